from __future__ import annotations

from lib_config_provider.domain.errors import (
    ConfigError,
    ConversionError,
    InvalidFormat,
    NotFound,
    UnknownFieldError,
    ValidationError,
)


def test_error_hierarchy() -> None:
    assert issubclass(InvalidFormat, ConfigError)
    assert issubclass(ConversionError, InvalidFormat)
    assert issubclass(ValidationError, ConfigError)
    assert issubclass(UnknownFieldError, ValidationError)
    assert issubclass(NotFound, ConfigError)
    for exception in (InvalidFormat(""), ValidationError(""), UnknownFieldError(""), NotFound("")):
        assert isinstance(exception, ConfigError)


def test_conversion_error_names_source_key_and_value() -> None:
    error = ConversionError("system_property", "lcp.elk.port", "eighty", reason="invalid literal")

    assert error.source == "system_property"
    assert error.key == "lcp.elk.port"
    assert error.raw_value == "eighty"
    assert str(error) == "Cannot convert system_property value for 'lcp.elk.port': 'eighty' (invalid literal)"
