"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy shared by the resolution engine, adapters,
and concrete providers. The hierarchy lives in the domain layer so outer
layers may depend on it without the domain depending on them.

Contents
--------
* :class:`ConfigError` – umbrella base class for all configuration issues.
* :class:`InvalidFormat` – text that cannot be parsed (properties files,
  converter input).
* :class:`ConversionError` – a present override whose raw string cannot be
  converted into the field's type.
* :class:`ValidationError` – semantic failures in provider declarations.
* :class:`UnknownFieldError` – a strategy or default targets a field the
  provider does not declare.
* :class:`NotFound` – an expected resource (file) is missing.

System Role
-----------
Missing or unreadable external files are *not* surfaced through this
hierarchy; the external property adapter degrades them to "cannot provide".
Malformed overrides and broken provider declarations are surfaced, because
silently falling through would mask operator or programmer mistakes.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Base type for all exceptions emitted by ``lib_config_provider``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class InvalidFormat(ConfigError):
    """Raised when textual input cannot be parsed.

    Typical Sources
    ---------------
    The properties file parser (bad ``\\u`` escapes) and value converters.
    """


class ConversionError(InvalidFormat):
    """A resolved raw string could not be converted to the field type.

    Attributes
    ----------
    source:
        Name of the source that produced the raw value (``"system_property"``,
        ``"environment"``, ``"external_property"``).
    key:
        Lookup key used against that source.
    raw_value:
        The offending string.

    Examples
    --------
    >>> err = ConversionError("environment", "APP_PORT", "eighty")
    >>> str(err)
    "Cannot convert environment value for 'APP_PORT': 'eighty'"
    >>> err.key
    'APP_PORT'
    """

    def __init__(self, source: str, key: str, raw_value: str, *, reason: str | None = None) -> None:
        message = f"Cannot convert {source} value for {key!r}: {raw_value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.source = source
        self.key = key
        self.raw_value = raw_value


class ValidationError(ConfigError):
    """Signifies that a provider declaration failed semantic checks."""


class UnknownFieldError(ValidationError):
    """A strategy, default, or lookup referenced a field without a specification.

    Why
    ----
    Every field a provider resolves needs its default-key triple. Referencing a
    field that was never declared is a programming error and must fail at
    construction time.
    """


class NotFound(ConfigError):
    """Represents missing-but-optional resources (files, directories, etc.)."""
