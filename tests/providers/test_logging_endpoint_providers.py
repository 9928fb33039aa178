from __future__ import annotations

from pathlib import Path

import pytest

from lib_config_provider.domain.errors import ConversionError
from lib_config_provider.domain.provenance import ResolvedBy
from lib_config_provider.providers import ElkLoggerConfigProvider, ElucidationConfigProvider
from tests.support import external_config, make_environment, write_properties


def test_elk_from_external_file(tmp_path: Path) -> None:
    environment = make_environment()
    body = 'elk.host=logstash.internal\nelk.port=5044\nelk.customFields={"service": "orders"}\n'
    provider = ElkLoggerConfigProvider(
        external_config=external_config(write_properties(tmp_path, body), environment), environment=environment
    )

    assert provider.can_provide()
    assert (provider.host, provider.port) == ("logstash.internal", 5044)
    assert provider.custom_fields == {"service": "orders"}
    assert set(provider.resolved_by().values()) == {ResolvedBy.EXTERNAL_PROPERTY}


def test_elk_port_defaults_to_zero() -> None:
    environment = make_environment(environ={"LCP_ELK_HOST": "logstash"})
    provider = ElkLoggerConfigProvider(external_config=external_config(environment=environment), environment=environment)

    assert provider.port == 0
    assert provider.resolved_by()["port"] is ResolvedBy.NONE
    assert provider.values()["port"] is None
    assert provider.can_not_provide()


def test_elk_malformed_port_raises() -> None:
    environment = make_environment(environ={"LCP_ELK_HOST": "logstash", "LCP_ELK_PORT": "fifty"})
    with pytest.raises(ConversionError, match="LCP_ELK_PORT"):
        ElkLoggerConfigProvider(external_config=external_config(environment=environment), environment=environment)


def test_elk_malformed_custom_fields_raise() -> None:
    environment = make_environment(properties={"lcp.elk.customFields": "[1, 2]"})
    with pytest.raises(ConversionError):
        ElkLoggerConfigProvider(external_config=external_config(environment=environment), environment=environment)


def test_elucidation_resolves_all_fields() -> None:
    environment = make_environment(
        environ={"LCP_ELUCIDATION_HOST": "elucidation", "LCP_ELUCIDATION_PORT": "8080"},
        properties={"lcp.elucidation.enabled": "true"},
    )
    provider = ElucidationConfigProvider(external_config=external_config(environment=environment), environment=environment)

    assert provider.can_provide()
    assert (provider.host, provider.port, provider.enabled) == ("elucidation", 8080, True)
    assert provider.resolved_by()["enabled"] is ResolvedBy.SYSTEM_PROPERTY


def test_elucidation_is_disabled_by_default() -> None:
    environment = make_environment(environ={"LCP_ELUCIDATION_HOST": "elucidation", "LCP_ELUCIDATION_PORT": "8080"})
    provider = ElucidationConfigProvider(external_config=external_config(environment=environment), environment=environment)

    assert provider.enabled is False
    assert provider.resolved_by()["enabled"] is ResolvedBy.PROVIDER_DEFAULT
    assert provider.values()["port"] == 8080
    assert provider.can_provide()


def test_elucidation_rejects_unclear_boolean() -> None:
    environment = make_environment(environ={"LCP_ELUCIDATION_ENABLED": "sure"})
    with pytest.raises(ConversionError):
        ElucidationConfigProvider(external_config=external_config(environment=environment), environment=environment)


def test_elucidation_unresolved_fields_report_no_value() -> None:
    environment = make_environment()
    provider = ElucidationConfigProvider(external_config=external_config(environment=environment), environment=environment)

    for name, resolved_by in provider.resolved_by().items():
        assert (provider.values()[name] is None) == (resolved_by is ResolvedBy.NONE)
    assert provider.values()["enabled"] is False
    assert provider.can_not_provide()
