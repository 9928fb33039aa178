from __future__ import annotations

from pathlib import Path

from lib_config_provider.domain.provenance import ResolvedBy
from lib_config_provider.domain.strategy import explicit_value_strategy
from lib_config_provider.providers import NetworkIdentityConfigProvider, ServiceIdentityConfigProvider
from tests.support import external_config, make_environment, write_properties


def test_service_identity_from_mixed_sources(tmp_path: Path) -> None:
    environment = make_environment(
        properties={"lcp.service.name": "orders"},
        environ={"LCP_SERVICE_VERSION": "1.4.2"},
    )
    external = external_config(write_properties(tmp_path, "service.env=production\n"), environment)

    provider = ServiceIdentityConfigProvider(external_config=external, environment=environment)

    assert provider.can_provide()
    assert (provider.name, provider.version, provider.environment) == ("orders", "1.4.2", "production")
    assert dict(provider.resolved_by()) == {
        "name": ResolvedBy.SYSTEM_PROPERTY,
        "version": ResolvedBy.SYSTEM_ENV,
        "environment": ResolvedBy.EXTERNAL_PROPERTY,
    }


def test_service_identity_needs_all_three_fields() -> None:
    environment = make_environment(environ={"LCP_SERVICE_NAME": "orders", "LCP_SERVICE_VERSION": "1.4.2"})
    provider = ServiceIdentityConfigProvider(external_config=external_config(environment=environment), environment=environment)

    assert provider.can_not_provide()
    assert provider.resolved_by()["environment"] is ResolvedBy.NONE


def test_network_identity_with_explicit_value() -> None:
    environment = make_environment()
    provider = NetworkIdentityConfigProvider(
        external_config=external_config(environment=environment),
        environment=environment,
        strategies={"network": explicit_value_strategy("dmz")},
    )

    assert provider.network == "dmz"
    assert provider.resolved_by() == {"network": ResolvedBy.EXPLICIT_VALUE}


def test_network_identity_without_sources() -> None:
    environment = make_environment()
    provider = NetworkIdentityConfigProvider(external_config=external_config(environment=environment), environment=environment)

    assert provider.can_not_provide()
    assert provider.network is None
