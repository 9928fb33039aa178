"""Service and network identity providers."""

from __future__ import annotations

from typing import ClassVar

from ..application.fields import FieldConfigProvider, FieldSpec, has_text


class ServiceIdentityConfigProvider(FieldConfigProvider):
    """Resolve the service name, version and deployment environment.

    Examples
    --------
    >>> from lib_config_provider.adapters.environment.default import DefaultEnvironment
    >>> from lib_config_provider.adapters.external.default import ExternalConfigProvider
    >>> environment = DefaultEnvironment(
    ...     environ={"LCP_SERVICE_NAME": "orders", "LCP_SERVICE_VERSION": "1.4.2", "LCP_SERVICE_ENV": "prod"},
    ...     properties={},
    ... )
    >>> external = ExternalConfigProvider(explicit_path="/nonexistent", environment=environment)
    >>> provider = ServiceIdentityConfigProvider(external_config=external, environment=environment)
    >>> provider.can_provide(), provider.name
    (True, 'orders')
    """

    NAME: ClassVar[str] = "service-identity"
    FIELDS = (
        FieldSpec("name", "lcp.service.name", "LCP_SERVICE_NAME", "service.name"),
        FieldSpec("version", "lcp.service.version", "LCP_SERVICE_VERSION", "service.version"),
        FieldSpec("environment", "lcp.service.env", "LCP_SERVICE_ENV", "service.env"),
    )

    @property
    def name(self) -> str | None:
        return self.value("name")

    @property
    def version(self) -> str | None:
        return self.value("version")

    @property
    def environment(self) -> str | None:
        return self.value("environment")

    def can_provide(self) -> bool:
        return has_text(self.name) and has_text(self.version) and has_text(self.environment)


class NetworkIdentityConfigProvider(FieldConfigProvider):
    """Resolve the name of the network the service runs in."""

    NAME: ClassVar[str] = "network-identity"
    FIELDS = (FieldSpec("network", "lcp.network", "LCP_NETWORK", "network"),)

    @property
    def network(self) -> str | None:
        return self.value("network")

    def can_provide(self) -> bool:
        return has_text(self.network)
