"""TLS context provider.

The provider can provide once a trust store is configured (path and
password); key store settings are optional for clients.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Mapping

from ..adapters.external.default import ExternalConfigProvider
from ..application.converters import to_bool, to_list
from ..application.fields import FieldConfigProvider, FieldSpec, has_text
from ..application.ports import RuntimeEnvironment
from ..domain.strategy import FieldResolverStrategy

DEFAULT_STORE_TYPE = "JKS"
DEFAULT_PROTOCOL = "TLSv1.2"


@dataclass(frozen=True)
class TlsDefaults:
    """Fallback values used when no source supplies a field."""

    key_store_path: str | None = None
    key_store_password: str | None = field(default=None, repr=False)
    key_store_type: str = DEFAULT_STORE_TYPE
    trust_store_path: str | None = None
    trust_store_password: str | None = field(default=None, repr=False)
    trust_store_type: str = DEFAULT_STORE_TYPE
    verify_hostname: bool = True
    protocol: str = DEFAULT_PROTOCOL
    supported_protocols: tuple[str, ...] | None = None

    def field_defaults(self) -> dict[str, Any]:
        """Return per-field fallbacks, omitting the ones left unset."""

        candidates = {
            "key_store_path": self.key_store_path,
            "key_store_password": self.key_store_password,
            "key_store_type": self.key_store_type,
            "trust_store_path": self.trust_store_path,
            "trust_store_password": self.trust_store_password,
            "trust_store_type": self.trust_store_type,
            "verify_hostname": self.verify_hostname,
            "protocol": self.protocol,
            "supported_protocols": list(self.supported_protocols) if self.supported_protocols is not None else None,
        }
        return {name: value for name, value in candidates.items() if value is not None}


@dataclass(frozen=True)
class TlsConfiguration:
    key_store_path: str | None
    key_store_password: str | None = field(repr=False)
    key_store_type: str
    trust_store_path: str | None
    trust_store_password: str | None = field(repr=False)
    trust_store_type: str
    verify_hostname: bool
    protocol: str
    supported_protocols: tuple[str, ...] | None


def _tls_field(name: str, suffix: str, env_suffix: str, **options: Any) -> FieldSpec[Any]:
    return FieldSpec(name, f"lcp.tls.{suffix}", f"LCP_TLS_{env_suffix}", f"tls.{suffix}", **options)


class TlsConfigProvider(FieldConfigProvider):
    """Resolve key store, trust store and protocol settings.

    Examples
    --------
    >>> from lib_config_provider.adapters.environment.default import DefaultEnvironment
    >>> environment = DefaultEnvironment(
    ...     environ={"LCP_TLS_TRUSTSTORE_PATH": "/etc/pki/truststore.jks", "LCP_TLS_TRUSTSTORE_PASSWORD": "changeit"},
    ...     properties={},
    ... )
    >>> external = ExternalConfigProvider(explicit_path="/nonexistent", environment=environment)
    >>> provider = TlsConfigProvider(external_config=external, environment=environment)
    >>> provider.can_provide(), provider.tls_configuration.trust_store_type
    (True, 'JKS')
    """

    NAME: ClassVar[str] = "tls"
    FIELDS = (
        _tls_field("key_store_path", "keyStorePath", "KEYSTORE_PATH"),
        _tls_field("key_store_password", "keyStorePassword", "KEYSTORE_PASSWORD", secret=True),
        _tls_field("key_store_type", "keyStoreType", "KEYSTORE_TYPE", default=DEFAULT_STORE_TYPE),
        _tls_field("trust_store_path", "trustStorePath", "TRUSTSTORE_PATH"),
        _tls_field("trust_store_password", "trustStorePassword", "TRUSTSTORE_PASSWORD", secret=True),
        _tls_field("trust_store_type", "trustStoreType", "TRUSTSTORE_TYPE", default=DEFAULT_STORE_TYPE),
        _tls_field("verify_hostname", "verifyHostname", "VERIFY_HOSTNAME", default=True, convert=to_bool),
        _tls_field("protocol", "protocol", "PROTOCOL", default=DEFAULT_PROTOCOL),
        _tls_field("supported_protocols", "supportedProtocols", "SUPPORTED_PROTOCOLS", convert=to_list),
    )

    def __init__(
        self,
        *,
        external_config: ExternalConfigProvider | None = None,
        environment: RuntimeEnvironment | None = None,
        strategies: Mapping[str, FieldResolverStrategy[Any] | None] | None = None,
        defaults: TlsDefaults | None = None,
    ) -> None:
        super().__init__(
            external_config=external_config,
            environment=environment,
            strategies=strategies,
            defaults=(defaults or TlsDefaults()).field_defaults(),
        )
        self._tls_configuration = TlsConfiguration(**self.values())

    def _complete_values(self, values: dict[str, Any]) -> dict[str, Any]:
        protocols = values["supported_protocols"]
        values["supported_protocols"] = tuple(protocols) if protocols is not None else None
        return values

    @property
    def tls_configuration(self) -> TlsConfiguration:
        return self._tls_configuration

    def can_provide(self) -> bool:
        return has_text(self._tls_configuration.trust_store_path) and has_text(
            self._tls_configuration.trust_store_password
        )
