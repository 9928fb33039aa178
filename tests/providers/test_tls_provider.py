from __future__ import annotations

from pathlib import Path

import pytest

from lib_config_provider.domain.errors import ConversionError
from lib_config_provider.domain.provenance import ResolvedBy
from lib_config_provider.providers import TlsConfigProvider, TlsDefaults
from tests.support import external_config, make_environment, write_properties


def test_defaults_without_trust_store() -> None:
    environment = make_environment()
    provider = TlsConfigProvider(external_config=external_config(environment=environment), environment=environment)

    tls = provider.tls_configuration
    assert provider.can_not_provide()
    assert (tls.key_store_type, tls.trust_store_type, tls.protocol) == ("JKS", "JKS", "TLSv1.2")
    assert tls.verify_hostname is True
    assert tls.supported_protocols is None
    assert provider.resolved_by()["protocol"] is ResolvedBy.PROVIDER_DEFAULT
    assert provider.resolved_by()["trust_store_path"] is ResolvedBy.NONE


def test_trust_store_enables_provider(tmp_path: Path) -> None:
    environment = make_environment(environ={"LCP_TLS_TRUSTSTORE_PASSWORD": "changeit"})
    body = "\n".join(
        [
            "tls.trustStorePath=/etc/pki/truststore.jks",
            "tls.supportedProtocols=TLSv1.2, TLSv1.3",
            "tls.verifyHostname=false",
        ]
    )
    provider = TlsConfigProvider(
        external_config=external_config(write_properties(tmp_path, body), environment), environment=environment
    )

    tls = provider.tls_configuration
    assert provider.can_provide()
    assert tls.trust_store_path == "/etc/pki/truststore.jks"
    assert tls.supported_protocols == ("TLSv1.2", "TLSv1.3")
    assert tls.verify_hostname is False
    assert provider.resolved_by()["trust_store_password"] is ResolvedBy.SYSTEM_ENV
    assert provider.resolved_by()["verify_hostname"] is ResolvedBy.EXTERNAL_PROPERTY
    assert "changeit" not in repr(tls)


def test_caller_defaults() -> None:
    environment = make_environment()
    defaults = TlsDefaults(
        trust_store_path="/srv/trust.p12",
        trust_store_password="pw",
        trust_store_type="PKCS12",
        verify_hostname=False,
        supported_protocols=("TLSv1.3",),
    )
    provider = TlsConfigProvider(
        external_config=external_config(environment=environment), environment=environment, defaults=defaults
    )

    tls = provider.tls_configuration
    assert provider.can_provide()
    assert tls.trust_store_type == "PKCS12"
    assert tls.verify_hostname is False
    assert tls.supported_protocols == ("TLSv1.3",)
    assert provider.resolved_by()["verify_hostname"] is ResolvedBy.PROVIDER_DEFAULT


def test_secret_fields() -> None:
    assert TlsConfigProvider.secret_fields() == frozenset({"key_store_password", "trust_store_password"})


def test_malformed_verify_hostname_raises() -> None:
    environment = make_environment(properties={"lcp.tls.verifyHostname": "perhaps"})
    with pytest.raises(ConversionError):
        TlsConfigProvider(external_config=external_config(environment=environment), environment=environment)
