"""External properties provider tests: path precedence and failure semantics."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from lib_config_provider.adapters.external.default import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_CONFIG_PATH_ENV_VARIABLE,
    DEFAULT_CONFIG_PATH_SYSTEM_PROPERTY,
    ExternalConfigProvider,
)
from lib_config_provider.domain.provenance import ResolvedBy
from lib_config_provider.domain.result import ResolverResult
from tests.support import MISSING_PATH, make_environment, write_properties


def test_default_constants() -> None:
    assert DEFAULT_CONFIG_PATH == Path.home() / ".lcp.external.config.properties"
    assert DEFAULT_CONFIG_PATH_SYSTEM_PROPERTY == "lcp.external.config.path"
    assert DEFAULT_CONFIG_PATH_ENV_VARIABLE == "LCP_EXTERNAL_CONFIG_PATH"


def test_nonexistent_file_cannot_provide() -> None:
    provider = ExternalConfigProvider(explicit_path=MISSING_PATH, environment=make_environment())

    assert provider.can_provide() is False
    assert provider.can_not_provide() is True
    assert provider.get_property("anything") is None
    assert dict(provider.entries()) == {}


def test_readable_file_can_provide(tmp_path: Path) -> None:
    path = write_properties(tmp_path, "zookeeper.connection=zk1:2181\n")
    provider = ExternalConfigProvider(explicit_path=path, environment=make_environment())

    assert provider.properties_path == path
    assert provider.can_provide() is True
    assert provider.get_property("zookeeper.connection") == "zk1:2181"
    assert provider.get_property("missing") is None


def test_empty_file_cannot_provide(tmp_path: Path) -> None:
    path = write_properties(tmp_path, "# only a comment\n")
    assert ExternalConfigProvider(explicit_path=path, environment=make_environment()).can_provide() is False


def test_path_precedence_property_then_env_then_explicit(tmp_path: Path) -> None:
    from_property = write_properties(tmp_path, "source=property\n", "property.properties")
    from_env = write_properties(tmp_path, "source=env\n", "env.properties")
    explicit = write_properties(tmp_path, "source=explicit\n", "explicit.properties")

    everything = make_environment(
        environ={DEFAULT_CONFIG_PATH_ENV_VARIABLE: str(from_env)},
        properties={DEFAULT_CONFIG_PATH_SYSTEM_PROPERTY: str(from_property)},
    )
    env_only = make_environment(environ={DEFAULT_CONFIG_PATH_ENV_VARIABLE: str(from_env)})
    blank_overrides = make_environment(
        environ={DEFAULT_CONFIG_PATH_ENV_VARIABLE: "  "},
        properties={DEFAULT_CONFIG_PATH_SYSTEM_PROPERTY: ""},
    )

    assert ExternalConfigProvider(explicit_path=explicit, environment=everything).get_property("source") == "property"
    assert ExternalConfigProvider(explicit_path=explicit, environment=env_only).get_property("source") == "env"
    assert ExternalConfigProvider(explicit_path=explicit, environment=blank_overrides).get_property("source") == "explicit"


def test_default_path_is_used_without_any_hint() -> None:
    provider = ExternalConfigProvider(environment=make_environment())
    assert provider.properties_path == DEFAULT_CONFIG_PATH.expanduser()


def test_custom_path_keys(tmp_path: Path) -> None:
    path = write_properties(tmp_path, "network=east\n")
    environment = make_environment(environ={"MY_CONFIG": str(path)})

    provider = ExternalConfigProvider(env_variable="MY_CONFIG", environment=environment)

    assert provider.get_property("network") == "east"


def test_with_path_returns_a_new_provider(tmp_path: Path) -> None:
    first = write_properties(tmp_path, "network=east\n", "first.properties")
    second = write_properties(tmp_path, "network=west\n", "second.properties")
    provider = ExternalConfigProvider(explicit_path=first, environment=make_environment())

    moved = provider.with_path(second)

    assert moved is not provider
    assert provider.get_property("network") == "east"
    assert moved.get_property("network") == "west"


def test_malformed_file_degrades_to_cannot_provide(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.WARNING, logger="lib_config_provider")
    path = write_properties(tmp_path, "broken=\\uZZZZ\n")

    provider = ExternalConfigProvider(explicit_path=path, environment=make_environment())

    assert provider.can_provide() is False
    assert any(record.getMessage() == "external_config_unreadable" for record in caplog.records)
    assert all(record.levelno <= logging.WARNING for record in caplog.records)


def test_directory_path_cannot_provide(tmp_path: Path) -> None:
    assert ExternalConfigProvider(explicit_path=tmp_path, environment=make_environment()).can_provide() is False


def test_use_property_if_present(tmp_path: Path) -> None:
    provider = ExternalConfigProvider(explicit_path=write_properties(tmp_path, "a=1\n"), environment=make_environment())
    seen: list[str] = []

    provider.use_property_if_present("a", seen.append, lambda: seen.append("absent"))
    provider.use_property_if_present("b", seen.append, lambda: seen.append("absent"))

    assert seen == ["1", "absent"]


def test_resolve_external_property_dispatches(tmp_path: Path) -> None:
    provider = ExternalConfigProvider(explicit_path=write_properties(tmp_path, "a=1\n"), environment=make_environment())

    def found(value: str) -> ResolverResult[int]:
        return ResolverResult(int(value), ResolvedBy.EXTERNAL_PROPERTY)

    assert provider.resolve_external_property("a", found, ResolverResult.none) == ResolverResult(
        1, ResolvedBy.EXTERNAL_PROPERTY
    )
    assert provider.resolve_external_property("b", found, ResolverResult.none) == ResolverResult.none()
