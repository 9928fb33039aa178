"""Shared fakes for the test-suite.

Tests never read the real ``os.environ``, the live property table, or the
home-directory properties file; they build a :class:`DefaultEnvironment` from
plain dicts and point the external provider at a ``tmp_path`` file (or at a
path that does not exist).
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Mapping, TypeVar

from lib_config_provider.adapters.environment.default import DefaultEnvironment
from lib_config_provider.adapters.external.default import ExternalConfigProvider
from lib_config_provider.domain.result import ResolverResult

T = TypeVar("T")

MISSING_PATH = Path("/nonexistent/lcp-test/external.properties")


def make_environment(
    *,
    environ: Mapping[str, str] | None = None,
    properties: Mapping[str, str] | None = None,
) -> DefaultEnvironment:
    """Return an environment isolated from the real process state."""

    return DefaultEnvironment(environ=dict(environ or {}), properties=dict(properties or {}))


def write_properties(directory: Path, body: str, name: str = "external.properties") -> Path:
    """Write *body* to ``directory/name`` and return the path."""

    path = directory / name
    path.write_text(body, encoding="utf-8")
    return path


def external_config(path: Path | None = None, environment: DefaultEnvironment | None = None) -> ExternalConfigProvider:
    """Build an external provider that never falls back to the home-directory file."""

    return ExternalConfigProvider(
        explicit_path=path if path is not None else MISSING_PATH,
        environment=environment if environment is not None else make_environment(),
    )


class FakePropertySource:
    """In-memory stand-in for the external properties file."""

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries = dict(entries or {})

    def can_provide(self) -> bool:
        return bool(self._entries)

    def can_not_provide(self) -> bool:
        return not self._entries

    def entries(self) -> Mapping[str, str]:
        return dict(self._entries)

    def get_property(self, key: str) -> str | None:
        return self._entries.get(key)

    def use_property_if_present(self, key: str, on_found: Callable[[str], None], on_absent: Callable[[], None]) -> None:
        value = self._entries.get(key)
        if value is None:
            on_absent()
        else:
            on_found(value)

    def resolve_external_property(
        self,
        key: str,
        on_found: Callable[[str], ResolverResult[T]],
        on_absent: Callable[[], ResolverResult[T]],
    ) -> ResolverResult[T]:
        value = self._entries.get(key)
        if value is None:
            return on_absent()
        return on_found(value)
