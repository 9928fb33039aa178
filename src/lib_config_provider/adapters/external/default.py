"""External properties file adapter.

Purpose
-------
Implement the :class:`lib_config_provider.application.ports.PropertySource`
port: a read-only key/value lookup backed by a local properties file that is
itself located through precedence.

Path precedence
---------------
1. Non-blank system property (``lcp.external.config.path`` or the supplied key).
2. Non-blank environment variable (``LCP_EXTERNAL_CONFIG_PATH`` or the supplied
   name).
3. The explicitly supplied path.
4. :data:`DEFAULT_CONFIG_PATH` (``~/.lcp.external.config.properties``).

Failure semantics
-----------------
Missing, unreadable, or malformed files never raise; the provider simply
reports that it cannot provide and logs why.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Callable, Final, Mapping, TypeVar

from ...application.ports import RuntimeEnvironment
from ...domain.errors import InvalidFormat
from ...domain.result import ResolverResult
from ...observability import log_debug, log_warning, make_event
from ..environment.default import DefaultEnvironment, environment_or_default
from .properties import load_properties

T = TypeVar("T")

DEFAULT_CONFIG_PATH: Final[Path] = Path.home() / ".lcp.external.config.properties"
DEFAULT_CONFIG_PATH_SYSTEM_PROPERTY: Final[str] = "lcp.external.config.path"
DEFAULT_CONFIG_PATH_ENV_VARIABLE: Final[str] = "LCP_EXTERNAL_CONFIG_PATH"


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


class ExternalConfigProvider:
    """Look up configuration values from a known properties file.

    Why
    ----
    Shared, checked-in infrastructure state sits below per-process overrides in
    the precedence chain; this adapter loads it once so every field resolution
    can consult it without further I/O.

    Examples
    --------
    >>> from tempfile import TemporaryDirectory
    >>> tmp = TemporaryDirectory()
    >>> path = Path(tmp.name) / "external.properties"
    >>> _ = path.write_text("app.host=file-host\\n", encoding="utf-8")
    >>> provider = ExternalConfigProvider(explicit_path=path, environment=DefaultEnvironment(environ={}, properties={}))
    >>> provider.can_provide(), provider.get_property("app.host")
    (True, 'file-host')
    >>> provider.get_property("missing") is None
    True
    >>> tmp.cleanup()
    """

    def __init__(
        self,
        *,
        explicit_path: Path | str | None = None,
        system_property_key: str | None = None,
        env_variable: str | None = None,
        environment: RuntimeEnvironment | None = None,
    ) -> None:
        """Resolve the properties path and eagerly load its entries.

        Parameters
        ----------
        explicit_path:
            Path used when neither the system property nor the environment
            variable names a file.
        system_property_key:
            System property that may hold the path; blank means
            :data:`DEFAULT_CONFIG_PATH_SYSTEM_PROPERTY`.
        env_variable:
            Environment variable that may hold the path; blank means
            :data:`DEFAULT_CONFIG_PATH_ENV_VARIABLE`.
        environment:
            Accessor for environment variables and system properties.
        """

        self._environment = environment_or_default(environment)
        self._system_property_key = (
            DEFAULT_CONFIG_PATH_SYSTEM_PROPERTY if _is_blank(system_property_key) else system_property_key
        )
        self._env_variable = DEFAULT_CONFIG_PATH_ENV_VARIABLE if _is_blank(env_variable) else env_variable
        self._explicit_path = Path(explicit_path) if explicit_path is not None else None
        self._properties_path = self._resolve_path()
        self._entries: Mapping[str, str] = MappingProxyType(_read_entries(self._properties_path))

    @property
    def properties_path(self) -> Path:
        """Return the path the entries were loaded from."""

        return self._properties_path

    def entries(self) -> Mapping[str, str]:
        """Return a read-only view of all loaded entries."""

        return self._entries

    def with_path(self, path: Path | str) -> ExternalConfigProvider:
        """Return a new provider that treats *path* as the explicit path.

        System property and environment overrides still take precedence, just
        as they do at construction.
        """

        return ExternalConfigProvider(
            explicit_path=path,
            system_property_key=self._system_property_key,
            env_variable=self._env_variable,
            environment=self._environment,
        )

    def can_provide(self) -> bool:
        """Return ``True`` if at least one property was loaded."""

        return bool(self._entries)

    def can_not_provide(self) -> bool:
        """Return the negation of :meth:`can_provide`."""

        return not self.can_provide()

    def get_property(self, key: str) -> str | None:
        """Return the property stored under *key*, or ``None``."""

        if not self.can_provide():
            return None
        return self._entries.get(key)

    def use_property_if_present(
        self,
        key: str,
        on_found: Callable[[str], None],
        on_absent: Callable[[], None],
    ) -> None:
        """Call *on_found* with the value for *key*, otherwise call *on_absent*."""

        value = self.get_property(key)
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
        """Return ``on_found(value)`` when *key* is present, else ``on_absent()``."""

        value = self.get_property(key)
        if value is None:
            return on_absent()
        return on_found(value)

    def _resolve_path(self) -> Path:
        from_property = self._environment.get_property(self._system_property_key)  # type: ignore[arg-type]
        from_env = self._environment.getenv(self._env_variable)  # type: ignore[arg-type]
        if not _is_blank(from_property):
            path, origin = Path(from_property), "system_property"  # type: ignore[arg-type]
        elif not _is_blank(from_env):
            path, origin = Path(from_env), "environment"  # type: ignore[arg-type]
        elif self._explicit_path is not None:
            path, origin = self._explicit_path, "explicit_path"
        else:
            path, origin = DEFAULT_CONFIG_PATH, "default_path"
        path = path.expanduser()
        log_debug("external_config_path_resolved", **make_event(origin, None, {"path": str(path)}))
        return path


def _read_entries(path: Path) -> dict[str, str]:
    """Load *path*, returning an empty mapping whenever it cannot be read."""

    try:
        if not path.is_file():
            log_debug("external_config_missing", **make_event("external_property", None, {"path": str(path)}))
            return {}
        entries = load_properties(path)
    except (OSError, UnicodeDecodeError, InvalidFormat) as exc:
        log_warning(
            "external_config_unreadable",
            **make_event("external_property", None, {"path": str(path), "error": str(exc)}),
        )
        return {}
    log_debug("external_config_loaded", **make_event("external_property", None, {"path": str(path), "keys": len(entries)}))
    return entries


def external_config_or_default(provided: ExternalConfigProvider | None) -> ExternalConfigProvider:
    """Return *provided* or a freshly constructed default provider."""

    return provided if provided is not None else ExternalConfigProvider()

