"""Application-layer ports describing collaborator responsibilities.

Purpose
-------
Define the structural contracts the resolution engine and concrete providers
depend on, so process-global state (environment, property table) and the
external properties file can be substituted with deterministic fakes.

Contents
--------
* :class:`RuntimeEnvironment` – read access to environment variables and the
  process-wide property table.
* :class:`PropertySource` – the external key/value lookup used as the third
  precedence step.
* :class:`ConfigProvider` – the facade every concrete provider implements.
"""

from __future__ import annotations

from typing import Callable, Mapping, Protocol, TypeVar, runtime_checkable

from ..domain.provenance import ResolvedBy
from ..domain.result import ResolverResult

T = TypeVar("T")


@runtime_checkable
class RuntimeEnvironment(Protocol):
    """Read-only view of ambient process state.

    Why
    ----
    Wrapping ``os.environ`` and the property table behind one accessor keeps
    tests from mutating real global state.
    """

    def getenv(self, name: str) -> str | None:
        """Return the environment variable *name* or ``None``."""

    def get_property(self, key: str) -> str | None:
        """Return the process-wide property *key* or ``None``."""


@runtime_checkable
class PropertySource(Protocol):
    """External key/value lookup loaded once from a local file."""

    def can_provide(self) -> bool:
        """Return ``True`` when at least one entry was loaded."""

    def can_not_provide(self) -> bool:
        """Return the negation of :meth:`can_provide`."""

    def entries(self) -> Mapping[str, str]:
        """Return a read-only view of every loaded entry."""

    def get_property(self, key: str) -> str | None:
        """Return the value stored under *key* or ``None``."""

    def use_property_if_present(
        self,
        key: str,
        on_found: Callable[[str], None],
        on_absent: Callable[[], None],
    ) -> None:
        """Call *on_found* with the value for *key*, otherwise call *on_absent*."""

    def resolve_external_property(
        self,
        key: str,
        on_found: Callable[[str], ResolverResult[T]],
        on_absent: Callable[[], ResolverResult[T]],
    ) -> ResolverResult[T]:
        """Dispatch to *on_found* or *on_absent* and return its result."""


@runtime_checkable
class ConfigProvider(Protocol):
    """Facade implemented by every concrete provider.

    ``can_provide`` is computed from already-resolved fields and never triggers
    re-resolution. ``resolved_by`` is an immutable snapshot keyed by field name.
    """

    def can_provide(self) -> bool:
        """Return ``True`` when the provider has enough data to be useful."""

    def can_not_provide(self) -> bool:
        """Return the negation of :meth:`can_provide`."""

    def resolved_by(self) -> Mapping[str, ResolvedBy]:
        """Return the provenance of every resolved field."""
