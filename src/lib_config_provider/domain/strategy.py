"""Per-field resolver strategies.

Purpose
-------
Let callers customise, without replacing, the default precedence chain for a
single field: pin an explicit value, provide a lazy supplier, or redirect where
the system property, environment variable, and external property lookups
happen.

Contents
--------
* :class:`FieldResolverStrategy` – immutable bundle of optional overrides.
* :data:`EMPTY_STRATEGY` – shared strategy with every member unset.
* ``*_strategy`` factory functions – single-purpose strategies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True, slots=True)
class FieldResolverStrategy(Generic[T]):
    """Optional overrides applied when resolving one field.

    Why
    ----
    Concrete providers share one default key triple per field, but individual
    deployments sometimes need a different key or a caller-supplied default.

    What
    ----
    Key overrides only redirect lookups and are independent of each other; a
    blank override is ignored. ``explicit_value`` and ``value_supplier`` drive
    the value itself when no external source is set.

    Examples
    --------
    >>> strategy = FieldResolverStrategy(system_property_key="custom.port")
    >>> strategy.system_property_key_or_default("lcp.port")
    'custom.port'
    >>> strategy.env_variable_or_default("LCP_PORT")
    'LCP_PORT'
    >>> FieldResolverStrategy(env_variable="  ").env_variable_or_default("LCP_PORT")
    'LCP_PORT'
    """

    explicit_value: T | None = None
    system_property_key: str | None = None
    env_variable: str | None = None
    external_property: str | None = None
    value_supplier: Callable[[], T | None] | None = None

    def system_property_key_or_default(self, default_key: str) -> str:
        """Return the override key or *default_key* when the override is blank."""

        return default_key if _is_blank(self.system_property_key) else self.system_property_key  # type: ignore[return-value]

    def env_variable_or_default(self, default_variable: str) -> str:
        """Return the override variable name or *default_variable*."""

        return default_variable if _is_blank(self.env_variable) else self.env_variable  # type: ignore[return-value]

    def external_property_or_default(self, default_property: str) -> str:
        """Return the override external key or *default_property*."""

        return default_property if _is_blank(self.external_property) else self.external_property  # type: ignore[return-value]


#: Strategy used whenever a caller does not supply one.
EMPTY_STRATEGY: FieldResolverStrategy[Any] = FieldResolverStrategy()


def explicit_value_strategy(explicit_value: T) -> FieldResolverStrategy[T]:
    """Create a strategy that only pins an explicit value.

    Examples
    --------
    >>> explicit_value_strategy("pinned").explicit_value
    'pinned'
    """

    return FieldResolverStrategy(explicit_value=explicit_value)


def system_property_strategy(system_property_key: str) -> FieldResolverStrategy[Any]:
    """Create a strategy that only redirects the system property lookup."""

    return FieldResolverStrategy(system_property_key=system_property_key)


def env_variable_strategy(env_variable: str) -> FieldResolverStrategy[Any]:
    """Create a strategy that only redirects the environment variable lookup."""

    return FieldResolverStrategy(env_variable=env_variable)


def external_property_strategy(external_property: str) -> FieldResolverStrategy[Any]:
    """Create a strategy that only redirects the external property lookup."""

    return FieldResolverStrategy(external_property=external_property)


def supplier_strategy(supplier: Callable[[], T | None]) -> FieldResolverStrategy[T]:
    """Create a strategy that only provides a lazily invoked supplier."""

    return FieldResolverStrategy(value_supplier=supplier)
