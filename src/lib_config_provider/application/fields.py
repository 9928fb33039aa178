"""Declarative field specifications and the provider base class.

Purpose
-------
Collapse the "one class per integration, one hand-written resolution call per
field" pattern into data: a provider lists :class:`FieldSpec` entries and
:func:`resolve_fields` turns them into an immutable :class:`ResolvedFields`
snapshot by running the precedence engine once per field.

Contents
--------
* :class:`FieldSpec` – field name, default key triple, fallback, converter.
* :class:`ResolvedFields` – immutable ``Mapping[str, ResolverResult]``.
* :func:`resolve_fields` – resolve every spec against shared collaborators.
* :class:`FieldConfigProvider` – base class implementing the
  :class:`lib_config_provider.application.ports.ConfigProvider` facade.

System Role
-----------
Concrete providers under :mod:`lib_config_provider.providers` subclass
:class:`FieldConfigProvider` and only declare ``FIELDS`` and ``can_provide``.
Provenance is collected into one immutable mapping at the end of construction,
so no half-built provider is ever observable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping as MappingABC
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Generic, Iterable, Iterator, Mapping, TypeVar

from ..adapters.environment.default import environment_or_default
from ..adapters.external.default import ExternalConfigProvider
from ..domain.errors import UnknownFieldError
from ..domain.provenance import ResolvedBy
from ..domain.result import ResolverResult
from ..domain.strategy import FieldResolverStrategy
from ..observability import log_info, make_event
from .converters import to_str
from .ports import RuntimeEnvironment
from .resolver import PropertyResolutionSettings, resolve_property

T = TypeVar("T")


@dataclass(frozen=True)
class FieldSpec(Generic[T]):
    """Identity and defaults of one resolvable field.

    Examples
    --------
    >>> from lib_config_provider.application.converters import to_int
    >>> port = FieldSpec("port", "lcp.elk.port", "LCP_ELK_PORT", "elk.port", convert=to_int)
    >>> port.settings().external_key
    'elk.port'
    """

    name: str
    system_property: str
    env_variable: str
    external_key: str
    default: T | None = None
    convert: Callable[[str], T] = field(default=to_str)  # type: ignore[assignment]
    secret: bool = False

    def settings(
        self,
        *,
        strategy: FieldResolverStrategy[T] | None = None,
        default: T | None = None,
        external_config_provider: ExternalConfigProvider | None = None,
        environment: RuntimeEnvironment | None = None,
    ) -> PropertyResolutionSettings[T]:
        """Build resolution settings; *default* replaces the compiled-in one when given."""

        return PropertyResolutionSettings(
            system_property=self.system_property,
            environment_variable=self.env_variable,
            external_key=self.external_key,
            default_value=self.default if default is None else default,
            convert_from_string=self.convert,
            resolver_strategy=strategy,
            external_config_provider=external_config_provider,
            environment=environment,
            secret=self.secret,
        )


class ResolvedFields(MappingABC[str, ResolverResult[Any]]):
    """Immutable mapping of field name to :class:`ResolverResult`.

    Examples
    --------
    >>> fields = ResolvedFields({"host": ResolverResult("localhost", ResolvedBy.SYSTEM_PROPERTY)})
    >>> fields.value("host")
    'localhost'
    >>> dict(fields.resolved_by())
    {'host': <ResolvedBy.SYSTEM_PROPERTY: 'system_property'>}
    """

    __slots__ = ("_results",)

    def __init__(self, results: Mapping[str, ResolverResult[Any]]) -> None:
        self._results: Mapping[str, ResolverResult[Any]] = MappingProxyType(dict(results))

    def __getitem__(self, name: str) -> ResolverResult[Any]:
        return self._results[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __repr__(self) -> str:
        return f"ResolvedFields({dict(self._results)!r})"

    def value(self, name: str) -> Any:
        """Return the resolved value of *name* (``None`` when unresolved).

        Raises
        ------
        UnknownFieldError
            When *name* was never declared.
        """

        try:
            return self._results[name].value
        except KeyError as exc:
            raise UnknownFieldError(f"No field named {name!r}") from exc

    def values_by_name(self) -> Mapping[str, Any]:
        """Return ``{name: value}`` for every field."""

        return MappingProxyType({name: result.value for name, result in self._results.items()})

    def resolved_by(self) -> Mapping[str, ResolvedBy]:
        """Return ``{name: ResolvedBy}`` for every field."""

        return MappingProxyType({name: result.resolved_by for name, result in self._results.items()})


def resolve_fields(
    specs: Iterable[FieldSpec[Any]],
    *,
    external_config: ExternalConfigProvider | None = None,
    environment: RuntimeEnvironment | None = None,
    strategies: Mapping[str, FieldResolverStrategy[Any] | None] | None = None,
    defaults: Mapping[str, Any] | None = None,
) -> ResolvedFields:
    """Resolve every spec with one shared external provider and environment.

    Raises
    ------
    UnknownFieldError
        When two specs share a name or when *strategies*/*defaults* mention a
        field that has no spec.
    """

    spec_list = list(specs)
    names = [spec.name for spec in spec_list]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise UnknownFieldError(f"Duplicate field specifications: {', '.join(duplicates)}")
    strategies = strategies or {}
    defaults = defaults or {}
    _reject_unknown(names, strategies, "strategy")
    _reject_unknown(names, defaults, "default")

    shared_environment = environment_or_default(environment)
    shared_external = external_config if external_config is not None else ExternalConfigProvider(environment=shared_environment)

    results: dict[str, ResolverResult[Any]] = {}
    for spec in spec_list:
        settings = spec.settings(
            strategy=strategies.get(spec.name),
            default=defaults.get(spec.name),
            external_config_provider=shared_external,
            environment=shared_environment,
        )
        results[spec.name] = resolve_property(settings)
    return ResolvedFields(results)


def _reject_unknown(names: list[str], supplied: Mapping[str, Any], what: str) -> None:
    unknown = sorted(set(supplied) - set(names))
    if unknown:
        raise UnknownFieldError(f"{what.capitalize()} supplied for undeclared field(s): {', '.join(unknown)}")


class FieldConfigProvider(ABC):
    """Base class for declarative providers.

    Subclasses set :attr:`NAME` and :attr:`FIELDS` and implement
    :meth:`can_provide` from already-resolved values. Providers whose shape
    is more than the raw field values (merged maps, numeric fallbacks)
    override :meth:`_complete_values`.
    """

    NAME: ClassVar[str] = "provider"
    FIELDS: ClassVar[tuple[FieldSpec[Any], ...]] = ()

    def __init__(
        self,
        *,
        external_config: ExternalConfigProvider | None = None,
        environment: RuntimeEnvironment | None = None,
        strategies: Mapping[str, FieldResolverStrategy[Any] | None] | None = None,
        defaults: Mapping[str, Any] | None = None,
    ) -> None:
        self._fields = resolve_fields(
            self.FIELDS,
            external_config=external_config,
            environment=environment,
            strategies=strategies,
            defaults=defaults,
        )
        self._values: Mapping[str, Any] = MappingProxyType(self._complete_values(dict(self._fields.values_by_name())))
        log_info(
            "provider_resolved",
            **make_event(self.NAME, None, {"resolved_by": {k: str(v) for k, v in self._fields.resolved_by().items()}}),
        )

    def _complete_values(self, values: dict[str, Any]) -> dict[str, Any]:
        return values

    @abstractmethod
    def can_provide(self) -> bool:
        """Return ``True`` when the resolved values are enough to use the integration."""

    def can_not_provide(self) -> bool:
        return not self.can_provide()

    def resolved_by(self) -> Mapping[str, ResolvedBy]:
        """Snapshot of ``{field: ResolvedBy}``."""

        return self._fields.resolved_by()

    def value(self, name: str) -> Any:
        if name not in self._values:
            raise UnknownFieldError(f"{self.NAME} has no field named {name!r}")
        return self._values[name]

    def values(self) -> Mapping[str, Any]:
        return self._values

    def results(self) -> ResolvedFields:
        return self._fields

    @classmethod
    def secret_fields(cls) -> frozenset[str]:
        return frozenset(spec.name for spec in cls.FIELDS if spec.secret)


def has_text(value: Any) -> bool:
    """Return ``True`` for a string with at least one non-whitespace character.

    Examples
    --------
    >>> has_text("zk1:2181"), has_text("   "), has_text(None)
    (True, False, False)
    """

    return isinstance(value, str) and bool(value.strip())
