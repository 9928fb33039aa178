"""Precedence engine resolving a single configuration field.

Purpose
-------
Given one :class:`PropertyResolutionSettings`, walk the precedence chain and
return exactly one :class:`ResolverResult` tagged with its provenance.

Precedence (first success wins)
-------------------------------
1. System property – non-blank → ``SYSTEM_PROPERTY``.
2. Environment variable – non-blank → ``SYSTEM_ENV``.
3. External property – present and non-blank → ``EXTERNAL_PROPERTY``.
4. Strategy explicit value – not ``None`` → ``EXPLICIT_VALUE``.
5. Strategy supplier – returns non-``None`` → ``SUPPLIER``.
6. Settings default value – not ``None`` → ``PROVIDER_DEFAULT``.
7. Nothing → ``(None, NONE)``.

Raw strings from steps 1–3 pass through ``convert_from_string``; a failing
conversion raises :class:`ConversionError` instead of falling through to a
weaker source.

System Role
-----------
Stateless and pure apart from reading already-loaded state, so it can be
called concurrently. Concrete providers reach it through
:mod:`lib_config_provider.application.fields`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Generic, TypeVar

from ..adapters.environment.default import environment_or_default
from ..adapters.external.default import ExternalConfigProvider, external_config_or_default
from ..domain.errors import ConversionError
from ..domain.provenance import ResolvedBy
from ..domain.result import ResolverResult
from ..domain.strategy import EMPTY_STRATEGY, FieldResolverStrategy
from ..observability import log_debug, make_event
from .converters import to_str
from .ports import RuntimeEnvironment

T = TypeVar("T")

_MASK = "<secret>"


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class PropertyResolutionSettings(Generic[T]):
    """Everything needed to resolve one field.

    Attributes
    ----------
    system_property / environment_variable / external_key:
        The field's default lookup keys.
    default_value:
        Compiled-in fallback; ``None`` means "no fallback".
    convert_from_string:
        Converter applied to raw strings from the first three sources.
    resolver_strategy:
        Optional caller overrides; ``None`` behaves like an empty strategy.
    external_config_provider / environment:
        Shared collaborators; ``None`` means the live defaults.
    secret:
        Suppress the value in log events.
    """

    system_property: str
    environment_variable: str
    external_key: str
    default_value: T | None = None
    convert_from_string: Callable[[str], T] = field(default=to_str)  # type: ignore[assignment]
    resolver_strategy: FieldResolverStrategy[T] | None = None
    external_config_provider: ExternalConfigProvider | None = None
    environment: RuntimeEnvironment | None = None
    secret: bool = False

    def with_strategy(self, strategy: FieldResolverStrategy[T] | None) -> PropertyResolutionSettings[T]:
        """Return a copy bound to *strategy*."""

        return replace(self, resolver_strategy=strategy)


def resolve_property(settings: PropertyResolutionSettings[T]) -> ResolverResult[T]:
    """Resolve one field according to the fixed precedence chain.

    Examples
    --------
    >>> from lib_config_provider.adapters.environment.default import DefaultEnvironment
    >>> from lib_config_provider.application.converters import to_int
    >>> environment = DefaultEnvironment(environ={"APP_PORT": "9000"}, properties={})
    >>> external = ExternalConfigProvider(explicit_path="/nonexistent/external.properties", environment=environment)
    >>> settings = PropertyResolutionSettings(
    ...     system_property="app.port",
    ...     environment_variable="APP_PORT",
    ...     external_key="app.port",
    ...     convert_from_string=to_int,
    ...     external_config_provider=external,
    ...     environment=environment,
    ... )
    >>> resolve_property(settings)
    ResolverResult(value=9000, resolved_by=<ResolvedBy.SYSTEM_ENV: 'system_env'>)
    """

    strategy: FieldResolverStrategy[T] = settings.resolver_strategy or EMPTY_STRATEGY
    environment = environment_or_default(settings.environment)
    convert = settings.convert_from_string

    property_key = strategy.system_property_key_or_default(settings.system_property)
    from_property = environment.get_property(property_key)
    if not _is_blank(from_property):
        return _converted(settings, convert, from_property, "system_property", property_key, ResolvedBy.SYSTEM_PROPERTY)  # type: ignore[arg-type]

    env_variable = strategy.env_variable_or_default(settings.environment_variable)
    from_env = environment.getenv(env_variable)
    if not _is_blank(from_env):
        return _converted(settings, convert, from_env, "environment", env_variable, ResolvedBy.SYSTEM_ENV)  # type: ignore[arg-type]

    external_key = strategy.external_property_or_default(settings.external_key)
    external = external_config_or_default(settings.external_config_provider)

    def on_found(raw: str) -> ResolverResult[T]:
        if _is_blank(raw):
            return _resolve_caller_defaults(settings, strategy)
        return _converted(settings, convert, raw, "external_property", external_key, ResolvedBy.EXTERNAL_PROPERTY)

    return external.resolve_external_property(
        external_key,
        on_found,
        lambda: _resolve_caller_defaults(settings, strategy),
    )


def resolve_string_property(settings: PropertyResolutionSettings[str]) -> ResolverResult[str]:
    """Resolve *settings* with the identity converter regardless of its own."""

    return resolve_property(replace(settings, convert_from_string=to_str))


def _resolve_caller_defaults(
    settings: PropertyResolutionSettings[T], strategy: FieldResolverStrategy[T]
) -> ResolverResult[T]:
    """Apply the explicit value, supplier, and fallback steps in order."""

    if strategy.explicit_value is not None:
        return _finish(settings, ResolverResult(strategy.explicit_value, ResolvedBy.EXPLICIT_VALUE), "strategy")
    if strategy.value_supplier is not None:
        supplied = strategy.value_supplier()
        if supplied is not None:
            return _finish(settings, ResolverResult(supplied, ResolvedBy.SUPPLIER), "strategy")
    if settings.default_value is not None:
        return _finish(settings, ResolverResult(settings.default_value, ResolvedBy.PROVIDER_DEFAULT), "default")
    log_debug("property_unresolved", **make_event("none", settings.system_property))
    return ResolverResult.none()


def _converted(
    settings: PropertyResolutionSettings[T],
    convert: Callable[[str], T],
    raw: str,
    source: str,
    key: str,
    resolved_by: ResolvedBy,
) -> ResolverResult[T]:
    try:
        value = convert(raw)
    except (ValueError, TypeError) as exc:
        if settings.secret:
            log_debug("property_conversion_failed", **make_event(source, key))
            raise ConversionError(source, key, _MASK) from exc
        log_debug("property_conversion_failed", **make_event(source, key, {"error": str(exc)}))
        raise ConversionError(source, key, raw, reason=str(exc)) from exc
    if value is None:
        raise ConversionError(source, key, _MASK if settings.secret else raw, reason="converter returned None")
    return _finish(settings, ResolverResult(value, resolved_by), source, key)


def _finish(
    settings: PropertyResolutionSettings[Any],
    result: ResolverResult[T],
    source: str,
    key: str | None = None,
) -> ResolverResult[T]:
    payload: dict[str, Any] = {"resolved_by": str(result.resolved_by)}
    if not settings.secret:
        payload["value"] = result.value
    log_debug("property_resolved", **make_event(source, key or settings.system_property, payload))
    return result
