"""Public package surface for ``lib_config_provider``.

Providers resolve each field through a fixed precedence chain (system
property, environment variable, external properties file, caller strategy,
compiled-in fallback) and report which source won via :class:`ResolvedBy`.
"""

from __future__ import annotations

from .adapters.environment.default import (
    DefaultEnvironment,
    clear_system_property,
    get_system_property,
    set_system_property,
    system_properties,
)
from .adapters.external.default import (
    DEFAULT_CONFIG_PATH,
    DEFAULT_CONFIG_PATH_ENV_VARIABLE,
    DEFAULT_CONFIG_PATH_SYSTEM_PROPERTY,
    ExternalConfigProvider,
)
from .application.fields import FieldConfigProvider, FieldSpec, ResolvedFields, resolve_fields
from .application.ports import ConfigProvider, PropertySource, RuntimeEnvironment
from .application.resolver import PropertyResolutionSettings, resolve_property, resolve_string_property
from .core import build_provider, describe_provider, resolve_provider
from .domain.errors import ConfigError, ConversionError, InvalidFormat, NotFound, UnknownFieldError, ValidationError
from .domain.provenance import ResolvedBy
from .domain.result import ResolverResult
from .domain.strategy import (
    FieldResolverStrategy,
    env_variable_strategy,
    explicit_value_strategy,
    external_property_strategy,
    supplier_strategy,
    system_property_strategy,
)
from .observability import bind_trace_id, get_logger
from .providers import PROVIDERS

__all__ = [
    "PROVIDERS",
    "ConfigError",
    "ConfigProvider",
    "ConversionError",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_CONFIG_PATH_ENV_VARIABLE",
    "DEFAULT_CONFIG_PATH_SYSTEM_PROPERTY",
    "DefaultEnvironment",
    "ExternalConfigProvider",
    "FieldConfigProvider",
    "FieldResolverStrategy",
    "FieldSpec",
    "InvalidFormat",
    "NotFound",
    "PropertyResolutionSettings",
    "PropertySource",
    "ResolvedBy",
    "ResolvedFields",
    "ResolverResult",
    "RuntimeEnvironment",
    "UnknownFieldError",
    "ValidationError",
    "bind_trace_id",
    "build_provider",
    "clear_system_property",
    "describe_provider",
    "env_variable_strategy",
    "explicit_value_strategy",
    "external_property_strategy",
    "get_logger",
    "get_system_property",
    "resolve_fields",
    "resolve_property",
    "resolve_string_property",
    "set_system_property",
    "supplier_strategy",
    "system_properties",
]
