"""Composition root for ``lib_config_provider``.

Purpose
-------
Wire the environment accessor, the external properties file, and the provider
registry together so callers (the CLI in particular) can build a provider by
name and obtain a serialisable description of what it resolved.

Contents
--------
* :data:`SECRET_MASK` – placeholder printed instead of secret values.
* :func:`build_provider` – construct a registered provider with shared
  collaborators.
* :func:`describe_provider` – JSON-friendly snapshot with secrets masked.
* :func:`resolve_provider` – one-shot helper combining both steps.

System Role
-----------
The only module that knows both the registry and the adapters. Library users
who construct providers directly never need it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Final

from .adapters.environment.default import environment_or_default
from .adapters.external.default import ExternalConfigProvider
from .application.fields import FieldConfigProvider
from .application.ports import RuntimeEnvironment
from .domain.errors import NotFound
from .observability import bind_trace_id, log_info, make_event
from .providers import PROVIDERS

SECRET_MASK: Final[str] = "********"


def build_provider(
    name: str,
    *,
    config_path: Path | str | None = None,
    environment: RuntimeEnvironment | None = None,
) -> FieldConfigProvider:
    """Instantiate the provider registered under *name*.

    Parameters
    ----------
    name:
        Registry key such as ``"zookeeper"`` or ``"tls"``.
    config_path:
        Explicit external properties path; system property and environment
        overrides of the path still win.
    environment:
        Environment accessor shared by the external provider and every field.

    Raises
    ------
    NotFound
        When *name* is not registered.
    """

    try:
        provider_class = PROVIDERS[name]
    except KeyError as exc:
        known = ", ".join(sorted(PROVIDERS))
        raise NotFound(f"Unknown provider {name!r}; expected one of: {known}") from exc
    shared_environment = environment_or_default(environment)
    external = ExternalConfigProvider(explicit_path=config_path, environment=shared_environment)
    return provider_class(external_config=external, environment=shared_environment)


def describe_provider(provider: FieldConfigProvider) -> dict[str, Any]:
    """Return ``{provider, can_provide, values, resolved_by}`` with secrets masked.

    Examples
    --------
    >>> from lib_config_provider.adapters.environment.default import DefaultEnvironment
    >>> environment = DefaultEnvironment(environ={"LCP_DATASOURCE_PASSWORD": "hunter2"}, properties={})
    >>> description = describe_provider(build_provider("datasource", config_path="/nonexistent", environment=environment))
    >>> description["values"]["password"], description["resolved_by"]["password"]
    ('********', 'SYSTEM_ENV')
    """

    secrets = provider.secret_fields()
    values = {
        name: SECRET_MASK if name in secrets and value is not None else value
        for name, value in provider.values().items()
    }
    return {
        "provider": provider.NAME,
        "can_provide": provider.can_provide(),
        "values": values,
        "resolved_by": {name: str(resolved_by) for name, resolved_by in provider.resolved_by().items()},
    }


def resolve_provider(
    name: str,
    *,
    config_path: Path | str | None = None,
    environment: RuntimeEnvironment | None = None,
) -> dict[str, Any]:
    """Build provider *name* under a fresh trace context and describe it."""

    bind_trace_id(None)
    description = describe_provider(build_provider(name, config_path=config_path, environment=environment))
    log_info("provider_described", **make_event(name, None, {"can_provide": description["can_provide"]}))
    return description
