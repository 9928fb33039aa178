"""Process environment and process-wide property table adapter.

Purpose
-------
Implement :class:`lib_config_provider.application.ports.RuntimeEnvironment`
on top of :data:`os.environ` and a process-wide property table, the in-process
analogue of ``-D`` command-line flags.

Key behaviours
--------------
* The property table is a single module-level mapping shared by the whole
  process. Only application bootstrap code (or the CLI ``-D`` option) writes
  to it; the resolution engine only reads.
* :class:`DefaultEnvironment` accepts explicit mappings for testability and
  otherwise reads the live process state on every lookup.
"""

from __future__ import annotations

import os
from types import MappingProxyType
from typing import Mapping

from ...application.ports import RuntimeEnvironment
from ...observability import log_debug

_SYSTEM_PROPERTIES: dict[str, str] = {}


def set_system_property(key: str, value: str) -> None:
    """Store *value* under *key* in the process-wide property table.

    Examples
    --------
    >>> set_system_property("lcp.demo", "1")
    >>> get_system_property("lcp.demo")
    '1'
    >>> clear_system_property("lcp.demo")
    >>> get_system_property("lcp.demo") is None
    True
    """

    if not key or not key.strip():
        raise ValueError("System property key must not be blank")
    _SYSTEM_PROPERTIES[key] = value
    log_debug("system_property_set", source="system_property", key=key)


def clear_system_property(key: str) -> None:
    """Remove *key* from the process-wide property table if present."""

    _SYSTEM_PROPERTIES.pop(key, None)


def get_system_property(key: str) -> str | None:
    """Return the process-wide property *key* or ``None``."""

    return _SYSTEM_PROPERTIES.get(key)


def system_properties() -> Mapping[str, str]:
    """Return a read-only snapshot of the process-wide property table."""

    return MappingProxyType(dict(_SYSTEM_PROPERTIES))


def parse_property_assignment(assignment: str) -> tuple[str, str]:
    """Split a ``key=value`` assignment as used by ``-D`` flags.

    Examples
    --------
    >>> parse_property_assignment("lcp.service.name=orders")
    ('lcp.service.name', 'orders')
    >>> parse_property_assignment("flag=")
    ('flag', '')
    """

    key, separator, value = assignment.partition("=")
    key = key.strip()
    if not separator or not key:
        raise ValueError(f"Expected key=value, got {assignment!r}")
    return key, value


class DefaultEnvironment:
    """Read environment variables and system properties for the resolver."""

    def __init__(
        self,
        *,
        environ: Mapping[str, str] | None = None,
        properties: Mapping[str, str] | None = None,
    ) -> None:
        """Initialise with optional fixed mappings for testability.

        Parameters
        ----------
        environ:
            Mapping to read environment variables from. Defaults to the live
            :data:`os.environ`.
        properties:
            Mapping to read system properties from. Defaults to the live
            process-wide property table.
        """

        self._environ = os.environ if environ is None else environ
        self._properties = _SYSTEM_PROPERTIES if properties is None else properties

    def getenv(self, name: str) -> str | None:
        """Return the environment variable *name* or ``None``.

        Examples
        --------
        >>> DefaultEnvironment(environ={"LCP_NETWORK": "east"}).getenv("LCP_NETWORK")
        'east'
        """

        return self._environ.get(name)

    def get_property(self, key: str) -> str | None:
        """Return the system property *key* or ``None``.

        Examples
        --------
        >>> DefaultEnvironment(properties={"lcp.network": "west"}).get_property("lcp.network")
        'west'
        """

        return self._properties.get(key)


def environment_or_default(provided: RuntimeEnvironment | None) -> RuntimeEnvironment:
    """Return *provided* or a live :class:`DefaultEnvironment`."""

    return provided if provided is not None else DefaultEnvironment()
