"""Provenance tags explaining how a configuration value was obtained."""

from __future__ import annotations

from enum import Enum


class ResolvedBy(Enum):
    """Closed set of resolution outcomes.

    Members
    -------
    PROVIDER_DEFAULT
        The field's compiled-in fallback was used because every other source
        was silent. Only ever a terminal outcome, never an "attempt pending"
        marker.
    EXTERNAL_PROPERTY
        Read from the external properties file.
    SYSTEM_PROPERTY
        Read from the process-wide property table.
    SYSTEM_ENV
        Read from a process environment variable.
    EXPLICIT_VALUE
        Pinned by the caller through a resolver strategy.
    SUPPLIER
        Produced by the caller's supplier callback.
    NONE
        Nothing resolved; the value is ``None``.

    Examples
    --------
    >>> ResolvedBy.SYSTEM_ENV.value
    'system_env'
    >>> ResolvedBy("external_property") is ResolvedBy.EXTERNAL_PROPERTY
    True
    """

    PROVIDER_DEFAULT = "provider_default"
    EXTERNAL_PROPERTY = "external_property"
    SYSTEM_PROPERTY = "system_property"
    SYSTEM_ENV = "system_env"
    EXPLICIT_VALUE = "explicit_value"
    SUPPLIER = "supplier"
    NONE = "none"

    def __str__(self) -> str:
        return self.name
