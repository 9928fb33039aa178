"""String-to-typed converters used by field specifications.

Every converter raises :class:`ValueError` on malformed input; the resolution
engine wraps that into :class:`lib_config_provider.domain.errors.ConversionError`.
"""

from __future__ import annotations

import json
from typing import Any

_TRUE = frozenset({"true", "yes", "on", "1"})
_FALSE = frozenset({"false", "no", "off", "0"})


def to_str(value: str) -> str:
    """Return *value* unchanged."""

    return value


def to_int(value: str) -> int:
    """Parse a base-10 integer, tolerating surrounding whitespace.

    Examples
    --------
    >>> to_int(" 9000 ")
    9000
    """

    return int(value.strip())


def to_bool(value: str) -> bool:
    """Parse a boolean strictly.

    Examples
    --------
    >>> to_bool("TRUE"), to_bool("off")
    (True, False)
    >>> to_bool("maybe")
    Traceback (most recent call last):
    ...
    ValueError: Not a boolean: 'maybe'
    """

    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"Not a boolean: {value!r}")


def to_list(value: str) -> list[str]:
    """Split a comma-separated value into stripped, non-empty items.

    Examples
    --------
    >>> to_list("TLSv1.2, TLSv1.3,,")
    ['TLSv1.2', 'TLSv1.3']
    """

    return [item.strip() for item in value.split(",") if item.strip()]


def to_json_map(value: str) -> dict[str, Any]:
    """Parse a JSON object into a ``dict``.

    Examples
    --------
    >>> to_json_map('{"env": "prod"}')
    {'env': 'prod'}
    >>> to_json_map('[1, 2]')
    Traceback (most recent call last):
    ...
    ValueError: Expected a JSON object, got list
    """

    data = json.loads(value)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data
