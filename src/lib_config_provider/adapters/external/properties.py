"""``.properties`` file parser.

Purpose
-------
Turn a flat, line-oriented properties document into a ``dict[str, str]`` using
the conventional rules: ``#``/``!`` comment lines, ``=``/``:``/whitespace
separators, backslash line continuation, and backslash escapes including
``\\uXXXX``.

Contents
--------
* :func:`parse_properties` – parse text into a mapping.
* :func:`load_properties` – read and parse a file path.
* Helper functions (`_logical_lines`, `_split_entry`, `_unescape`) that keep
  each rule readable.

System Role
-----------
Used by :class:`lib_config_provider.adapters.external.default.ExternalConfigProvider`
which converts any :class:`InvalidFormat` or I/O failure into "cannot provide".
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator

from ...domain.errors import InvalidFormat

_SEPARATORS = frozenset("=:")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = frozenset(" \t\f")
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def load_properties(path: Path) -> dict[str, str]:
    """Read *path* as UTF-8 and parse it.

    Raises
    ------
    OSError
        When the file cannot be read.
    UnicodeDecodeError
        When the file is not valid UTF-8.
    InvalidFormat
        When an escape sequence is malformed.
    """

    return parse_properties(path.read_text(encoding="utf-8"))


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties *text* into a mapping; later duplicate keys win.

    Examples
    --------
    >>> parse_properties("# comment\\napp.host=file-host\\napp.port : 9000\\n")
    {'app.host': 'file-host', 'app.port': '9000'}
    >>> parse_properties("list = a,\\\\\\n    b")
    {'list': 'a,b'}
    >>> parse_properties("greeting hello world")
    {'greeting': 'hello world'}
    """

    entries: dict[str, str] = {}
    for line_number, logical in _logical_lines(_LINE_BREAK.split(text)):
        key, value = _split_entry(logical)
        try:
            entries[_unescape(key)] = _unescape(value)
        except InvalidFormat as exc:
            raise InvalidFormat(f"Malformed escape on line {line_number}: {exc}") from exc
    return entries


def _logical_lines(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, text)`` for each non-comment logical line.

    A physical line ending in an odd number of backslashes continues onto the
    next line, whose leading whitespace is discarded.
    """

    buffer: list[str] = []
    start = 0
    for line_number, raw in enumerate(lines, start=1):
        stripped = raw.lstrip(" \t\f")
        if not buffer:
            if not stripped or stripped[0] in "#!":
                continue
            start = line_number
        if _continues(stripped):
            buffer.append(stripped[:-1])
            continue
        buffer.append(stripped)
        yield start, "".join(buffer)
        buffer = []
    if buffer:
        yield start, "".join(buffer)


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into raw (still escaped) key and value."""

    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1
    key = line[:index]
    rest = line[index:].lstrip(" \t\f")
    if rest[:1] in _SEPARATORS:
        rest = rest[1:].lstrip(" \t\f")
    return key, rest


def _unescape(raw: str) -> str:
    """Resolve backslash escapes in *raw*.

    Examples
    --------
    >>> _unescape("tab\\\\there")
    'tab\\there'
    >>> _unescape("\\\\u0041BC")
    'ABC'
    >>> _unescape("\\\\u00zz")
    Traceback (most recent call last):
    ...
    lib_config_provider.domain.errors.InvalidFormat: Malformed \\uxxxx encoding: '00zz'
    """

    if "\\" not in raw:
        return raw
    out: list[str] = []
    index = 0
    length = len(raw)
    while index < length:
        char = raw[index]
        if char != "\\":
            out.append(char)
            index += 1
            continue
        index += 1
        if index >= length:
            break
        escaped = raw[index]
        if escaped == "u":
            digits = raw[index + 1 : index + 5]
            try:
                if len(digits) != 4:
                    raise ValueError(digits)
                out.append(chr(int(digits, 16)))
            except ValueError as exc:
                raise InvalidFormat(f"Malformed \\uxxxx encoding: {digits!r}") from exc
            index += 5
            continue
        out.append(_ESCAPES.get(escaped, escaped))
        index += 1
    return "".join(out)
