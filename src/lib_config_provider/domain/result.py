"""Immutable ``(value, provenance)`` pair returned by the resolution engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .provenance import ResolvedBy

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ResolverResult(Generic[T]):
    """Outcome of resolving one field.

    Why
    ----
    Callers need both the typed value and the tag explaining where it came
    from, and the two must never disagree about whether anything resolved.

    What
    ----
    ``resolved_by is ResolvedBy.NONE`` holds exactly when ``value is None``;
    construction rejects any other combination.

    Examples
    --------
    >>> result = ResolverResult(9000, ResolvedBy.SYSTEM_PROPERTY)
    >>> result.resolved(), result.not_resolved()
    (True, False)
    >>> ResolverResult.none().resolved()
    False
    >>> ResolverResult(None, ResolvedBy.SUPPLIER)
    Traceback (most recent call last):
    ...
    ValueError: ResolverResult with value None must be resolved by NONE, got SUPPLIER
    """

    value: T | None
    resolved_by: ResolvedBy

    def __post_init__(self) -> None:
        if self.value is None and self.resolved_by is not ResolvedBy.NONE:
            raise ValueError(f"ResolverResult with value None must be resolved by NONE, got {self.resolved_by}")
        if self.value is not None and self.resolved_by is ResolvedBy.NONE:
            raise ValueError("ResolverResult resolved by NONE cannot carry a value")

    @classmethod
    def none(cls) -> ResolverResult[T]:
        """Return the canonical "nothing resolved" result."""

        return cls(None, ResolvedBy.NONE)

    def resolved(self) -> bool:
        """Return ``True`` when any source supplied the value."""

        return self.resolved_by is not ResolvedBy.NONE

    def not_resolved(self) -> bool:
        """Return ``True`` when no source supplied a value."""

        return not self.resolved()
