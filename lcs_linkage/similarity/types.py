"""Type definitions for similarity comparators.

This module provides the structural contract a record-linkage engine relies on
when it calls a field comparator, plus the row shape emitted by bulk scoring.
"""

from typing import Protocol, TypedDict, runtime_checkable


@runtime_checkable
class Comparator(Protocol):
    """Protocol for field comparators consumed by the matching engine.

    Any object exposing these methods can be plugged into the bulk scoring
    helpers, independent of the metric it implements.
    """

    def compare(self, s1: str, s2: str) -> float:
        """Return a similarity score in the ``[0, 1]`` range."""
        ...

    def is_tokenized(self) -> bool:
        """Whether the comparator expects already-segmented field values."""
        ...


class PairScore(TypedDict):
    """Structured type for one scored candidate pair."""

    id_a: str
    id_b: str
    score: float
