"""Helpers for splitting large ``IN (...)`` parameter lists."""

from collections.abc import Iterator, Sequence
from typing import TypeVar

T = TypeVar("T")

# Stays well under SQLite's bound-parameter limit
IN_CLAUSE_CHUNK_SIZE = 500


def chunked(values: Sequence[T], size: int = IN_CLAUSE_CHUNK_SIZE) -> Iterator[Sequence[T]]:
    """Yield consecutive slices of ``values`` of at most ``size`` items."""
    for start in range(0, len(values), size):
        yield values[start : start + size]
