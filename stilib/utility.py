"""Small shared helpers: search results and element swapping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, MutableSequence

__all__ = ["Finder", "swap"]


@dataclass(frozen=True)
class Finder:
    """Outcome of a search: whether something was found and where."""

    is_found: bool = False
    index: int = 0

    def __bool__(self) -> bool:
        return self.is_found


def swap(sequence: MutableSequence[Any], index_a: int, index_b: int) -> None:
    """Exchange the elements at two positions of a mutable sequence in place."""
    if index_a == index_b:
        # Still validate the position so a bad index never passes silently.
        sequence[index_a]
        return
    sequence[index_a], sequence[index_b] = sequence[index_b], sequence[index_a]