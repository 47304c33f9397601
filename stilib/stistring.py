"""Owned strings and lightweight string views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

__all__ = ["StiString", "StringView"]


class StiString:
    """A string that owns its text and records its length."""

    __slots__ = ("data", "length")

    def __init__(self, string: Optional[str] = None) -> None:
        if string is None:
            self.data: Optional[str] = None
            self.length = 0
        else:
            self.data = str(string)
            self.length = len(self.data)

    @classmethod
    def move_create(cls, string: str) -> "StiString":
        """Build a StiString that takes over the given text."""
        if string is None:
            raise TypeError("cannot take over None")
        created = cls.__new__(cls)
        created.data = string
        created.length = len(string)
        return created

    def clone(self) -> "StiString":
        """Return an independent copy."""
        return StiString(self.data)

    def destroy(self) -> None:
        """Release the text, leaving an empty string."""
        self.data = None
        self.length = 0

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return self.data or ""

    def __repr__(self) -> str:
        return f"StiString({self.data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StiString):
            return NotImplemented
        return self.data == other.data and self.length == other.length

    def __hash__(self) -> int:
        return hash((self.data, self.length))


@dataclass(frozen=True)
class StringView:
    """Read-only view of some text and its length."""

    data: Optional[str] = None
    length: int = 0

    @classmethod
    def from_text(cls, string: str) -> "StringView":
        """View over a plain string."""
        if string is None:
            raise TypeError("cannot view None")
        return cls(string, len(string))

    @classmethod
    def from_sti_string(cls, string: StiString) -> "StringView":
        """View over the text of a StiString."""
        return cls(string.data, string.length)

    def __len__(self) -> int:
        return self.length

    def __str__(self) -> str:
        return self.data or ""