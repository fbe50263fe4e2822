"""Data models for book highlights."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union


@dataclass(frozen=True)
class Location:
    """Position of a highlight in the book plus a link that opens it."""

    value: int
    link: str

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Location value must not be negative: {self.value}")


@dataclass(frozen=True)
class Quote:
    """Word-by-word quote from the original text."""

    quote: str
    location: Location


@dataclass(frozen=True)
class Note:
    """Margin note for a particular book location."""

    note: str
    location: Location


@dataclass(frozen=True)
class Comment:
    """Quote from the book together with the reader's note on it."""

    quote: str
    note: str
    location: Location


Highlight = Union[Quote, Note, Comment]


@dataclass(frozen=True)
class Book:
    """Book with its highlighted passages, in reading order."""

    title: str
    authors: str
    highlights: Tuple[Highlight, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable but always store an immutable tuple.
        object.__setattr__(self, "highlights", tuple(self.highlights))
