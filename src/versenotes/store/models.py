"""Verse and lookup result data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Verse:
    """A single verse of the corpus, identified by (book, chapter, verse)."""

    book: str
    chapter: int
    verse: int
    text: str

    @property
    def key(self) -> tuple[str, int, int]:
        return (self.book, self.chapter, self.verse)

    def to_dict(self) -> dict[str, Any]:
        return {
            "book": self.book,
            "chapter": self.chapter,
            "verse": self.verse,
            "text": self.text,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Verse:
        return cls(
            book=data["book"],
            chapter=int(data["chapter"]),
            verse=int(data["verse"]),
            text=data["text"],
        )


@dataclass(frozen=True)
class BibleResult:
    """Lookup result returned to callers.

    An empty ``verses`` tuple means "not found"; it is not an error.
    """

    formatted_reference: str
    verses: tuple[Verse, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return bool(self.verses)

    def to_dict(self) -> dict[str, Any]:
        return {
            "formattedReference": self.formatted_reference,
            "verses": [verse.to_dict() for verse in self.verses],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BibleResult:
        return cls(
            formatted_reference=data["formattedReference"],
            verses=tuple(Verse.from_dict(v) for v in data.get("verses", [])),
        )


@dataclass(frozen=True)
class CacheEntry:
    """A cached lookup, stamped with epoch milliseconds."""

    key: str
    result: BibleResult
    timestamp: int

    def is_fresh(self, now: int, ttl_ms: int) -> bool:
        return now - self.timestamp < ttl_ms
