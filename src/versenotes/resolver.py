"""Verse lookup orchestration.

A lookup runs: cache check -> parse -> resolve book -> query store ->
format -> cache. Parse and book failures surface as
``InvalidReferenceError`` and are never cached. Empty results are valid
and cached like any other.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from versenotes.cache import LookupCache, cache_key
from versenotes.errors import InvalidReferenceError, ParseError, UnknownBookError
from versenotes.reference.books import BookNameResolver
from versenotes.reference.formatting import format_reference
from versenotes.reference.parser import ParsedReference, ReferenceParser
from versenotes.store.base import VerseStore
from versenotes.store.models import BibleResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedReference:
    """A parsed reference whose book is a canonical book name."""

    book: str
    chapter: int
    start_verse: int | None = None
    end_verse: int | None = None

    @classmethod
    def from_parsed(cls, parsed: ParsedReference, book: str) -> ResolvedReference:
        return cls(
            book=book,
            chapter=parsed.chapter,
            start_verse=parsed.start_verse,
            end_verse=parsed.end_verse,
        )

    def __str__(self) -> str:
        return format_reference(self.book, self.chapter, self.start_verse, self.end_verse)


class VerseResolver:
    """Composes parser, book resolver, cache and store into ``lookup``."""

    def __init__(
        self,
        store: VerseStore,
        cache: LookupCache,
        books: BookNameResolver | None = None,
        parser: ReferenceParser | None = None,
    ):
        self.store = store
        self.cache = cache
        self.books = books or BookNameResolver()
        self.parser = parser or ReferenceParser()

    def resolve(self, raw: str) -> ResolvedReference:
        """Parse a reference and map its book to a canonical name.

        Raises:
            InvalidReferenceError: If the reference cannot be parsed or the
                book is unknown
        """
        try:
            parsed = self.parser.parse(raw)
        except ParseError as e:
            raise InvalidReferenceError(raw, str(e)) from e

        try:
            book = self.books.resolve(parsed.book_token)
        except UnknownBookError as e:
            raise InvalidReferenceError(raw, str(e)) from e

        return ResolvedReference.from_parsed(parsed, book)

    def lookup(self, raw: str) -> BibleResult:
        """Look up the verses for a reference string.

        Raises:
            InvalidReferenceError: If the reference cannot be parsed or resolved
            NotInitializedError: If the store has not been initialized
        """
        key = cache_key(raw)
        if key:
            cached = self.cache.get(key)
            if cached is not None:
                return cached

        ref = self.resolve(raw)
        verses = self.store.query(ref.book, ref.chapter, ref.start_verse, ref.end_verse)
        result = BibleResult(formatted_reference=str(ref), verses=tuple(verses))

        if not verses:
            logger.debug(f"No verses found for {result.formatted_reference}")

        self.cache.put(key, result)
        return result
