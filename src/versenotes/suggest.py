"""Live verse suggestions while typing.

Only the trailing window of text before the cursor is scanned, so the
cost per keystroke does not grow with the length of the note. Callers are
expected to debounce (300-1000ms); nothing here rate-limits.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from versenotes.errors import InvalidReferenceError, ParseError, UnknownBookError
from versenotes.reference.books import BookNameResolver
from versenotes.reference.parser import ReferenceParser
from versenotes.resolver import VerseResolver
from versenotes.store.models import BibleResult

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = 64
DEFAULT_MAX_BOOK_WORDS = 4

_WORD_RE = re.compile(r"\S+")
_LEADING_PUNCT_RE = re.compile(r"^[^\w]+")


@dataclass(frozen=True)
class ReferenceMatch:
    """A reference-looking span of text ending at the cursor."""

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class Suggestion:
    """A resolved reference near the cursor, ready to offer for insertion."""

    reference: str
    start: int
    end: int
    result: BibleResult


def find_reference_near_cursor(
    text: str,
    cursor: int | None = None,
    window: int = DEFAULT_WINDOW,
    max_book_words: int = DEFAULT_MAX_BOOK_WORDS,
    books: BookNameResolver | None = None,
    parser: ReferenceParser | None = None,
) -> ReferenceMatch | None:
    """Find the longest valid reference that ends right before the cursor.

    Args:
        text: Full editor content
        cursor: Cursor offset (defaults to end of text)
        window: Number of characters before the cursor to scan
        max_book_words: Longest book name, in words, to consider
        books: Book resolver used to reject unknown book tokens
        parser: Reference parser

    Returns:
        ReferenceMatch with absolute offsets into ``text``, or None
    """
    books = books or BookNameResolver()
    parser = parser or ReferenceParser()

    cursor = len(text) if cursor is None else max(0, min(cursor, len(text)))
    offset = max(0, cursor - window)
    tail = text[offset:cursor].rstrip()
    if not tail:
        return None

    words = list(_WORD_RE.finditer(tail))
    # A word cut by the window edge is not a real word start
    if offset > 0 and words and words[0].start() == 0 and not text[offset - 1].isspace():
        words = words[1:]

    # Book words plus the chapter/verse word
    candidates = words[-(max_book_words + 1):]
    for word in candidates:
        start = word.start()
        chunk = tail[start:]
        lead = _LEADING_PUNCT_RE.match(chunk)
        if lead:
            start += lead.end()
            chunk = tail[start:]
        if not chunk:
            continue

        try:
            parsed = parser.parse(chunk)
            books.resolve(parsed.book_token)
        except (ParseError, UnknownBookError):
            continue

        return ReferenceMatch(text=chunk, start=offset + start, end=offset + len(tail))

    return None


class VerseSuggester:
    """Turns the text around the cursor into a verse suggestion."""

    def __init__(
        self,
        resolver: VerseResolver,
        window: int = DEFAULT_WINDOW,
        max_book_words: int = DEFAULT_MAX_BOOK_WORDS,
    ):
        self.resolver = resolver
        self.window = window
        self.max_book_words = max_book_words

    def suggest(self, text: str, cursor: int | None = None) -> Suggestion | None:
        """Suggest verses for a reference typed just before the cursor.

        Returns None when no reference is found or it has no verses.

        Raises:
            NotInitializedError: If the verse store is not ready
        """
        match = find_reference_near_cursor(
            text,
            cursor,
            window=self.window,
            max_book_words=self.max_book_words,
            books=self.resolver.books,
            parser=self.resolver.parser,
        )
        if match is None:
            return None

        try:
            result = self.resolver.lookup(match.text)
        except InvalidReferenceError as e:
            logger.debug(f"Suggestion candidate '{match.text}' rejected: {e}")
            return None

        if not result.found:
            return None

        return Suggestion(
            reference=result.formatted_reference,
            start=match.start,
            end=match.end,
            result=result,
        )
