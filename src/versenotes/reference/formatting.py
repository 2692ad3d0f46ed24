"""Display formatting for references and passages."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from versenotes.store.models import BibleResult


_NUMERAL_LETTER_RE = re.compile(r"(\d)([A-Za-z])")

_SUPERSCRIPT = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")


def space_book_numeral(book: str) -> str:
    """Insert a space between a numeral prefix and the following letter.

    >>> space_book_numeral("1John")
    '1 John'
    """
    return _NUMERAL_LETTER_RE.sub(r"\1 \2", book)


def format_reference(
    book: str,
    chapter: int,
    start_verse: int | None = None,
    end_verse: int | None = None,
) -> str:
    """Build "<Book> <chapter>[:<start>[-<end>]]"."""
    text = f"{space_book_numeral(book)} {chapter}"
    if start_verse is not None:
        text += f":{start_verse}"
        if end_verse is not None:
            text += f"-{end_verse}"
    return text


def superscript(number: int) -> str:
    """Render a verse number with Unicode superscript digits."""
    return str(number).translate(_SUPERSCRIPT)


def render_passage(result: BibleResult, superscript_numbers: bool = False) -> str:
    """Flatten a result into insertable note text.

    Each verse becomes "<number> <text>", joined by single spaces.
    """
    parts = []
    for verse in result.verses:
        number = superscript(verse.verse) if superscript_numbers else str(verse.verse)
        parts.append(f"{number} {verse.text}")
    return " ".join(parts)
