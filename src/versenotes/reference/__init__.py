"""Reference parsing and book name resolution.

Public API:
    Parsing:
        parse_reference(raw) -> ParsedReference
        normalize_reference_text(raw) -> str

    Books:
        BookTable.default() -> BookTable
        BookNameResolver(table).resolve(token) -> str

    Formatting:
        format_reference(book, chapter, start, end) -> str
        render_passage(result) -> str
"""

from versenotes.reference.books import (
    BOOK_ABBREVIATIONS,
    CANONICAL_BOOKS,
    BookEntry,
    BookMatch,
    BookNameResolver,
    BookTable,
    normalize_book_token,
)
from versenotes.reference.formatting import (
    format_reference,
    render_passage,
    space_book_numeral,
    superscript,
)
from versenotes.reference.parser import (
    ParsedReference,
    ReferenceParser,
    normalize_reference_text,
    parse_reference,
)

__all__ = [
    # Books
    "BOOK_ABBREVIATIONS",
    "CANONICAL_BOOKS",
    "BookEntry",
    "BookMatch",
    "BookNameResolver",
    "BookTable",
    "normalize_book_token",
    # Formatting
    "format_reference",
    "render_passage",
    "space_book_numeral",
    "superscript",
    # Parsing
    "ParsedReference",
    "ReferenceParser",
    "normalize_reference_text",
    "parse_reference",
]
