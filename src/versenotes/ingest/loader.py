"""Seed corpus loading.

The seed format is an ordered list of book records:

    [{"book": "John",
      "chapters": [{"chapter": 3,
                    "verses": [{"verse": 16, "text": "For God so loved..."}]}]}]

Records are validated as they are flattened into ``Verse`` rows. Book names
are mapped onto canonical names where the book table knows them, so that
datasets spelling "Psalm" or "1John" still line up with resolved lookups.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator

from versenotes.errors import CorpusFormatError, UnknownBookError
from versenotes.reference.books import BookNameResolver
from versenotes.store.models import Verse

logger = logging.getLogger(__name__)


def load_corpus_file(path: Path) -> list[dict[str, Any]]:
    """Read a JSON seed corpus from disk.

    Raises:
        CorpusFormatError: If the file is not valid JSON or not a list
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CorpusFormatError(f"Corpus file {path} is not valid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise CorpusFormatError(f"Corpus file {path} is not valid UTF-8: {e}") from e

    if not isinstance(data, list):
        raise CorpusFormatError(
            f"Corpus file {path} must contain a list of book records, "
            f"got {type(data).__name__}"
        )
    return data


def _require(record: dict[str, Any], key: str, where: str) -> Any:
    if not isinstance(record, dict) or key not in record:
        raise CorpusFormatError(f"Missing '{key}' in {where}")
    return record[key]


def _require_list(record: dict[str, Any], key: str, where: str) -> list:
    value = _require(record, key, where)
    if not isinstance(value, list):
        raise CorpusFormatError(
            f"'{key}' must be a list in {where}, got {type(value).__name__}"
        )
    return value


def _positive_int(value: Any, what: str, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise CorpusFormatError(f"Invalid {what} {value!r} in {where}")
    return value


def canonical_book_name(name: str, resolver: BookNameResolver) -> str:
    """Map a dataset book name to its canonical name, or keep it verbatim."""
    try:
        match = resolver.match(name)
    except UnknownBookError:
        logger.warning(f"Corpus book '{name}' is not a canonical book; kept as-is")
        return name
    if match.rule == "prefix":
        # Prefix hits are fine for user input, not for seed data
        logger.warning(f"Corpus book '{name}' only prefix-matches '{match.name}'; kept as-is")
        return name
    return match.name


def iter_corpus_verses(
    corpus: Iterable[dict[str, Any]],
    resolver: BookNameResolver | None = None,
) -> Iterator[Verse]:
    """Flatten seed records into verses in corpus order.

    Args:
        corpus: Book records in the seed format
        resolver: Book resolver used to canonicalize book names

    Yields:
        Verse rows with trimmed text

    Raises:
        CorpusFormatError: On missing keys or non-positive numbers
    """
    resolver = resolver or BookNameResolver()

    for book_index, book_record in enumerate(corpus):
        where = f"book record #{book_index}"
        raw_name = _require(book_record, "book", where)
        if not isinstance(raw_name, str) or not raw_name.strip():
            raise CorpusFormatError(f"Invalid book name {raw_name!r} in {where}")
        book = canonical_book_name(raw_name.strip(), resolver)

        for chapter_record in _require_list(book_record, "chapters", where):
            chapter = _positive_int(_require(chapter_record, "chapter", book), "chapter", book)

            verse_where = f"{book} {chapter}"
            for verse_record in _require_list(chapter_record, "verses", verse_where):
                number = _positive_int(
                    _require(verse_record, "verse", verse_where), "verse", verse_where
                )
                text = _require(verse_record, "text", f"{book} {chapter}:{number}")
                if not isinstance(text, str):
                    raise CorpusFormatError(
                        f"Verse text must be a string in {book} {chapter}:{number}"
                    )
                yield Verse(book=book, chapter=chapter, verse=number, text=text.strip())
