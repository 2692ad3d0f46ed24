"""Seed corpus ingestion.

Public API:
    load_corpus_file(path) -> list of book records
    iter_corpus_verses(corpus, resolver) -> iterator of Verse
    DEMO_CORPUS: bundled KJV sample in the seed format
"""

from versenotes.ingest.demo_data import DEMO_CORPUS, demo_verse_count
from versenotes.ingest.loader import (
    canonical_book_name,
    iter_corpus_verses,
    load_corpus_file,
)

__all__ = [
    "DEMO_CORPUS",
    "demo_verse_count",
    "canonical_book_name",
    "iter_corpus_verses",
    "load_corpus_file",
]
