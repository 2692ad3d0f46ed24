"""Tests for seed corpus loading.

These tests verify that the loader:
1. Reads the seed JSON format
2. Rejects malformed records
3. Trims verse text
4. Maps dataset book names onto canonical names
"""

import json
from pathlib import Path

import pytest

from versenotes.errors import CorpusFormatError
from versenotes.ingest.demo_data import DEMO_CORPUS, demo_verse_count
from versenotes.ingest.loader import (
    canonical_book_name,
    iter_corpus_verses,
    load_corpus_file,
)
from versenotes.reference.books import CANONICAL_BOOKS, BookNameResolver


FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_CORPUS = FIXTURES_DIR / "sample_corpus.json"
BAD_CORPUS = FIXTURES_DIR / "bad_corpus.json"


class TestLoadCorpusFile:
    def test_loads_book_records(self):
        corpus = load_corpus_file(SAMPLE_CORPUS)
        assert [record["book"] for record in corpus] == ["Psalm", "1John", "Jn"]

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{not json")
        with pytest.raises(CorpusFormatError, match="not valid JSON"):
            load_corpus_file(path)

    def test_top_level_must_be_list(self, tmp_path):
        path = tmp_path / "object.json"
        path.write_text(json.dumps({"book": "John"}))
        with pytest.raises(CorpusFormatError, match="list of book records"):
            load_corpus_file(path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.json"
        path.write_bytes(b"\xff\xfe[]")
        with pytest.raises(CorpusFormatError, match="not valid UTF-8"):
            load_corpus_file(path)


class TestIterCorpusVerses:
    def test_flattens_in_corpus_order(self):
        verses = list(iter_corpus_verses(load_corpus_file(SAMPLE_CORPUS)))
        assert [(v.book, v.chapter, v.verse) for v in verses] == [
            ("Psalms", 117, 1),
            ("Psalms", 117, 2),
            ("1 John", 4, 8),
            ("John", 11, 35),
        ]

    def test_text_is_trimmed(self):
        verses = list(iter_corpus_verses(load_corpus_file(SAMPLE_CORPUS)))
        assert verses[0].text == (
            "O praise the LORD, all ye nations: praise him, all ye people."
        )

    def test_non_positive_verse_rejected(self):
        with pytest.raises(CorpusFormatError, match="Invalid verse 0"):
            list(iter_corpus_verses(load_corpus_file(BAD_CORPUS)))

    def test_missing_chapters_key(self):
        with pytest.raises(CorpusFormatError, match="Missing 'chapters'"):
            list(iter_corpus_verses([{"book": "John"}]))

    @pytest.mark.parametrize("value", [None, 3, "chapter one", {"chapter": 1}])
    def test_chapters_must_be_list(self, value):
        with pytest.raises(CorpusFormatError, match="'chapters' must be a list"):
            list(iter_corpus_verses([{"book": "John", "chapters": value}]))

    def test_verses_must_be_list(self):
        corpus = [{"book": "John", "chapters": [{"chapter": 1, "verses": None}]}]
        with pytest.raises(CorpusFormatError, match="'verses' must be a list"):
            list(iter_corpus_verses(corpus))

    def test_missing_text(self):
        corpus = [{"book": "John", "chapters": [{"chapter": 1, "verses": [{"verse": 1}]}]}]
        with pytest.raises(CorpusFormatError, match="Missing 'text'"):
            list(iter_corpus_verses(corpus))

    def test_non_integer_chapter(self):
        corpus = [{"book": "John", "chapters": [{"chapter": "one", "verses": []}]}]
        with pytest.raises(CorpusFormatError, match="Invalid chapter"):
            list(iter_corpus_verses(corpus))

    def test_blank_book_name(self):
        with pytest.raises(CorpusFormatError, match="Invalid book name"):
            list(iter_corpus_verses([{"book": "  ", "chapters": []}]))

    def test_is_lazy(self):
        """Bad records further on are not touched until consumed."""
        corpus = [
            {"book": "John", "chapters": [{"chapter": 1, "verses": [{"verse": 1, "text": "x"}]}]},
            {"chapters": []},
        ]
        verses = iter_corpus_verses(corpus)
        assert next(verses).book == "John"


class TestCanonicalBookName:
    def test_abbreviation_mapped(self):
        assert canonical_book_name("Psalm", BookNameResolver()) == "Psalms"

    def test_unknown_kept_verbatim(self):
        assert canonical_book_name("Tobit", BookNameResolver()) == "Tobit"

    def test_prefix_only_kept_verbatim(self):
        """Seed data is not stretched to fit a prefix match."""
        assert canonical_book_name("Deuter", BookNameResolver()) == "Deuter"


class TestDemoCorpus:
    def test_demo_books_are_canonical(self):
        for record in DEMO_CORPUS:
            assert record["book"] in CANONICAL_BOOKS

    def test_demo_verse_count_matches_iteration(self):
        assert demo_verse_count() == len(list(iter_corpus_verses(DEMO_CORPUS)))

    def test_demo_contains_john_3_16(self):
        verses = {(v.book, v.chapter, v.verse): v.text for v in iter_corpus_verses(DEMO_CORPUS)}
        assert verses[("John", 3, 16)].startswith("For God so loved the world")
