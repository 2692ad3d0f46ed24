"""Book name normalization against the 66-book Protestant canon.

The abbreviation table is immutable data. A ``BookTable`` is built once and
handed to whoever needs it; tests can build their own (or extend the default
with ``with_aliases``) without touching shared state.

Resolution order for a token, after normalization (lowercase, whitespace and
periods removed):

1. exact match on a canonical name
2. exact match on a known abbreviation
3. prefix match: the token is a prefix of a canonical name or abbreviation

Within each stage the first book in canonical order wins. Numbered books
(1-3 prefix) only prefix-match tokens carrying the same numeral, so "1 Jo"
can never land on 2 John.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Mapping

from versenotes.errors import UnknownBookError


# ============================================================================
# Canon
# ============================================================================

CANONICAL_BOOKS: tuple[str, ...] = (
    # Old Testament
    "Genesis",
    "Exodus",
    "Leviticus",
    "Numbers",
    "Deuteronomy",
    "Joshua",
    "Judges",
    "Ruth",
    "1 Samuel",
    "2 Samuel",
    "1 Kings",
    "2 Kings",
    "1 Chronicles",
    "2 Chronicles",
    "Ezra",
    "Nehemiah",
    "Esther",
    "Job",
    "Psalms",
    "Proverbs",
    "Ecclesiastes",
    "Song of Solomon",
    "Isaiah",
    "Jeremiah",
    "Lamentations",
    "Ezekiel",
    "Daniel",
    "Hosea",
    "Joel",
    "Amos",
    "Obadiah",
    "Jonah",
    "Micah",
    "Nahum",
    "Habakkuk",
    "Zephaniah",
    "Haggai",
    "Zechariah",
    "Malachi",
    # New Testament
    "Matthew",
    "Mark",
    "Luke",
    "John",
    "Acts",
    "Romans",
    "1 Corinthians",
    "2 Corinthians",
    "Galatians",
    "Ephesians",
    "Philippians",
    "Colossians",
    "1 Thessalonians",
    "2 Thessalonians",
    "1 Timothy",
    "2 Timothy",
    "Titus",
    "Philemon",
    "Hebrews",
    "James",
    "1 Peter",
    "2 Peter",
    "1 John",
    "2 John",
    "3 John",
    "Jude",
    "Revelation",
)

# Known abbreviations per canonical book (normalized on table construction)
BOOK_ABBREVIATIONS: dict[str, tuple[str, ...]] = {
    "Genesis": ("Gen", "Ge", "Gn"),
    "Exodus": ("Exod", "Ex", "Exo"),
    "Leviticus": ("Lev", "Le", "Lv"),
    "Numbers": ("Num", "Nu", "Nm", "Nb"),
    "Deuteronomy": ("Deut", "De", "Dt"),
    "Joshua": ("Josh", "Jos", "Jsh"),
    "Judges": ("Judg", "Jdg", "Jg", "Jdgs"),
    "Ruth": ("Rth", "Ru"),
    "1 Samuel": ("1 Sam", "1Sa", "1 Sm"),
    "2 Samuel": ("2 Sam", "2Sa", "2 Sm"),
    "1 Kings": ("1 Kgs", "1 King", "1Ki"),
    "2 Kings": ("2 Kgs", "2 King", "2Ki"),
    "1 Chronicles": ("1 Chr", "1Ch", "1 Chron"),
    "2 Chronicles": ("2 Chr", "2Ch", "2 Chron"),
    "Ezra": ("Ezr", "Ez"),
    "Nehemiah": ("Neh", "Ne"),
    "Esther": ("Esth", "Es"),
    "Job": ("Jb",),
    "Psalms": ("Ps", "Psalm", "Psa", "Psm", "Pss"),
    "Proverbs": ("Prov", "Pr", "Prv"),
    "Ecclesiastes": ("Eccles", "Eccl", "Ecc", "Ec", "Qoh"),
    "Song of Solomon": ("Song", "SS", "So", "Song of Songs", "Songs", "Sos", "Cant"),
    "Isaiah": ("Isa", "Is"),
    "Jeremiah": ("Jer", "Je", "Jr"),
    "Lamentations": ("Lam", "La"),
    "Ezekiel": ("Ezek", "Eze", "Ezk"),
    "Daniel": ("Dan", "Da", "Dn"),
    "Hosea": ("Hos", "Ho"),
    "Joel": ("Jl",),
    "Amos": ("Am",),
    "Obadiah": ("Obad", "Ob"),
    "Jonah": ("Jon", "Jnh"),
    "Micah": ("Mic", "Mc"),
    "Nahum": ("Nah", "Na"),
    "Habakkuk": ("Hab", "Hb"),
    "Zephaniah": ("Zeph", "Zep", "Zp"),
    "Haggai": ("Hag", "Hg"),
    "Zechariah": ("Zech", "Zec", "Zc"),
    "Malachi": ("Mal", "Ml"),
    "Matthew": ("Matt", "Mat", "Mt"),
    "Mark": ("Mrk", "Mk", "Mr"),
    "Luke": ("Luk", "Lk"),
    "John": ("Jn", "Jhn", "Joh"),
    "Acts": ("Ac", "Act"),
    "Romans": ("Rom", "Ro", "Rm"),
    "1 Corinthians": ("1 Cor", "1Co"),
    "2 Corinthians": ("2 Cor", "2Co"),
    "Galatians": ("Gal", "Ga"),
    "Ephesians": ("Eph", "Ephes"),
    "Philippians": ("Phil", "Php", "Pp"),
    "Colossians": ("Col", "Co"),
    "1 Thessalonians": ("1 Thess", "1Th", "1Ts"),
    "2 Thessalonians": ("2 Thess", "2Th", "2Ts"),
    "1 Timothy": ("1 Tim", "1Ti"),
    "2 Timothy": ("2 Tim", "2Ti"),
    "Titus": ("Tit", "Ti"),
    "Philemon": ("Philem", "Phlm", "Phm"),
    "Hebrews": ("Heb",),
    "James": ("Jas", "Jam", "Jm"),
    "1 Peter": ("1 Pet", "1Pe", "1Pt", "1P"),
    "2 Peter": ("2 Pet", "2Pe", "2Pt", "2P"),
    "1 John": ("1Jn", "1Jhn", "1J"),
    "2 John": ("2Jn", "2Jhn", "2J"),
    "3 John": ("3Jn", "3Jhn", "3J"),
    "Jude": ("Jud", "Jd"),
    "Revelation": ("Rev", "Re", "Revel", "Rv"),
}

_NUMERAL_RE = re.compile(r"^([1-3])")
_STRIP_RE = re.compile(r"[\s.]+")


def normalize_book_token(token: str) -> str:
    """Lowercase a book token and drop whitespace and periods.

    >>> normalize_book_token("  1 Cor. ")
    '1cor'
    """
    return _STRIP_RE.sub("", token).lower()


def title_case_token(token: str) -> str:
    """Capitalize the first letter of every word of a raw token."""
    return " ".join(word[:1].upper() + word[1:] for word in token.split())


def _numeral(normalized: str) -> str | None:
    match = _NUMERAL_RE.match(normalized)
    return match.group(1) if match else None


# ============================================================================
# Table
# ============================================================================


@dataclass(frozen=True)
class BookEntry:
    """One canonical book and its normalized lookup keys."""

    name: str
    key: str
    abbreviations: tuple[str, ...]

    @property
    def numeral(self) -> str | None:
        return _numeral(self.key)

    @property
    def keys(self) -> tuple[str, ...]:
        """Canonical key followed by abbreviations, for prefix matching."""
        return (self.key,) + self.abbreviations


class BookTable:
    """Ordered, read-only mapping of canonical books to abbreviations."""

    def __init__(self, books: Mapping[str, tuple[str, ...] | list[str]]):
        entries = []
        for name, abbreviations in books.items():
            key = normalize_book_token(name)
            normalized = []
            for abbr in abbreviations:
                abbr_key = normalize_book_token(abbr)
                if abbr_key and abbr_key != key and abbr_key not in normalized:
                    normalized.append(abbr_key)
            entries.append(BookEntry(name=name, key=key, abbreviations=tuple(normalized)))
        self._entries: tuple[BookEntry, ...] = tuple(entries)
        self._by_name = {entry.name: entry for entry in self._entries}

    @classmethod
    def default(cls) -> BookTable:
        """Build the standard 66-book table."""
        return cls({name: BOOK_ABBREVIATIONS.get(name, ()) for name in CANONICAL_BOOKS})

    def with_aliases(self, extra: Mapping[str, tuple[str, ...] | list[str]]) -> BookTable:
        """Return a new table with extra abbreviations appended.

        Raises:
            UnknownBookError: If ``extra`` names a book not in this table
        """
        merged: dict[str, tuple[str, ...]] = {
            entry.name: entry.abbreviations for entry in self._entries
        }
        for name, abbreviations in extra.items():
            if name not in merged:
                raise UnknownBookError(name)
            merged[name] = merged[name] + tuple(abbreviations)
        return BookTable(merged)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(entry.name for entry in self._entries)

    def __iter__(self) -> Iterator[BookEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> BookEntry | None:
        return self._by_name.get(name)


# ============================================================================
# Resolver
# ============================================================================


@dataclass(frozen=True)
class BookMatch:
    """Outcome of matching a token against the book table.

    ``authoritative`` is False only for the title-cased fallback guess,
    which is not a canonical book name.
    """

    name: str
    rule: str  # "name", "abbreviation", "prefix" or "fallback"
    authoritative: bool = True


class BookNameResolver:
    """Maps abbreviations and full names to canonical book names."""

    def __init__(self, table: BookTable | None = None):
        self.table = table if table is not None else BookTable.default()

    def match(self, token: str, allow_fallback: bool = False) -> BookMatch:
        """Match a token, optionally falling back to a title-cased guess.

        Args:
            token: Raw book token (e.g., "Jn", "1 cor", "Song of Solomon")
            allow_fallback: Return a non-authoritative guess instead of raising

        Raises:
            UnknownBookError: If nothing matches and fallback is not allowed
        """
        key = normalize_book_token(token)

        if key:
            for entry in self.table:
                if key == entry.key:
                    return BookMatch(entry.name, "name")

            for entry in self.table:
                if key in entry.abbreviations:
                    return BookMatch(entry.name, "abbreviation")

            numeral = _numeral(key)
            for entry in self.table:
                if entry.numeral != numeral:
                    continue
                if any(candidate.startswith(key) for candidate in entry.keys):
                    return BookMatch(entry.name, "prefix")

        guess = title_case_token(token.strip())
        if allow_fallback and guess:
            return BookMatch(guess, "fallback", authoritative=False)
        raise UnknownBookError(token, suggestion=guess or None)

    def resolve(self, token: str) -> str:
        """Resolve a token to its canonical book name.

        Raises:
            UnknownBookError: If no canonical book matches
        """
        return self.match(token).name
