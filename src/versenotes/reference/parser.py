"""Reference parsing for free-form scripture references.

Supported shapes (first match wins):

1. "John 3:16-18"  book, chapter and verse range
2. "John 3:16"     book, chapter and single verse
3. "John 3"        whole chapter
4. "1John1"        whole chapter, no space before the chapter

Input is whitespace-collapsed and trimmed before matching; case does not
matter. A dangling range dash ("John 3:16-") falls back to shape 2.
The book token is returned raw; mapping it to a canonical book is the job
of ``BookNameResolver``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from versenotes.errors import ParseError


# Optional 1-3 numeral, then one or more words of letters (trailing period allowed)
_BOOK = r"(?P<book>(?:[1-3] ?)?[a-z]+\.?(?: [a-z]+\.?)*)"
_BOOK_TIGHT = r"(?P<book>(?:[1-3] ?)?[a-z]+)"
_NUM = r"\d+"

_SHAPES: tuple[tuple[str, re.Pattern[str]], ...] = (
    (
        "range",
        re.compile(
            rf"^{_BOOK} (?P<chapter>{_NUM}):(?P<start>{_NUM})-(?P<end>{_NUM})$",
            re.IGNORECASE,
        ),
    ),
    (
        "verse",
        re.compile(
            rf"^{_BOOK} (?P<chapter>{_NUM}):(?P<start>{_NUM})(?:-(?!\d).*)?$",
            re.IGNORECASE,
        ),
    ),
    ("chapter", re.compile(rf"^{_BOOK} (?P<chapter>{_NUM})$", re.IGNORECASE)),
    ("compact", re.compile(rf"^{_BOOK_TIGHT}(?P<chapter>{_NUM})$", re.IGNORECASE)),
)


def normalize_reference_text(raw: str) -> str:
    """Collapse whitespace runs, trim, and map en/em dashes to hyphens.

    Case is preserved; callers lowercase where case must not matter.
    """
    text = raw.replace("–", "-").replace("—", "-")
    return " ".join(text.split())


@dataclass(frozen=True)
class ParsedReference:
    """Structured reference before book resolution."""

    book_token: str
    chapter: int
    start_verse: int | None = None
    end_verse: int | None = None

    def __post_init__(self) -> None:
        if self.chapter < 1:
            raise ValueError(f"chapter must be positive, got {self.chapter}")
        if self.start_verse is not None and self.start_verse < 1:
            raise ValueError(f"start_verse must be positive, got {self.start_verse}")
        if self.end_verse is not None:
            if self.start_verse is None:
                raise ValueError("end_verse requires start_verse")
            if self.end_verse < self.start_verse:
                raise ValueError(
                    f"end_verse ({self.end_verse}) precedes "
                    f"start_verse ({self.start_verse})"
                )

    def __str__(self) -> str:
        text = f"{self.book_token} {self.chapter}"
        if self.start_verse is not None:
            text += f":{self.start_verse}"
            if self.end_verse is not None:
                text += f"-{self.end_verse}"
        return text


def _positive(value: str, what: str, reference: str) -> int:
    number = int(value)
    if number < 1:
        raise ParseError(
            reference,
            f"Invalid {what} number: {number} in '{reference}'. "
            f"{what.capitalize()}s start at 1.",
        )
    return number


class ReferenceParser:
    """Parses raw reference strings into ``ParsedReference`` objects."""

    def parse(self, raw: str) -> ParsedReference:
        """Parse a reference string.

        Args:
            raw: Reference like "Jn 3:16-18", "1 Cor 13" or "1John1"

        Returns:
            ParsedReference with the raw book token and numeric parts

        Raises:
            ParseError: If the string matches none of the recognized shapes
        """
        text = normalize_reference_text(raw)
        if not text:
            raise ParseError(raw, "Empty reference string provided.")

        for shape, pattern in _SHAPES:
            match = pattern.match(text)
            if match is None:
                continue

            groups = match.groupdict()
            chapter = _positive(groups["chapter"], "chapter", text)
            start = end = None
            if groups.get("start") is not None:
                start = _positive(groups["start"], "verse", text)
            if groups.get("end") is not None:
                end = _positive(groups["end"], "verse", text)
                if end < start:
                    raise ParseError(
                        text,
                        f"Invalid verse range in '{text}'. "
                        f"Start verse ({start}) cannot be greater than "
                        f"end verse ({end}).",
                    )

            return ParsedReference(
                book_token=groups["book"],
                chapter=chapter,
                start_verse=start,
                end_verse=end,
            )

        raise ParseError(text)


_default_parser = ReferenceParser()


def parse_reference(raw: str) -> ParsedReference:
    """Convenience wrapper around a shared ``ReferenceParser``."""
    return _default_parser.parse(raw)
