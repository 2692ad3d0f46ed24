"""Error taxonomy for verse lookups.

Parsing and book resolution failures are always surfaced to the caller.
Storage failures at startup disable verse features rather than the host app.
An empty lookup result is not an error.
"""

from __future__ import annotations


class VerseNotesError(Exception):
    """Base class for all versenotes errors."""

    pass


class ParseError(VerseNotesError, ValueError):
    """Raised when a reference string matches none of the recognized shapes."""

    def __init__(self, reference: str, message: str | None = None):
        self.reference = reference
        super().__init__(
            message
            or f"Invalid reference format: '{reference}'. "
            "Expected 'Book Chapter', 'Book Chapter:Verse' or "
            "'Book Chapter:Verse-Verse' (e.g., 'John 3:16-18')."
        )


class UnknownBookError(VerseNotesError, LookupError):
    """Raised when a book token matches no canonical book.

    ``suggestion`` holds the title-cased raw token. It is a best guess only
    and is never used as a canonical book name.
    """

    def __init__(self, token: str, suggestion: str | None = None):
        self.token = token
        self.suggestion = suggestion
        super().__init__(f"Unknown book: '{token}'.")


class InvalidReferenceError(VerseNotesError, ValueError):
    """User-facing error for references that cannot be parsed or resolved."""

    def __init__(self, reference: str, reason: str):
        self.reference = reference
        self.reason = reason
        super().__init__(reason)


class CorpusFormatError(VerseNotesError, ValueError):
    """Raised when seed corpus data does not match the expected format."""

    pass


class StorageError(VerseNotesError):
    """Backing storage failed."""

    pass


class StorageInitError(StorageError):
    """Backing storage could not be created or seeded at startup."""

    pass


class NotInitializedError(StorageError):
    """A query was attempted before a successful initialize()."""

    def __init__(self, message: str = "Verse store has not been initialized."):
        super().__init__(message)
