"""versenotes: Bible reference parsing, verse lookup and caching for notes."""

__version__ = "0.1.0"

from versenotes.errors import (  # noqa: E402
    InvalidReferenceError,
    NotInitializedError,
    ParseError,
    StorageInitError,
    UnknownBookError,
)
from versenotes.service import BibleService  # noqa: E402
from versenotes.store.models import BibleResult, Verse  # noqa: E402

__all__ = [
    "__version__",
    "BibleResult",
    "BibleService",
    "InvalidReferenceError",
    "NotInitializedError",
    "ParseError",
    "StorageInitError",
    "UnknownBookError",
    "Verse",
]
