"""Application-facing verse service.

Wires settings, store, cache, resolver and suggester together. A failed
``initialize()`` disables verse features for the session instead of
raising, so the rest of the host application keeps working.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from versenotes.cache import LookupCache
from versenotes.config import Settings
from versenotes.errors import CorpusFormatError, NotInitializedError, StorageInitError
from versenotes.ingest.demo_data import DEMO_CORPUS
from versenotes.ingest.loader import iter_corpus_verses, load_corpus_file
from versenotes.reference.books import BookNameResolver, BookTable
from versenotes.resolver import VerseResolver
from versenotes.store import create_store
from versenotes.store.base import VerseStore
from versenotes.store.models import BibleResult
from versenotes.suggest import Suggestion, VerseSuggester

logger = logging.getLogger(__name__)


@dataclass
class ServiceStatus:
    """Snapshot of the verse feature state."""

    enabled: bool
    backend: str
    verse_count: int
    error: str | None = None


class BibleService:
    """Entry point for note-editor collaborators.

    Usage:
        service = BibleService(Settings())
        if service.initialize():
            result = service.lookup("Jn 3:16")
    """

    def __init__(
        self,
        settings: Settings | None = None,
        store: VerseStore | None = None,
        books: BookTable | None = None,
    ):
        self.settings = settings or Settings()
        self.store = store if store is not None else create_store(self.settings)
        self.books = BookNameResolver(books or BookTable.default())
        self.cache = LookupCache(self.store, ttl_ms=self.settings.cache_ttl_ms)
        self.resolver = VerseResolver(self.store, self.cache, books=self.books)
        self.suggester = VerseSuggester(
            self.resolver,
            window=self.settings.suggestion_window,
            max_book_words=self.settings.suggestion_max_book_words,
        )
        self._error: str | None = None

    @property
    def enabled(self) -> bool:
        return self.store.ready

    def _corpus(self) -> Iterator[dict[str, Any]]:
        # Lazy: the seed file is only read when the store is empty
        if self.settings.corpus_path is not None:
            yield from load_corpus_file(self.settings.corpus_path)
        else:
            yield from DEMO_CORPUS

    def initialize(self, corpus: Iterable[dict[str, Any]] | None = None) -> bool:
        """Prepare the verse store, seeding it on first run.

        Args:
            corpus: Seed records; defaults to ``settings.corpus_path`` or the
                bundled demo corpus

        Returns:
            True if verse features are available, False if disabled
        """
        try:
            if corpus is None:
                corpus = self._corpus()
            self.store.initialize(iter_corpus_verses(corpus, self.books))
        except (StorageInitError, CorpusFormatError, OSError) as e:
            self._error = str(e)
            logger.error(f"Verse lookup disabled: {e}")
            return False

        self._error = None
        return True

    def _require_enabled(self) -> None:
        if not self.enabled:
            raise NotInitializedError(
                self._error or "Verse lookup is not available; initialize() first."
            )

    def lookup(self, reference: str) -> BibleResult:
        """Look up verses for a reference.

        Raises:
            InvalidReferenceError: If the reference cannot be parsed or resolved
            NotInitializedError: If verse features are disabled
        """
        self._require_enabled()
        return self.resolver.lookup(reference)

    def suggest(self, text: str, cursor: int | None = None) -> Suggestion | None:
        """Offer verses for a reference typed just before the cursor."""
        self._require_enabled()
        return self.suggester.suggest(text, cursor)

    def status(self) -> ServiceStatus:
        count = self.store.verse_count() if self.enabled else 0
        return ServiceStatus(
            enabled=self.enabled,
            backend=self.store.backend_name,
            verse_count=count,
            error=self._error,
        )
