"""Configuration settings for versenotes."""

from __future__ import annotations

from pathlib import Path
from dataclasses import dataclass, field


# Cached lookups are ignored once older than this
DEFAULT_CACHE_TTL_MS = 24 * 60 * 60 * 1000

BACKEND_SQLITE = "sqlite"
BACKEND_MEMORY = "memory"
BACKENDS = (BACKEND_SQLITE, BACKEND_MEMORY)


@dataclass
class Settings:
    """Application settings."""

    # Storage
    db_path: Path = field(
        default_factory=lambda: Path.home() / ".versenotes" / "verses.db"
    )
    backend: str = BACKEND_SQLITE

    # Seed data (None = bundled demo corpus)
    corpus_path: Path | None = None

    # Cache
    cache_ttl_ms: int = DEFAULT_CACHE_TTL_MS

    # Live suggestions
    suggestion_window: int = 64
    suggestion_max_book_words: int = 4
