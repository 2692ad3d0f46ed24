"""SQLite verse store (persistent backend)."""

from __future__ import annotations

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator

from versenotes.errors import StorageError
from versenotes.store.base import VerseStore
from versenotes.store.models import BibleResult, CacheEntry, Verse

logger = logging.getLogger(__name__)


SCHEMA_SQL = """
-- verses: the seed corpus, one row per verse
CREATE TABLE IF NOT EXISTS verses (
    id INTEGER PRIMARY KEY,
    book TEXT NOT NULL,
    chapter INTEGER NOT NULL,
    verse INTEGER NOT NULL,
    text TEXT NOT NULL,
    UNIQUE(book, chapter, verse)
);

-- verse_cache: lookup results keyed by normalized reference string
CREATE TABLE IF NOT EXISTS verse_cache (
    reference TEXT PRIMARY KEY,
    result TEXT NOT NULL,
    timestamp INTEGER NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_verses_ref ON verses(book, chapter, verse);
CREATE INDEX IF NOT EXISTS idx_cache_timestamp ON verse_cache(timestamp);
"""


def get_connection(db_path: Path) -> sqlite3.Connection:
    """
    Get a SQLite connection with row factory and WAL mode.

    WAL (Write-Ahead Logging) mode lets lookups read while the seed
    import or cache writes are in progress.
    """
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode = WAL")
    return conn


class SQLiteVerseStore(VerseStore):
    """Verse store backed by a SQLite file.

    Each operation opens its own short-lived connection, so the store can
    be shared across threads (e.g., API worker threads).

    Usage:
        store = SQLiteVerseStore(Path("verses.db"))
        store.initialize(iter_corpus_verses(DEMO_CORPUS))
        verses = store.query("John", 3, 16, 18)
    """

    backend_name = "sqlite"

    def __init__(self, db_path: Path):
        super().__init__()
        self.db_path = Path(db_path)

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Open a connection, commit on success, roll back on failure."""
        try:
            conn = get_connection(self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot open {self.db_path}: {e}") from e

        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StorageError(f"SQLite error on {self.db_path}: {e}") from e
        except BaseException:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _create_schema(self) -> None:
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create {self.db_path.parent}: {e}") from e

        with self._connect() as conn:
            conn.executescript(SCHEMA_SQL)

    def _count_verses(self) -> int:
        with self._connect() as conn:
            return conn.execute("SELECT COUNT(*) FROM verses").fetchone()[0]

    def _bulk_insert(self, verses: Iterable[Verse]) -> int:
        # Single transaction: a bad record rolls back the whole import
        with self._connect() as conn:
            before = conn.total_changes
            conn.executemany(
                "INSERT OR IGNORE INTO verses (book, chapter, verse, text) "
                "VALUES (?, ?, ?, ?)",
                ((v.book, v.chapter, v.verse, v.text) for v in verses),
            )
            return conn.total_changes - before

    def _select(
        self, book: str, chapter: int, start: int | None, end: int | None
    ) -> list[Verse]:
        query = "SELECT book, chapter, verse, text FROM verses WHERE book = ? AND chapter = ?"
        params: list = [book, chapter]

        if start is not None:
            query += " AND verse BETWEEN ? AND ?"
            params.extend([start, end])

        query += " ORDER BY verse"

        with self._connect() as conn:
            rows = conn.execute(query, params).fetchall()

        return [
            Verse(
                book=row["book"],
                chapter=row["chapter"],
                verse=row["verse"],
                text=row["text"],
            )
            for row in rows
        ]

    def _clear_all(self) -> None:
        self._create_schema()
        with self._connect() as conn:
            conn.execute("DELETE FROM verse_cache")
            conn.execute("DELETE FROM verses")

    def _read_cache(self, key: str) -> CacheEntry | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT reference, result, timestamp FROM verse_cache WHERE reference = ?",
                (key,),
            ).fetchone()

        if row is None:
            return None

        try:
            result = BibleResult.from_dict(json.loads(row["result"]))
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Ignoring unreadable cache row for '{key}': {e}")
            return None

        return CacheEntry(key=row["reference"], result=result, timestamp=row["timestamp"])

    def _write_cache(self, entry: CacheEntry) -> None:
        with self._connect() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO verse_cache (reference, result, timestamp) "
                "VALUES (?, ?, ?)",
                (entry.key, json.dumps(entry.result.to_dict()), entry.timestamp),
            )

    def _delete_cache(self, key: str) -> bool:
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM verse_cache WHERE reference = ?", (key,))
            return cursor.rowcount > 0

    def _purge_cache(self, older_than: int | None) -> int:
        with self._connect() as conn:
            if older_than is None:
                cursor = conn.execute("DELETE FROM verse_cache")
            else:
                cursor = conn.execute(
                    "DELETE FROM verse_cache WHERE timestamp < ?", (older_than,)
                )
            return cursor.rowcount
