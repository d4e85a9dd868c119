"""SQLite-backed storage for the amem index."""

import json
import logging
import sqlite3
import time
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional

import numpy as np

from amem.models import Document
from amem.protocols import ChunkingStrategy
from amem.storage.schema import CONTENT_TABLES, SCHEMA
from amem.tokens import token_counts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexStats:
    """Row counts of the content tables."""

    documents: int = 0
    chunks: int = 0
    postings: int = 0
    terms: int = 0


class IndexStore:
    """SQLite-backed inverted index over a memory directory.

    The store holds no open handle; every operation opens and closes its
    own connection.
    """

    SIDE_FILE_SUFFIXES = ("-wal", "-shm", "-journal")

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """Context manager for database connections."""
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        try:
            conn.execute("PRAGMA foreign_keys = ON")
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def reset(self) -> None:
        """Delete the database file and its journal side files."""
        for candidate in [self.path] + [
            self.path.with_name(self.path.name + suffix)
            for suffix in self.SIDE_FILE_SUFFIXES
        ]:
            candidate.unlink(missing_ok=True)

    def initialize(self) -> None:
        """Create schema if not exists."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.connection() as conn:
            conn.executescript(SCHEMA)

    def replace_contents(
        self, documents: Iterable[Document], chunker: ChunkingStrategy
    ) -> IndexStats:
        """Replace every content row with the index of ``documents``.

        Runs as one transaction: on any exception nothing is committed and
        the previous index stays as it was.
        """
        now = int(time.time())
        with self.connection() as conn:
            conn.execute("BEGIN IMMEDIATE")
            for table in CONTENT_TABLES:
                conn.execute(f"DELETE FROM {table}")

            for doc in documents:
                logger.debug(f"  {doc.path}")
                conn.execute(
                    "INSERT INTO documents (path, content_hash, modified_at) VALUES (?, ?, ?)",
                    (doc.path, doc.content_hash, doc.modified_at),
                )
                for chunk in chunker.chunk(doc.content, doc.path):
                    cursor = conn.execute(
                        """INSERT INTO chunks (path, chunk_text, ordinal, updated_at)
                           VALUES (?, ?, ?, ?)""",
                        (chunk.path, chunk.text, chunk.ordinal, now),
                    )
                    chunk_id = cursor.lastrowid
                    conn.executemany(
                        "INSERT INTO postings (token, chunk_id, tf) VALUES (?, ?, ?)",
                        (
                            (token, chunk_id, tf)
                            for token, tf in token_counts(chunk.text).items()
                        ),
                    )

            conn.execute(
                """INSERT INTO term_stats (token, df)
                   SELECT token, COUNT(DISTINCT chunk_id) FROM postings GROUP BY token"""
            )
            return self._stats(conn)

    def stats(self) -> IndexStats:
        """Row counts of the committed index."""
        with self.connection() as conn:
            return self._stats(conn)

    @staticmethod
    def _stats(conn: sqlite3.Connection) -> IndexStats:
        def count(table: str) -> int:
            return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]

        return IndexStats(
            documents=count("documents"),
            chunks=count("chunks"),
            postings=count("postings"),
            terms=count("term_stats"),
        )

    # Read helpers for the query executor. They take an open connection so a
    # query sees one consistent snapshot.

    @staticmethod
    def chunk_count(conn: sqlite3.Connection) -> int:
        return conn.execute("SELECT COUNT(*) FROM chunks").fetchone()[0]

    @staticmethod
    def document_frequencies(conn: sqlite3.Connection, tokens: list[str]) -> dict[str, int]:
        """df for each of ``tokens`` present in term_stats."""
        cursor = conn.execute(
            """SELECT token, df FROM term_stats
               WHERE token IN (SELECT value FROM json_each(?))""",
            (json.dumps(tokens),),
        )
        return {row["token"]: row["df"] for row in cursor}

    @staticmethod
    def iter_postings(conn: sqlite3.Connection, tokens: list[str]) -> Iterator[sqlite3.Row]:
        """Stream (token, tf, path, chunk_text) rows in chunk order."""
        yield from conn.execute(
            """SELECT p.token, p.tf, c.path, c.chunk_text
               FROM postings p JOIN chunks c ON c.id = p.chunk_id
               WHERE p.token IN (SELECT value FROM json_each(?))
               ORDER BY p.chunk_id, p.token""",
            (json.dumps(tokens),),
        )

    def document_paths(self) -> list[str]:
        """Paths of all indexed documents, sorted."""
        with self.connection() as conn:
            cursor = conn.execute("SELECT path FROM documents ORDER BY path")
            return [row["path"] for row in cursor]

    # Reserved vector cache

    def put_vector(self, cache_key: str, vector: np.ndarray) -> None:
        """Store a vector as float32 bytes."""
        with self.connection() as conn:
            conn.execute(
                """INSERT OR REPLACE INTO vector_cache (cache_key, vector, created_at)
                   VALUES (?, ?, ?)""",
                (cache_key, np.asarray(vector, dtype=np.float32).tobytes(), int(time.time())),
            )

    def get_vector(self, cache_key: str) -> Optional[np.ndarray]:
        """Load a cached vector, or None."""
        with self.connection() as conn:
            row = conn.execute(
                "SELECT vector FROM vector_cache WHERE cache_key = ?", (cache_key,)
            ).fetchone()
        if row is None or row["vector"] is None:
            return None
        return np.frombuffer(row["vector"], dtype=np.float32)
