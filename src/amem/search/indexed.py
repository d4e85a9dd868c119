"""Query executor over the persisted index."""

import logging
import math
import sqlite3
from dataclasses import dataclass

from amem.config import DEFAULT_CONFIG, EngineConfig
from amem.models import SearchHit
from amem.search.ranker import first_line, matching_line, rank
from amem.storage import IndexStore
from amem.tokens import query_tokens

logger = logging.getLogger(__name__)


@dataclass
class _Accumulator:
    score: float = 0.0
    snippet: str = ""
    bonus_applied: bool = False


def idf(total: int, df: int) -> float:
    """Smoothed inverse frequency, ln((N + 1) / (df + 1)) + 1."""
    return math.log((total + 1) / (df + 1)) + 1.0


def search_index(
    store: IndexStore,
    query: str,
    top_k: int,
    config: EngineConfig | None = None,
) -> list[SearchHit] | None:
    """Answer ``query`` from the index.

    Returns None when the index is unavailable (missing, unreadable or
    malformed); the caller is expected to fall back to a direct scan. An
    empty list is a real answer.
    """
    if not store.exists():
        return None

    try:
        return _search(store, query, top_k, config or DEFAULT_CONFIG)
    except sqlite3.Error as exc:
        logger.debug(f"Index at {store.path} unusable: {exc}")
        return None


def _search(
    store: IndexStore, query: str, top_k: int, config: EngineConfig
) -> list[SearchHit]:
    tokens = query_tokens(query)

    with store.connection() as conn:
        # Probe before the token check so a corrupt file is still reported
        total = store.chunk_count(conn)
        if total == 0 or not tokens:
            return []

        dfs = store.document_frequencies(conn, tokens)
        if not dfs:
            return []
        weights = {token: idf(total, df) for token, df in dfs.items()}

        acc: dict[str, _Accumulator] = {}
        for row in store.iter_postings(conn, list(dfs)):
            entry = acc.setdefault(row["path"], _Accumulator())
            entry.score += row["tf"] * weights[row["token"]]
            chunk_text = row["chunk_text"]
            if not entry.snippet:
                entry.snippet = first_line(chunk_text)
            if not entry.bonus_applied and query in chunk_text:
                entry.score += config.exact_match_bonus
                entry.bonus_applied = True
                entry.snippet = matching_line(chunk_text, query) or entry.snippet

    return rank(
        (
            SearchHit(path=path, score=entry.score, snippet=entry.snippet)
            for path, entry in acc.items()
        ),
        top_k,
    )
