"""Ranked lexical search over the memory directory."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from amem.config import DEFAULT_CONFIG, EngineConfig
from amem.indexer import open_store
from amem.models import SearchHit
from amem.protocols import Ingester
from amem.search.fallback import search_files
from amem.search.indexed import search_index
from amem.search.ranker import rank

logger = logging.getLogger(__name__)


@dataclass
class SearchOutcome:
    """Hits plus which path produced them."""

    hits: list[SearchHit] = field(default_factory=list)
    used_index: bool = False


def run_query(
    root: Path | str,
    text: str,
    top_k: int,
    config: EngineConfig | None = None,
    ingester: Ingester | None = None,
) -> SearchOutcome:
    """Query the index of ``root``, scanning the files when it is unavailable."""
    config = config or DEFAULT_CONFIG
    hits = search_index(open_store(root, config), text, top_k, config)
    if hits is not None:
        return SearchOutcome(hits=hits, used_index=True)

    logger.debug(f"No usable index under {root}; scanning files")
    hits = search_files(root, text, top_k, config, ingester)
    return SearchOutcome(hits=hits, used_index=False)


def query(
    root: Path | str,
    text: str,
    top_k: int,
    config: EngineConfig | None = None,
    ingester: Ingester | None = None,
) -> list[SearchHit]:
    """Ranked hits for ``text``; never fails because of a broken index."""
    return run_query(root, text, top_k, config, ingester).hits


__all__ = [
    "SearchOutcome",
    "query",
    "rank",
    "run_query",
    "search_files",
    "search_index",
]
