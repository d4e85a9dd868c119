"""Full, atomic rebuild of the persisted index."""

import logging
import sqlite3
from pathlib import Path

from amem.chunkers import ParagraphChunker
from amem.config import DEFAULT_CONFIG, EngineConfig
from amem.errors import BuildError
from amem.ingesters import collect_documents
from amem.protocols import ChunkingStrategy, Ingester
from amem.storage import IndexStats, IndexStore

logger = logging.getLogger(__name__)


def open_store(root: Path | str, config: EngineConfig | None = None) -> IndexStore:
    """Return the store handle for the index of ``root``."""
    return IndexStore((config or DEFAULT_CONFIG).index_db(root))


def rebuild(
    root: Path | str,
    force_reset: bool = False,
    *,
    config: EngineConfig | None = None,
    chunker: ChunkingStrategy | None = None,
    ingester: Ingester | None = None,
) -> IndexStats:
    """Rebuild the index of ``root`` from the current corpus.

    With ``force_reset`` the database file is deleted first and the schema
    recreated; otherwise the existing file and schema are reused and only
    their rows are replaced.

    Args:
        root: The memory directory
        force_reset: Discard the whole store before rebuilding
        config: Engine settings
        chunker: Chunking strategy, ParagraphChunker by default
        ingester: Corpus source, a FolderIngester over root by default

    Returns:
        Row counts of the new index

    Raises:
        BuildError: If any step fails. The previous index is left intact
            unless ``force_reset`` had already removed it.
    """
    config = config or DEFAULT_CONFIG
    store = open_store(root, config)

    try:
        if force_reset:
            logger.info(f"Removing {store.path}")
            store.reset()
        store.initialize()
        documents = collect_documents(root, config, ingester)
        stats = store.replace_contents(documents, chunker or ParagraphChunker())
    except (sqlite3.Error, OSError) as exc:
        raise BuildError(f"failed to rebuild {store.path}: {exc}") from exc

    logger.info(
        f"Indexed {stats.documents} files, {stats.chunks} chunks, "
        f"{stats.terms} terms -> {store.path}"
    )
    return stats
