"""Corpus collection for amem."""

from pathlib import Path

from amem.config import DEFAULT_CONFIG, EngineConfig
from amem.ingesters.folder_ingester import FolderIngester
from amem.models import Document
from amem.protocols import Ingester


def collect_documents(
    root: Path | str,
    config: EngineConfig | None = None,
    ingester: Ingester | None = None,
) -> list[Document]:
    """Read every corpus document under ``root``, sorted by path.

    A source the ingester cannot handle, such as a missing root, is an
    empty corpus.

    Args:
        root: The memory directory
        config: Engine settings
        ingester: Corpus source, a FolderIngester by default
    """
    ingester = ingester or FolderIngester(config or DEFAULT_CONFIG)
    source = Path(root)
    if not ingester.can_handle(source):
        return []
    return sorted(ingester.ingest(source), key=lambda doc: doc.path)


__all__ = ["collect_documents", "FolderIngester"]
