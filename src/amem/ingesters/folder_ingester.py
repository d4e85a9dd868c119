"""Ingester for the memory directory."""

import logging
import os
from pathlib import Path
from typing import Iterator

from amem.config import DEFAULT_CONFIG, EngineConfig
from amem.models import Document

logger = logging.getLogger(__name__)


class FolderIngester:
    """Ingester for a local folder of UTF-8 text notes."""

    source_type = "folder"

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG):
        self.config = config

    def can_handle(self, source: Path) -> bool:
        """Check if this is an existing directory."""
        return source.is_dir()

    def ingest(self, source: Path) -> Iterator[Document]:
        """Yield documents from a folder recursively.

        Everything with a document suffix is a candidate except the index
        directory at the top of ``source``. Files that cannot be read or are
        not valid UTF-8 are skipped.

        Args:
            source: Path to the memory directory

        Yields:
            Document objects in walk order (callers sort)
        """
        for root, dirs, files in os.walk(source):
            if Path(root) == source:
                # Prune in place so the index directory is never descended into
                dirs[:] = [d for d in dirs if d != self.config.index_dir_name]

            for filename in files:
                full_path = Path(root) / filename
                rel_path = full_path.relative_to(source)

                if rel_path.suffix.lower() not in self.config.document_suffixes:
                    continue

                try:
                    content = full_path.read_bytes().decode("utf-8")
                    modified_at = int(full_path.stat().st_mtime)
                except OSError as exc:
                    logger.debug(f"Skipping unreadable {rel_path}: {exc}")
                    continue
                except UnicodeDecodeError:
                    logger.debug(f"Skipping non UTF-8 {rel_path}")
                    continue

                yield Document(
                    path=rel_path.as_posix(),
                    content=content,
                    modified_at=modified_at,
                )
