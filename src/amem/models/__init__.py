"""Data models for amem."""

from amem.models.document import Chunk, Document, SearchHit

__all__ = ["Document", "Chunk", "SearchHit"]
