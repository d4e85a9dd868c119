"""Core data models for documents, chunks and search hits."""

import hashlib
from dataclasses import dataclass


@dataclass(frozen=True)
class Document:
    """A corpus document read from the memory directory."""

    path: str  # root-relative, POSIX separators
    content: str
    modified_at: int = 0

    @property
    def content_hash(self) -> str:
        """SHA-256 of the UTF-8 content."""
        return hashlib.sha256(self.content.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class Chunk:
    """A paragraph of a document, numbered from 1 within that document."""

    text: str
    path: str
    ordinal: int


@dataclass(frozen=True)
class SearchHit:
    """A ranked query result."""

    path: str
    score: float
    snippet: str

    def to_dict(self) -> dict:
        return {"path": self.path, "score": self.score, "snippet": self.snippet}
