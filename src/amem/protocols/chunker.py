"""Protocol for text chunking strategies."""

from typing import Protocol, runtime_checkable

from amem.models import Chunk


@runtime_checkable
class ChunkingStrategy(Protocol):
    """Protocol for text chunking strategies.

    Implementations must return chunks with dense ordinals starting at 1
    and no blank chunk text.
    """

    def chunk(self, text: str, file_path: str) -> list[Chunk]:
        """Split text into chunks with metadata."""
        ...
