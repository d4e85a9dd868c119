"""Protocol definitions for extensible components."""

from amem.protocols.chunker import ChunkingStrategy
from amem.protocols.ingester import Ingester

__all__ = ["Ingester", "ChunkingStrategy"]
