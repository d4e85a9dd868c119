"""Chunking strategies for amem."""

from amem.chunkers.paragraph_chunker import ParagraphChunker

__all__ = ["ParagraphChunker"]
