"""Paragraph-based chunking strategy."""

import re

from amem.models import Chunk

_BLANK_LINE = re.compile(r"\n{2,}")


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class ParagraphChunker:
    """Split on blank lines, trim each paragraph, drop the empty ones.

    Unlike a size-balanced chunker this never merges or hard-splits:
    one paragraph is one chunk, so ordinals map directly onto paragraphs.
    """

    def chunk(self, text: str, file_path: str) -> list[Chunk]:
        """Split text into chunks numbered from 1.

        Args:
            text: The document content
            file_path: Root-relative path of the owning document

        Returns:
            List of Chunk objects with dense ordinals
        """
        if not text or not text.strip():
            return []

        paragraphs = (p.strip() for p in _BLANK_LINE.split(normalize_newlines(text)))
        return [
            Chunk(text=para, path=file_path, ordinal=ordinal)
            for ordinal, para in enumerate((p for p in paragraphs if p), start=1)
        ]
