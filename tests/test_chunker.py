"""Tests for paragraph chunking and tokenization."""

from __future__ import annotations

from amem.chunkers import ParagraphChunker
from amem.chunkers.paragraph_chunker import normalize_newlines
from amem.protocols import ChunkingStrategy
from amem.tokens import query_tokens, token_counts


def test_splits_on_blank_lines_with_dense_ordinals() -> None:
    chunks = ParagraphChunker().chunk("first\r\n\r\nsecond\n\n\n\n  \n\nthird\nline", "notes/a.md")

    assert [c.text for c in chunks] == ["first", "second", "third\nline"]
    assert [c.ordinal for c in chunks] == [1, 2, 3]
    assert {c.path for c in chunks} == {"notes/a.md"}


def test_whitespace_only_lines_do_not_split() -> None:
    chunks = ParagraphChunker().chunk("a\n   \nb", "a.md")

    assert [c.text for c in chunks] == ["a\n   \nb"]


def test_blank_document_has_no_chunks() -> None:
    assert ParagraphChunker().chunk("", "a.md") == []
    assert ParagraphChunker().chunk(" \n\n\t\n", "a.md") == []


def test_normalize_newlines() -> None:
    assert normalize_newlines("a\r\nb\rc\n") == "a\nb\nc\n"


def test_paragraph_chunker_satisfies_protocol() -> None:
    assert isinstance(ParagraphChunker(), ChunkingStrategy)


def test_query_tokens_are_distinct_characters_in_order() -> None:
    assert query_tokens("東京 東京\tで") == ["東", "京", "で"]
    assert query_tokens(" \n　") == []


def test_token_counts_skip_whitespace_and_keep_case() -> None:
    counts = token_counts("Aa a\nb")

    assert counts == {"A": 1, "a": 2, "b": 1}
