"""Ordering contract shared by both query paths."""

from pathlib import PurePosixPath
from typing import Iterable

from amem.models import SearchHit


def first_line(text: str) -> str:
    """First non-blank line of ``text``, trimmed."""
    return next((line.strip() for line in text.splitlines() if line.strip()), "")


def matching_line(text: str, query: str) -> str | None:
    """First line of ``text`` containing ``query``, trimmed."""
    for line in text.splitlines():
        if query in line:
            return line.strip()
    return None


def rank(candidates: Iterable[SearchHit], top_k: int) -> list[SearchHit]:
    """Drop non-positive scores, sort and truncate.

    Order is descending score with ascending path breaking ties. Every
    returned snippet is a single trimmed, non-empty line.
    """
    if top_k <= 0:
        return []

    hits = [hit for hit in candidates if hit.score > 0]
    hits.sort(key=lambda hit: (-hit.score, hit.path))
    return [_with_clean_snippet(hit) for hit in hits[:top_k]]


def _with_clean_snippet(hit: SearchHit) -> SearchHit:
    snippet = first_line(hit.snippet) or PurePosixPath(hit.path).name
    if snippet == hit.snippet:
        return hit
    return SearchHit(path=hit.path, score=hit.score, snippet=snippet)
