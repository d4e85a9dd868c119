"""Character-level tokenization shared by indexing and querying.

Every non-whitespace code point is a token. There is no case folding and no
multi-character grouping.
"""

from collections import Counter


def query_tokens(text: str) -> list[str]:
    """Distinct non-whitespace characters of ``text`` in first-seen order."""
    return list(dict.fromkeys(ch for ch in text if not ch.isspace()))


def token_counts(text: str) -> Counter[str]:
    """Occurrences of each non-whitespace character in ``text``."""
    return Counter(ch for ch in text if not ch.isspace())
