"""Direct scan of the corpus, used when no index is available.

Scores whole documents: df counts documents containing a character and tf
counts it across the entire document. This is coarser than the indexed path,
which works per chunk, so the two paths rank similarly but not identically.
"""

from collections import Counter
from pathlib import Path

from amem.config import DEFAULT_CONFIG, EngineConfig
from amem.ingesters import collect_documents
from amem.models import SearchHit
from amem.protocols import Ingester
from amem.search.indexed import idf
from amem.search.ranker import first_line, matching_line, rank
from amem.tokens import query_tokens


def search_files(
    root: Path | str,
    query: str,
    top_k: int,
    config: EngineConfig | None = None,
    ingester: Ingester | None = None,
) -> list[SearchHit]:
    config = config or DEFAULT_CONFIG
    tokens = query_tokens(query)
    if not tokens:
        return []

    documents = collect_documents(root, config, ingester)
    total = max(len(documents), 1)

    df: Counter[str] = Counter()
    for doc in documents:
        df.update(token for token in tokens if token in doc.content)

    candidates = []
    for doc in documents:
        score = 0.0
        for token in tokens:
            tf = doc.content.count(token)
            if tf:
                score += tf * idf(total, df[token])
        if query in doc.content:
            score += config.exact_match_bonus
        if score > 0:
            snippet = matching_line(doc.content, query) or first_line(doc.content)
            candidates.append(SearchHit(path=doc.path, score=score, snippet=snippet))

    return rank(candidates, top_k)
