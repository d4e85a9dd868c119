"""amem - local memory index with ranked lexical search."""

from amem.config import EngineConfig, resolve_memory_dir
from amem.errors import AmemError, BuildError
from amem.indexer import open_store, rebuild
from amem.models import SearchHit
from amem.search import SearchOutcome, query, run_query

__version__ = "0.1.0"

__all__ = [
    "AmemError",
    "BuildError",
    "EngineConfig",
    "SearchHit",
    "SearchOutcome",
    "open_store",
    "query",
    "rebuild",
    "resolve_memory_dir",
    "run_query",
]
