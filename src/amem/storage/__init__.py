"""SQLite storage for the amem index."""

from amem.storage.store import IndexStats, IndexStore

__all__ = ["IndexStore", "IndexStats"]
