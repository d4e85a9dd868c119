"""FastMCP server implementation for amem."""

from pathlib import Path

from mcp.server.fastmcp import FastMCP

from amem.config import DEFAULT_CONFIG, EngineConfig
from amem.errors import BuildError
from amem.indexer import rebuild
from amem.models import SearchHit
from amem.search import run_query


def format_hits(hits: list[SearchHit]) -> str:
    """Render hits as a numbered list, one snippet line each."""
    lines = []
    for i, hit in enumerate(hits, 1):
        lines.append(f"{i}. [{hit.score:.3f}] {hit.path}")
        lines.append(f"   {hit.snippet}")
        lines.append("")
    return "\n".join(lines)


def resolve_document(memory_dir: Path, path: str, config: EngineConfig) -> Path | None:
    """Map a root-relative path to a corpus file, or None if it is outside it."""
    root = memory_dir.resolve()
    target = (root / path).resolve()
    if not target.is_relative_to(root) or target == root:
        return None
    if target.relative_to(root).parts[0] == config.index_dir_name:
        return None
    return target if target.is_file() else None


def create_mcp_server(memory_dir: Path, config: EngineConfig | None = None) -> FastMCP:
    """Create an MCP server for one memory directory.

    Args:
        memory_dir: Root of the notes to search

    Returns:
        Configured FastMCP server instance
    """
    config = config or DEFAULT_CONFIG
    mcp = FastMCP(name="amem")

    @mcp.tool()
    def search(query: str, limit: int = config.default_top_k) -> str:
        """Keyword search across the memory directory.

        Matching is per character, so it works for text without spaces
        between words. Documents containing the exact query rank higher.

        Args:
            query: Text to look for
            limit: Maximum number of results to return

        Returns:
            Ranked list of documents with a representative line each
        """
        outcome = run_query(memory_dir, query, limit, config)
        if not outcome.hits:
            return f"No results found for: {query}"
        return format_hits(outcome.hits)

    @mcp.tool()
    def index(force_reset: bool = False) -> str:
        """Rebuild the search index from the current files.

        Args:
            force_reset: Delete the index database before rebuilding

        Returns:
            Summary of what was indexed
        """
        try:
            stats = rebuild(memory_dir, force_reset, config=config)
        except BuildError as exc:
            return f"Error: {exc}"
        return f"Indexed {stats.documents} files, {stats.chunks} chunks, {stats.terms} terms"

    @mcp.tool()
    def read(path: str) -> str:
        """Read a document from the memory directory.

        Args:
            path: Relative path as shown in search results

        Returns:
            File content
        """
        target = resolve_document(memory_dir, path, config)
        if target is None:
            return f"Error: File not found: {path}"
        try:
            return target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            return f"Error: Cannot read {path}: {exc}"

    return mcp
