"""CLI entry point for amem."""

import argparse
import json
import logging
import sys
from pathlib import Path

from amem.config import DEFAULT_CONFIG, resolve_memory_dir
from amem.errors import BuildError
from amem.indexer import open_store, rebuild
from amem.models import SearchHit
from amem.search import query

logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)
logger = logging.getLogger(__name__)


def _print_json(payload) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2))


def _print_hits(hits: list[SearchHit]) -> None:
    for hit in hits:
        print(f"{hit.score:.3f}\t{hit.path}\t{hit.snippet}")


def index(memory_dir: Path, force_reset: bool = False, as_json: bool = False) -> None:
    """Rebuild the index of a memory directory.

    Args:
        memory_dir: Root of the notes
        force_reset: Delete the database before rebuilding
        as_json: Print a JSON status object instead of the database path
    """
    store = open_store(memory_dir)
    try:
        rebuild(memory_dir, force_reset)
    except BuildError as exc:
        logger.error(f"Index build failed: {exc}")
        sys.exit(1)

    if as_json:
        _print_json({"index_db": str(store.path), "status": "ok"})
    else:
        print(store.path)


def search(memory_dir: Path, text: str, top_k: int, as_json: bool = False) -> None:
    """Print ranked hits for a query.

    Args:
        memory_dir: Root of the notes
        text: Query text
        top_k: Maximum number of hits
        as_json: Print a JSON list of {path, score, snippet}
    """
    hits = query(memory_dir, text, top_k)
    if as_json:
        _print_json([hit.to_dict() for hit in hits])
    else:
        _print_hits(hits)


def context(memory_dir: Path, task: str, as_json: bool = False) -> None:
    """Print the memory related to a task."""
    hits = query(memory_dir, task, DEFAULT_CONFIG.context_top_k)
    if as_json:
        _print_json({"task": task, "related": [hit.to_dict() for hit in hits]})
        return

    print(f"Task Context: {task}")
    print("")
    print("== Related Memory ==")
    if not hits:
        print("(none)")
    else:
        _print_hits(hits)


def info(memory_dir: Path, as_json: bool = False) -> None:
    """Show row counts of the index."""
    store = open_store(memory_dir)
    if not store.exists():
        if as_json:
            _print_json({"index_db": str(store.path), "exists": False})
        else:
            print(f"No index at {store.path} (searches scan files directly)")
        return

    stats = store.stats()
    if as_json:
        _print_json(
            {
                "index_db": str(store.path),
                "exists": True,
                "documents": stats.documents,
                "chunks": stats.chunks,
                "postings": stats.postings,
                "terms": stats.terms,
            }
        )
        return

    print(f"Index: {store.path}")
    print(f"  Size: {store.path.stat().st_size / 1024:.1f} KB")
    print(f"")
    print(f"Contents:")
    print(f"  Documents: {stats.documents}")
    print(f"  Chunks: {stats.chunks}")
    print(f"  Postings: {stats.postings}")
    print(f"  Terms: {stats.terms}")


def serve(memory_dir: Path, transport: str = "stdio") -> None:
    """Start MCP server for a memory directory.

    Args:
        memory_dir: Root of the notes
        transport: Transport protocol (stdio or sse)
    """
    # Import here to avoid loading MCP unless needed
    from amem.server import create_mcp_server

    from typing import cast, Literal

    logger.info(f"Serving {memory_dir} via {transport}")
    mcp = create_mcp_server(memory_dir)
    mcp.run(transport=cast(Literal["stdio", "sse", "streamable-http"], transport))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="amem",
        description="Local memory CLI for assistant workflows",
    )
    parser.add_argument(
        "--memory-dir",
        help="Memory directory (default: $AMEM_DIR, $AMEM_ROOT or ~/.amem)",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # index command
    index_parser = subparsers.add_parser(
        "index",
        help="Rebuild the search index",
    )
    index_parser.add_argument(
        "--rebuild",
        action="store_true",
        help="Delete the index database and recreate it from scratch",
    )

    # search command
    search_parser = subparsers.add_parser(
        "search",
        aliases=["remember"],
        help="Search memory files",
    )
    search_parser.add_argument("query", help="Text to search for")
    search_parser.add_argument(
        "-k",
        "--top-k",
        type=int,
        default=DEFAULT_CONFIG.default_top_k,
        help=f"Maximum number of hits (default: {DEFAULT_CONFIG.default_top_k})",
    )

    # context command
    context_parser = subparsers.add_parser(
        "context",
        help="Show memory related to a task",
    )
    context_parser.add_argument("--task", required=True, help="Task description")

    # info command
    subparsers.add_parser("info", help="Show information about the index")

    # which command
    subparsers.add_parser("which", help="Print the resolved memory directory")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start MCP server for the memory directory",
    )
    serve_parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.getLogger("amem").setLevel(logging.DEBUG)

    memory_dir = resolve_memory_dir(Path.cwd(), args.memory_dir)

    if args.command == "index":
        index(memory_dir, force_reset=args.rebuild, as_json=args.json)
    elif args.command in ("search", "remember"):
        search(memory_dir, args.query, args.top_k, as_json=args.json)
    elif args.command == "context":
        context(memory_dir, args.task, as_json=args.json)
    elif args.command == "info":
        info(memory_dir, as_json=args.json)
    elif args.command == "which":
        print(memory_dir)
    elif args.command == "serve":
        serve(memory_dir, args.transport)


if __name__ == "__main__":
    main()
