"""Engine settings and memory directory resolution."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class EngineConfig:
    """Settings shared by the index builder and both query paths."""

    index_dir_name: str = ".index"
    index_db_name: str = "index.db"
    document_suffixes: tuple[str, ...] = (".md",)
    exact_match_bonus: float = 5.0
    default_top_k: int = 8
    context_top_k: int = 5

    def index_dir(self, root: Path | str) -> Path:
        return Path(root) / self.index_dir_name

    def index_db(self, root: Path | str) -> Path:
        return self.index_dir(root) / self.index_db_name


DEFAULT_CONFIG = EngineConfig()


def default_memory_dir() -> Path:
    """Return $AMEM_ROOT, else ~/.amem, else a relative .amem."""
    root = os.environ.get("AMEM_ROOT")
    if root:
        return Path(root)
    home = os.environ.get("HOME") or os.environ.get("USERPROFILE")
    if home:
        return Path(home) / ".amem"
    return Path(".amem")


def resolve_memory_dir(cwd: Path | str, explicit: Path | str | None = None) -> Path:
    """Resolve the memory directory.

    Precedence: explicit argument, $AMEM_DIR, then default_memory_dir().
    Relative results are joined to ``cwd`` and normalized.
    """
    if explicit is not None:
        base = Path(explicit)
    elif os.environ.get("AMEM_DIR"):
        base = Path(os.environ["AMEM_DIR"])
    else:
        base = default_memory_dir()

    if not base.is_absolute():
        base = Path(cwd) / base
    return Path(os.path.normpath(base))
