"""Protocol for corpus sources."""

from pathlib import Path
from typing import Iterator, Protocol, runtime_checkable

from amem.models import Document


@runtime_checkable
class Ingester(Protocol):
    """A source of corpus documents for rebuilds and direct scans.

    ``ingest`` yields Documents with root-relative POSIX paths; ordering is
    left to the caller. Entries that cannot be read are skipped rather than
    raised, so one bad file never fails a rebuild or a query.
    """

    def can_handle(self, source: Path) -> bool:
        """False when ``source`` is missing or of the wrong kind."""
        ...

    def ingest(self, source: Path) -> Iterator[Document]:
        ...
