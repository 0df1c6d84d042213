"""Abstract port for path-addressed JSON document storage."""

from abc import ABC, abstractmethod
from typing import Any

from consult_tracker.domain.entities import ProbeResult, ReadResult


class ContentStore(ABC):
    """Port for whole-document reads and writes — implemented in the infrastructure layer.

    Writes are guarded by optimistic concurrency: the implementation tracks
    the version token of every document it has seen and sends it back as a
    precondition on the next write of the same path.
    """

    @abstractmethod
    async def read(self, path: str) -> ReadResult:
        """Fetch the document at ``path``. A missing document is ``Absent``, not an error."""
        ...

    @abstractmethod
    async def write(self, path: str, document: Any, message: str | None = None) -> str:
        """Replace the document at ``path`` and return its new version token."""
        ...

    @abstractmethod
    async def probe(self) -> ProbeResult:
        """Check that the configured location is reachable. Never raises."""
        ...
