"""Value objects for the remote content store — configuration and read results."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class RemoteConfig:
    """Where the data repository lives and how to authenticate."""

    token: str = ""
    owner: str = ""
    repo: str = ""
    branch: str = "main"

    @property
    def is_complete(self) -> bool:
        return bool(self.token and self.owner and self.repo and self.branch)


@dataclass(frozen=True)
class Found:
    """A document that exists remotely, with its version token."""

    document: Any
    sha: str


@dataclass(frozen=True)
class Absent:
    """The remote store has no document at ``path``."""

    path: str


ReadResult = Found | Absent


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a connectivity check."""

    ok: bool
    detail: str
