"""Colored operation logger for collection I/O against the remote repository.

Each store stage gets its own color so loads, saves and seeding can be
followed in the terminal:

    Blue    — LOAD (remote reads)
    Green   — SAVE (remote writes)
    Magenta — SEED
    Yellow  — stale version token (409 conflict)
    Red     — any other failure
"""

import logging
import time
from contextlib import contextmanager
from typing import Any, Iterator, NamedTuple

from consult_tracker.domain.exceptions import ConflictError

_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_RED = "\033[91m"
_GREEN = "\033[92m"
_YELLOW = "\033[93m"
_BLUE = "\033[94m"
_MAGENTA = "\033[95m"
_GRAY = "\033[90m"


class Stage(NamedTuple):
    label: str
    color: str
    icon: str


class OperationStage:
    """Stages of the collection store."""

    LOAD = Stage("LOAD", _BLUE, "📥")
    SAVE = Stage("SAVE", _GREEN, "💾")
    SEED = Stage("SEED", _MAGENTA, "🌱")


def _details(fields: dict[str, Any]) -> str:
    if not fields:
        return ""
    joined = " | ".join(f"{k}={v}" for k, v in fields.items())
    return f" {_GRAY}({joined}){_RESET}"


class OperationLogger:
    """Color-coded logger for collection store operations.

    Usage:
        log = OperationLogger("CollectionStore")
        with log.timed_step(OperationStage.SAVE, "Saving data/clients.json", records=3):
            await content_store.write(...)
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: Stage, message: str, **fields: Any) -> None:
        self._logger.info(
            f"{stage.color}{_BOLD}{stage.icon} [{stage.label}]{_RESET} "
            f"{stage.color}{message}{_RESET}{_details(fields)}"
        )

    def step_complete(self, stage: Stage, message: str, **fields: Any) -> None:
        self._logger.info(
            f"{stage.color}{stage.icon} [{stage.label}]{_RESET} "
            f"{_GREEN}✓ {message}{_RESET}{_details(fields)}"
        )

    def step_conflict(self, stage: Stage, message: str, path: str) -> None:
        """A write was rejected because the remote document moved on."""
        self._logger.warning(
            f"{_YELLOW}{_BOLD}⚠ [{stage.label}]{_RESET} "
            f"{_YELLOW}{message}: {path} changed remotely, refresh before retrying{_RESET}"
        )

    def step_error(self, stage: Stage, message: str, error: Exception | None = None) -> None:
        line = f"{_RED}{_BOLD}❌ [{stage.label}]{_RESET} {_RED}{message}{_RESET}"
        if error is not None:
            line += f" {_DIM}→ {type(error).__name__}: {error}{_RESET}"
        self._logger.error(line)

    def stats(self, **counts: int) -> None:
        """Log record counts after a load."""
        parts = " | ".join(f"{k}: {v}" for k, v in counts.items())
        self._logger.info(f"   {_GRAY}📈 {parts}{_RESET}")

    @contextmanager
    def timed_step(self, stage: Stage, message: str, **fields: Any) -> Iterator[None]:
        """Log start and end of a block with the elapsed time.

        Conflicts are logged as warnings; every exception is re-raised.
        """
        self.step_start(stage, message, **fields)
        start = time.perf_counter()
        try:
            yield
        except ConflictError as e:
            self.step_conflict(stage, message, e.path)
            raise
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} — failed after {elapsed:.2f}s", error=e)
            raise
        elapsed = time.perf_counter() - start
        self.step_complete(stage, f"{message} — {elapsed:.2f}s", **fields)
