"""Logging setup for the tracker.

Each category (HTTP client chatter, uvicorn, the GitHub content client,
the collection store) gets its own level from Settings, so e.g. httpx
request lines can be muted while store operations stay visible.

Call ``setup_logging()`` once at startup; main.py does it in the lifespan.
"""

import logging
import sys

from consult_tracker.config import Settings, get_settings

# Settings field → logger names whose level it controls.
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_github": (
        "consult_tracker.infrastructure.github",
        "consult_tracker.infrastructure.settings",
    ),
    "log_level_store": (
        "CollectionStore",
        "consult_tracker.application.services",
    ),
}

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply root and per-category levels. Returns the level set per logger name."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    # uvicorn installs its own handlers; plain scripts and tests have none
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%H:%M:%S"))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for field_name, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug(
        "Logging configured (root=%s, http=%s, github=%s, store=%s)",
        settings.log_level,
        settings.log_level_http,
        settings.log_level_github,
        settings.log_level_store,
    )
    return applied


def _parse_level(raw: str) -> int:
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else logging.INFO
