import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)
_LOG_LEVEL_KEYS = frozenset({
    "log_level",
    "log_level_http",
    "log_level_uvicorn",
    "log_level_github",
    "log_level_store",
})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Consult Tracker API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # GitHub contents API
    github_api_base_url: str = "https://api.github.com"
    request_timeout_seconds: float = 30.0

    # Remote repository defaults — overridden by the local settings store
    github_token: str = ""
    github_owner: str = ""
    github_repo: str = ""
    github_branch: str = "main"

    # Local settings store for the remote configuration
    remote_config_file: str = "data/github_config.json"

    # Seed writes go out one at a time to stay clear of GitHub's secondary
    # rate limits. The four paths are independent, so disabling this is safe
    # for the version-token cache.
    seed_sequential_writes: bool = True

    # Meeting note uploads
    max_meeting_note_bytes: int = 500 * 1024

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore — outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_github: str = "INFO"           # GitHub contents client
    log_level_store: str = "INFO"            # CollectionStore / TrackerService

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Replace unknown log level names with INFO."""
        for key in _LOG_LEVEL_KEYS:
            raw = getattr(self, key)
            if not isinstance(getattr(logging, raw.upper(), None), int):
                _config_logger.warning("Unknown log level %r for %s — using INFO", raw, key)
                object.__setattr__(self, key, "INFO")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
