"""Local settings store for the GitHub repository configuration.

Reads/writes the token, owner, repo and branch to a JSON file so the
settings persist across restarts. Values missing from the file fall back
to the GITHUB_* environment defaults.
"""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any

from consult_tracker.application.interfaces import RemoteConfigRepository
from consult_tracker.config import Settings
from consult_tracker.domain.entities import RemoteConfig

logger = logging.getLogger(__name__)

CONFIG_KEYS = ("token", "owner", "repo", "branch")


class JsonFileRemoteConfigRepository(RemoteConfigRepository):
    """Implements the RemoteConfigRepository port with a JSON file on disk."""

    def __init__(self, path: str | Path, defaults: Settings | None = None):
        self._path = Path(path)
        self._defaults = defaults

    def _read_overrides(self) -> dict[str, Any]:
        """Read the JSON file, returning {} if missing or corrupt."""
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text("utf-8"))
        except (OSError, ValueError):
            logger.warning("Could not read %s — using defaults", self._path)
            return {}
        return data if isinstance(data, dict) else {}

    def _default_values(self) -> dict[str, str]:
        if self._defaults is None:
            return {"branch": "main"}
        return {
            "token": self._defaults.github_token,
            "owner": self._defaults.github_owner,
            "repo": self._defaults.github_repo,
            "branch": self._defaults.github_branch,
        }

    def load(self) -> RemoteConfig | None:
        defaults = self._default_values()
        overrides = self._read_overrides()
        values = {
            key: str(overrides.get(key) or defaults.get(key) or "")
            for key in CONFIG_KEYS
        }
        if not (values["token"] or values["owner"] or values["repo"]):
            return None
        return RemoteConfig(
            token=values["token"],
            owner=values["owner"],
            repo=values["repo"],
            branch=values["branch"] or "main",
        )

    def save(self, config: RemoteConfig) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(asdict(config), indent=2), encoding="utf-8")
        logger.info(
            "Remote settings saved: %s/%s@%s", config.owner, config.repo, config.branch
        )
