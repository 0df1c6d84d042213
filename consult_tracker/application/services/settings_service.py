"""Application service for the GitHub repository settings.

The settings live in the local settings store (RemoteConfigRepository);
the content client reads them again before every remote call, so changes
apply to the next operation without a restart.
"""

import logging
from collections.abc import Callable, Iterable

from consult_tracker.application.interfaces import ContentStore, RemoteConfigRepository
from consult_tracker.domain.entities import ProbeResult, RemoteConfig

logger = logging.getLogger(__name__)


def _target(config: RemoteConfig | None) -> tuple[str, str, str] | None:
    if config is None:
        return None
    return (config.owner, config.repo, config.branch)


class SettingsService:
    """Reads, updates and verifies the remote repository configuration.

    ``on_target_change`` callbacks run when a saved config points at another
    owner, repo or branch. They drop state that belongs to the old target:
    cached version tokens and the loaded snapshot.
    """

    def __init__(
        self,
        repository: RemoteConfigRepository,
        content_store: ContentStore,
        on_target_change: Iterable[Callable[[], None]] = (),
    ):
        self._repository = repository
        self._content_store = content_store
        self._on_target_change = tuple(on_target_change)

    def get_config(self) -> RemoteConfig | None:
        return self._repository.load()

    def update_config(self, config: RemoteConfig) -> RemoteConfig:
        previous = _target(self._repository.load())
        self._repository.save(config)

        if previous != _target(config):
            logger.info(
                "Data repository changed to %s/%s@%s — dropping cached state",
                config.owner,
                config.repo,
                config.branch,
            )
            for callback in self._on_target_change:
                callback()
        return config

    async def test_connection(self) -> ProbeResult:
        """Probe the configured repository; failures are reported, never raised."""
        result = await self._content_store.probe()
        if result.ok:
            logger.info("GitHub connection OK — %s", result.detail)
        else:
            logger.warning("GitHub connection failed — %s", result.detail)
        return result
