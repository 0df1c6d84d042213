"""FastAPI dependency injection — wires infrastructure to application layer.

The content client, its version-token cache and the tracker snapshot are
process-lifetime singletons: one session, one editor.
"""

from functools import lru_cache

from consult_tracker.application.interfaces import RemoteConfigRepository
from consult_tracker.application.services import (
    CollectionStore,
    SettingsService,
    TrackerService,
)
from consult_tracker.config import get_settings
from consult_tracker.infrastructure.github import GitHubContentClient, VersionTokenCache
from consult_tracker.infrastructure.settings import JsonFileRemoteConfigRepository


@lru_cache
def get_remote_config_repository() -> RemoteConfigRepository:
    """Provides the local settings store for the repository configuration."""
    settings = get_settings()
    return JsonFileRemoteConfigRepository(settings.remote_config_file, defaults=settings)


@lru_cache
def get_content_client() -> GitHubContentClient:
    """Provides the GitHub contents client with its own version-token cache."""
    settings = get_settings()
    repository = get_remote_config_repository()
    return GitHubContentClient(
        config_provider=repository.load,
        base_url=settings.github_api_base_url,
        timeout=settings.request_timeout_seconds,
        token_cache=VersionTokenCache(),
    )


@lru_cache
def get_collection_store() -> CollectionStore:
    settings = get_settings()
    return CollectionStore(
        get_content_client(),
        sequential_seed=settings.seed_sequential_writes,
    )


@lru_cache
def get_tracker_service() -> TrackerService:
    """Provides the TrackerService that owns the session snapshot."""
    settings = get_settings()
    return TrackerService(
        get_collection_store(),
        max_meeting_note_bytes=settings.max_meeting_note_bytes,
    )


def get_settings_service() -> SettingsService:
    """Provides a SettingsService bound to the shared content client.

    Pointing the settings at another repository or branch clears the
    client's version tokens and the tracker snapshot.
    """
    content_client = get_content_client()
    return SettingsService(
        get_remote_config_repository(),
        content_client,
        on_target_change=(content_client.token_cache.clear, get_tracker_service().reset),
    )
