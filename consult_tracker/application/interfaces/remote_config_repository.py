"""Abstract repository interface (port) for the remote repository settings."""

from abc import ABC, abstractmethod

from consult_tracker.domain.entities import RemoteConfig


class RemoteConfigRepository(ABC):
    """Port for persisting the token / owner / repo / branch settings."""

    @abstractmethod
    def load(self) -> RemoteConfig | None:
        """Return the stored configuration, or None when nothing is stored."""
        ...

    @abstractmethod
    def save(self, config: RemoteConfig) -> None:
        """Persist the configuration, replacing any previous value."""
        ...
