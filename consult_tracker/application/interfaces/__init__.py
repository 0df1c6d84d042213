from .content_store import ContentStore
from .remote_config_repository import RemoteConfigRepository

__all__ = [
    "ContentStore",
    "RemoteConfigRepository",
]
