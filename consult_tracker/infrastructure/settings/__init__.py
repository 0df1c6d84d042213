from .local_settings_store import JsonFileRemoteConfigRepository

__all__ = [
    "JsonFileRemoteConfigRepository",
]
