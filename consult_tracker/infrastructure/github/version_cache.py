"""Per-path cache of GitHub blob SHAs used as write preconditions."""


class VersionTokenCache:
    """Mapping of document path → last known version token (blob SHA).

    Entries are filled lazily by successful reads and writes and are only
    ever overwritten, never expired. ``clear()`` drops them all when the
    target repository or branch changes. The cache is advisory: a document changed
    by another process is only detected when the next write is rejected.
    """

    def __init__(self, initial: dict[str, str] | None = None):
        self._tokens: dict[str, str] = dict(initial or {})

    def get(self, path: str) -> str | None:
        return self._tokens.get(path)

    def set(self, path: str, token: str) -> None:
        self._tokens[path] = token

    def snapshot(self) -> dict[str, str]:
        """Return a copy of all cached tokens."""
        return dict(self._tokens)

    def __contains__(self, path: object) -> bool:
        return path in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def clear(self) -> None:
        """Forget every token, e.g. after switching to another repository or branch."""
        self._tokens.clear()
