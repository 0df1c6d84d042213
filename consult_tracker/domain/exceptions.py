"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class NotConfiguredError(Exception):
    """Raised when the remote repository configuration is missing or incomplete."""

    def __init__(self, message: str = "GitHub settings are not configured. Register a token on the settings page."):
        self.message = message
        super().__init__(message)


class RemoteContentError(Exception):
    """Base class for failures talking to the remote content store.

    ``kind`` tells transport problems apart from HTTP and decode errors:
    ``http``, ``decode``, ``transport`` or ``timeout``.
    """

    operation = "access"

    def __init__(
        self,
        path: str,
        status_code: int | None = None,
        detail: str = "",
        kind: str = "http",
    ):
        self.path = path
        self.status_code = status_code
        self.detail = detail
        self.kind = kind
        status = status_code if status_code is not None else kind
        super().__init__(f"Failed to {self.operation} '{path}' [{status}]: {detail}")


class RemoteReadError(RemoteContentError):
    """Raised when a document cannot be fetched or decoded."""

    operation = "read"


class RemoteWriteError(RemoteContentError):
    """Raised when a document write is rejected for a reason other than a conflict."""

    operation = "write"


class ConflictError(Exception):
    """Raised when a write is rejected because the remote document changed.

    The cached version token for ``path`` is stale; reload the data and
    apply the change again.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(
            f"'{path}' was changed remotely. Reload the data and try again."
        )


class MeetingNoteTooLargeError(Exception):
    """Raised when an uploaded meeting note exceeds the size limit."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"Meeting note is {size} bytes; the limit is {limit} bytes")
