"""Maps domain exceptions to HTTP errors for the v1 endpoints."""

import logging

from fastapi import HTTPException, status

from consult_tracker.domain.exceptions import (
    ConflictError,
    EntityNotFoundError,
    MeetingNoteTooLargeError,
    NotConfiguredError,
    RemoteContentError,
)

logger = logging.getLogger(__name__)

# Everything the tracker can raise that a caller is expected to handle.
TRACKER_ERRORS = (
    ConflictError,
    EntityNotFoundError,
    MeetingNoteTooLargeError,
    NotConfiguredError,
    RemoteContentError,
)


def http_error(exc: Exception) -> HTTPException:
    """Build the HTTPException matching a domain exception."""
    if isinstance(exc, EntityNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))
    if isinstance(exc, NotConfiguredError):
        return HTTPException(status_code=status.HTTP_428_PRECONDITION_REQUIRED, detail=exc.message)
    if isinstance(exc, MeetingNoteTooLargeError):
        return HTTPException(status_code=413, detail=str(exc))
    if isinstance(exc, RemoteContentError):
        logger.error("GitHub %s failed for %s: %s", exc.operation, exc.path, exc)
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={
                "message": str(exc),
                "path": exc.path,
                "status": exc.status_code,
                "kind": exc.kind,
            },
        )
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))
