"""Translation of domain errors to HTTP errors."""

import logfire
from fastapi import HTTPException, status

from askabout.domain.error import ConflictError, NotFoundError, StorageError


def to_http_exception(error: Exception) -> HTTPException:
    """Map a domain or validation error to the HTTP error returned to clients.

    - NotFoundError -> 404
    - ConflictError (already voted, concurrent change) -> 409
    - StorageError -> 503
    - ValueError (malformed ID) -> 400

    Args:
        error: The raised error

    Returns:
        HTTPException to raise from the route

    Raises:
        Exception: The original error if it is not a known kind
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, StorageError):
        logfire.error("Storage failure", error=str(error))
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Could not save the change, please try again",
        )
    if isinstance(error, ValueError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    raise error
