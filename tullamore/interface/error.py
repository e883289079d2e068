"""Translation of application errors into HTTP errors."""

import logfire
from fastapi import HTTPException, status

from tullamore.domain.error import AlreadyExistsError, NotFoundError


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Map an error raised while handling a request to an HTTPException.

    - NotFoundError -> 404
    - AlreadyExistsError -> 409
    - ValueError (including pydantic validation of domain models) -> 400
    - anything else -> 500, logged as an error

    Args:
        error: The raised error
        action: What the route was doing, e.g. "create tag"

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, NotFoundError):
        logfire.warn("Failed to {action}: not found", action=action, error=str(error))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, AlreadyExistsError):
        logfire.warn("Failed to {action}: already exists", action=action, error=str(error))
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    if isinstance(error, ValueError):
        logfire.warn("Failed to {action}: invalid input", action=action, error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    logfire.error(
        "Unexpected error while trying to {action}",
        action=action,
        error=str(error),
        error_type=type(error).__name__,
    )
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )


def check_page(limit: int, offset: int, max_limit: int) -> None:
    """Validate pagination parameters.

    Raises:
        HTTPException: 400 if limit or offset is out of range
    """
    if limit < 1 or limit > max_limit:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Limit must be between 1 and {max_limit}",
        )
    if offset < 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Offset must be non-negative",
        )
