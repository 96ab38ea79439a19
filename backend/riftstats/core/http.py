"""Translation of service and Riot API errors into HTTP responses."""

from fastapi import HTTPException

from .exceptions import IngestionError
from .riot_api.errors import NotFoundError, RateLimitError, RiotAPIError


def http_exception_for(error: Exception) -> HTTPException:
    """Map an exception raised below the router to an HTTPException.

    Ingestion failures are classified by the error that aborted them.
    """
    cause = error
    if isinstance(error, IngestionError) and error.original_error is not None:
        cause = error.original_error

    if isinstance(cause, RateLimitError):
        headers = None
        if cause.retry_after:
            headers = {"Retry-After": str(int(cause.retry_after))}
        return HTTPException(status_code=429, detail=str(error), headers=headers)
    if isinstance(cause, NotFoundError):
        return HTTPException(status_code=404, detail=str(error))
    if isinstance(cause, RiotAPIError):
        return HTTPException(status_code=502, detail=str(error))
    return HTTPException(status_code=500, detail=str(error))
