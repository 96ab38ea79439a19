"""Errors raised by the Riot API client.

One subclass per failure the client can classify. Callers above the
gateway layer only need to tell rate limiting and missing resources apart
from everything else; see ``riftstats.core.http``.
"""

from typing import Any, Dict, Optional


class RiotAPIError(Exception):
    """A Riot API call failed or returned an unusable payload."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict[str, Any]] = None,
        retry_after: Optional[float] = None,
    ) -> None:
        """
        Initialize RiotAPIError.

        Args:
            message: Error message
            status_code: HTTP status returned by Riot, None for transport
                and payload failures
            response_data: Decoded error body, if any
            retry_after: Seconds Riot asked us to wait (429 only)
        """
        super().__init__(message)
        self.message: str = message
        self.status_code: Optional[int] = status_code
        self.response_data: Dict[str, Any] = response_data or {}
        self.retry_after: Optional[float] = retry_after

    def __str__(self) -> str:
        if self.status_code:
            return f"Riot API Error {self.status_code}: {self.message}"
        return f"Riot API Error: {self.message}"


class BadRequestError(RiotAPIError):
    """400 - malformed request parameters."""


class AuthenticationError(RiotAPIError):
    """401 - the API key is missing, invalid or expired."""


class ForbiddenError(RiotAPIError):
    """403 - the key may not call this endpoint."""


class NotFoundError(RiotAPIError):
    """404 - unknown Riot ID, PUUID or match ID."""


class RateLimitError(RiotAPIError):
    """429 - rate limited; ``retry_after`` holds the Retry-After header."""

    def __str__(self) -> str:
        base = super().__str__()
        if self.retry_after:
            return f"{base} (retry after {self.retry_after:g}s)"
        return base


class ServiceUnavailableError(RiotAPIError):
    """5xx response or transport failure; Riot could not be reached."""


__all__ = [
    "RiotAPIError",
    "BadRequestError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServiceUnavailableError",
]
