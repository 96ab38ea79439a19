"""Async HTTP client for the Riot account, summoner and match endpoints."""

from typing import Any, Dict, Optional, Tuple, Type

import httpx
import structlog

from .constants import Platform, Region
from .endpoints import RiotAPIEndpoints
from .errors import (
    AuthenticationError,
    BadRequestError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    RiotAPIError,
    ServiceUnavailableError,
)
from .models import AccountDTO, MatchDTO, MatchListDTO, SummonerDTO

logger = structlog.get_logger(__name__)

# Client errors Riot answers with, mapped to (error class, message)
_CLIENT_ERRORS: Dict[int, Tuple[Type[RiotAPIError], str]] = {
    400: (BadRequestError, "Invalid request parameters"),
    401: (AuthenticationError, "Invalid API key"),
    403: (ForbiddenError, "Access forbidden"),
    404: (NotFoundError, "Resource not found"),
}

DEFAULT_TIMEOUT = httpx.Timeout(connect=5.0, read=25.0, write=10.0, pool=30.0)


class RiotAPIClient:
    """Riot API client returning typed DTOs and raising typed errors.

    There is no client-side rate limiting and no retry: every call makes
    exactly one request and a failure surfaces to the caller immediately.

    Usage::

        async with RiotAPIClient(api_key, Region.EUROPE, Platform.EUW1) as client:
            account = await client.get_account_by_riot_id("Caps", "EUW")
    """

    def __init__(
        self,
        api_key: str,
        region: Region = Region.AMERICAS,
        platform: Platform = Platform.NA1,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize Riot API client.

        Args:
            api_key: Riot API key sent as ``X-Riot-Token``
            region: Region for account and match endpoints
            platform: Platform for summoner endpoints
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.api_key = api_key
        self.region = region
        self.platform = platform
        self.endpoints = RiotAPIEndpoints(region, platform)

        self._transport = transport
        self.session: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "RiotAPIClient":
        await self.start_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def start_session(self) -> None:
        """Open the underlying httpx client if it is not open yet."""
        if self.session is not None and not self.session.is_closed:
            return

        self.session = httpx.AsyncClient(
            headers={
                "X-Riot-Token": self.api_key,
                "Accept": "application/json",
                "User-Agent": "Riftstats/1.0",
            },
            timeout=DEFAULT_TIMEOUT,
            transport=self._transport,
        )
        logger.info(
            "riot_client_session_started",
            region=self.region.value,
            platform=self.platform.value,
        )

    async def close(self) -> None:
        """Close the underlying httpx client."""
        if self.session is not None and not self.session.is_closed:
            await self.session.aclose()
            logger.info("riot_client_session_closed")

    @staticmethod
    def _raise_for_status(response: httpx.Response) -> None:
        """Raise the RiotAPIError subclass matching a non-200 response."""
        status = response.status_code
        if status == 200:
            return

        if status in _CLIENT_ERRORS:
            error_class, message = _CLIENT_ERRORS[status]
            raise error_class(message, status_code=status)

        if status == 429:
            retry_after = response.headers.get("Retry-After")
            raise RateLimitError(
                "Rate limit exceeded",
                status_code=status,
                retry_after=float(retry_after) if retry_after else None,
            )

        if status >= 500:
            message = "Service unavailable" if status == 503 else f"Server error {status}"
            raise ServiceUnavailableError(message, status_code=status)

        raise RiotAPIError(f"Unexpected status {status}", status_code=status)

    async def _get(self, url: str) -> Any:
        """GET ``url`` and return the decoded JSON body.

        Raises:
            RiotAPIError: For error statuses and transport failures
        """
        await self.start_session()

        try:
            response = await self.session.get(url)
        except httpx.HTTPError as e:
            logger.warning("riot_api_request_failed", url=url, error=str(e))
            raise ServiceUnavailableError(f"Request failed: {e}") from e

        logger.debug("riot_api_response", url=url, status=response.status_code)
        self._raise_for_status(response)

        try:
            return response.json()
        except ValueError as e:
            logger.warning("riot_api_invalid_json", url=url, error=str(e))
            raise RiotAPIError(
                "Response body is not valid JSON", status_code=response.status_code
            ) from e

    async def get_account_by_riot_id(self, game_name: str, tag_line: str) -> AccountDTO:
        """Resolve a Riot ID (gameName#tagLine) to an account."""
        data = await self._get(self.endpoints.account_by_riot_id(game_name, tag_line))
        return AccountDTO.model_validate(data)

    async def get_summoner_by_puuid(self, puuid: str) -> SummonerDTO:
        """Get the summoner profile (level, icon) for a PUUID."""
        data = await self._get(self.endpoints.summoner_by_puuid(puuid))
        return SummonerDTO.model_validate(data)

    async def get_match_list_by_puuid(
        self, puuid: str, start: int = 0, count: int = 20
    ) -> MatchListDTO:
        """Get a player's match IDs, most recent first."""
        match_ids = await self._get(
            self.endpoints.match_list_by_puuid(puuid, start, count)
        )
        if not isinstance(match_ids, list):
            raise RiotAPIError(
                f"Expected a list of match IDs, got {type(match_ids).__name__}"
            )
        return MatchListDTO(match_ids=match_ids, start=start, count=count, puuid=puuid)

    async def get_match(self, match_id: str) -> MatchDTO:
        """Get the full match detail for a match ID."""
        data = await self._get(self.endpoints.match_by_id(match_id))
        return MatchDTO.model_validate(data)
