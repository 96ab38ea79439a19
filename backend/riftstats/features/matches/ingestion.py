"""Match ingestion: pull a player's recent matches from Riot into the store.

For every recent match ID, in the order Riot returns them:

1. skip it if a row for (match_id, puuid) is already stored
2. otherwise fetch the match detail and extract the player's statistics
3. skip it if the player is not among the participants
4. insert the row

Work is strictly sequential. The first Riot API or database failure aborts
the run; rows inserted before it stay stored, so calling again resumes
where the failed run stopped.
"""

import structlog

from riftstats.core.exceptions import DatabaseError, IngestionError
from riftstats.core.riot_api.errors import RiotAPIError

from .gateway import RiotMatchGateway
from .repository import MatchRepositoryInterface
from .transformers import MatchExtractor

logger = structlog.get_logger(__name__)

DEFAULT_MATCH_HISTORY_COUNT = 20


class MatchIngestionService:
    """Ingests recent matches for one player at a time. Holds no state between calls."""

    def __init__(
        self,
        repository: MatchRepositoryInterface,
        riot_gateway: RiotMatchGateway,
        match_history_count: int = DEFAULT_MATCH_HISTORY_COUNT,
    ):
        """Initialize ingestion service.

        :param repository: Match repository
        :param riot_gateway: Anti-Corruption Layer for Riot match API
        :param match_history_count: How many recent match IDs to request
        """
        self.repository = repository
        self.riot_gateway = riot_gateway
        self.match_history_count = match_history_count

    async def ingest_recent_matches(self, puuid: str) -> int:
        """Store the player's recent matches that are not stored yet.

        :param puuid: Player PUUID
        :returns: Number of newly inserted matches
        :raises IngestionError: On the first Riot API or database failure
        """
        processed_count = 0

        try:
            match_ids = await self.riot_gateway.fetch_recent_match_ids(
                puuid, self.match_history_count
            )

            for match_id in match_ids:
                if await self._ingest_match(match_id, puuid):
                    processed_count += 1

        except (RiotAPIError, DatabaseError) as e:
            logger.error(
                "match_ingestion_failed",
                puuid=puuid,
                processed_count=processed_count,
                error_type=e.__class__.__name__,
                error=str(e),
            )
            raise IngestionError(
                message=f"Failed to ingest matches: {e}",
                puuid=puuid,
                processed_count=processed_count,
                original_error=e,
            ) from e

        logger.info(
            "match_ingestion_completed",
            puuid=puuid,
            fetched=len(match_ids),
            processed_count=processed_count,
        )
        return processed_count

    async def _ingest_match(self, match_id: str, puuid: str) -> bool:
        """Ingest a single match; returns True if a row was inserted."""
        if await self.repository.exists(match_id, puuid):
            logger.debug("match_already_stored", match_id=match_id, puuid=puuid)
            return False

        match = await self.riot_gateway.fetch_match_detail(match_id)

        record = MatchExtractor.extract(match, puuid)
        if record is None:
            return False

        # A concurrent ingestion may have stored the same row since exists()
        return await self.repository.insert_match(record)
