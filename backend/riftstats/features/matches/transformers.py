"""Match extraction: raw Riot match detail -> one player's match statistics.

Everything here is pure; nothing touches the database or the network.
"""

from datetime import datetime, timezone
from typing import Optional

import structlog

from riftstats.core.riot_api.models import MatchDTO, ParticipantDTO

from .schemas import ITEM_SLOTS, MatchCreate

logger = structlog.get_logger(__name__)


def calculate_kda(kills: int, deaths: int, assists: int) -> float:
    """(kills + assists) / max(deaths, 1), rounded to 2 decimals.

    Deathless games divide by one, so 10/0/5 is 15.0.

    Example:
        >>> calculate_kda(3, 4, 2)
        1.25
    """
    return round((kills + assists) / max(deaths, 1), 2)


def calculate_creep_score(participant: ParticipantDTO) -> int:
    """Minions + neutral monsters + epic monsters killed.

    Example:
        120 minions, 30 neutral, 2 epic -> 152
    """
    return (
        participant.total_minions_killed
        + participant.neutral_minions_killed
        + participant.objectives_epic_monster_kills
    )


def timestamp_ms_to_datetime(timestamp_ms: int) -> datetime:
    """Convert a Riot millisecond epoch timestamp to an aware UTC datetime."""
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc)


def find_participant(match: MatchDTO, puuid: str) -> Optional[ParticipantDTO]:
    """Return the participant entry for ``puuid`` or None."""
    return next((p for p in match.info.participants if p.puuid == puuid), None)


class MatchExtractor:
    """Turns a Riot match detail into the statistics stored for one player."""

    @staticmethod
    def extract(match: MatchDTO, puuid: str) -> Optional[MatchCreate]:
        """Extract ``puuid``'s statistics from ``match``.

        Returns None when the player did not take part in the match; callers
        skip such matches without treating it as an error.
        """
        participant = find_participant(match, puuid)
        if participant is None:
            logger.debug(
                "participant_not_in_match", match_id=match.match_id, puuid=puuid
            )
            return None

        return MatchCreate(
            match_id=match.match_id,
            puuid=puuid,
            champion=participant.champion_name,
            kills=participant.kills,
            deaths=participant.deaths,
            assists=participant.assists,
            kda=calculate_kda(
                participant.kills, participant.deaths, participant.assists
            ),
            win=participant.win,
            game_mode=match.info.game_mode,
            game_duration=match.info.game_duration,
            items={slot: getattr(participant, slot) for slot in ITEM_SLOTS},
            cs=calculate_creep_score(participant),
            gold=participant.gold_earned,
            damage=participant.total_damage_dealt_to_champions,
            game_start=timestamp_ms_to_datetime(match.info.game_start_timestamp),
        )
