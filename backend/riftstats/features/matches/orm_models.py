"""SQLAlchemy 2.0 ORM models for the matches feature.

One row per (match, tracked player): the same Riot match yields a separate
row for every player it was ingested for.
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import (
    Boolean,
    DateTime as SQLDateTime,
    Index,
    Integer,
    JSON,
    Numeric,
    String,
)
from sqlalchemy.orm import Mapped, mapped_column

from riftstats.core.models import Base


class MatchORM(Base):
    """A player's performance in one match. Rows are immutable once stored."""

    __tablename__ = "matches"
    __table_args__ = (
        Index("idx_matches_puuid_game_start", "puuid", "game_start"),
        Index("idx_matches_puuid_champion", "puuid", "champion"),
    )

    # Composite primary key - (match, player) is unique
    match_id: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        comment="Match identifier from Riot API",
    )

    puuid: Mapped[str] = mapped_column(
        String(78),
        primary_key=True,
        comment="PUUID of the player this row describes",
    )

    champion: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Champion name played",
    )

    kills: Mapped[int] = mapped_column(Integer, nullable=False)
    deaths: Mapped[int] = mapped_column(Integer, nullable=False)
    assists: Mapped[int] = mapped_column(Integer, nullable=False)

    kda: Mapped[float] = mapped_column(
        Numeric(8, 2, asdecimal=False),
        nullable=False,
        comment="(kills + assists) / max(deaths, 1), 2 decimals",
    )

    win: Mapped[bool] = mapped_column(Boolean, nullable=False)

    game_mode: Mapped[Optional[str]] = mapped_column(
        String(32),
        nullable=True,
        comment="Game mode (e.g., 'CLASSIC', 'ARAM')",
    )

    game_duration: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Game duration in seconds",
    )

    items: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        comment="Item slots item0..item6 at game end",
    )

    cs: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Minions + neutral monsters + epic monsters killed",
    )

    gold: Mapped[int] = mapped_column(Integer, nullable=False, comment="Gold earned")

    damage: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Total damage dealt to champions",
    )

    game_start: Mapped[datetime] = mapped_column(
        SQLDateTime(timezone=True),
        nullable=False,
        comment="Game start instant",
    )

    def __repr__(self) -> str:
        return (
            f"<MatchORM(match_id='{self.match_id}', puuid='{self.puuid}', "
            f"champion='{self.champion}')>"
        )
