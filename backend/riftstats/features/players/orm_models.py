"""SQLAlchemy 2.0 ORM models for the players feature."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime as SQLDateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from riftstats.core.models import Base


class PlayerORM(Base):
    """Player identified by Riot PUUID.

    Name, tag, level and icon change over time and are overwritten on
    every re-fetch; the PUUID never changes.
    """

    __tablename__ = "players"

    puuid: Mapped[str] = mapped_column(
        String(78),
        primary_key=True,
        comment="Riot PUUID - stable player identifier",
    )

    game_name: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="Riot ID game name (before #)",
    )

    tag_line: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        comment="Riot ID tag line (after #)",
    )

    summoner_level: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        comment="Summoner account level",
    )

    profile_icon_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        comment="Profile icon ID",
    )

    last_updated: Mapped[datetime] = mapped_column(
        SQLDateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        comment="When this player was last fetched from Riot API",
    )

    @property
    def riot_id(self) -> str:
        """Full Riot ID in ``name#tag`` form."""
        return f"{self.game_name}#{self.tag_line}"

    def __repr__(self) -> str:
        return f"<PlayerORM(puuid='{self.puuid}', riot_id='{self.riot_id}')>"
