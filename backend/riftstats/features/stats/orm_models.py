"""SQLAlchemy 2.0 ORM model for materialized player statistics."""

from datetime import datetime, timezone

from sqlalchemy import DateTime as SQLDateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from riftstats.core.models import Base


class PlayerStatsORM(Base):
    """Cached stats snapshot for one player.

    Derived from the player's matches and overwritten wholesale on every
    recomputation; the matches table stays authoritative.
    """

    __tablename__ = "player_stats"

    puuid: Mapped[str] = mapped_column(
        String(78),
        primary_key=True,
        comment="Player PUUID",
    )

    total_games: Mapped[int] = mapped_column(Integer, nullable=False)
    wins: Mapped[int] = mapped_column(Integer, nullable=False)
    losses: Mapped[int] = mapped_column(Integer, nullable=False)
    win_rate: Mapped[float] = mapped_column(
        Numeric(5, 2, asdecimal=False),
        nullable=False,
        comment="Win percentage, 2 decimals",
    )
    avg_kda: Mapped[float] = mapped_column(Numeric(8, 2, asdecimal=False), nullable=False)
    favorite_champion: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="Most played champion, 'None' without matches",
    )
    total_kills: Mapped[int] = mapped_column(Integer, nullable=False)
    total_deaths: Mapped[int] = mapped_column(Integer, nullable=False)
    total_assists: Mapped[int] = mapped_column(Integer, nullable=False)
    avg_cs: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    avg_gold: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    avg_damage: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False), nullable=False
    )

    last_updated: Mapped[datetime] = mapped_column(
        SQLDateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        comment="When this snapshot was computed",
    )
