"""Tests for the player repository against an in-memory database."""

from sqlalchemy import func, select

from riftstats.features.players.orm_models import PlayerORM
from riftstats.features.players.repository import SQLAlchemyPlayerRepository


def make_player(**overrides) -> PlayerORM:
    fields = dict(
        puuid="p1",
        game_name="Hide on bush",
        tag_line="KR1",
        summoner_level=412,
        profile_icon_id=29,
    )
    fields.update(overrides)
    return PlayerORM(**fields)


async def test_upsert_inserts_new_player(db_session):
    repo = SQLAlchemyPlayerRepository(db_session)

    stored = await repo.upsert(make_player())

    assert stored.puuid == "p1"
    assert stored.riot_id == "Hide on bush#KR1"
    assert stored.last_updated is not None


async def test_upsert_updates_profile_in_place(db_session):
    repo = SQLAlchemyPlayerRepository(db_session)
    await repo.upsert(make_player())

    stored = await repo.upsert(
        make_player(game_name="Faker", tag_line="T1", summoner_level=413)
    )

    assert stored.game_name == "Faker"
    assert stored.tag_line == "T1"
    assert stored.summoner_level == 413

    count = await db_session.scalar(select(func.count()).select_from(PlayerORM))
    assert count == 1


async def test_upsert_keeps_other_players(db_session):
    repo = SQLAlchemyPlayerRepository(db_session)
    await repo.upsert(make_player())
    await repo.upsert(make_player(puuid="p2", game_name="Caps", tag_line="EUW"))

    player = await db_session.get(PlayerORM, "p1")

    assert player is not None
    assert player.profile_icon_id == 29
    count = await db_session.scalar(select(func.count()).select_from(PlayerORM))
    assert count == 2
