"""Riot API routing values.

Account and match endpoints are served per region, summoner endpoints per
platform (server). A player on ``euw1`` is looked up through ``europe``.
"""

from enum import Enum


class Region(str, Enum):
    """Regional routing hosts (account-v1, match-v5)."""

    AMERICAS = "americas"
    ASIA = "asia"
    EUROPE = "europe"
    SEA = "sea"


class Platform(str, Enum):
    """Platform routing hosts (summoner-v4)."""

    BR1 = "br1"
    EUN1 = "eun1"
    EUW1 = "euw1"
    JP1 = "jp1"
    KR = "kr"
    LA1 = "la1"
    LA2 = "la2"
    NA1 = "na1"
    OC1 = "oc1"
    RU = "ru"
    TR1 = "tr1"
    TW2 = "tw2"
    VN2 = "vn2"
