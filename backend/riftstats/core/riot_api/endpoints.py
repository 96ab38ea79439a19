"""Riot API endpoint definitions and routing information."""

from urllib.parse import quote

from .constants import Region, Platform


class RiotAPIEndpoints:
    """Riot API endpoint definitions and routing."""

    def __init__(
        self, region: Region = Region.AMERICAS, platform: Platform = Platform.NA1
    ):
        """
        Initialize endpoint configuration.

        Args:
            region: Default region for regional endpoints
            platform: Default platform for platform endpoints
        """
        self.region = region
        self.platform = platform

    def get_base_url(self) -> str:
        """Get base URL for regional endpoints."""
        return f"https://{self.region.value}.api.riotgames.com"

    def get_platform_url(self) -> str:
        """Get base URL for platform endpoints."""
        return f"https://{self.platform.value}.api.riotgames.com"

    # Account endpoints (Regional)
    def account_by_riot_id(self, game_name: str, tag_line: str) -> str:
        """Get account by Riot ID endpoint."""
        return (
            f"{self.get_base_url()}/riot/account/v1/accounts/by-riot-id/"
            f"{quote(game_name, safe='')}/{quote(tag_line, safe='')}"
        )

    # Summoner endpoints (Platform)
    def summoner_by_puuid(self, puuid: str) -> str:
        """Get summoner by PUUID endpoint."""
        return f"{self.get_platform_url()}/lol/summoner/v4/summoners/by-puuid/{puuid}"

    # Match endpoints (Regional)
    def match_list_by_puuid(self, puuid: str, start: int = 0, count: int = 20) -> str:
        """Get match list by PUUID endpoint."""
        url = f"{self.get_base_url()}/lol/match/v5/matches/by-puuid/{puuid}/ids"
        return f"{url}?start={start}&count={count}"

    def match_by_id(self, match_id: str) -> str:
        """Get match by ID endpoint."""
        return f"{self.get_base_url()}/lol/match/v5/matches/{match_id}"
