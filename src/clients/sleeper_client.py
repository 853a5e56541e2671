# src/clients/sleeper_client.py

from typing import Any, Dict, List, Optional, Union

from loguru import logger

from src.config.settings import settings
from src.models.enums import Sport
from src.models.sleeper import (
    PlayerDirectory,
    SleeperLeague,
    SleeperPlayer,
    SleeperRoster,
    SleeperUser,
)
from .base_client import BaseClient


class SleeperClient(BaseClient):
    """Read-only client for the public Sleeper API.

    Each fetch returns None when Sleeper answers with a JSON null (for example an
    unknown league id). Transport failures raise DataSourceUnavailableError.
    """

    source_name: str = "Sleeper"

    def __init__(self, base_url: Optional[str] = None, **kwargs):
        super().__init__(base_url or settings.sleeper_api_base_url, **kwargs)

    async def get_league(self, league_id: str) -> Optional[SleeperLeague]:
        data = await self._get_json(f"/league/{league_id}")
        if data is None:
            logger.warning(f"Sleeper returned no league for id {league_id}")
            return None
        return SleeperLeague.model_validate(data)

    async def get_users(self, league_id: str) -> Optional[List[Optional[SleeperUser]]]:
        data = await self._get_json(f"/league/{league_id}/users")
        if data is None:
            return None
        users = [
            SleeperUser.model_validate(item) if item is not None else None
            for item in data
        ]
        logger.info(f"Fetched {len(users)} users for league {league_id}")
        return users

    async def get_rosters(
        self, league_id: str
    ) -> Optional[List[Optional[SleeperRoster]]]:
        data = await self._get_json(f"/league/{league_id}/rosters")
        if data is None:
            return None
        rosters = [
            SleeperRoster.model_validate(item) if item is not None else None
            for item in data
        ]
        logger.info(f"Fetched {len(rosters)} rosters for league {league_id}")
        return rosters

    async def get_players(self, sport: Union[Sport, str]) -> Optional[PlayerDirectory]:
        """Fetches the full player directory for a sport (a multi-MB payload)."""
        sport_code = sport.value if isinstance(sport, Sport) else str(sport).lower()
        data: Optional[Dict[str, Any]] = await self._get_json(f"/players/{sport_code}")
        if data is None:
            return None
        players = {
            player_id: SleeperPlayer.model_validate(item)
            for player_id, item in data.items()
            if item is not None
        }
        logger.info(f"Fetched {len(players)} {sport_code} players from Sleeper")
        return players
