import asyncio
from typing import Optional, Union

from loguru import logger

from src.clients.sleeper_client import SleeperClient
from src.models.enums import Sport
from src.models.league import League
from src.models.sleeper import SleeperLeague
from .transformer import Transformer


class TransformerService:
    """Fetches a league snapshot from Sleeper and transforms it."""

    def __init__(
        self,
        sleeper_client: SleeperClient,
        transformer: Optional[Transformer] = None,
    ):
        self.sleeper_client = sleeper_client
        self.transformer = transformer or Transformer()

    async def serve_league(self, sport: Union[Sport, str], league_id: str) -> League:
        """Fetches the four inputs concurrently and returns the normalized League.

        Absent fetch results are replaced by empty defaults. When one fetch fails
        the others are cancelled and the original client error
        (DataSourceUnavailableError and friends) is re-raised unchanged.
        """
        logger.info(f"Serving league {league_id} ({sport})")

        fetches = [
            asyncio.ensure_future(self.sleeper_client.get_league(league_id)),
            asyncio.ensure_future(self.sleeper_client.get_users(league_id)),
            asyncio.ensure_future(self.sleeper_client.get_rosters(league_id)),
            asyncio.ensure_future(self.sleeper_client.get_players(sport)),
        ]
        try:
            sleeper_league, sleeper_users, sleeper_rosters, sleeper_players = (
                await asyncio.gather(*fetches)
            )
        except BaseException:
            pending = [fetch for fetch in fetches if not fetch.done()]
            if pending:
                logger.warning(
                    f"Fetch for league {league_id} failed, cancelling {len(pending)} pending fetches."
                )
            for fetch in pending:
                fetch.cancel()
            # Collect every outcome so no task error goes unretrieved
            await asyncio.gather(*fetches, return_exceptions=True)
            raise

        return self.transformer.parse_league(
            sleeper_league or SleeperLeague(),
            sleeper_users or [],
            sleeper_rosters or [],
            sleeper_players or {},
        )
