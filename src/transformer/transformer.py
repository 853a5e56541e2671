from typing import Dict, List, Mapping, Optional, Sequence, Set

from loguru import logger

from src.models.league import League
from src.models.player import Player
from src.models.sleeper import (
    PlayerDirectory,
    SleeperLeague,
    SleeperPlayer,
    SleeperRoster,
    SleeperUser,
)
from src.models.team import Team

UNKNOWN_TEAM_NAME = "Unknown Team"

# Type alias for the per-call user index
UserLookup = Mapping[str, SleeperUser]


class Transformer:
    """Turns a raw Sleeper league snapshot into the normalized League tree.

    The transformer is stateless: every call builds its own lookups from the
    inputs it receives, so one instance can be shared freely. Missing data never
    raises, it simply leaves the corresponding output field unset.
    """

    def parse_league(
        self,
        sleeper_league: Optional[SleeperLeague],
        sleeper_users: Optional[Sequence[Optional[SleeperUser]]],
        sleeper_rosters: Optional[Sequence[Optional[SleeperRoster]]],
        sleeper_players: Optional[PlayerDirectory],
    ) -> League:
        """Builds a League from the four raw inputs.

        Args:
            sleeper_league: League metadata, None is treated as an empty league.
            sleeper_users: League members, None entries are ignored.
            sleeper_rosters: Rosters in display order, None entries are ignored.
            sleeper_players: Player directory keyed by player id.

        Returns:
            The normalized League. `teams` is None when no roster produced a team.
        """
        sleeper_league = sleeper_league or SleeperLeague()
        sleeper_players = sleeper_players or {}

        league = League(
            name=sleeper_league.name,
            season=sleeper_league.season,
            sport=sleeper_league.sport.upper()
            if sleeper_league.sport is not None
            else None,
        )
        league.teams = self._parse_teams(
            sleeper_users or [], sleeper_rosters or [], sleeper_players
        )

        logger.info(
            f"Transformed league '{league.name}' ({league.season}) with {league.team_count} teams."
        )
        return league

    def _parse_teams(
        self,
        sleeper_users: Sequence[Optional[SleeperUser]],
        sleeper_rosters: Sequence[Optional[SleeperRoster]],
        sleeper_players: PlayerDirectory,
    ) -> Optional[List[Team]]:
        # Duplicate user ids: the last one wins
        user_lookup: Dict[str, SleeperUser] = {
            user.user_id: user for user in sleeper_users if user is not None
        }
        logger.debug(f"Indexed {len(user_lookup)} users for name resolution.")

        teams = [
            self.parse_team(user_lookup, roster, sleeper_players)
            for roster in sleeper_rosters
            if roster is not None
        ]
        return teams or None

    def parse_team(
        self,
        user_lookup: UserLookup,
        sleeper_roster: SleeperRoster,
        sleeper_players: PlayerDirectory,
    ) -> Team:
        """Builds one Team from a roster. Always returns a Team."""
        settings = sleeper_roster.settings

        team = Team(
            name=self.parse_team_name(user_lookup, sleeper_roster),
            wins=settings.wins if settings else None,
            losses=settings.losses if settings else None,
            ties=settings.ties if settings else None,
            starters=self.parse_players(sleeper_players, sleeper_roster.starters),
            reserves=self.parse_players(sleeper_players, sleeper_roster.reserve),
            taxis=self.parse_players(sleeper_players, sleeper_roster.taxi),
        )
        team.bench = self.parse_players(
            sleeper_players, self.parse_bench_ids(sleeper_roster)
        )

        logger.debug(
            f"Built team '{team.name}' from roster {sleeper_roster.roster_id} "
            f"(owner: {sleeper_roster.owner_id})"
        )
        return team

    def parse_team_name(
        self, user_lookup: UserLookup, sleeper_roster: SleeperRoster
    ) -> str:
        """Resolves a team name, first match wins:

        1. the owner's custom team name (user metadata)
        2. the owner's display name
        3. "Team <roster_id>"
        4. "Unknown Team"

        Empty custom and display names count as missing; any roster id is used.
        """
        owner = (
            user_lookup.get(sleeper_roster.owner_id)
            if sleeper_roster.owner_id is not None
            else None
        )
        if owner is not None:
            if owner.metadata is not None and owner.metadata.team_name:
                return owner.metadata.team_name
            if owner.display_name:
                return owner.display_name

        if sleeper_roster.roster_id is not None:
            return f"Team {sleeper_roster.roster_id}"

        return UNKNOWN_TEAM_NAME

    def parse_bench_ids(self, sleeper_roster: SleeperRoster) -> List[str]:
        """Ids on the roster that are neither starters, reserve nor taxi.

        Keeps the order of the full roster list; a duplicated id is kept once.
        """
        excluded: Set[str] = set()
        for group in (
            sleeper_roster.starters,
            sleeper_roster.reserve,
            sleeper_roster.taxi,
        ):
            excluded.update(group or [])

        bench_ids: List[str] = []
        for player_id in sleeper_roster.players or []:
            if player_id in excluded:
                continue
            # Marking it excluded also drops later duplicates
            excluded.add(player_id)
            bench_ids.append(player_id)
        return bench_ids

    def parse_players(
        self,
        sleeper_players: PlayerDirectory,
        sleeper_player_ids: Optional[Sequence[str]],
    ) -> Optional[List[Player]]:
        """Resolves ids against the directory, dropping unknown ones.

        Returns None instead of an empty list.
        """
        players: List[Player] = []
        for player_id in sleeper_player_ids or []:
            sleeper_player = sleeper_players.get(player_id)
            if sleeper_player is None:
                logger.debug(f"Dropping unknown player id '{player_id}'")
                continue

            player = self.parse_player(
                sleeper_players, self._canonical_player_id(player_id, sleeper_player)
            )
            if player is None:
                logger.debug(
                    f"Player '{player_id}' declares id '{sleeper_player.player_id}' "
                    f"which is not in the directory, dropping."
                )
                continue
            players.append(player)

        return players or None

    @staticmethod
    def _canonical_player_id(player_id: str, sleeper_player: SleeperPlayer) -> str:
        # The record's own id is authoritative when the directory key disagrees
        return sleeper_player.player_id or player_id

    def parse_player(
        self, sleeper_players: PlayerDirectory, sleeper_player_id: str
    ) -> Optional[Player]:
        """Builds a Player from the directory entry, or None if there is none."""
        sleeper_player = sleeper_players.get(sleeper_player_id)
        if sleeper_player is None:
            return None

        return Player(
            first_name=sleeper_player.first_name,
            last_name=sleeper_player.last_name,
            positions=sleeper_player.fantasy_positions,
            team=sleeper_player.team,
            number=sleeper_player.number,
        )
