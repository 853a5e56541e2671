# src/models/sleeper.py
"""Raw Sleeper payload models.

Every field is optional: the Sleeper API omits or nulls fields freely, and the
transformer treats a missing value as absent rather than as an error. Unknown
keys in the payloads are ignored.
"""
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict


class SleeperLeague(BaseModel):
    """League metadata from GET /league/{league_id}."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: Optional[str] = None
    season: Optional[str] = None
    sport: Optional[str] = None  # Free-form, e.g. "nfl"


class SleeperUserMetadata(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    team_name: Optional[str] = None  # Custom team name chosen by the user


class SleeperUser(BaseModel):
    """League member from GET /league/{league_id}/users."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    user_id: Optional[str] = None
    display_name: Optional[str] = None
    metadata: Optional[SleeperUserMetadata] = None


class SleeperRosterSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    wins: Optional[int] = None
    losses: Optional[int] = None
    ties: Optional[int] = None


class SleeperRoster(BaseModel):
    """Roster from GET /league/{league_id}/rosters."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    owner_id: Optional[str] = None  # None for an unclaimed roster
    roster_id: Optional[Union[int, str]] = None
    settings: Optional[SleeperRosterSettings] = None
    players: Optional[List[str]] = None  # Full roster, every category included
    starters: Optional[List[str]] = None
    reserve: Optional[List[str]] = None  # Injured / inactive list
    taxi: Optional[List[str]] = None  # Practice squad


class SleeperPlayer(BaseModel):
    """Entry of the player directory from GET /players/{sport}."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    player_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    fantasy_positions: Optional[List[str]] = None
    team: Optional[str] = None  # NFL/NBA team abbreviation
    number: Optional[int] = None


# Player id -> raw player, shared by every roster of one transform call
PlayerDirectory = Dict[str, SleeperPlayer]
