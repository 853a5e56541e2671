# src/models/team.py
from typing import List, Optional

from pydantic import BaseModel

from .player import Player


class Team(BaseModel):
    """A normalized fantasy team built from one roster."""

    name: str  # Always resolved, see Transformer.parse_team_name
    wins: Optional[int] = None
    losses: Optional[int] = None
    ties: Optional[int] = None

    # Player groups are None instead of empty so consumers can test presence
    starters: Optional[List[Player]] = None
    reserves: Optional[List[Player]] = None
    taxis: Optional[List[Player]] = None
    bench: Optional[List[Player]] = None
