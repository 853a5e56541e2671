from typing import List, Optional

from pydantic import BaseModel

from .team import Team


class League(BaseModel):
    """The normalized, provider-agnostic league tree."""

    name: Optional[str] = None
    season: Optional[str] = None
    sport: Optional[str] = None  # Uppercased, e.g. "NFL"
    teams: Optional[List[Team]] = None  # Roster input order; None when empty

    @property
    def team_count(self) -> int:
        return len(self.teams) if self.teams else 0
