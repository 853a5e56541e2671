from typing import List, Optional

from pydantic import BaseModel


class Player(BaseModel):
    """A normalized player. Only fields present in the source are set."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    positions: Optional[List[str]] = None
    team: Optional[str] = None
    number: Optional[int] = None
