from enum import Enum


class Sport(str, Enum):
    """Sport codes accepted by the Sleeper player directory endpoint."""

    NFL = "nfl"
    NBA = "nba"
    LCS = "lcs"
    # Add more sports as Sleeper supports them
