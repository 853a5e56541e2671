"""
Test Configuration
Pytest fixtures shared by the transformer, client and service tests.
"""

import pytest

from src.models.sleeper import (
    SleeperLeague,
    SleeperPlayer,
    SleeperRoster,
    SleeperRosterSettings,
    SleeperUser,
    SleeperUserMetadata,
)
from src.transformer.transformer import Transformer


@pytest.fixture
def transformer():
    """A fresh transformer."""
    return Transformer()


@pytest.fixture
def sample_players():
    """Small player directory keyed by player id."""
    return {
        "4046": SleeperPlayer(
            player_id="4046",
            first_name="Patrick",
            last_name="Mahomes",
            fantasy_positions=["QB"],
            team="KC",
            number=15,
        ),
        "6786": SleeperPlayer(
            player_id="6786",
            first_name="CeeDee",
            last_name="Lamb",
            fantasy_positions=["WR"],
            team="DAL",
            number=88,
        ),
        "9509": SleeperPlayer(
            player_id="9509",
            first_name="Bijan",
            last_name="Robinson",
            fantasy_positions=["RB"],
            team="ATL",
            number=7,
        ),
        "DET": SleeperPlayer(
            player_id="DET",
            first_name="Detroit",
            last_name="Lions",
            fantasy_positions=["DEF"],
            team="DET",
        ),
    }


@pytest.fixture
def sample_league_data():
    """Raw league payload as returned by GET /league/{id}."""
    return {
        "league_id": "1048313545995296768",
        "name": "Dynasty League",
        "season": "2024",
        "sport": "nfl",
        "status": "in_season",
        "total_rosters": 2,
    }


@pytest.fixture
def sample_users_data():
    """Raw users payload as returned by GET /league/{id}/users."""
    return [
        {
            "user_id": "u1",
            "display_name": "kingmaker",
            "avatar": "abc",
            "metadata": {"team_name": "Dynasty Kings", "allow_pn": "on"},
        },
        {"user_id": "u2", "display_name": "second_owner", "metadata": {}},
    ]


@pytest.fixture
def sample_rosters_data():
    """Raw rosters payload as returned by GET /league/{id}/rosters."""
    return [
        {
            "roster_id": 1,
            "owner_id": "u1",
            "players": ["4046", "6786", "9509"],
            "starters": ["4046"],
            "reserve": None,
            "taxi": ["6786"],
            "settings": {"wins": 9, "losses": 4, "ties": 0, "fpts": 1650},
        },
        {
            "roster_id": 2,
            "owner_id": None,
            "players": None,
            "starters": None,
            "reserve": None,
            "taxi": None,
            "settings": None,
        },
    ]


@pytest.fixture
def sample_players_data():
    """Raw player directory payload as returned by GET /players/nfl."""
    return {
        "4046": {
            "player_id": "4046",
            "first_name": "Patrick",
            "last_name": "Mahomes",
            "fantasy_positions": ["QB"],
            "team": "KC",
            "number": 15,
            "status": "Active",
        },
        "6786": {
            "player_id": "6786",
            "first_name": "CeeDee",
            "last_name": "Lamb",
            "fantasy_positions": ["WR"],
            "team": "DAL",
            "number": 88,
        },
        "9509": {
            "player_id": "9509",
            "first_name": "Bijan",
            "last_name": "Robinson",
            "fantasy_positions": ["RB"],
            "team": "ATL",
            "number": 7,
        },
    }


@pytest.fixture
def owner_user():
    return SleeperUser(
        user_id="u1",
        display_name="kingmaker",
        metadata=SleeperUserMetadata(team_name="Dynasty Kings"),
    )


@pytest.fixture
def sample_league():
    return SleeperLeague(name="Dynasty League", season="2024", sport="nfl")


@pytest.fixture
def sample_roster():
    return SleeperRoster(
        roster_id=1,
        owner_id="u1",
        players=["4046", "6786", "9509"],
        starters=["4046"],
        taxi=["6786"],
        settings=SleeperRosterSettings(wins=9, losses=4, ties=0),
    )
