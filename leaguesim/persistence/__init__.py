"""
Persistence layer for league data.
No business logic, no simulation. Only read/write interfaces.
"""
from .db import get_connection, init_db, set_db_path, get_db_path
from .stores import (
    StoreError,
    TeamStore,
    MatchStore,
    InMemoryTeamStore,
    InMemoryMatchStore,
)
from .repositories import TeamRepository, MatchRepository
from .seed import DEFAULT_TEAMS, create_league, seed_league

__all__ = [
    "get_connection",
    "init_db",
    "set_db_path",
    "get_db_path",
    "StoreError",
    "TeamStore",
    "MatchStore",
    "InMemoryTeamStore",
    "InMemoryMatchStore",
    "TeamRepository",
    "MatchRepository",
    "DEFAULT_TEAMS",
    "create_league",
    "seed_league",
]
