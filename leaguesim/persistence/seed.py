"""
Seed data: the default four-team league and its double round-robin schedule.
"""
from __future__ import annotations

import logging
import sqlite3

from leaguesim.models import Match, Team
from leaguesim.services.scheduling import generate_league_schedule, total_weeks

from .repositories import MatchRepository, TeamRepository
from .stores import MatchStore, TeamStore

logger = logging.getLogger(__name__)

# (name, strength)
DEFAULT_TEAMS: list[tuple[str, int]] = [
    ("Chelsea", 85),
    ("Arsenal", 87),
    ("Manchester City", 94),
    ("Liverpool", 92),
]


def create_league(
    team_store: TeamStore,
    match_store: MatchStore,
    teams: list[tuple[str, int]],
) -> tuple[list[Team], list[Match]]:
    """Create the given teams and every fixture of their season in the stores."""
    created = [team_store.create(name, strength) for name, strength in teams]
    schedule = generate_league_schedule([t.id for t in created])
    matches = [
        match_store.create(f["week"], f["home_team_id"], f["away_team_id"])
        for f in schedule
    ]
    logger.info(
        "Generated %d matches over %d weeks for %d teams",
        len(matches), total_weeks(schedule), len(created),
    )
    return created, matches


def seed_league(conn: sqlite3.Connection, teams: list[tuple[str, int]] | None = None) -> bool:
    """
    Load the default league into an empty database.
    Returns False (and changes nothing) when teams already exist.
    """
    team_repo = TeamRepository(conn)
    if team_repo.count() > 0:
        logger.info("Database already seeded.")
        return False
    create_league(team_repo, MatchRepository(conn), teams or DEFAULT_TEAMS)
    return True
