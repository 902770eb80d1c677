"""
SQLite repositories implementing the TeamStore and MatchStore contracts.
No business logic. Only read/write operations.

Each repository is bound to one connection; sqlite3 errors surface as StoreError.
"""
from __future__ import annotations

import logging
import sqlite3
import uuid
from contextlib import contextmanager
from typing import Iterator

from leaguesim.models import Match, StatLine, Team

from .stores import StoreError

logger = logging.getLogger(__name__)

_TEAM_COLS = "id, name, strength, points, wins, draws, losses, goals_for, goals_against"
_MATCH_COLS = "id, week, home_team_id, away_team_id, home_goals, away_goals, is_played"


@contextmanager
def _store_errors(action: str) -> Iterator[None]:
    try:
        yield
    except sqlite3.Error as e:
        logger.error("Store failure while trying to %s: %s", action, e)
        raise StoreError(f"Failed to {action}: {e}") from e


def _row_to_team(r: sqlite3.Row) -> Team:
    return Team(
        id=r["id"],
        name=r["name"],
        strength=r["strength"],
        stats=StatLine(
            points=r["points"],
            wins=r["wins"],
            draws=r["draws"],
            losses=r["losses"],
            goals_for=r["goals_for"],
            goals_against=r["goals_against"],
        ),
    )


def _row_to_match(r: sqlite3.Row) -> Match:
    return Match(
        id=r["id"],
        week=r["week"],
        home_team_id=r["home_team_id"],
        away_team_id=r["away_team_id"],
        home_goals=r["home_goals"],
        away_goals=r["away_goals"],
        is_played=bool(r["is_played"]),
    )


# ---------- TeamRepository ----------


class TeamRepository:
    """CRUD for teams (statline columns embedded). No business logic."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def create(self, name: str, strength: int, id: str | None = None) -> Team:
        tid = id or str(uuid.uuid4())
        with _store_errors(f"create team {name}"):
            self._conn.execute(
                "INSERT INTO teams (id, name, strength) VALUES (?, ?, ?)",
                (tid, name, strength),
            )
            self._conn.commit()
        return Team(id=tid, name=name, strength=strength, stats=StatLine.zero())

    def get(self, team_id: str) -> Team | None:
        with _store_errors(f"read team {team_id}"):
            row = self._conn.execute(
                f"SELECT {_TEAM_COLS} FROM teams WHERE id = ?",
                (team_id,),
            ).fetchone()
        if row is None:
            return None
        return _row_to_team(row)

    def list_all(self) -> list[Team]:
        with _store_errors("list teams"):
            rows = self._conn.execute(f"SELECT {_TEAM_COLS} FROM teams ORDER BY rowid").fetchall()
        return [_row_to_team(r) for r in rows]

    def count(self) -> int:
        with _store_errors("count teams"):
            return self._conn.execute("SELECT COUNT(*) FROM teams").fetchone()[0]

    def update(self, team: Team) -> None:
        """Full overwrite of identity fields and statline."""
        s = team.stats
        with _store_errors(f"update team {team.id}"):
            cur = self._conn.execute(
                "UPDATE teams SET name = ?, strength = ?, points = ?, wins = ?, draws = ?, losses = ?, "
                "goals_for = ?, goals_against = ? WHERE id = ?",
                (team.name, team.strength, s.points, s.wins, s.draws, s.losses,
                 s.goals_for, s.goals_against, team.id),
            )
            self._conn.commit()
        if cur.rowcount == 0:
            raise StoreError(f"Team not found: {team.id}")


# ---------- MatchRepository ----------


class MatchRepository:
    """CRUD for matches (fixtures). No business logic."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def create(self, week: int, home_team_id: str, away_team_id: str, id: str | None = None) -> Match:
        mid = id or str(uuid.uuid4())
        with _store_errors(f"create match for week {week}"):
            self._conn.execute(
                "INSERT INTO matches (id, week, home_team_id, away_team_id, home_goals, away_goals, is_played) "
                "VALUES (?, ?, ?, ?, 0, 0, 0)",
                (mid, week, home_team_id, away_team_id),
            )
            self._conn.commit()
        return Match(id=mid, week=week, home_team_id=home_team_id, away_team_id=away_team_id)

    def get(self, match_id: str) -> Match | None:
        with _store_errors(f"read match {match_id}"):
            row = self._conn.execute(
                f"SELECT {_MATCH_COLS} FROM matches WHERE id = ?",
                (match_id,),
            ).fetchone()
        if row is None:
            return None
        return _row_to_match(row)

    def list_all(self) -> list[Match]:
        with _store_errors("list matches"):
            rows = self._conn.execute(
                f"SELECT {_MATCH_COLS} FROM matches ORDER BY week, rowid"
            ).fetchall()
        return [_row_to_match(r) for r in rows]

    def list_by_week(self, week: int) -> list[Match]:
        with _store_errors(f"list matches for week {week}"):
            rows = self._conn.execute(
                f"SELECT {_MATCH_COLS} FROM matches WHERE week = ? ORDER BY rowid",
                (week,),
            ).fetchall()
        return [_row_to_match(r) for r in rows]

    def unplayed_weeks(self) -> list[int]:
        """Sorted week numbers that still contain at least one unplayed fixture."""
        with _store_errors("list unplayed weeks"):
            rows = self._conn.execute(
                "SELECT DISTINCT week FROM matches WHERE is_played = 0 ORDER BY week"
            ).fetchall()
        return [r[0] for r in rows]

    def update(self, match: Match) -> None:
        """Full overwrite of a fixture."""
        with _store_errors(f"update match {match.id}"):
            cur = self._conn.execute(
                "UPDATE matches SET week = ?, home_team_id = ?, away_team_id = ?, home_goals = ?, "
                "away_goals = ?, is_played = ? WHERE id = ?",
                (match.week, match.home_team_id, match.away_team_id, match.home_goals,
                 match.away_goals, int(match.is_played), match.id),
            )
            self._conn.commit()
        if cur.rowcount == 0:
            raise StoreError(f"Match not found: {match.id}")
