"""
SQLite schema for league entities.
Migration-friendly: each table created with IF NOT EXISTS.
"""
from __future__ import annotations


def teams_schema() -> str:
    """Competitors with their embedded statline. Goal difference is derived, not stored."""
    return """
    CREATE TABLE IF NOT EXISTS teams (
        id TEXT PRIMARY KEY,
        name TEXT NOT NULL,
        strength INTEGER NOT NULL,
        points INTEGER NOT NULL DEFAULT 0,
        wins INTEGER NOT NULL DEFAULT 0,
        draws INTEGER NOT NULL DEFAULT 0,
        losses INTEGER NOT NULL DEFAULT 0,
        goals_for INTEGER NOT NULL DEFAULT 0,
        goals_against INTEGER NOT NULL DEFAULT 0
    );
    """


def matches_schema() -> str:
    """Fixtures. Row order (rowid) is generation order within a week."""
    return """
    CREATE TABLE IF NOT EXISTS matches (
        id TEXT PRIMARY KEY,
        week INTEGER NOT NULL,
        home_team_id TEXT NOT NULL,
        away_team_id TEXT NOT NULL,
        home_goals INTEGER NOT NULL DEFAULT 0,
        away_goals INTEGER NOT NULL DEFAULT 0,
        is_played INTEGER NOT NULL DEFAULT 0,
        FOREIGN KEY (home_team_id) REFERENCES teams(id),
        FOREIGN KEY (away_team_id) REFERENCES teams(id)
    );
    CREATE INDEX IF NOT EXISTS ix_matches_week ON matches(week);
    CREATE INDEX IF NOT EXISTS ix_matches_is_played ON matches(is_played);
    """


def all_schema_sql() -> str:
    """Combine all schema DDL for a single execution. Order: teams, matches."""
    return "\n".join([
        teams_schema(),
        matches_schema(),
    ])
