"""
Data models for the league engine.
Domain objects only. No persistence or API logic.

A league is a fixed set of teams playing a double round-robin season.
Fixtures are created once at schedule time and resolved week by week.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


# ---------- StatLine ----------
@dataclass
class StatLine:
    """
    Cumulative record for one team.
    Goal difference is derived from goals_for/goals_against, never stored.
    """
    points: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    goals_for: int = 0
    goals_against: int = 0

    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    @property
    def played(self) -> int:
        return self.wins + self.draws + self.losses

    @classmethod
    def zero(cls) -> StatLine:
        return cls()

    def to_dict(self) -> dict[str, Any]:
        return {
            "points": self.points,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
            "goals_for": self.goals_for,
            "goals_against": self.goals_against,
            "goal_difference": self.goal_difference,
            "played": self.played,
        }


# ---------- Team ----------
@dataclass
class Team:
    """
    A competitor. Strength is fixed at creation and only feeds the simulator;
    stats mutate every time one of the team's fixtures is resolved.
    """
    id: str
    name: str
    strength: int
    stats: StatLine = field(default_factory=StatLine)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "strength": self.strength,
            "stats": self.stats.to_dict(),
        }


# ---------- Match (fixture) ----------
@dataclass
class Match:
    """
    A scheduled fixture. Scores stay 0-0 until the match is played.
    Mutated once per play, or overwritten when a result is edited.
    """
    id: str
    week: int  # 1-based
    home_team_id: str
    away_team_id: str
    home_goals: int = 0
    away_goals: int = 0
    is_played: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "week": self.week,
            "home_team_id": self.home_team_id,
            "away_team_id": self.away_team_id,
            "home_goals": self.home_goals,
            "away_goals": self.away_goals,
            "is_played": self.is_played,
        }


# ---------- Prediction ----------
@dataclass(frozen=True)
class Prediction:
    """Championship chance for one team. Produced fresh; never persisted."""
    team_name: str
    percentage: float
    chance: str  # e.g. "25.0%"

    def to_dict(self) -> dict[str, Any]:
        return {"team_name": self.team_name, "chance": self.chance}


# ---------- Orchestrator results ----------
@dataclass
class PlayResult:
    """Outcome of playing one or more weeks."""
    table: list[Team]
    matches: list[Match]
    predictions: list[Prediction]
    current_week: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "league_table": [t.to_dict() for t in self.table],
            "matches": [m.to_dict() for m in self.matches],
            "predictions": [p.to_dict() for p in self.predictions],
            "current_week": self.current_week,
        }


@dataclass
class EditResult:
    """Updated fixture plus the re-ranked table after an edit."""
    match: Match
    table: list[Team]

    def to_dict(self) -> dict[str, Any]:
        return {
            "match": self.match.to_dict(),
            "league_table": [t.to_dict() for t in self.table],
        }
