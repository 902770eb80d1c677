"""
Standings aggregation: apply or revert a single result against two statlines,
and rank a collection of teams into the league table.

Apply and Revert share one code path; the sign of the multiplier is the only
difference, so revert_result(apply_result(s, h, a), h, a) restores s exactly.
"""
from __future__ import annotations

from typing import Iterable

from leaguesim.models import StatLine, Team

WIN_POINTS = 3
DRAW_POINTS = 1


def _update_stats(home: StatLine, away: StatLine, home_goals: int, away_goals: int, multiplier: int) -> None:
    if home_goals > away_goals:
        home.points += WIN_POINTS * multiplier
        home.wins += multiplier
        away.losses += multiplier
    elif away_goals > home_goals:
        away.points += WIN_POINTS * multiplier
        away.wins += multiplier
        home.losses += multiplier
    else:
        home.points += DRAW_POINTS * multiplier
        away.points += DRAW_POINTS * multiplier
        home.draws += multiplier
        away.draws += multiplier

    home.goals_for += home_goals * multiplier
    home.goals_against += away_goals * multiplier
    away.goals_for += away_goals * multiplier
    away.goals_against += home_goals * multiplier


def apply_result(home: StatLine, away: StatLine, home_goals: int, away_goals: int) -> None:
    """Record a final score against both statlines (in place)."""
    _update_stats(home, away, home_goals, away_goals, 1)


def revert_result(home: StatLine, away: StatLine, home_goals: int, away_goals: int) -> None:
    """Undo a previously applied score (in place). Exact inverse of apply_result."""
    _update_stats(home, away, home_goals, away_goals, -1)


def ranking_key(team: Team) -> tuple[int, int, int]:
    s = team.stats
    return (-s.points, -s.goal_difference, -s.goals_for)


def rank_teams(teams: Iterable[Team]) -> list[Team]:
    """
    Order by points, goal difference, goals for (all descending).
    Stable: teams still tied keep their input order.
    """
    return sorted(teams, key=ranking_key)
