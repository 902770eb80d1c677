"""
Tests for standings aggregation: apply/revert arithmetic and table ranking.
"""
from __future__ import annotations

import copy
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from leaguesim.models import StatLine, Team
from leaguesim.services.standings import apply_result, rank_teams, revert_result


def _team(name: str, points: int = 0, goals_for: int = 0, goals_against: int = 0) -> Team:
    return Team(
        id=name.lower(),
        name=name,
        strength=80,
        stats=StatLine(points=points, goals_for=goals_for, goals_against=goals_against),
    )


# ---- Apply ----


def test_apply_home_win():
    home, away = StatLine(), StatLine()
    apply_result(home, away, 3, 1)
    assert (home.points, home.wins, home.draws, home.losses) == (3, 1, 0, 0)
    assert (away.points, away.wins, away.draws, away.losses) == (0, 0, 0, 1)
    assert (home.goals_for, home.goals_against) == (3, 1)
    assert (away.goals_for, away.goals_against) == (1, 3)


def test_apply_away_win():
    home, away = StatLine(), StatLine()
    apply_result(home, away, 0, 2)
    assert (away.points, away.wins) == (3, 1)
    assert (home.points, home.losses) == (0, 1)
    assert home.goal_difference == -2
    assert away.goal_difference == 2


def test_apply_draw():
    home, away = StatLine(), StatLine()
    apply_result(home, away, 2, 2)
    assert (home.points, home.draws) == (1, 1)
    assert (away.points, away.draws) == (1, 1)
    assert home.goals_for == home.goals_against == 2


def test_points_invariant_after_many_results():
    home, away = StatLine(), StatLine()
    for h, a in [(1, 0), (0, 0), (2, 3), (4, 4), (5, 1)]:
        apply_result(home, away, h, a)
    for s in (home, away):
        assert s.points == 3 * s.wins + s.draws
        assert s.played == 5


# ---- Revert ----


@pytest.mark.parametrize("score", [(2, 0), (1, 3), (2, 2), (0, 0), (5, 4)])
def test_revert_is_exact_inverse(score):
    home = StatLine(points=13, wins=4, draws=1, losses=1, goals_for=11, goals_against=5)
    away = StatLine(points=6, wins=2, draws=0, losses=3, goals_for=5, goals_against=8)
    home_before, away_before = copy.deepcopy(home), copy.deepcopy(away)
    apply_result(home, away, *score)
    revert_result(home, away, *score)
    assert home == home_before
    assert away == away_before


def test_revert_from_zero_goes_negative():
    """Revert does not clamp; the caller must only revert what was applied."""
    home, away = StatLine(), StatLine()
    revert_result(home, away, 1, 0)
    assert home.points == -3
    assert away.losses == -1


# ---- Rank ----


def test_rank_tie_break_order():
    """Points, then goal difference, then goals for."""
    a = _team("A", points=15, goals_for=20, goals_against=10)
    b = _team("B", points=12, goals_for=18, goals_against=8)
    c = _team("C", points=9, goals_for=15, goals_against=12)
    d = _team("D", points=15, goals_for=25, goals_against=10)
    assert [t.name for t in rank_teams([a, b, c, d])] == ["D", "A", "B", "C"]


def test_rank_goals_for_breaks_equal_difference():
    a = _team("A", points=10, goals_for=8, goals_against=4)
    b = _team("B", points=10, goals_for=10, goals_against=6)
    assert [t.name for t in rank_teams([a, b])] == ["B", "A"]


def test_rank_is_stable_for_full_ties():
    teams = [_team(n, points=7, goals_for=5, goals_against=5) for n in ["W", "X", "Y", "Z"]]
    assert [t.name for t in rank_teams(teams)] == ["W", "X", "Y", "Z"]
    assert [t.name for t in rank_teams(list(reversed(teams)))] == ["Z", "Y", "X", "W"]


def test_rank_does_not_mutate_input():
    teams = [_team("A", points=1), _team("B", points=5)]
    ranked = rank_teams(teams)
    assert [t.name for t in teams] == ["A", "B"]
    assert [t.name for t in ranked] == ["B", "A"]


def test_rank_empty():
    assert rank_teams([]) == []
