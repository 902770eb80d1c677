"""
Tests for the match-score simulator: bounds, determinism, leading-run structure.
"""
from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from leaguesim.services.simulation_service import MAX_GOALS, simulate_match_score


class ScriptedRNG:
    """Returns a fixed sequence of draws; home draws come before away draws."""

    def __init__(self, values: list[float]) -> None:
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return self._values.pop(0)


class TestLeadingRun:
    def test_first_miss_stops_scoring(self):
        # Equal strength: home thresholds .5 .4 .3 ..., away thresholds .45 .36 .27 ...
        rng = ScriptedRNG([0.1, 0.35, 0.9, 0.44, 0.5])
        assert simulate_match_score(50, 50, rng) == (2, 1)
        assert rng.calls == 5

    def test_later_success_does_not_count_after_miss(self):
        # Home misses attempt 0, so the small draws after it belong to the away side
        rng = ScriptedRNG([0.6, 0.01, 0.01, 0.01, 0.01, 0.01])
        assert simulate_match_score(50, 50, rng) == (0, 5)

    def test_away_attenuation(self):
        # 0.46 beats the home threshold (.5) but not the attenuated away one (.45)
        rng = ScriptedRNG([0.46, 0.46, 0.46])
        assert simulate_match_score(50, 50, rng) == (1, 0)

    def test_capped_at_max_goals(self):
        rng = ScriptedRNG([0.0] * (2 * MAX_GOALS))
        assert simulate_match_score(50, 50, rng) == (MAX_GOALS, MAX_GOALS)

    def test_scoring_probability_decreases(self):
        # 0.39 passes attempt 0 (.5) and 1 (.4), fails attempt 2 (.3)
        rng = ScriptedRNG([0.39, 0.39, 0.39, 0.99])
        assert simulate_match_score(50, 50, rng) == (2, 0)


def test_bounds_over_many_matches():
    rng = random.Random(7)
    for _ in range(2000):
        home, away = simulate_match_score(94, 85, rng)
        assert 0 <= home <= MAX_GOALS
        assert 0 <= away <= MAX_GOALS


def test_deterministic_with_seed():
    a = [simulate_match_score(87, 92, random.Random(12345)) for _ in range(5)]
    b = [simulate_match_score(87, 92, random.Random(12345)) for _ in range(5)]
    assert a == b


def test_stronger_home_side_scores_more_on_average():
    rng = random.Random(99)
    results = [simulate_match_score(94, 50, rng) for _ in range(2000)]
    home_avg = sum(h for h, _ in results) / len(results)
    away_avg = sum(a for _, a in results) / len(results)
    assert home_avg > away_avg


def test_unseeded_call_returns_valid_score():
    home, away = simulate_match_score(85, 87)
    assert 0 <= home <= MAX_GOALS and 0 <= away <= MAX_GOALS


@pytest.mark.parametrize("home,away", [(0, 0), (-5, 10), (10, -1)])
def test_invalid_strength_rejected(home, away):
    with pytest.raises(ValueError):
        simulate_match_score(home, away, random.Random(1))
