"""
Pure match-score simulation: no persistence, no UI.
Callable by league week execution or directly for a one-off score.
"""
from __future__ import annotations

import random

MAX_GOALS = 5
# Structural disadvantage for the away side
AWAY_ATTENUATION = 0.9


def _leading_run(rng: random.Random, share: float, max_goals: int, attenuation: float = 1.0) -> int:
    """
    Goals = length of the leading run of successful attempts.
    Attempt i succeeds with share * (1 - i/max_goals) * attenuation; first miss ends the run.
    """
    goals = 0
    for i in range(max_goals):
        probability = share * (1.0 - i / max_goals) * attenuation
        if rng.random() < probability:
            goals += 1
        else:
            break
    return goals


def simulate_match_score(
    home_strength: int,
    away_strength: int,
    rng: random.Random | None = None,
    max_goals: int = MAX_GOALS,
) -> tuple[int, int]:
    """
    Simulate one match. Returns (home_goals, away_goals), each in [0, max_goals].
    Deterministic when rng is seeded; home draws are taken before away draws.
    """
    if home_strength < 0 or away_strength < 0:
        raise ValueError("Strength values cannot be negative")
    total = home_strength + away_strength
    if total <= 0:
        raise ValueError("Total strength must be positive")
    rng = rng if rng is not None else random.Random()
    home_goals = _leading_run(rng, home_strength / total, max_goals)
    away_goals = _leading_run(rng, away_strength / total, max_goals, AWAY_ATTENUATION)
    return home_goals, away_goals
