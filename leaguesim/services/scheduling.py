"""
Deterministic double round-robin schedule generation.

Every team meets every other team twice: once in the first half of the season
and once in the second half with home/away reversed. Season length is
2 * (N - 1) weeks for N even, 2 * N weeks for N odd.

BYE handling: when the number of teams is odd, we add a virtual BYE. The team
drawn against the BYE sits the round out; BYE fixtures are never emitted.

Uses the circle method: fix the first slot, move slot 1 to the end after each
round. Same team list ordering yields the same schedule.
"""
from __future__ import annotations

from typing import Any

# Sentinel for bye when number of teams is odd
BYE = None


def round_robin_pairings(team_ids: list[str]) -> list[tuple[int, str, str]]:
    """
    Generate double round-robin pairings: (week, home_team_id, away_team_id).
    Ordered by ascending week; within a week, in generation order.
    """
    if len(team_ids) < 2:
        return []
    rotation: list[str | None] = list(team_ids)
    if len(rotation) % 2 == 1:
        rotation.append(BYE)
    n = len(rotation)
    half = n - 1
    first_half: list[tuple[int, str, str]] = []
    second_half: list[tuple[int, str, str]] = []
    for week in range(1, half + 1):
        # Pair rotation[0] with rotation[n-1], rotation[1] with rotation[n-2], ...
        for i in range(n // 2):
            home, away = rotation[i], rotation[n - 1 - i]
            if home is BYE or away is BYE:
                continue
            first_half.append((week, home, away))
            second_half.append((week + half, away, home))
        # Rotate: keep 0, move 1 to the end
        rotation = [rotation[0]] + rotation[2:] + [rotation[1]]
    return first_half + second_half


def generate_league_schedule(team_ids: list[str]) -> list[dict[str, Any]]:
    """
    Return list of fixtures: { "week": int, "home_team_id": str, "away_team_id": str }.
    Deterministic; every ordered pair exactly once; max one game per team per week.
    """
    return [
        {"week": w, "home_team_id": h, "away_team_id": a}
        for w, h, a in round_robin_pairings(team_ids)
    ]


def total_weeks(schedule: list[dict[str, Any]]) -> int:
    """Highest week number in a schedule (0 when empty)."""
    return max((f["week"] for f in schedule), default=0)
