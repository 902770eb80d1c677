"""
Championship predictions from the current table.

Not a simulation: each team's chance is (points + 1) raised to an exponent
that grows from 1 towards 2 as the season progresses, normalized to 100%.
Early in the season the table is flat; late in the season leaders dominate.
"""
from __future__ import annotations

from leaguesim.models import Prediction, Team

# Progress never reaches 1 before the season is mathematically over
MAX_PROGRESS = 0.99999


def season_length(num_teams: int) -> int:
    """Double round-robin: every team plays every other team home and away."""
    if num_teams <= 1:
        return 0
    return 2 * (num_teams - 1)


def format_chance(percentage: float) -> str:
    return f"{percentage:.1f}%"


def _prediction(team: Team, percentage: float) -> Prediction:
    return Prediction(team_name=team.name, percentage=percentage, chance=format_chance(percentage))


def calculate_predictions(table: list[Team], current_week: int) -> list[Prediction]:
    """
    Return one prediction per team, in table order, summing to ~100%.
    table must already be ranked; table[0] takes the title once the season is over.
    The season is 2 * (N - 1) weeks long for every N, even though an odd-sized
    schedule runs to 2 * N weeks.
    """
    n = len(table)
    if n <= 1:
        return []
    weeks = season_length(n)

    if current_week >= weeks:
        return [_prediction(t, 100.0 if i == 0 else 0.0) for i, t in enumerate(table)]

    first_points = table[0].stats.points
    if all(t.stats.points == first_points for t in table):
        equal = 100.0 / n
        return [_prediction(t, equal) for t in table]

    progress = min(current_week / weeks, MAX_PROGRESS)
    exponent = 1.0 + progress
    raw = [float(t.stats.points + 1) ** exponent for t in table]
    total_raw = sum(raw)
    return [_prediction(t, r / total_raw * 100.0) for t, r in zip(table, raw)]
