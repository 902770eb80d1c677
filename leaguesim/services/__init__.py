"""
Service layer: scheduling, simulation, standings, predictions, orchestration.
Only league_service touches the stores; everything else is pure.
"""
from .scheduling import generate_league_schedule, round_robin_pairings
from .simulation_service import simulate_match_score
from .standings import apply_result, revert_result, rank_teams
from .predictions import calculate_predictions
from .league_service import (
    LeagueService,
    NotFoundError,
    InvalidInputError,
    EditIncompleteError,
)

__all__ = [
    "generate_league_schedule",
    "round_robin_pairings",
    "simulate_match_score",
    "apply_result",
    "revert_result",
    "rank_teams",
    "calculate_predictions",
    "LeagueService",
    "NotFoundError",
    "InvalidInputError",
    "EditIncompleteError",
]
