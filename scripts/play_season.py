#!/usr/bin/env python3
"""
Season walkthrough: Seed league → Play weeks → Edit a result → Reset.
Run from project root: python3 scripts/play_season.py [--seed N]
"""
from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

# Ensure project root on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from leaguesim.config import configure_logging
from leaguesim.models import Team
from leaguesim.persistence import MatchRepository, TeamRepository, get_connection, init_db, set_db_path
from leaguesim.services.league_service import LeagueService


def _print_table(table: list[Team]) -> None:
    print(f"  {'Team':<18} {'P':>2} {'W':>2} {'D':>2} {'L':>2} {'GF':>3} {'GA':>3} {'GD':>4} {'Pts':>4}")
    for t in table:
        s = t.stats
        print(
            f"  {t.name:<18} {s.played:>2} {s.wins:>2} {s.draws:>2} {s.losses:>2} "
            f"{s.goals_for:>3} {s.goals_against:>3} {s.goal_difference:>4} {s.points:>4}"
        )


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=2024, help="RNG seed for the simulator")
    args = parser.parse_args()
    configure_logging()

    # Use data/play_season.db for demo (distinct from league.db); start fresh each run
    db_path = PROJECT_ROOT / "data" / "play_season.db"
    if db_path.exists():
        db_path.unlink()
    set_db_path(db_path)
    init_db(db_path=db_path, seed=True)

    conn = get_connection()
    try:
        teams = TeamRepository(conn)
        matches = MatchRepository(conn)
        svc = LeagueService(teams, matches, rng=random.Random(args.seed))
        names = {t.id: t.name for t in teams.list_all()}

        # 1. Play week by week
        while matches.unplayed_weeks():
            result = svc.play_weeks()
            print(f"\nWeek {result.current_week}")
            for m in result.matches:
                print(f"  {names[m.home_team_id]} {m.home_goals}-{m.away_goals} {names[m.away_team_id]}")
            _print_table(result.table)
            for p in result.predictions:
                print(f"  {p.team_name:<18} {p.chance:>7}")

        # 2. Edit the first match of the season
        first = svc.get_week_results(1)[0]
        edited = svc.edit_result(first.id, first.away_goals, first.home_goals)
        print(
            f"\nEdited {names[first.home_team_id]} vs {names[first.away_team_id]}: "
            f"{first.home_goals}-{first.away_goals} -> {edited.match.home_goals}-{edited.match.away_goals}"
        )
        _print_table(edited.table)

        # 3. Reset
        svc.reset()
        print(f"\nReset complete. Unplayed weeks: {matches.unplayed_weeks()}")
    finally:
        conn.close()


if __name__ == "__main__":
    main()
