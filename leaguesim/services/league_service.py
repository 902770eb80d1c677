"""
League-centric service: week execution, result editing, season reset.
Coordinates the simulator, the standings aggregator and the prediction
estimator against injected team/match stores.

Stores are assumed to serialize writes per league: one service call runs to
completion before another starts against the same league.
"""
from __future__ import annotations

import logging
import random

from leaguesim.models import EditResult, Match, PlayResult, Prediction, StatLine, Team
from leaguesim.persistence.stores import MatchStore, StoreError, TeamStore
from leaguesim.services.predictions import calculate_predictions
from leaguesim.services.simulation_service import simulate_match_score
from leaguesim.services.standings import apply_result, rank_teams, revert_result

logger = logging.getLogger(__name__)

PREDICTION_MIN_WEEK = 4

# ---------- Exceptions ----------


class NotFoundError(LookupError):
    """Unknown match or team id, or a week with no fixtures."""


class InvalidInputError(ValueError):
    """Negative goals or a malformed week number. Raised before any statline changes."""


class EditIncompleteError(StoreError):
    """
    Phase 2 of an edit failed after phase 1 was persisted.
    Both teams hold the reverted statline; the old score is no longer counted.
    """

    def __init__(self, match_id: str, cause: Exception) -> None:
        super().__init__(
            f"Edit of match {match_id} incomplete: old result reverted but new result not applied ({cause})"
        )
        self.match_id = match_id


# ---------- LeagueService ----------


class LeagueService:
    """
    Domain logic for a league season: play weeks, edit results, reset.
    Persistence is delegated to the stores passed in.
    """

    def __init__(
        self,
        team_store: TeamStore,
        match_store: MatchStore,
        rng: random.Random | None = None,
        prediction_min_week: int = PREDICTION_MIN_WEEK,
    ) -> None:
        self._team_store = team_store
        self._match_store = match_store
        self._rng = rng if rng is not None else random.Random()
        self._prediction_min_week = prediction_min_week

    # ---------- Reads ----------

    def get_table(self) -> list[Team]:
        """All teams ranked by points, goal difference, goals for."""
        return rank_teams(self._team_store.list_all())

    def get_week_results(self, week: int) -> list[Match]:
        _check_week(week)
        matches = self._match_store.list_by_week(week)
        if not matches:
            raise NotFoundError(f"No matches scheduled for week {week}")
        return matches

    def current_week(self) -> int:
        """
        Last week of the unbroken run of fully played weeks from week 1 (0 before kickoff).
        Weeks played out of order do not advance it until the gap is filled.
        """
        matches = self._match_store.list_all()
        unplayed = {m.week for m in matches if not m.is_played}
        current = 0
        for week in sorted({m.week for m in matches}):
            if week in unplayed:
                break
            current = week
        return current

    def total_weeks(self) -> int:
        return max((m.week for m in self._match_store.list_all()), default=0)

    # ---------- Playing weeks ----------

    def play_weeks(self, play_all: bool = False) -> PlayResult:
        """
        Play the next unplayed week, or every unplayed week when play_all is set.
        A store failure aborts the loop; weeks already persisted stay played.
        """
        weeks = self._match_store.unplayed_weeks()
        if not play_all:
            weeks = weeks[:1]
        played: list[Match] = []
        for week in weeks:
            played.extend(self._play_week_fixtures(week))
        if not weeks:
            logger.info("No unplayed weeks left")
        return self._build_result(played)

    def play_week(self, week: int) -> PlayResult:
        """
        Play one explicit week. A week whose fixtures are all played is not
        replayed: the result carries no matches and no predictions.
        """
        _check_week(week)
        matches = self._match_store.list_by_week(week)
        if not matches:
            raise NotFoundError(f"No matches scheduled for week {week}")
        if all(m.is_played for m in matches):
            logger.info("Week %d has already been played", week)
            return PlayResult(table=self.get_table(), matches=[], predictions=[], current_week=self.current_week())
        return self._build_result(self._play_week_fixtures(week))

    def _play_week_fixtures(self, week: int) -> list[Match]:
        played: list[Match] = []
        for match in self._match_store.list_by_week(week):
            if match.is_played:
                continue
            home = self._require_team(match.home_team_id)
            away = self._require_team(match.away_team_id)
            home_goals, away_goals = simulate_match_score(home.strength, away.strength, self._rng)
            match.home_goals = home_goals
            match.away_goals = away_goals
            match.is_played = True
            apply_result(home.stats, away.stats, home_goals, away_goals)
            try:
                self._match_store.update(match)
                self._team_store.update(home)
                self._team_store.update(away)
            except StoreError:
                logger.error("Aborting week %d at match %s; earlier results are kept", week, match.id)
                raise
            logger.debug("Week %d: %s %d-%d %s", week, home.name, home_goals, away_goals, away.name)
            played.append(match)
        logger.info("Played week %d (%d matches)", week, len(played))
        return played

    def _build_result(self, played: list[Match]) -> PlayResult:
        table = self.get_table()
        current = self.current_week()
        return PlayResult(
            table=table,
            matches=played,
            predictions=self.predictions(table, current),
            current_week=current,
        )

    def predictions(self, table: list[Team], current_week: int) -> list[Prediction]:
        """Championship chances, or [] until enough weeks have been played."""
        if current_week < self._prediction_min_week:
            return []
        return calculate_predictions(table, current_week)

    # ---------- Editing results ----------

    def edit_result(self, match_id: str, home_goals: int, away_goals: int) -> EditResult:
        """
        Replace a match score and keep standings consistent.
        Two phases, in order: revert_phase (old score out), reapply_phase (new score in).
        An unplayed match skips the revert and is recorded directly.
        """
        _check_goals(home_goals, away_goals)
        match = self._match_store.get(match_id)
        if match is None:
            raise NotFoundError(f"Match not found: {match_id}")

        was_played = match.is_played
        if was_played:
            home, away = self.revert_phase(match)
        else:
            home = self._require_team(match.home_team_id)
            away = self._require_team(match.away_team_id)

        try:
            self.reapply_phase(match, home_goals, away_goals, home, away)
        except StoreError as e:
            if not was_played:
                raise
            logger.error("Edit of match %s left standings reverted: %s", match_id, e)
            raise EditIncompleteError(match_id, e) from e

        logger.info("Edited match %s to %d-%d", match_id, home_goals, away_goals)
        return EditResult(match=match, table=self.get_table())

    def revert_phase(self, match: Match) -> tuple[Team, Team]:
        """Phase 1: remove the stored score from both statlines and persist them."""
        home = self._require_team(match.home_team_id)
        away = self._require_team(match.away_team_id)
        revert_result(home.stats, away.stats, match.home_goals, match.away_goals)
        self._team_store.update(home)
        self._team_store.update(away)
        return home, away

    def reapply_phase(self, match: Match, home_goals: int, away_goals: int, home: Team, away: Team) -> None:
        """Phase 2: overwrite the match score, persist it, apply it to both statlines."""
        match.home_goals = home_goals
        match.away_goals = away_goals
        match.is_played = True
        self._match_store.update(match)
        apply_result(home.stats, away.stats, home_goals, away_goals)
        self._team_store.update(home)
        self._team_store.update(away)

    # ---------- Reset ----------

    def reset(self) -> None:
        """Every match back to unplayed 0-0, every statline zeroed. Direct overwrite."""
        for match in self._match_store.list_all():
            match.home_goals = 0
            match.away_goals = 0
            match.is_played = False
            self._match_store.update(match)
        for team in self._team_store.list_all():
            team.stats = StatLine.zero()
            self._team_store.update(team)
        logger.info("League reset")

    # ---------- Helpers ----------

    def _require_team(self, team_id: str) -> Team:
        team = self._team_store.get(team_id)
        if team is None:
            raise NotFoundError(f"Team not found: {team_id}")
        return team


def _check_goals(home_goals: int, away_goals: int) -> None:
    for value in (home_goals, away_goals):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(f"Goals must be integers, got {value!r}")
    if home_goals < 0 or away_goals < 0:
        raise InvalidInputError("Scores cannot be negative")


def _check_week(week: int) -> None:
    if isinstance(week, bool) or not isinstance(week, int) or week < 1:
        raise InvalidInputError(f"Invalid week number: {week!r}")
