"""
Store contracts consumed by the league service, plus in-memory implementations.
No business logic. Only read/write operations.

Stores hand out copies: mutating a returned Team or Match has no effect until
it is passed back through update().
"""
from __future__ import annotations

import copy
import uuid
from typing import Protocol

from leaguesim.models import Match, StatLine, Team


class StoreError(RuntimeError):
    """The backing store failed to read or write an entity."""


class TeamStore(Protocol):
    def list_all(self) -> list[Team]: ...
    def get(self, team_id: str) -> Team | None: ...
    def update(self, team: Team) -> None: ...
    def create(self, name: str, strength: int, id: str | None = None) -> Team: ...


class MatchStore(Protocol):
    def list_all(self) -> list[Match]: ...
    def get(self, match_id: str) -> Match | None: ...
    def list_by_week(self, week: int) -> list[Match]: ...
    def unplayed_weeks(self) -> list[int]: ...
    def update(self, match: Match) -> None: ...
    def create(self, week: int, home_team_id: str, away_team_id: str, id: str | None = None) -> Match: ...


# ---------- In-memory stores ----------


class InMemoryTeamStore:
    """Dict-backed TeamStore. Insertion order is preserved for list_all."""

    def __init__(self, teams: list[Team] | None = None) -> None:
        self._teams: dict[str, Team] = {}
        for t in teams or []:
            self._teams[t.id] = copy.deepcopy(t)

    def list_all(self) -> list[Team]:
        return [copy.deepcopy(t) for t in self._teams.values()]

    def get(self, team_id: str) -> Team | None:
        team = self._teams.get(team_id)
        return copy.deepcopy(team) if team is not None else None

    def update(self, team: Team) -> None:
        if team.id not in self._teams:
            raise StoreError(f"Team not found: {team.id}")
        self._teams[team.id] = copy.deepcopy(team)

    def create(self, name: str, strength: int, id: str | None = None) -> Team:
        team = Team(id=id or str(uuid.uuid4()), name=name, strength=strength, stats=StatLine.zero())
        self._teams[team.id] = copy.deepcopy(team)
        return team


class InMemoryMatchStore:
    """Dict-backed MatchStore. Fixtures keep creation order within a week."""

    def __init__(self, matches: list[Match] | None = None) -> None:
        self._matches: dict[str, Match] = {}
        for m in matches or []:
            self._matches[m.id] = copy.deepcopy(m)

    def list_all(self) -> list[Match]:
        return [copy.deepcopy(m) for m in sorted(self._matches.values(), key=lambda m: m.week)]

    def get(self, match_id: str) -> Match | None:
        match = self._matches.get(match_id)
        return copy.deepcopy(match) if match is not None else None

    def list_by_week(self, week: int) -> list[Match]:
        return [copy.deepcopy(m) for m in self._matches.values() if m.week == week]

    def unplayed_weeks(self) -> list[int]:
        return sorted({m.week for m in self._matches.values() if not m.is_played})

    def update(self, match: Match) -> None:
        if match.id not in self._matches:
            raise StoreError(f"Match not found: {match.id}")
        self._matches[match.id] = copy.deepcopy(match)

    def create(self, week: int, home_team_id: str, away_team_id: str, id: str | None = None) -> Match:
        match = Match(id=id or str(uuid.uuid4()), week=week, home_team_id=home_team_id, away_team_id=away_team_id)
        self._matches[match.id] = copy.deepcopy(match)
        return match
