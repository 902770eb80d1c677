"""
REST API for the league engine.
Thin wrappers around LeagueService and the SQLite repositories.
"""
from __future__ import annotations

import logging
import random
from contextlib import asynccontextmanager, contextmanager
from typing import Any, AsyncGenerator, Generator, Iterator

from fastapi import FastAPI, HTTPException, Path
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from leaguesim import __version__, config
from leaguesim.persistence import (
    MatchRepository,
    StoreError,
    TeamRepository,
    get_connection,
    get_db_path,
    init_db,
)
from leaguesim.services.league_service import (
    EditIncompleteError,
    InvalidInputError,
    LeagueService,
    NotFoundError,
)

logger = logging.getLogger(__name__)


@contextmanager
def db_conn() -> Generator:
    """Yield a DB connection, ensure close on exit."""
    conn = get_connection()
    try:
        yield conn
    finally:
        conn.close()


def _make_rng() -> random.Random:
    """One generator per app; seeded from LEAGUE_SEED when set."""
    seed = config.simulation_seed()
    return random.Random(seed) if seed is not None else random.Random()


def _league_service(conn) -> LeagueService:
    return LeagueService(
        TeamRepository(conn),
        MatchRepository(conn),
        rng=getattr(app.state, "rng", None),
        prediction_min_week=config.prediction_min_week(),
    )


@contextmanager
def _service_errors() -> Iterator[None]:
    """Map service exceptions to HTTP errors."""
    try:
        yield
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except EditIncompleteError as e:
        logger.error("Incomplete edit: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
    except StoreError as e:
        raise HTTPException(status_code=500, detail=str(e))


# ---------- Startup: ensure DB and seed ----------
def _ensure_db() -> None:
    init_db(db_path=get_db_path(), seed=True)


# ---------- Lifespan ----------
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    config.configure_logging()
    _ensure_db()
    app.state.rng = _make_rng()
    yield


# ---------- FastAPI app ----------
app = FastAPI(
    title="League Simulation API",
    description="Double round-robin league: play weeks, edit results, predictions",
    version=__version__,
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------- Request models ----------


class EditMatchRequest(BaseModel):
    home_goals: int = Field(..., ge=0, description="New home score")
    away_goals: int = Field(..., ge=0, description="New away score")


# ---------- Routes ----------


@app.get("/")
def root() -> dict[str, Any]:
    return {"message": "Welcome to the League Simulation API"}


@app.get("/api/league")
def get_league_table() -> dict[str, Any]:
    """Current league table, ranked by points, goal difference, goals for."""
    with db_conn() as conn, _service_errors():
        svc = _league_service(conn)
        return {"teams": [t.to_dict() for t in svc.get_table()]}


@app.get("/api/league/play")
def play_next_week() -> dict[str, Any]:
    """Simulate the next unplayed week."""
    with db_conn() as conn, _service_errors():
        result = _league_service(conn).play_weeks(play_all=False)
        out = result.to_dict()
        if not result.matches:
            out["message"] = "All weeks have been played"
        return out


@app.get("/api/league/play-all")
def play_all_weeks() -> dict[str, Any]:
    """Simulate every remaining week."""
    with db_conn() as conn, _service_errors():
        return _league_service(conn).play_weeks(play_all=True).to_dict()


@app.post("/api/league/week/{week}/play")
def play_week(week: int = Path(..., ge=1)) -> dict[str, Any]:
    """Simulate one explicit week. An already-played week is reported, not replayed."""
    with db_conn() as conn, _service_errors():
        result = _league_service(conn).play_week(week)
        out = result.to_dict()
        if not result.matches:
            out["message"] = f"Week {week} has already been played"
        return out


@app.get("/api/league/week/{week}")
def get_week_results(week: int = Path(..., ge=1)) -> dict[str, Any]:
    with db_conn() as conn, _service_errors():
        matches = _league_service(conn).get_week_results(week)
        return {"week": week, "matches": [m.to_dict() for m in matches]}


@app.put("/api/league/edit-match/{match_id}")
def edit_match_result(match_id: str, req: EditMatchRequest) -> dict[str, Any]:
    """Replace a match score; standings are reverted and reapplied."""
    with db_conn() as conn, _service_errors():
        result = _league_service(conn).edit_result(match_id, req.home_goals, req.away_goals)
        return result.to_dict()


@app.post("/api/league/reset")
def reset_league() -> dict[str, Any]:
    with db_conn() as conn, _service_errors():
        _league_service(conn).reset()
        return {"message": "League has been reset successfully"}


@app.get("/api/teams")
def list_teams() -> list[dict[str, Any]]:
    with db_conn() as conn, _service_errors():
        return [t.to_dict() for t in TeamRepository(conn).list_all()]


@app.get("/api/teams/{team_id}")
def get_team(team_id: str) -> dict[str, Any]:
    with db_conn() as conn, _service_errors():
        team = TeamRepository(conn).get(team_id)
        if team is None:
            raise HTTPException(status_code=404, detail="Team not found")
        return team.to_dict()


@app.get("/api/matches")
def list_matches() -> list[dict[str, Any]]:
    with db_conn() as conn, _service_errors():
        return [m.to_dict() for m in MatchRepository(conn).list_all()]


@app.get("/api/matches/{match_id}")
def get_match(match_id: str) -> dict[str, Any]:
    with db_conn() as conn, _service_errors():
        match = MatchRepository(conn).get(match_id)
        if match is None:
            raise HTTPException(status_code=404, detail="Match not found")
        return match.to_dict()


# ---------- Run with: uvicorn leaguesim.api:app --reload ----------
