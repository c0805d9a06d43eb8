"""FastAPI server for the bridge console.

Provides an HTTP API to create missions, submit commands one line at a
time and read state, scores and the high score table.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from ..models import GameConfig
from .schemas.requests import CommandRequest, CreateGameRequest, SubmitScoreRequest
from .schemas.responses import (
    CommandResponse,
    CreateGameResponse,
    GameStateResponse,
    HighScoreResponse,
    ScoreResponse,
    SubmitScoreResponse,
)
from .session import GameSession, GameSessionManager

# Configure logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Global session manager
sessions = GameSessionManager()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown."""
    logger.info("Star Trek server starting...")
    yield
    logger.info("Star Trek server shutting down...")
    await sessions.cleanup_all()


app = FastAPI(
    title="Star Trek API",
    description="Web API for the Star Trek tactical simulation",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_session(game_id: str) -> GameSession:
    session = sessions.get(game_id)
    if not session:
        raise HTTPException(status_code=404, detail="Game not found")
    return session


# ============================================
# API ENDPOINTS
# ============================================


@app.get("/api")
async def api_root():
    """API root endpoint - server health check."""
    return {
        "service": "Star Trek",
        "status": "operational",
        "activeGames": len(sessions.sessions),
    }


@app.post("/api/games", response_model=CreateGameResponse)
async def create_game(request: CreateGameRequest):
    """Create a new mission.

    Args:
        request: Game creation parameters

    Returns:
        Game ID, initial state and the mission briefing

    Example:
        POST /api/games
        {
          "difficulty": "captain",
          "seed": 42
        }
    """
    try:
        session = await sessions.create_session(
            config=GameConfig.for_difficulty(request.difficulty),
            seed=request.seed,
        )
    except Exception as e:
        logger.error(f"Failed to create game: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Failed to create game: {str(e)}")

    return CreateGameResponse(
        gameId=session.id,
        difficulty=request.difficulty.value,
        seed=session.seed,
        state=session.get_state(),
        messages=list(session.mission.state.messages),
    )


@app.get("/api/games/{game_id}/state", response_model=GameStateResponse)
async def get_game_state(game_id: str, history: int = 0):
    """Get current game state.

    Args:
        game_id: Game session ID
        history: Number of most recent log lines to include

    Example:
        GET /api/games/game-abc123/state?history=20
    """
    session = _get_session(game_id)
    messages = session.mission.state.messages[-history:] if history > 0 else []

    return GameStateResponse(
        gameId=game_id,
        gameOver=session.mission.game_over,
        state=session.get_state(),
        messages=messages,
    )


@app.post("/api/games/{game_id}/commands", response_model=CommandResponse)
async def submit_command(game_id: str, request: CommandRequest):
    """Submit one line of console input.

    Commands given without arguments leave the session awaiting input; the
    next request supplies the value.

    Example:
        POST /api/games/game-abc123/commands
        {"input": "NAV 3 1"}
    """
    session = _get_session(game_id)

    if session.mission.game_over:
        raise HTTPException(status_code=400, detail="Game already ended")

    messages = session.processor.process(request.input)
    mission = session.mission
    logger.debug(f"Game {game_id}: {request.input!r} -> {len(messages)} lines")

    return CommandResponse(
        messages=messages,
        awaitingInput=session.processor.awaiting_input,
        prompt=session.processor.prompt,
        gameOver=mission.game_over,
        state=session.get_state(),
        score=mission.score.to_dict() if mission.score else None,
    )


@app.get("/api/games/{game_id}/score", response_model=ScoreResponse)
async def get_score(game_id: str):
    """Get the final score of a finished game."""
    session = _get_session(game_id)
    mission = session.mission
    if not mission.game_over:
        raise HTTPException(status_code=400, detail="Game still in progress")

    return ScoreResponse(
        gameId=game_id,
        victory=mission.state.victory,
        score=mission.score.to_dict(),
        isHighScore=(
            not session.score_submitted and sessions.scores.is_high_score(mission.score.total)
        ),
    )


@app.post("/api/games/{game_id}/leaderboard", response_model=SubmitScoreResponse)
async def submit_score(game_id: str, request: SubmitScoreRequest):
    """Enter a finished game's score in the high score table."""
    session = _get_session(game_id)
    mission = session.mission
    if not mission.game_over:
        raise HTTPException(status_code=400, detail="Game still in progress")
    if session.score_submitted:
        raise HTTPException(status_code=400, detail="Score already submitted")

    rank = sessions.scores.add(request.name, mission.score.total, mission.score.grade)
    session.score_submitted = True
    return SubmitScoreResponse(
        accepted=rank is not None,
        rank=rank,
        scores=sessions.scores.to_list(),
    )


@app.get("/api/leaderboard", response_model=HighScoreResponse)
async def get_leaderboard():
    """Get the high score table."""
    return HighScoreResponse(
        scores=sessions.scores.to_list(),
        lastPlayerName=sessions.scores.last_player_name,
    )


@app.delete("/api/games/{game_id}")
async def delete_game(game_id: str):
    """Delete a game session.

    Args:
        game_id: Game session ID

    Returns:
        Success status
    """
    if sessions.delete(game_id):
        return {"message": f"Game {game_id} deleted"}
    else:
        raise HTTPException(status_code=404, detail="Game not found")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
