"""Pydantic response schemas for API endpoints."""

from pydantic import BaseModel, Field


class GameStateResponse(BaseModel):
    """Response containing current game state."""

    gameId: str  # noqa: N815
    gameOver: bool  # noqa: N815
    state: dict
    messages: list[str] = Field(default_factory=list)


class CreateGameResponse(BaseModel):
    """Response after creating a new game."""

    gameId: str  # noqa: N815
    difficulty: str
    seed: int
    state: dict
    messages: list[str]


class CommandResponse(BaseModel):
    """Response after submitting a command."""

    messages: list[str]
    awaitingInput: bool  # noqa: N815
    prompt: str
    gameOver: bool  # noqa: N815
    state: dict
    score: dict | None = None


class ScoreResponse(BaseModel):
    """Final score of a finished game."""

    gameId: str  # noqa: N815
    victory: bool
    score: dict
    isHighScore: bool  # noqa: N815


class HighScoreResponse(BaseModel):
    """Entries of the high score table, highest first."""

    scores: list[dict]
    lastPlayerName: str  # noqa: N815


class SubmitScoreResponse(BaseModel):
    """Result of entering a score in the high score table."""

    accepted: bool
    rank: int | None = None
    scores: list[dict] = Field(default_factory=list)
