"""Pydantic request schemas for API endpoints."""

from pydantic import BaseModel, Field

from ...models import Difficulty


class CreateGameRequest(BaseModel):
    """Request to create a new game."""

    difficulty: Difficulty = Field(
        default=Difficulty.CAPTAIN, description="Difficulty: 'cadet', 'captain' or 'admiral'"
    )
    seed: int | None = Field(default=None, description="Optional RNG seed for determinism")


class CommandRequest(BaseModel):
    """One line of bridge console input."""

    input: str = Field(max_length=200, description="Command or follow-up value, e.g. 'NAV 3 1'")


class SubmitScoreRequest(BaseModel):
    """Request to enter a finished game's score in the high score table."""

    name: str = Field(min_length=1, max_length=20, description="Player initials")
