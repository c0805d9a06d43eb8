"""Mission clock, hostile tally and narrative log."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Outcome(Enum):
    IN_PROGRESS = "in_progress"
    VICTORY = "victory"
    DEFEAT = "defeat"


class DefeatReason(Enum):
    """Why a mission ended in defeat."""

    ENERGY_DEPLETED = "energy_depleted"
    TIME_EXPIRED = "time_expired"
    COLLISION = "collision"
    DESTROYED = "destroyed"
    RESIGNED = "resigned"


@dataclass
class MissionState:
    """Overall mission progress.

    The message log is append-only for the lifetime of the session; the
    presentation layer decides how much of it to show.
    """

    stardate: int  # Current stardate
    initial_stardate: int  # Stardate at mission start
    stardate_limit: int  # Stardates available
    hostiles_remaining: int
    hostiles_at_start: int
    resupply_remaining: int = 0
    outcome: Outcome = Outcome.IN_PROGRESS
    defeat_reason: Optional[DefeatReason] = None
    messages: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Validate mission data after initialization."""
        if self.stardate_limit < 1:
            raise ValueError(f"Invalid stardate_limit: {self.stardate_limit} (must be >= 1)")
        if self.stardate < self.initial_stardate:
            raise ValueError(
                f"Invalid stardate: {self.stardate} (before start {self.initial_stardate})"
            )
        if not (0 <= self.hostiles_remaining <= self.hostiles_at_start):
            raise ValueError(
                f"Invalid hostiles_remaining: {self.hostiles_remaining} "
                f"(must be 0-{self.hostiles_at_start})"
            )

    @property
    def game_over(self) -> bool:
        return self.outcome != Outcome.IN_PROGRESS

    @property
    def victory(self) -> bool:
        return self.outcome == Outcome.VICTORY

    @property
    def stardates_used(self) -> int:
        return self.stardate - self.initial_stardate

    @property
    def stardates_remaining(self) -> int:
        return self.stardate_limit - self.stardates_used

    @property
    def hostiles_destroyed(self) -> int:
        return self.hostiles_at_start - self.hostiles_remaining

    @property
    def deadline(self) -> int:
        return self.initial_stardate + self.stardate_limit

    def log(self, *lines: str) -> None:
        """Append narrative lines to the message log."""
        self.messages.extend(lines)
