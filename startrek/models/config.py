"""Mission configuration and difficulty presets."""

from dataclasses import dataclass, replace
from enum import Enum

from ..utils.constants import (
    GALAXY_SIZE,
    INITIAL_ENERGY,
    INITIAL_TORPEDOES,
    MAX_HOSTILES_PER_QUADRANT,
    MIN_HOSTILES,
    STARDATE_LIMIT,
)

# Most hostiles the galaxy can hold
HOSTILE_CAPACITY = GALAXY_SIZE * GALAXY_SIZE * MAX_HOSTILES_PER_QUADRANT


class Difficulty(Enum):
    """Challenge levels offered at mission start."""

    CADET = "cadet"
    CAPTAIN = "captain"
    ADMIRAL = "admiral"


@dataclass(frozen=True)
class GameConfig:
    """Tunable parameters for one mission.

    Defaults match the CAPTAIN preset. Multipliers scale hostile energy,
    incoming damage and the passive repair rate.
    """

    difficulty: Difficulty = Difficulty.CAPTAIN
    min_hostiles: int = MIN_HOSTILES  # Galaxy-wide hostile floor
    stardate_limit: int = STARDATE_LIMIT  # Stardates available for the mission
    initial_energy: int = INITIAL_ENERGY
    initial_torpedoes: int = INITIAL_TORPEDOES
    hostile_strength: float = 1.0  # Multiplier on hostile energy at spawn
    damage_multiplier: float = 1.0  # Multiplier on counter-attack damage
    repair_multiplier: float = 1.0  # Multiplier on passive repair per turn

    def __post_init__(self):
        """Validate configuration values."""
        if self.min_hostiles < 1:
            raise ValueError(f"Invalid min_hostiles: {self.min_hostiles} (must be >= 1)")
        if self.min_hostiles > HOSTILE_CAPACITY:
            raise ValueError(
                f"Invalid min_hostiles: {self.min_hostiles} (must be <= {HOSTILE_CAPACITY})"
            )
        if self.stardate_limit < 1:
            raise ValueError(f"Invalid stardate_limit: {self.stardate_limit} (must be >= 1)")
        if self.initial_energy <= 0:
            raise ValueError(f"Invalid initial_energy: {self.initial_energy} (must be > 0)")
        if self.initial_torpedoes < 0:
            raise ValueError(
                f"Invalid initial_torpedoes: {self.initial_torpedoes} (must be >= 0)"
            )
        for name in ("hostile_strength", "damage_multiplier", "repair_multiplier"):
            if getattr(self, name) <= 0:
                raise ValueError(f"Invalid {name}: {getattr(self, name)} (must be > 0)")

    @classmethod
    def for_difficulty(cls, difficulty: Difficulty) -> "GameConfig":
        """Return the preset configuration for a difficulty level."""
        return DIFFICULTY_PRESETS[difficulty]

    def with_overrides(self, **changes) -> "GameConfig":
        """Copy of this config with some fields replaced."""
        return replace(self, **changes)


DIFFICULTY_PRESETS = {
    Difficulty.CADET: GameConfig(
        difficulty=Difficulty.CADET,
        min_hostiles=5,
        stardate_limit=40,
        initial_energy=3500,
        initial_torpedoes=12,
        hostile_strength=0.7,
        damage_multiplier=0.8,
        repair_multiplier=1.5,
    ),
    Difficulty.CAPTAIN: GameConfig(),
    Difficulty.ADMIRAL: GameConfig(
        difficulty=Difficulty.ADMIRAL,
        min_hostiles=12,
        stardate_limit=25,
        initial_energy=2500,
        initial_torpedoes=8,
        hostile_strength=1.5,
        damage_multiplier=1.3,
        repair_multiplier=0.7,
    ),
}
