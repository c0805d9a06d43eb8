"""Player starship state and per-system damage table."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Tuple

from ..utils.constants import (
    GALAXY_SIZE,
    INITIAL_ENERGY,
    INITIAL_TORPEDOES,
    LOW_ENERGY_THRESHOLD,
    QUADRANT_SIZE,
    SYSTEM_OPERATIONAL_THRESHOLD,
)


class ShipSystem(Enum):
    """Ship systems that can be damaged, with their report labels."""

    NAVIGATION = "Navigation"
    SHORT_RANGE_SENSORS = "Short Range Sensors"
    LONG_RANGE_SENSORS = "Long Range Sensors"
    WEAPONS_CONTROL = "Weapons Control"
    TORPEDO_TUBES = "Torpedo Tubes"
    SHIELD_CONTROL = "Shield Control"
    COMPUTER = "Computer"


# Explicit iteration order for reports and random selection
ALL_SYSTEMS: List[ShipSystem] = list(ShipSystem)


class Condition(Enum):
    """Alert condition shown on the short-range display."""

    GREEN = "GREEN"
    YELLOW = "YELLOW"
    RED = "RED"
    DOCKED = "DOCKED"


@dataclass
class SystemDamageTable:
    """Health of every ship system in [0, 1], 1 meaning fully operational."""

    health: Dict[ShipSystem, float] = field(
        default_factory=lambda: {system: 1.0 for system in ALL_SYSTEMS}
    )

    def __post_init__(self):
        """Fill missing systems and validate ranges."""
        for system in ALL_SYSTEMS:
            self.health.setdefault(system, 1.0)
        for system, value in self.health.items():
            if not (0.0 <= value <= 1.0):
                raise ValueError(f"Invalid health for {system.value}: {value} (must be 0-1)")

    def __getitem__(self, system: ShipSystem) -> float:
        return self.health[system]

    def __setitem__(self, system: ShipSystem, value: float) -> None:
        self.health[system] = min(1.0, max(0.0, value))

    def is_operational(self, system: ShipSystem) -> bool:
        return self.health[system] >= SYSTEM_OPERATIONAL_THRESHOLD

    def damaged(self) -> List[ShipSystem]:
        """Systems below full health, in table order."""
        return [s for s in ALL_SYSTEMS if self.health[s] < 1.0]

    def undamaged(self) -> List[ShipSystem]:
        """Systems at full health, in table order."""
        return [s for s in ALL_SYSTEMS if self.health[s] >= 1.0]

    def all_healthy(self) -> bool:
        return not self.damaged()

    def repair_all(self) -> None:
        for system in ALL_SYSTEMS:
            self.health[system] = 1.0


@dataclass
class ShipState:
    """The player's starship.

    Position is split into the quadrant (galaxy grid) and the sector
    (grid inside the quadrant). Shields are up whenever shield energy is
    positive.
    """

    quadrant: Tuple[int, int]  # (qx, qy)
    sector: Tuple[int, int]  # (sx, sy)
    energy: int = INITIAL_ENERGY
    max_energy: int = INITIAL_ENERGY
    shields: int = 0  # Energy held in the shields
    shields_up: bool = False
    torpedoes: int = INITIAL_TORPEDOES
    max_torpedoes: int = INITIAL_TORPEDOES
    docked: bool = False
    destroyed: bool = False
    damage: SystemDamageTable = field(default_factory=SystemDamageTable)

    def __post_init__(self):
        """Validate ship data after initialization."""
        qx, qy = self.quadrant
        sx, sy = self.sector
        if not (0 <= qx < GALAXY_SIZE and 0 <= qy < GALAXY_SIZE):
            raise ValueError(f"Invalid quadrant: {self.quadrant}")
        if not (0 <= sx < QUADRANT_SIZE and 0 <= sy < QUADRANT_SIZE):
            raise ValueError(f"Invalid sector: {self.sector}")
        if self.max_energy <= 0:
            raise ValueError(f"Invalid max_energy: {self.max_energy} (must be > 0)")
        if self.shields < 0:
            raise ValueError(f"Invalid shields: {self.shields} (must be >= 0)")
        if not (0 <= self.torpedoes <= self.max_torpedoes):
            raise ValueError(
                f"Invalid torpedoes: {self.torpedoes} (must be 0-{self.max_torpedoes})"
            )

    def condition(self, hostiles_in_quadrant: int) -> Condition:
        """Alert condition given the hostiles in the current quadrant."""
        if self.docked:
            return Condition.DOCKED
        if hostiles_in_quadrant > 0:
            return Condition.RED
        if self.energy < LOW_ENERGY_THRESHOLD:
            return Condition.YELLOW
        return Condition.GREEN

    def resupply(self) -> None:
        """Restore energy and torpedoes, drop shields and repair every system."""
        self.energy = self.max_energy
        self.torpedoes = self.max_torpedoes
        self.shields = 0
        self.shields_up = False
        self.damage.repair_all()
