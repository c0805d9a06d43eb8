"""Sector-level entities of the quadrant the ship occupies."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..utils.constants import QUADRANT_SIZE


class EntityKind(Enum):
    """What occupies a sector."""

    HOSTILE = "hostile"
    RESUPPLY = "resupply"
    OBSTACLE = "obstacle"
    SHIP = "ship"


@dataclass
class Entity:
    """An occupant of one sector.

    Only hostiles carry energy and shields; for other kinds they stay None.
    """

    kind: EntityKind
    x: int  # Sector column (0-7)
    y: int  # Sector row (0-7)
    energy: Optional[int] = None  # Hostile energy; destroyed at <= 0
    shields: Optional[int] = None  # Hostile shield strength

    def __post_init__(self):
        """Validate entity data after initialization."""
        if not (0 <= self.x < QUADRANT_SIZE):
            raise ValueError(f"Invalid x coordinate: {self.x} (must be 0-{QUADRANT_SIZE - 1})")
        if not (0 <= self.y < QUADRANT_SIZE):
            raise ValueError(f"Invalid y coordinate: {self.y} (must be 0-{QUADRANT_SIZE - 1})")
        if self.kind == EntityKind.HOSTILE:
            if self.energy is None:
                raise ValueError("Hostile entities require an energy value")
            if self.shields is None:
                self.shields = 0

    @property
    def sector(self) -> Tuple[int, int]:
        return (self.x, self.y)


@dataclass
class QuadrantContents:
    """Materialized entities of one quadrant.

    Invariant: no two entities share a sector coordinate.
    """

    qx: int  # Quadrant column
    qy: int  # Quadrant row
    entities: List[Entity] = field(default_factory=list)

    def __post_init__(self):
        """Reject overlapping entities."""
        sectors = [e.sector for e in self.entities]
        if len(sectors) != len(set(sectors)):
            raise ValueError(f"Quadrant ({self.qx}, {self.qy}) has overlapping entities")

    def at(self, x: int, y: int) -> Optional[Entity]:
        """Entity occupying sector (x, y), if any."""
        for entity in self.entities:
            if entity.x == x and entity.y == y:
                return entity
        return None

    def of_kind(self, kind: EntityKind) -> List[Entity]:
        return [e for e in self.entities if e.kind == kind]

    @property
    def hostiles(self) -> List[Entity]:
        return self.of_kind(EntityKind.HOSTILE)

    @property
    def resupply_stations(self) -> List[Entity]:
        return self.of_kind(EntityKind.RESUPPLY)

    @property
    def obstacles(self) -> List[Entity]:
        return self.of_kind(EntityKind.OBSTACLE)

    def occupied(self) -> set:
        """Set of occupied sector coordinates."""
        return {e.sector for e in self.entities}

    def add(self, entity: Entity) -> None:
        """Add an entity, keeping sectors exclusive."""
        if self.at(entity.x, entity.y) is not None:
            raise ValueError(f"Sector ({entity.x}, {entity.y}) is already occupied")
        self.entities.append(entity)

    def remove(self, entity: Entity) -> None:
        self.entities.remove(entity)
