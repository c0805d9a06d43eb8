"""Galaxy-level map of quadrant summaries."""

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from ..utils.constants import GALAXY_SIZE


@dataclass
class QuadrantSummary:
    """Counts of what a quadrant contains.

    The summary is the persistent record of a quadrant. Entities are only
    materialized from it when the ship enters (see QuadrantContents).
    """

    hostiles: int = 0  # Hostile ships in the quadrant
    resupply: int = 0  # Resupply stations (0 or 1)
    obstacles: int = 0  # Stars
    visited: bool = False  # Entered or long-range scanned by the player

    def __post_init__(self):
        """Validate quadrant counts."""
        if self.hostiles < 0:
            raise ValueError(f"Invalid hostiles: {self.hostiles} (must be >= 0)")
        if self.resupply < 0:
            raise ValueError(f"Invalid resupply: {self.resupply} (must be >= 0)")
        if self.obstacles < 0:
            raise ValueError(f"Invalid obstacles: {self.obstacles} (must be >= 0)")

    @property
    def code(self) -> str:
        """Three-digit scan code: hostiles, resupply, obstacles."""
        return f"{self.hostiles}{self.resupply}{self.obstacles}"


@dataclass
class GalaxyMap:
    """8x8 grid of quadrant summaries, indexed as cells[y][x]."""

    cells: List[List[QuadrantSummary]] = field(
        default_factory=lambda: [
            [QuadrantSummary() for _ in range(GALAXY_SIZE)] for _ in range(GALAXY_SIZE)
        ]
    )

    def __post_init__(self):
        """Validate grid shape."""
        if len(self.cells) != GALAXY_SIZE or any(len(row) != GALAXY_SIZE for row in self.cells):
            raise ValueError(f"Galaxy must be {GALAXY_SIZE}x{GALAXY_SIZE} quadrants")

    @staticmethod
    def in_bounds(x: int, y: int) -> bool:
        """True if (x, y) is a quadrant inside the galaxy."""
        return 0 <= x < GALAXY_SIZE and 0 <= y < GALAXY_SIZE

    def get(self, x: int, y: int) -> QuadrantSummary:
        """Summary of quadrant (x, y)."""
        if not self.in_bounds(x, y):
            raise ValueError(f"Quadrant ({x}, {y}) is outside the galaxy")
        return self.cells[y][x]

    def coordinates(self) -> Iterator[Tuple[int, int]]:
        """Every quadrant coordinate in row-major order."""
        for y in range(GALAXY_SIZE):
            for x in range(GALAXY_SIZE):
                yield x, y

    def total_hostiles(self) -> int:
        return sum(cell.hostiles for row in self.cells for cell in row)

    def total_resupply(self) -> int:
        return sum(cell.resupply for row in self.cells for cell in row)

    def total_obstacles(self) -> int:
        return sum(cell.obstacles for row in self.cells for cell in row)
