"""Warp navigation between sectors and quadrants.

Movement model:
- Course is continuous in [1, 9]: 1 is north (-y), each whole step turns
  45 degrees clockwise and 9 wraps back to north
- Displacement is warp * unit vector, rounded half-up to whole sectors
- Sector overflow carries into the quadrant coordinate, across as many
  quadrant boundaries as needed
- Cost is floor(warp * 10) energy; a move that would leave the galaxy is
  rejected before anything is charged
"""

import logging
import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Tuple

from ..models import EntityKind, ShipSystem
from ..utils import (
    ENERGY_PER_WARP,
    GALAXY_SIZE,
    QUADRANT_SIZE,
    course_vector,
    round_half_up,
)
from .damage import check_system, update_docking
from .galaxy_generator import populate_quadrant

if TYPE_CHECKING:
    from .mission import Mission

logger = logging.getLogger(__name__)


@dataclass
class NavigationResult:
    """Outcome of a navigation command.

    Attributes:
        success: False if the move was rejected (no cost, no movement)
        messages: Narrative lines
        energy_used: Energy charged for the move
        quadrant_changed: True if the ship entered a new quadrant
        collision: Kind of entity the ship collided with, if any
        docked: Docked status after the move
    """

    success: bool
    messages: List[str] = field(default_factory=list)
    energy_used: int = 0
    quadrant_changed: bool = False
    collision: Optional[EntityKind] = None
    docked: bool = False


def navigation_cost(warp: float) -> int:
    """Energy needed for a warp factor."""
    return math.floor(round(warp * ENERGY_PER_WARP, 9))


def plot_destination(
    quadrant: Tuple[int, int], sector: Tuple[int, int], course: float, warp: float
) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """Compute the destination of a move without validating it.

    Args:
        quadrant: Starting (qx, qy)
        sector: Starting (sx, sy)
        course: Course in [1, 9]
        warp: Warp factor

    Returns:
        ((qx, qy), (sx, sy)); the quadrant may lie outside the galaxy

    Examples:
        >>> plot_destination((0, 0), (7, 4), 3, 2)
        ((1, 0), (1, 4))
    """
    dx, dy = course_vector(course)
    qx, sx = _carry(quadrant[0], sector[0] + round_half_up(dx * warp))
    qy, sy = _carry(quadrant[1], sector[1] + round_half_up(dy * warp))
    return (qx, qy), (sx, sy)


def _carry(quadrant: int, sector: int) -> Tuple[int, int]:
    """Wrap a sector coordinate into [0, 8), moving the quadrant with it."""
    while sector >= QUADRANT_SIZE:
        sector -= QUADRANT_SIZE
        quadrant += 1
    while sector < 0:
        sector += QUADRANT_SIZE
        quadrant -= 1
    return quadrant, sector


def navigate(mission: "Mission", course: float, warp: float) -> NavigationResult:
    """Move the ship.

    Validation (in order, nothing changes on failure):
    1. Navigation system operational
    2. Enough energy for floor(warp * 10)
    3. Destination quadrant inside the galaxy

    On success the energy is charged and the ship moves. Entering a new
    quadrant populates it and marks it visited, without regard to the
    arrival sector. Landing on an occupied sector destroys the ship.
    Docking is recomputed afterwards.

    Args:
        mission: Active mission
        course: Course in [1, 9]
        warp: Warp factor in [0.1, 8]

    Returns:
        NavigationResult describing the move
    """
    ship = mission.ship

    blocked = check_system(ship, ShipSystem.NAVIGATION)
    if blocked:
        return NavigationResult(success=False, messages=[blocked])

    cost = navigation_cost(warp)
    if cost > ship.energy:
        return NavigationResult(
            success=False,
            messages=[f"Insufficient energy for warp {warp:g}. Need {cost}, have {ship.energy}."],
        )

    quadrant, sector = plot_destination(ship.quadrant, ship.sector, course, warp)
    if not mission.galaxy.in_bounds(*quadrant):
        return NavigationResult(
            success=False,
            messages=["Navigation would take the ship outside the galaxy. Course rejected."],
        )

    ship.energy -= cost
    result = NavigationResult(success=True, energy_used=cost)

    if quadrant != ship.quadrant:
        summary = mission.galaxy.get(*quadrant)
        summary.visited = True
        mission.contents = populate_quadrant(summary, quadrant[0], quadrant[1], mission.rng, mission.config)
        result.quadrant_changed = True
        result.messages.append(f"Entering quadrant {quadrant[0]},{quadrant[1]}.")
        logger.debug("Entered quadrant %s with %d entities", quadrant, len(mission.contents.entities))

    ship.quadrant = quadrant
    ship.sector = sector

    obstacle = mission.contents.at(*sector)
    if obstacle is not None:
        ship.destroyed = True
        result.collision = obstacle.kind
        result.messages.append(
            f"Collision with {obstacle.kind.value} at sector {sector[0]},{sector[1]}! "
            "The ship is destroyed."
        )
        return result

    result.messages.append(
        f"Arrived at quadrant {quadrant[0]},{quadrant[1]} sector {sector[0]},{sector[1]}. "
        f"Energy used: {cost}"
    )

    result.docked = update_docking(ship, mission.contents)
    if result.docked:
        result.messages.append(
            "Docked at resupply station. Energy and torpedoes replenished, all systems repaired."
        )

    return result
