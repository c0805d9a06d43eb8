"""Galaxy layout generation and lazy quadrant population."""

import logging
from typing import Optional, Set, Tuple

from ..models import (
    Entity,
    EntityKind,
    GalaxyMap,
    GameConfig,
    QuadrantContents,
    QuadrantSummary,
)
from ..utils import GALAXY_SIZE, QUADRANT_SIZE, GameRNG
from ..utils.constants import (
    HOSTILE_ENERGY_RANGE,
    HOSTILE_QUADRANT_PROB,
    HOSTILE_SHIELD_RANGE,
    MAX_HOSTILES_PER_QUADRANT,
    OBSTACLE_RANGE,
    RESUPPLY_QUADRANT_PROB,
    SECTOR_PLACEMENT_ATTEMPTS,
    START_QUADRANT_ATTEMPTS,
)

logger = logging.getLogger(__name__)


def generate_galaxy(config: GameConfig, rng: GameRNG) -> GalaxyMap:
    """Generate the 8x8 quadrant layout.

    Algorithm:
    1. Roll every quadrant independently:
       - 30% chance of 1-3 hostiles, otherwise none
       - 10% chance of one resupply station
       - 1-8 obstacles
    2. Top up hostiles one at a time in random quadrants (max 3 per
       quadrant) until the configured minimum is reached
    3. Force-place a resupply station if none was rolled

    Args:
        config: Mission configuration (supplies the hostile minimum)
        rng: Random source

    Returns:
        GalaxyMap satisfying the hostile minimum and resupply invariants
    """
    galaxy = GalaxyMap()

    for x, y in galaxy.coordinates():
        cell = galaxy.get(x, y)
        if rng.random() < HOSTILE_QUADRANT_PROB:
            cell.hostiles = rng.randint(1, MAX_HOSTILES_PER_QUADRANT)
        cell.resupply = 1 if rng.random() < RESUPPLY_QUADRANT_PROB else 0
        cell.obstacles = rng.randint(*OBSTACLE_RANGE)

    total_hostiles = galaxy.total_hostiles()
    while total_hostiles < config.min_hostiles:
        cell = galaxy.get(rng.randint(0, GALAXY_SIZE - 1), rng.randint(0, GALAXY_SIZE - 1))
        if cell.hostiles < MAX_HOSTILES_PER_QUADRANT:
            cell.hostiles += 1
            total_hostiles += 1

    if galaxy.total_resupply() == 0:
        cell = galaxy.get(rng.randint(0, GALAXY_SIZE - 1), rng.randint(0, GALAXY_SIZE - 1))
        cell.resupply = 1

    logger.debug(
        "Generated galaxy: %d hostiles, %d resupply stations, %d obstacles",
        galaxy.total_hostiles(),
        galaxy.total_resupply(),
        galaxy.total_obstacles(),
    )
    return galaxy


def choose_start_quadrant(galaxy: GalaxyMap, rng: GameRNG) -> Tuple[int, int]:
    """Pick a starting quadrant, preferring one without hostiles.

    Rejection-samples up to START_QUADRANT_ATTEMPTS random quadrants for
    one with zero hostiles and falls back to any random quadrant.

    Returns:
        (qx, qy) of the starting quadrant
    """
    for _ in range(START_QUADRANT_ATTEMPTS):
        x = rng.randint(0, GALAXY_SIZE - 1)
        y = rng.randint(0, GALAXY_SIZE - 1)
        if galaxy.get(x, y).hostiles == 0:
            return (x, y)

    logger.warning(
        "No hostile-free quadrant found after %d attempts, starting anywhere",
        START_QUADRANT_ATTEMPTS,
    )
    return (rng.randint(0, GALAXY_SIZE - 1), rng.randint(0, GALAXY_SIZE - 1))


def populate_quadrant(
    summary: QuadrantSummary,
    qx: int,
    qy: int,
    rng: GameRNG,
    config: Optional[GameConfig] = None,
) -> QuadrantContents:
    """Materialize the entities of a quadrant from its summary.

    Hostiles are placed first, then resupply stations, then obstacles,
    each on a sector chosen by rejection sampling against the sectors
    already taken. Placement within one call is collision-free; separate
    calls for the same summary are rolled independently.

    Args:
        summary: Counts to materialize
        qx: Quadrant column
        qy: Quadrant row
        rng: Random source
        config: Mission configuration (hostile strength multiplier)

    Returns:
        QuadrantContents with one entity per counted object
    """
    strength = config.hostile_strength if config else 1.0
    occupied: Set[Tuple[int, int]] = set()
    contents = QuadrantContents(qx=qx, qy=qy)

    for _ in range(summary.hostiles):
        x, y = _find_empty_sector(rng, occupied)
        occupied.add((x, y))
        energy = int(rng.randint(*HOSTILE_ENERGY_RANGE) * strength)
        shields = rng.randint(*HOSTILE_SHIELD_RANGE)
        contents.add(Entity(EntityKind.HOSTILE, x, y, energy=energy, shields=shields))

    for _ in range(summary.resupply):
        x, y = _find_empty_sector(rng, occupied)
        occupied.add((x, y))
        contents.add(Entity(EntityKind.RESUPPLY, x, y))

    for _ in range(summary.obstacles):
        x, y = _find_empty_sector(rng, occupied)
        occupied.add((x, y))
        contents.add(Entity(EntityKind.OBSTACLE, x, y))

    return contents


def place_ship(contents: QuadrantContents, rng: GameRNG) -> Tuple[int, int]:
    """Random empty sector for the ship inside populated contents."""
    return _find_empty_sector(rng, contents.occupied())


def _find_empty_sector(rng: GameRNG, occupied: Set[Tuple[int, int]]) -> Tuple[int, int]:
    """Find random unoccupied sector.

    Args:
        rng: Random number generator
        occupied: Set of occupied sectors

    Returns:
        Tuple of (x, y) sector coordinates

    Raises:
        RuntimeError: If no unoccupied sector found after max attempts
    """
    if len(occupied) >= QUADRANT_SIZE * QUADRANT_SIZE:
        raise RuntimeError("Quadrant is full, no sector available")

    for _ in range(SECTOR_PLACEMENT_ATTEMPTS):
        x = rng.randint(0, QUADRANT_SIZE - 1)
        y = rng.randint(0, QUADRANT_SIZE - 1)
        if (x, y) not in occupied:
            return (x, y)

    raise RuntimeError(
        f"Could not find unoccupied sector after {SECTOR_PLACEMENT_ATTEMPTS} attempts"
    )
