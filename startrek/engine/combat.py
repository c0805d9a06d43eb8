"""Weapons fire and hostile counter-attacks.

This module handles:
1. Phaser fire split evenly across every hostile in the quadrant
2. Photon torpedo path tracing (first entity hit ends the trace)
3. Hostile return fire against the ship

None of these advance the mission clock; the Mission decides when a
counter-attack follows and when the turn ends.
"""

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

from ..models import EntityKind, ShipSystem
from ..utils import QUADRANT_SIZE, course_vector, euclidean_distance
from ..utils.constants import (
    HOSTILE_ATTACK_FACTOR,
    HOSTILE_REFERENCE_ENERGY,
    PHASER_SHIELD_ABSORPTION,
    PHASER_SHIELD_DRAIN,
    TORPEDO_MAX_STEPS,
    WEAPON_RANGE,
)
from .damage import DamageResult, apply_damage, check_system

if TYPE_CHECKING:
    from .mission import Mission

logger = logging.getLogger(__name__)


@dataclass
class PhaserHit:
    """Phaser damage delivered to one hostile.

    Attributes:
        sector: Hostile's (x, y) sector
        distance: Euclidean distance from the ship
        damage: Whole damage points dealt after shield absorption
        remaining: Hostile energy after the hit
        destroyed: True if the hostile was destroyed
    """

    sector: Tuple[int, int]
    distance: float
    damage: int
    remaining: int
    destroyed: bool


@dataclass
class PhaserResult:
    success: bool
    messages: List[str] = field(default_factory=list)
    energy_used: int = 0
    hits: List[PhaserHit] = field(default_factory=list)

    @property
    def destroyed(self) -> int:
        return sum(1 for hit in self.hits if hit.destroyed)


class TorpedoOutcome(Enum):
    """How a torpedo trace ended."""

    HOSTILE_DESTROYED = "hostile_destroyed"
    OBSTACLE = "obstacle"
    RESUPPLY_DESTROYED = "resupply_destroyed"
    MISSED = "missed"


@dataclass
class TorpedoResult:
    """Outcome of a torpedo launch.

    Attributes:
        success: False if the launch was rejected (nothing consumed)
        messages: Narrative lines
        outcome: How the trace ended (None when rejected)
        track: Sectors the torpedo passed through, in order
        target: Sector of the entity hit, if any
        friendly_fire: True if a resupply station was destroyed
    """

    success: bool
    messages: List[str] = field(default_factory=list)
    outcome: Optional[TorpedoOutcome] = None
    track: List[Tuple[int, int]] = field(default_factory=list)
    target: Optional[Tuple[int, int]] = None
    friendly_fire: bool = False


@dataclass
class AttackEvent:
    """One hostile's shot at the ship."""

    sector: Tuple[int, int]
    hit: bool
    damage: Optional[DamageResult] = None


@dataclass
class CounterAttackResult:
    messages: List[str] = field(default_factory=list)
    events: List[AttackEvent] = field(default_factory=list)

    @property
    def total_damage(self) -> int:
        return sum(e.damage.amount for e in self.events if e.damage is not None)


def fire_phasers(mission: "Mission", amount: int) -> PhaserResult:
    """Fire phasers at every hostile in the current quadrant.

    The energy is split evenly across hostiles. For a hostile at distance d:
        effective = share * max(0, 1 - d/10)
        dealt = max(0, effective - shields * 0.1)
    The hostile loses floor(dealt) energy and floor(dealt * 0.3) shields
    (shields floored at 0). Hostiles at or below zero energy are destroyed.

    Args:
        mission: Active mission
        amount: Energy to commit

    Returns:
        PhaserResult; on rejection nothing is charged
    """
    ship = mission.ship
    hostiles = mission.contents.hostiles

    if amount <= 0:
        return PhaserResult(success=False, messages=["Phaser energy must be positive."])
    if not hostiles:
        return PhaserResult(
            success=False, messages=["No hostile vessels in this quadrant. Phasers not fired."]
        )
    if amount > ship.energy:
        return PhaserResult(
            success=False, messages=[f"Insufficient energy. Available: {ship.energy}"]
        )
    blocked = check_system(ship, ShipSystem.WEAPONS_CONTROL)
    if blocked:
        return PhaserResult(success=False, messages=[blocked])

    ship.energy -= amount
    result = PhaserResult(success=True, energy_used=amount)
    result.messages.append(f"Phasers fired: {amount} units of energy.")

    share = amount / len(hostiles)
    sx, sy = ship.sector
    for hostile in hostiles:
        distance = euclidean_distance(sx, sy, hostile.x, hostile.y)
        effective = share * max(0.0, 1 - distance / WEAPON_RANGE)
        dealt = max(0.0, effective - hostile.shields * PHASER_SHIELD_ABSORPTION)

        hostile.shields = max(0, hostile.shields - math.floor(dealt * PHASER_SHIELD_DRAIN))
        hostile.energy -= math.floor(dealt)
        destroyed = hostile.energy <= 0

        result.hits.append(
            PhaserHit(
                sector=hostile.sector,
                distance=distance,
                damage=math.floor(dealt),
                remaining=max(0, hostile.energy),
                destroyed=destroyed,
            )
        )
        if destroyed:
            mission.remove_entity(hostile)
            result.messages.append(f"Hostile at sector {_fmt(hostile.sector)} destroyed!")
        else:
            result.messages.append(
                f"{math.floor(dealt)} unit hit on hostile at sector {_fmt(hostile.sector)} "
                f"({hostile.energy} energy remaining)"
            )

    logger.debug("Phasers: %d energy, %d destroyed", amount, result.destroyed)
    return result


def fire_torpedo(mission: "Mission", course: float) -> TorpedoResult:
    """Launch a photon torpedo along a course.

    The trace starts at the centre of the ship's sector and advances one
    unit per step for up to TORPEDO_MAX_STEPS steps. The first sector
    holding an entity ends the trace:
    - hostile: destroyed
    - obstacle: absorbs the torpedo
    - resupply station: destroyed (friendly fire)
    Leaving the sector grid is a miss. A torpedo is consumed either way.

    Args:
        mission: Active mission
        course: Course in [1.0, 9.0]

    Returns:
        TorpedoResult; on rejection nothing is consumed
    """
    ship = mission.ship

    if ship.torpedoes <= 0:
        return TorpedoResult(success=False, messages=["All photon torpedoes expended."])
    blocked = check_system(ship, ShipSystem.TORPEDO_TUBES)
    if blocked:
        return TorpedoResult(success=False, messages=[blocked])

    ship.torpedoes -= 1
    result = TorpedoResult(success=True)
    result.messages.append("Torpedo track:")

    dx, dy = course_vector(course)
    x = ship.sector[0] + 0.5
    y = ship.sector[1] + 0.5

    for _ in range(TORPEDO_MAX_STEPS):
        x += dx
        y += dy
        cx, cy = math.floor(x), math.floor(y)

        if not (0 <= cx < QUADRANT_SIZE and 0 <= cy < QUADRANT_SIZE):
            break
        if (cx, cy) == ship.sector:
            continue
        if not result.track or result.track[-1] != (cx, cy):
            result.track.append((cx, cy))
            result.messages.append(f"  {_fmt((cx, cy))}")

        entity = mission.contents.at(cx, cy)
        if entity is None:
            continue

        result.target = entity.sector
        if entity.kind == EntityKind.HOSTILE:
            mission.remove_entity(entity)
            result.outcome = TorpedoOutcome.HOSTILE_DESTROYED
            result.messages.append("*** Hostile destroyed ***")
        elif entity.kind == EntityKind.RESUPPLY:
            mission.remove_entity(entity)
            result.outcome = TorpedoOutcome.RESUPPLY_DESTROYED
            result.friendly_fire = True
            result.messages.append(
                "*** Resupply station destroyed *** Command will hear about this."
            )
        else:
            result.outcome = TorpedoOutcome.OBSTACLE
            result.messages.append(f"Star at {_fmt(entity.sector)} absorbed the torpedo energy.")
        return result

    result.outcome = TorpedoOutcome.MISSED
    result.messages.append("Torpedo missed.")
    return result


def hostile_counter_attack(mission: "Mission") -> CounterAttackResult:
    """Every hostile in the quadrant fires at the ship.

    A hostile with energy E at distance d hits with probability
    (1 - d/10) * (E/300), clamped to [0, 1], for
    floor(E / (d + 1) * 0.3 * damage_multiplier) damage. Nothing happens
    while docked or once the mission is over. Stops early if the ship's
    energy is exhausted.

    Returns:
        CounterAttackResult listing every shot
    """
    ship = mission.ship
    result = CounterAttackResult()

    if ship.docked or mission.state.game_over:
        return result

    sx, sy = ship.sector
    for hostile in mission.contents.hostiles:
        distance = euclidean_distance(sx, sy, hostile.x, hostile.y)
        chance = max(0.0, 1 - distance / WEAPON_RANGE) * (
            hostile.energy / HOSTILE_REFERENCE_ENERGY
        )
        chance = min(1.0, max(0.0, chance))

        if mission.rng.random() >= chance:
            result.events.append(AttackEvent(sector=hostile.sector, hit=False))
            result.messages.append(f"Hostile at {_fmt(hostile.sector)} fires and misses.")
            continue

        amount = math.floor(
            hostile.energy / (distance + 1) * HOSTILE_ATTACK_FACTOR
            * mission.config.damage_multiplier
        )
        damage = apply_damage(ship, amount, mission.rng)
        result.events.append(AttackEvent(sector=hostile.sector, hit=True, damage=damage))
        result.messages.append(f"{amount} unit hit on ship from sector {_fmt(hostile.sector)}")
        if damage.absorbed:
            result.messages.append(f"  Shields absorbed {damage.absorbed}. Shields at {ship.shields}")
        if damage.shields_down:
            result.messages.append("  Shields are down!")
        if damage.system_damaged is not None:
            result.messages.append(f"  {damage.system_damaged.value} damaged!")

        if ship.energy <= 0:
            break

    return result


def _fmt(sector: Tuple[int, int]) -> str:
    return f"{sector[0]},{sector[1]}"
