"""Ship system damage, repair, docking and shield control.

This module handles:
1. Gating commands on system health (operational threshold 0.5)
2. Applying incoming hostile fire to shields, energy and systems
3. Passive repair at every turn advance
4. Docking detection and the resupply it triggers
5. Moving energy between the reserve and the shields
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from ..models import EntityKind, QuadrantContents, ShipState, ShipSystem
from ..utils import GameRNG, is_adjacent
from ..utils.constants import (
    PASSIVE_REPAIR_PER_TURN,
    SYSTEM_DAMAGE_CHANCE,
    SYSTEM_DAMAGE_RANGE,
    SYSTEM_OPERATIONAL_THRESHOLD,
)

if TYPE_CHECKING:
    from .mission import Mission

logger = logging.getLogger(__name__)

SYSTEM_OFFLINE_MESSAGES = {
    ShipSystem.NAVIGATION: "Warp engines are damaged. Navigation is unavailable.",
    ShipSystem.SHORT_RANGE_SENSORS: "Short range sensors are damaged and inoperative.",
    ShipSystem.LONG_RANGE_SENSORS: "Long range sensors are damaged and inoperative.",
    ShipSystem.WEAPONS_CONTROL: "Phaser control is damaged. Phasers cannot fire.",
    ShipSystem.TORPEDO_TUBES: "Photon torpedo tubes are damaged and inoperative.",
    ShipSystem.SHIELD_CONTROL: "Shield control is damaged. Shields cannot be adjusted.",
    ShipSystem.COMPUTER: "Library computer is damaged and unavailable.",
}


@dataclass
class DamageResult:
    """Outcome of one hit against the ship.

    Attributes:
        amount: Damage delivered by the attacker
        absorbed: Portion taken by the shields
        energy_damage: Portion that reached the energy reserve
        system_damaged: System degraded by the hit, if any
        shields_down: True if the shields collapsed on this hit
    """

    amount: int
    absorbed: int = 0
    energy_damage: int = 0
    system_damaged: Optional[ShipSystem] = None
    shields_down: bool = False


@dataclass
class ShieldResult:
    """Outcome of a shield transfer command."""

    success: bool
    messages: List[str] = field(default_factory=list)
    transferred: int = 0


def check_system(ship: ShipState, system: ShipSystem) -> Optional[str]:
    """Rejection message if a system is below the operational threshold.

    Returns:
        None when the system is usable, otherwise the message to show
    """
    if ship.damage.is_operational(system):
        return None
    return SYSTEM_OFFLINE_MESSAGES[system]


def apply_damage(ship: ShipState, amount: int, rng: GameRNG) -> DamageResult:
    """Apply an incoming hit to the ship.

    Raised shields absorb up to their current strength; the remainder
    drains the energy reserve. Every hit that reaches the reserve has a
    30% chance of degrading one randomly chosen undamaged system by a
    uniform 0.3-0.7.

    Args:
        ship: Ship taking the hit
        amount: Damage points
        rng: Random source for the system damage roll

    Returns:
        DamageResult describing where the damage went
    """
    result = DamageResult(amount=amount)
    remaining = amount

    if ship.shields_up and ship.shields > 0:
        result.absorbed = min(ship.shields, remaining)
        ship.shields -= result.absorbed
        remaining -= result.absorbed
        if ship.shields <= 0:
            ship.shields = 0
            ship.shields_up = False
            result.shields_down = True

    if remaining > 0:
        ship.energy -= remaining
        result.energy_damage = remaining

        if rng.random() < SYSTEM_DAMAGE_CHANCE:
            candidates = ship.damage.undamaged()
            if candidates:
                system = rng.choice(candidates)
                ship.damage[system] = ship.damage[system] - rng.uniform(*SYSTEM_DAMAGE_RANGE)
                result.system_damaged = system
                logger.debug("%s degraded to %.2f", system.value, ship.damage[system])

    return result


def passive_repair(ship: ShipState, multiplier: float = 1.0) -> List[ShipSystem]:
    """Repair every damaged system by one turn's worth.

    Args:
        ship: Ship to repair
        multiplier: Difficulty repair multiplier

    Returns:
        Systems that crossed back over the operational threshold
    """
    restored = []
    step = PASSIVE_REPAIR_PER_TURN * multiplier
    for system in ship.damage.damaged():
        before = ship.damage[system]
        ship.damage[system] = before + step
        if before < SYSTEM_OPERATIONAL_THRESHOLD <= ship.damage[system]:
            restored.append(system)
    return restored


def update_docking(ship: ShipState, contents: QuadrantContents) -> bool:
    """Recompute docked status and resupply when docked.

    The ship is docked when any resupply station sits in one of the eight
    surrounding sectors. Docking restores energy and torpedoes, drops the
    shields and fully repairs every system.

    Returns:
        True if the ship is now docked
    """
    sx, sy = ship.sector
    ship.docked = any(
        is_adjacent(sx, sy, station.x, station.y)
        for station in contents.of_kind(EntityKind.RESUPPLY)
    )
    if ship.docked:
        ship.resupply()
    return ship.docked


def adjust_shields(mission: "Mission", amount: int) -> ShieldResult:
    """Move energy between the reserve and the shields.

    Positive amounts raise shield energy, negative amounts return it to
    the reserve. Shields are up whenever shield energy is positive.

    Args:
        mission: Active mission
        amount: Energy to transfer (non-zero)

    Returns:
        ShieldResult; on failure nothing is changed
    """
    ship = mission.ship

    blocked = check_system(ship, ShipSystem.SHIELD_CONTROL)
    if blocked:
        return ShieldResult(success=False, messages=[blocked])
    if ship.docked:
        return ShieldResult(
            success=False,
            messages=["Shields cannot be adjusted while docked at a resupply station."],
        )
    if amount == 0:
        return ShieldResult(success=False, messages=["Shield transfer must be non-zero."])

    if amount > 0:
        if amount > ship.energy:
            return ShieldResult(
                success=False,
                messages=[f"Insufficient energy. Available: {ship.energy}"],
            )
        ship.energy -= amount
        ship.shields += amount
    else:
        if -amount > ship.shields:
            return ShieldResult(
                success=False,
                messages=[f"Insufficient shield energy. Shields at: {ship.shields}"],
            )
        ship.shields += amount
        ship.energy -= amount

    ship.shields_up = ship.shields > 0
    state = "UP" if ship.shields_up else "DOWN"
    return ShieldResult(
        success=True,
        transferred=amount,
        messages=[f"Shields {state}. Shield energy: {ship.shields}. Ship energy: {ship.energy}"],
    )
