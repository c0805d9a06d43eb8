"""Simulation engine: generation, navigation, combat, damage and mission flow."""

from .combat import (
    CounterAttackResult,
    PhaserResult,
    TorpedoOutcome,
    TorpedoResult,
    fire_phasers,
    fire_torpedo,
    hostile_counter_attack,
)
from .damage import DamageResult, ShieldResult, adjust_shields, apply_damage, check_system
from .galaxy_generator import (
    choose_start_quadrant,
    generate_galaxy,
    place_ship,
    populate_quadrant,
)
from .mission import CommandResult, Mission, MissionOverError, TargetSolution
from .navigation import NavigationResult, navigate, plot_destination
from .scoring import compute_score, grade_for, live_score

__all__ = [
    "CommandResult",
    "CounterAttackResult",
    "DamageResult",
    "Mission",
    "MissionOverError",
    "NavigationResult",
    "PhaserResult",
    "ShieldResult",
    "TargetSolution",
    "TorpedoOutcome",
    "TorpedoResult",
    "adjust_shields",
    "apply_damage",
    "check_system",
    "choose_start_quadrant",
    "compute_score",
    "fire_phasers",
    "fire_torpedo",
    "generate_galaxy",
    "grade_for",
    "hostile_counter_attack",
    "live_score",
    "navigate",
    "place_ship",
    "plot_destination",
    "populate_quadrant",
]
