"""Utility functions and constants for the simulation."""

from .constants import (
    ENERGY_PER_WARP,
    GALAXY_SIZE,
    INITIAL_ENERGY,
    INITIAL_TORPEDOES,
    MIN_HOSTILES,
    QUADRANT_SIZE,
    STARDATE_LIMIT,
    SYSTEM_OPERATIONAL_THRESHOLD,
)
from .distance import (
    chebyshev_distance,
    course_between,
    course_vector,
    euclidean_distance,
    is_adjacent,
    round_half_up,
)
from .rng import GameRNG

__all__ = [
    "ENERGY_PER_WARP",
    "GALAXY_SIZE",
    "INITIAL_ENERGY",
    "INITIAL_TORPEDOES",
    "MIN_HOSTILES",
    "QUADRANT_SIZE",
    "STARDATE_LIMIT",
    "SYSTEM_OPERATIONAL_THRESHOLD",
    "chebyshev_distance",
    "course_between",
    "course_vector",
    "euclidean_distance",
    "is_adjacent",
    "round_half_up",
    "GameRNG",
]
