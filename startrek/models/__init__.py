"""Data models for the simulation."""

from .config import DIFFICULTY_PRESETS, Difficulty, GameConfig
from .entity import Entity, EntityKind, QuadrantContents
from .galaxy import GalaxyMap, QuadrantSummary
from .mission import DefeatReason, MissionState, Outcome
from .score import ScoreRecord
from .ship import ALL_SYSTEMS, Condition, ShipState, ShipSystem, SystemDamageTable

__all__ = [
    "ALL_SYSTEMS",
    "Condition",
    "DefeatReason",
    "DIFFICULTY_PRESETS",
    "Difficulty",
    "Entity",
    "EntityKind",
    "GalaxyMap",
    "GameConfig",
    "MissionState",
    "Outcome",
    "QuadrantContents",
    "QuadrantSummary",
    "ScoreRecord",
    "ShipState",
    "ShipSystem",
    "SystemDamageTable",
]
