"""Final mission score record."""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class ScoreRecord:
    """Graded end-of-mission score. Immutable once computed."""

    hostiles_points: int
    time_points: int
    energy_points: int
    torpedo_points: int
    speed_bonus: int
    no_damage_bonus: int
    perfection_bonus: int
    total: int
    grade: str
    grade_description: str

    def breakdown(self) -> List[Tuple[str, int]]:
        """Non-zero score components as (label, points) in display order."""
        items = [
            ("Hostiles Destroyed", self.hostiles_points),
            ("Time Remaining", self.time_points),
            ("Energy Bonus", self.energy_points),
            ("Torpedo Bonus", self.torpedo_points),
            ("Speed Bonus", self.speed_bonus),
            ("No Damage Bonus", self.no_damage_bonus),
            ("Perfection Bonus", self.perfection_bonus),
        ]
        return [(label, points) for label, points in items if points > 0]

    def to_dict(self) -> dict:
        return {
            "hostiles": self.hostiles_points,
            "time": self.time_points,
            "energy": self.energy_points,
            "torpedoes": self.torpedo_points,
            "speed": self.speed_bonus,
            "noDamage": self.no_damage_bonus,
            "perfection": self.perfection_bonus,
            "total": self.total,
            "grade": self.grade,
            "gradeDescription": self.grade_description,
        }
