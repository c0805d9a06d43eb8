"""End-of-mission score and grade."""

import math
from typing import Tuple

from ..models import MissionState, ScoreRecord, ShipState
from ..utils.constants import (
    DEFEAT_GRADE,
    ENERGY_PER_SCORE_POINT,
    FAILING_GRADE,
    GRADE_THRESHOLDS,
    LIVE_SCORE_HEALTHY_BONUS,
    NO_DAMAGE_BONUS,
    PERFECTION_BONUS,
    PERFECTION_BONUS_STARDATES,
    SCORE_PER_HOSTILE,
    SCORE_PER_STARDATE_REMAINING,
    SCORE_PER_TORPEDO,
    SPEED_BONUS_PER_STARDATE,
    SPEED_BONUS_STARDATES,
)


def grade_for(total: int) -> Tuple[str, str]:
    """Letter grade and description for a victory total.

    Examples:
        >>> grade_for(2958)
        ('A', 'Excellent Command')
    """
    for threshold, grade, description in GRADE_THRESHOLDS:
        if total >= threshold:
            return grade, description
    return FAILING_GRADE


def compute_score(state: MissionState, ship: ShipState) -> ScoreRecord:
    """Score a finished mission.

    A defeat scores 0 with grade F. A victory sums:
    - 100 per hostile destroyed
    - 10 per stardate remaining
    - 1 per 100 energy left
    - 50 per torpedo left
    - 100 per stardate under 20 used (speed bonus)
    - 1000 if every system is at full health
    - 500 if fewer than 15 stardates were used

    Args:
        state: Terminal mission state
        ship: Ship at mission end

    Returns:
        ScoreRecord with the breakdown, total and grade
    """
    if not state.victory:
        grade, description = DEFEAT_GRADE
        return ScoreRecord(0, 0, 0, 0, 0, 0, 0, total=0, grade=grade, grade_description=description)

    used = state.stardates_used
    hostiles_points = state.hostiles_destroyed * SCORE_PER_HOSTILE
    time_points = math.floor(max(0, state.stardates_remaining) * SCORE_PER_STARDATE_REMAINING)
    energy_points = math.floor(max(0, ship.energy) / ENERGY_PER_SCORE_POINT)
    torpedo_points = ship.torpedoes * SCORE_PER_TORPEDO
    speed_bonus = 0
    if used < SPEED_BONUS_STARDATES:
        speed_bonus = (SPEED_BONUS_STARDATES - used) * SPEED_BONUS_PER_STARDATE
    no_damage_bonus = NO_DAMAGE_BONUS if ship.damage.all_healthy() else 0
    perfection_bonus = PERFECTION_BONUS if used < PERFECTION_BONUS_STARDATES else 0

    total = (
        hostiles_points
        + time_points
        + energy_points
        + torpedo_points
        + speed_bonus
        + no_damage_bonus
        + perfection_bonus
    )
    grade, description = grade_for(total)
    return ScoreRecord(
        hostiles_points=hostiles_points,
        time_points=time_points,
        energy_points=energy_points,
        torpedo_points=torpedo_points,
        speed_bonus=speed_bonus,
        no_damage_bonus=no_damage_bonus,
        perfection_bonus=perfection_bonus,
        total=total,
        grade=grade,
        grade_description=description,
    )


def live_score(state: MissionState, ship: ShipState) -> int:
    """Running score shown during play."""
    score = state.hostiles_destroyed * SCORE_PER_HOSTILE
    score += math.floor(max(0, ship.energy) / ENERGY_PER_SCORE_POINT)
    score += ship.torpedoes * SCORE_PER_TORPEDO
    score += max(0, state.stardates_remaining) * SCORE_PER_STARDATE_REMAINING
    if ship.damage.all_healthy():
        score += LIVE_SCORE_HEALTHY_BONUS
    return score
