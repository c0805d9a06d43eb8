"""Tests for end-of-mission scoring and grades."""

import pytest

from startrek.engine.scoring import compute_score, grade_for
from startrek.models import DefeatReason, MissionState, Outcome, ShipState, ShipSystem


def finished(used, limit=22, destroyed=3, outcome=Outcome.VICTORY, reason=None):
    return MissionState(
        stardate=2250 + used,
        initial_stardate=2250,
        stardate_limit=limit,
        hostiles_remaining=0 if outcome == Outcome.VICTORY else 1,
        hostiles_at_start=destroyed if outcome == Outcome.VICTORY else destroyed + 1,
        outcome=outcome,
        defeat_reason=reason,
    )


def ship(energy=800, torpedoes=5):
    return ShipState(quadrant=(0, 0), sector=(0, 0), energy=energy, torpedoes=torpedoes)


class TestComputeScore:
    def test_full_breakdown(self):
        """3 kills in 12 of 22 stardates with 800 energy and 5 torpedoes left."""
        score = compute_score(finished(used=12), ship())

        assert score.hostiles_points == 300
        assert score.time_points == 100
        assert score.energy_points == 8
        assert score.torpedo_points == 250
        assert score.speed_bonus == 800
        assert score.no_damage_bonus == 1000
        assert score.perfection_bonus == 500
        assert score.total == 2958
        assert score.grade == "A"

    def test_defeat_scores_zero(self):
        state = finished(
            used=5, outcome=Outcome.DEFEAT, reason=DefeatReason.DESTROYED
        )

        score = compute_score(state, ship())

        assert score.total == 0
        assert score.grade == "F"
        assert score.grade_description == "Mission Failed"
        assert score.breakdown() == []

    def test_no_speed_bonus_at_twenty_stardates(self):
        score = compute_score(finished(used=20, limit=30), ship())

        assert score.speed_bonus == 0
        assert score.perfection_bonus == 0

    def test_no_perfection_bonus_at_fifteen_stardates(self):
        score = compute_score(finished(used=15, limit=30), ship())

        assert score.speed_bonus == 500
        assert score.perfection_bonus == 0

    def test_any_damage_forfeits_bonus(self):
        damaged = ship()
        damaged.damage[ShipSystem.COMPUTER] = 0.99

        score = compute_score(finished(used=12), damaged)

        assert score.no_damage_bonus == 0
        assert score.total == 1958

    def test_breakdown_omits_zero_items(self):
        score = compute_score(finished(used=25, limit=25), ship(energy=50, torpedoes=0))

        labels = [label for label, _ in score.breakdown()]
        assert labels == ["Hostiles Destroyed", "No Damage Bonus"]


@pytest.mark.parametrize(
    "total, grade",
    [
        (3000, "S"),
        (2999, "A"),
        (2000, "A"),
        (1999, "B"),
        (1500, "B"),
        (1000, "C"),
        (500, "D"),
        (499, "F"),
        (0, "F"),
    ],
)
def test_grade_boundaries(total, grade):
    assert grade_for(total)[0] == grade


def test_failing_victory_description():
    assert grade_for(100) == ("F", "Needs Improvement")
