"""Tests for data model validation and helpers."""

import pytest

from startrek.models import (
    DIFFICULTY_PRESETS,
    Condition,
    Difficulty,
    Entity,
    EntityKind,
    GalaxyMap,
    GameConfig,
    MissionState,
    QuadrantContents,
    QuadrantSummary,
    ShipState,
    ShipSystem,
    SystemDamageTable,
)


class TestEntity:
    def test_hostile_requires_energy(self):
        with pytest.raises(ValueError, match="energy"):
            Entity(EntityKind.HOSTILE, 1, 1)

    def test_hostile_shields_default_to_zero(self):
        assert Entity(EntityKind.HOSTILE, 1, 1, energy=100).shields == 0

    def test_invalid_coordinates(self):
        with pytest.raises(ValueError):
            Entity(EntityKind.OBSTACLE, 8, 0)
        with pytest.raises(ValueError):
            Entity(EntityKind.OBSTACLE, 0, -1)


class TestQuadrantContents:
    def test_overlap_rejected(self):
        with pytest.raises(ValueError, match="overlapping"):
            QuadrantContents(
                qx=0,
                qy=0,
                entities=[Entity(EntityKind.OBSTACLE, 2, 2), Entity(EntityKind.RESUPPLY, 2, 2)],
            )

    def test_add_to_occupied_sector(self):
        contents = QuadrantContents(qx=0, qy=0, entities=[Entity(EntityKind.OBSTACLE, 2, 2)])

        with pytest.raises(ValueError):
            contents.add(Entity(EntityKind.RESUPPLY, 2, 2))

    def test_lookup_and_filters(self):
        star = Entity(EntityKind.OBSTACLE, 2, 2)
        base = Entity(EntityKind.RESUPPLY, 3, 3)
        contents = QuadrantContents(qx=0, qy=0, entities=[star, base])

        assert contents.at(2, 2) is star
        assert contents.at(4, 4) is None
        assert contents.resupply_stations == [base]
        assert contents.occupied() == {(2, 2), (3, 3)}

        contents.remove(star)
        assert contents.obstacles == []


class TestGalaxyMap:
    def test_code(self):
        assert QuadrantSummary(hostiles=2, resupply=1, obstacles=7).code == "217"

    def test_out_of_bounds(self):
        galaxy = GalaxyMap()

        assert not galaxy.in_bounds(8, 0)
        with pytest.raises(ValueError):
            galaxy.get(-1, 3)

    def test_totals(self):
        galaxy = GalaxyMap()
        galaxy.get(0, 0).hostiles = 2
        galaxy.get(7, 7).hostiles = 1
        galaxy.get(3, 4).resupply = 1

        assert galaxy.total_hostiles() == 3
        assert galaxy.total_resupply() == 1
        assert len(list(galaxy.coordinates())) == 64

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            QuadrantSummary(hostiles=-1)


class TestSystemDamageTable:
    def test_starts_healthy(self):
        table = SystemDamageTable()

        assert table.all_healthy()
        assert table.undamaged() == list(ShipSystem)

    def test_values_clamped(self):
        table = SystemDamageTable()
        table[ShipSystem.COMPUTER] = -0.5
        table[ShipSystem.NAVIGATION] = 1.7

        assert table[ShipSystem.COMPUTER] == 0.0
        assert table[ShipSystem.NAVIGATION] == 1.0

    def test_invalid_initial_value(self):
        with pytest.raises(ValueError):
            SystemDamageTable({ShipSystem.COMPUTER: 1.5})


class TestShipState:
    def test_invalid_sector(self):
        with pytest.raises(ValueError):
            ShipState(quadrant=(0, 0), sector=(8, 0))

    def test_torpedoes_bounded(self):
        with pytest.raises(ValueError):
            ShipState(quadrant=(0, 0), sector=(0, 0), torpedoes=11)

    def test_condition_priority(self):
        ship = ShipState(quadrant=(0, 0), sector=(0, 0), energy=100)

        assert ship.condition(0) == Condition.YELLOW
        assert ship.condition(2) == Condition.RED
        ship.docked = True
        assert ship.condition(2) == Condition.DOCKED


class TestMissionState:
    def test_derived_values(self):
        state = MissionState(
            stardate=2260,
            initial_stardate=2250,
            stardate_limit=30,
            hostiles_remaining=4,
            hostiles_at_start=12,
        )

        assert state.stardates_used == 10
        assert state.stardates_remaining == 20
        assert state.hostiles_destroyed == 8
        assert state.deadline == 2280
        assert not state.game_over

    def test_remaining_cannot_exceed_start(self):
        with pytest.raises(ValueError):
            MissionState(
                stardate=2250,
                initial_stardate=2250,
                stardate_limit=30,
                hostiles_remaining=5,
                hostiles_at_start=4,
            )


class TestGameConfig:
    def test_presets(self):
        assert DIFFICULTY_PRESETS[Difficulty.CAPTAIN] == GameConfig()
        assert GameConfig.for_difficulty(Difficulty.CADET).stardate_limit == 40

    def test_invalid_multiplier(self):
        with pytest.raises(ValueError, match="damage_multiplier"):
            GameConfig(damage_multiplier=0)

    def test_min_hostiles_within_galaxy_capacity(self):
        """64 quadrants of at most 3 hostiles hold 192."""
        assert GameConfig(min_hostiles=192).min_hostiles == 192
        with pytest.raises(ValueError, match="min_hostiles"):
            GameConfig(min_hostiles=193)
        with pytest.raises(ValueError, match="must be <= 192"):
            GameConfig().with_overrides(min_hostiles=500)

    def test_with_overrides_keeps_other_fields(self):
        config = DIFFICULTY_PRESETS[Difficulty.ADMIRAL].with_overrides(stardate_limit=5)

        assert config.stardate_limit == 5
        assert config.initial_energy == 2500
