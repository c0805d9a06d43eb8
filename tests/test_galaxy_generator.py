"""Tests for galaxy generation and quadrant population."""

import pytest

from startrek.engine.galaxy_generator import (
    choose_start_quadrant,
    generate_galaxy,
    place_ship,
    populate_quadrant,
)
from startrek.models import (
    DIFFICULTY_PRESETS,
    Difficulty,
    Entity,
    EntityKind,
    GalaxyMap,
    GameConfig,
    QuadrantContents,
    QuadrantSummary,
)
from startrek.utils import GameRNG


class TestGenerateGalaxy:
    """Galaxy-wide invariants across many seeds."""

    @pytest.mark.parametrize("seed", range(25))
    def test_hostile_minimum_and_resupply(self, seed):
        """Every galaxy meets the hostile floor and has a resupply station."""
        galaxy = generate_galaxy(GameConfig(), GameRNG(seed))

        assert galaxy.total_hostiles() >= 10
        assert galaxy.total_resupply() >= 1

    @pytest.mark.parametrize("seed", range(10))
    def test_per_quadrant_limits(self, seed):
        """Hostiles are capped at 3 per quadrant and obstacles stay within 1-8."""
        galaxy = generate_galaxy(GameConfig(), GameRNG(seed))

        for x, y in galaxy.coordinates():
            cell = galaxy.get(x, y)
            assert 0 <= cell.hostiles <= 3
            assert 1 <= cell.obstacles <= 8
            assert cell.resupply in (0, 1)
            assert not cell.visited

    def test_admiral_minimum(self):
        """The ADMIRAL preset raises the hostile floor."""
        config = DIFFICULTY_PRESETS[Difficulty.ADMIRAL]
        for seed in range(10):
            galaxy = generate_galaxy(config, GameRNG(seed))
            assert galaxy.total_hostiles() >= config.min_hostiles

    def test_same_seed_same_galaxy(self):
        """Seeded generation is reproducible."""
        a = generate_galaxy(GameConfig(), GameRNG(7))
        b = generate_galaxy(GameConfig(), GameRNG(7))

        assert [c.code for row in a.cells for c in row] == [c.code for row in b.cells for c in row]


class TestChooseStartQuadrant:
    def test_prefers_hostile_free_quadrant(self):
        """Start quadrant has no hostiles when one exists."""
        for seed in range(10):
            galaxy = generate_galaxy(GameConfig(), GameRNG(seed))
            x, y = choose_start_quadrant(galaxy, GameRNG(seed))
            assert galaxy.get(x, y).hostiles == 0

    def test_falls_back_when_every_quadrant_is_hostile(self):
        """With hostiles everywhere, any in-bounds quadrant is returned."""
        galaxy = GalaxyMap()
        for x, y in galaxy.coordinates():
            galaxy.get(x, y).hostiles = 1

        x, y = choose_start_quadrant(galaxy, GameRNG(1))

        assert galaxy.in_bounds(x, y)


class TestPopulateQuadrant:
    def test_counts_match_summary(self):
        """One entity per counted object."""
        summary = QuadrantSummary(hostiles=3, resupply=1, obstacles=8)
        contents = populate_quadrant(summary, 2, 5, GameRNG(3))

        assert (contents.qx, contents.qy) == (2, 5)
        assert len(contents.hostiles) == 3
        assert len(contents.resupply_stations) == 1
        assert len(contents.obstacles) == 8

    @pytest.mark.parametrize("seed", range(20))
    def test_no_overlap(self, seed):
        """No two entities share a sector."""
        summary = QuadrantSummary(hostiles=3, resupply=1, obstacles=8)
        contents = populate_quadrant(summary, 0, 0, GameRNG(seed))

        sectors = [e.sector for e in contents.entities]
        assert len(sectors) == len(set(sectors))

    def test_hostile_stats(self):
        """Hostile energy is 200-299 and shields 100-199 at normal strength."""
        summary = QuadrantSummary(hostiles=3)
        for seed in range(20):
            for h in populate_quadrant(summary, 0, 0, GameRNG(seed)).hostiles:
                assert 200 <= h.energy <= 299
                assert 100 <= h.shields <= 199

    def test_hostile_strength_scales_energy(self):
        """CADET hostiles spawn weaker."""
        config = DIFFICULTY_PRESETS[Difficulty.CADET]
        summary = QuadrantSummary(hostiles=3)
        for seed in range(20):
            for h in populate_quadrant(summary, 0, 0, GameRNG(seed), config).hostiles:
                assert int(200 * 0.7) <= h.energy <= int(299 * 0.7)


class TestPlaceShip:
    def test_ship_lands_on_empty_sector(self):
        summary = QuadrantSummary(hostiles=2, resupply=1, obstacles=8)
        for seed in range(20):
            rng = GameRNG(seed)
            contents = populate_quadrant(summary, 0, 0, rng)
            assert place_ship(contents, rng) not in contents.occupied()

    def test_full_quadrant_raises(self):
        """A quadrant with no free sector cannot take the ship."""
        entities = [Entity(EntityKind.OBSTACLE, x, y) for y in range(8) for x in range(8)]
        contents = QuadrantContents(qx=0, qy=0, entities=entities)

        with pytest.raises(RuntimeError):
            place_ship(contents, GameRNG(0))
