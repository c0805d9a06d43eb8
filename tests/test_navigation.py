"""Tests for warp navigation, collisions and docking."""

from conftest import ScriptedRNG, build_mission, hostile, star, station

from startrek.engine.navigation import navigate, navigation_cost, plot_destination
from startrek.models import DefeatReason, EntityKind, Outcome, ShipSystem


class TestPlotDestination:
    def test_east_within_quadrant(self):
        assert plot_destination((3, 3), (4, 4), 3, 2) == ((3, 3), (6, 4))

    def test_north_is_negative_y(self):
        assert plot_destination((3, 3), (4, 4), 1, 3) == ((3, 3), (4, 1))

    def test_course_nine_equals_course_one(self):
        assert plot_destination((3, 3), (4, 4), 9, 3) == plot_destination((3, 3), (4, 4), 1, 3)

    def test_crosses_one_quadrant_boundary(self):
        """Sector overflow carries into the quadrant coordinate."""
        assert plot_destination((0, 0), (7, 4), 3, 2) == ((1, 0), (1, 4))

    def test_crosses_multiple_boundaries_westward(self):
        """Negative overflow wraps back into range and decrements the quadrant."""
        assert plot_destination((2, 2), (4, 4), 7, 8) == ((1, 2), (4, 4))

    def test_diagonal_rounds_half_up(self):
        """Course 2 at warp 1 lands on the north-east neighbour."""
        assert plot_destination((3, 3), (4, 4), 2, 1) == ((3, 3), (5, 3))

    def test_can_leave_galaxy(self):
        """Unvalidated destination may lie outside the galaxy."""
        quadrant, _ = plot_destination((0, 0), (0, 4), 7, 1)
        assert quadrant == (-1, 0)


def test_navigation_cost():
    """Energy cost is floor(warp * 10)."""
    assert navigation_cost(1) == 10
    assert navigation_cost(0.1) == 1
    assert navigation_cost(2.55) == 25
    assert navigation_cost(8) == 80


def test_navigation_cost_is_exact_for_decimal_warp():
    """Binary float error does not lose a unit: 2.3 * 10 costs 23."""
    assert navigation_cost(2.3) == 23
    assert navigation_cost(0.7) == 7
    assert navigation_cost(5.1) == 51


class TestNavigateRejections:
    """Rejected moves change nothing."""

    def test_galaxy_edge_rejected_without_cost(self):
        """Heading west out of quadrant (0,0) is refused before charging."""
        mission = build_mission(quadrant=(0, 0), sector=(0, 4), hostiles_elsewhere=1)

        result = mission.navigate(7, 1)

        assert not result.success
        assert mission.ship.energy == 3000
        assert mission.ship.quadrant == (0, 0)
        assert mission.ship.sector == (0, 4)
        assert mission.state.stardate == 2250

    def test_insufficient_energy(self):
        mission = build_mission(energy=5, hostiles_elsewhere=1)

        result = mission.navigate(3, 1)

        assert not result.success
        assert mission.ship.energy == 5
        assert mission.ship.sector == (4, 4)

    def test_damaged_navigation(self):
        mission = build_mission(hostiles_elsewhere=1)
        mission.ship.damage[ShipSystem.NAVIGATION] = 0.4

        result = mission.navigate(3, 1)

        assert not result.success
        assert "Warp engines" in result.messages[0]
        assert mission.ship.energy == 3000
        assert mission.state.stardate == 2250


class TestNavigate:
    def test_move_within_quadrant(self):
        """Successful move charges energy and advances the clock."""
        mission = build_mission(hostiles_elsewhere=1)

        result = mission.navigate(3, 2)

        assert result.success
        assert result.energy_used == 20
        assert mission.ship.sector == (6, 4)
        assert mission.ship.energy == 2980
        assert mission.state.stardate == 2251

    def test_zero_length_move_is_legal(self):
        """A move that rounds to the same sector still costs energy."""
        mission = build_mission(hostiles_elsewhere=1)

        result = mission.navigate(3, 0.1)

        assert result.success
        assert mission.ship.sector == (4, 4)
        assert mission.ship.energy == 2999

    def test_entering_new_quadrant_populates_it(self):
        """The destination quadrant is materialized and marked visited."""
        # Obstacles land on the diagonal, clear of the arrival sector
        rng = ScriptedRNG(randints=[1, 1, 2, 2, 3, 3, 4, 4, 5, 5])
        mission = build_mission(quadrant=(3, 3), sector=(7, 4), hostiles_elsewhere=1, rng=rng)
        destination = mission.galaxy.get(4, 3)
        destination.obstacles = 5

        result = navigate(mission, 3, 1)

        assert result.quadrant_changed
        assert mission.ship.quadrant == (4, 3)
        assert mission.ship.sector == (0, 4)
        assert (mission.contents.qx, mission.contents.qy) == (4, 3)
        assert len(mission.contents.obstacles) == 5
        assert mission.contents.at(0, 4) is None
        assert destination.visited

    def test_collision_destroys_ship(self):
        """Landing on an occupied sector is an immediate defeat."""
        mission = build_mission(entities=[star(6, 4)], hostiles_elsewhere=1)

        result = mission.navigate(3, 2)

        assert result.collision == EntityKind.OBSTACLE
        assert mission.state.outcome == Outcome.DEFEAT
        assert mission.state.defeat_reason == DefeatReason.COLLISION
        assert mission.ship.destroyed
        assert mission.score.total == 0
        assert mission.score.grade == "F"

    def test_collision_on_entering_quadrant(self):
        """The arrival sector is not kept clear when a quadrant is populated."""
        rng = ScriptedRNG(randints=[0, 4])
        mission = build_mission(quadrant=(3, 3), sector=(7, 4), hostiles_elsewhere=1, rng=rng)
        mission.galaxy.get(4, 3).obstacles = 1

        result = mission.navigate(3, 1)

        assert result.quadrant_changed
        assert result.collision == EntityKind.OBSTACLE
        assert mission.ship.sector == (0, 4)
        assert mission.ship.destroyed
        assert mission.state.defeat_reason == DefeatReason.COLLISION

    def test_entering_packed_quadrant_always_collides(self):
        """Every sector of a 64-star quadrant is taken, so arrival is fatal."""
        mission = build_mission(quadrant=(3, 3), sector=(7, 4), hostiles_elsewhere=1)
        mission.galaxy.get(4, 3).obstacles = 64

        result = mission.navigate(3, 1)

        assert result.collision == EntityKind.OBSTACLE
        assert mission.state.outcome == Outcome.DEFEAT


class TestDocking:
    def test_diagonal_docking_restores_ship(self):
        """Ending next to a station (diagonal counts) resupplies and repairs."""
        mission = build_mission(
            entities=[station(6, 6)], energy=1000, torpedoes=2, shields=300, hostiles_elsewhere=1
        )
        mission.ship.damage[ShipSystem.TORPEDO_TUBES] = 0.6

        result = mission.navigate(4, 1)

        assert mission.ship.sector == (5, 5)
        assert result.docked
        assert mission.ship.docked
        assert mission.ship.energy == mission.ship.max_energy
        assert mission.ship.torpedoes == mission.ship.max_torpedoes
        assert mission.ship.shields == 0
        assert not mission.ship.shields_up
        assert mission.ship.damage.all_healthy()

    def test_no_docking_two_sectors_away(self):
        """Chebyshev distance 2 does not dock."""
        mission = build_mission(entities=[station(7, 7)], energy=1000, hostiles_elsewhere=1)

        result = mission.navigate(4, 1)

        assert mission.ship.sector == (5, 5)
        assert not result.docked
        assert not mission.ship.docked
        assert mission.ship.energy == 990

    def test_docked_ship_is_not_attacked(self):
        """Hostiles hold fire while the ship is docked."""
        mission = build_mission(
            entities=[station(6, 6), hostile(5, 6, energy=300)], hostiles_elsewhere=1
        )
        mission.rng.randoms = [0.0, 0.0]

        mission.navigate(4, 1)

        assert mission.ship.docked
        assert mission.ship.energy == mission.ship.max_energy
        assert mission.rng.randoms == [0.0, 0.0]
