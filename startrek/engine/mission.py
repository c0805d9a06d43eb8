"""Mission state machine.

The Mission owns the whole simulation for one session and sequences every
command the same way:
1. Run the resolver (navigation, combat or shield control)
2. Check victory immediately if a hostile was destroyed
3. Let the remaining hostiles return fire (not after shield transfers)
4. Advance the clock: passive repair, stardate +1, terminal checks

Terminal checks at the turn boundary, in order:
- energy <= 0 while undocked: defeat
- stardates used >= limit with hostiles left: defeat
- no hostiles left: victory

The score is computed once, on the transition to game over.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from ..models import (
    ALL_SYSTEMS,
    DefeatReason,
    Entity,
    EntityKind,
    GalaxyMap,
    GameConfig,
    MissionState,
    Outcome,
    QuadrantContents,
    QuadrantSummary,
    ScoreRecord,
    ShipState,
    ShipSystem,
)
from ..utils import QUADRANT_SIZE, GameRNG, course_between, euclidean_distance, is_adjacent
from ..utils.constants import INITIAL_STARDATE_RANGE, STARDATE_INCREMENT
from . import scoring
from .combat import (
    PhaserResult,
    TorpedoResult,
    fire_phasers,
    fire_torpedo,
    hostile_counter_attack,
)
from .damage import ShieldResult, adjust_shields, check_system, passive_repair, update_docking
from .galaxy_generator import (
    choose_start_quadrant,
    generate_galaxy,
    place_ship,
    populate_quadrant,
)
from .navigation import NavigationResult, navigate

logger = logging.getLogger(__name__)

DEFEAT_MESSAGES = {
    DefeatReason.ENERGY_DEPLETED: "The ship has run out of energy and is dead in space.",
    DefeatReason.TIME_EXPIRED: "Time has run out. Hostile forces remain in the galaxy.",
    DefeatReason.COLLISION: "The ship was lost in a collision.",
    DefeatReason.DESTROYED: "The ship has been destroyed by hostile fire.",
    DefeatReason.RESIGNED: "Command relinquished. The mission is abandoned.",
}


class MissionOverError(RuntimeError):
    """Raised when a command is issued after the mission has ended."""


@dataclass
class CommandResult:
    """Outcome of a read-only command.

    Attributes:
        success: False if the command was blocked
        messages: Narrative lines
        data: Command-specific payload for the renderer
    """

    success: bool
    messages: List[str] = field(default_factory=list)
    data: Any = None


@dataclass
class TargetSolution:
    """Library computer firing data for one hostile."""

    sector: Tuple[int, int]
    distance: float
    course: float
    energy: int


class Mission:
    """One game session: galaxy, ship, current quadrant and mission clock."""

    def __init__(
        self,
        config: GameConfig,
        rng: GameRNG,
        galaxy: GalaxyMap,
        contents: QuadrantContents,
        ship: ShipState,
        state: MissionState,
    ):
        self.config = config
        self.rng = rng
        self.galaxy = galaxy
        self.contents = contents
        self.ship = ship
        self.state = state
        self._score: Optional[ScoreRecord] = None

    @classmethod
    def new(cls, config: Optional[GameConfig] = None, rng: Optional[GameRNG] = None) -> "Mission":
        """Start a fresh mission.

        Args:
            config: Mission configuration (defaults to the CAPTAIN preset)
            rng: Random source (defaults to an unseeded GameRNG)

        Returns:
            Mission in progress with the briefing in its log
        """
        config = config or GameConfig()
        rng = rng or GameRNG()

        galaxy = generate_galaxy(config, rng)
        qx, qy = choose_start_quadrant(galaxy, rng)
        summary = galaxy.get(qx, qy)
        summary.visited = True
        contents = populate_quadrant(summary, qx, qy, rng, config)
        sector = place_ship(contents, rng)

        ship = ShipState(
            quadrant=(qx, qy),
            sector=sector,
            energy=config.initial_energy,
            max_energy=config.initial_energy,
            torpedoes=config.initial_torpedoes,
            max_torpedoes=config.initial_torpedoes,
        )
        stardate = rng.randint(*INITIAL_STARDATE_RANGE)
        hostiles = galaxy.total_hostiles()
        state = MissionState(
            stardate=stardate,
            initial_stardate=stardate,
            stardate_limit=config.stardate_limit,
            hostiles_remaining=hostiles,
            hostiles_at_start=hostiles,
            resupply_remaining=galaxy.total_resupply(),
        )

        mission = cls(config, rng, galaxy, contents, ship, state)
        update_docking(ship, contents)
        state.log(
            f"Stardate {stardate}. Difficulty: {config.difficulty.name}.",
            f"Your mission: destroy {hostiles} hostile vessels before stardate {state.deadline}.",
            f"You have {config.stardate_limit} stardates and "
            f"{galaxy.total_resupply()} resupply stations.",
            f"Current position: quadrant {qx},{qy} sector {sector[0]},{sector[1]}.",
        )
        logger.info(
            "New mission: %s, %d hostiles, stardate %d, seed %s",
            config.difficulty.name,
            hostiles,
            stardate,
            rng.seed,
        )
        return mission

    # ----------------------------------------------------------------- state

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    @property
    def score(self) -> Optional[ScoreRecord]:
        """Final score, available once the mission has ended."""
        return self._score

    def live_score(self) -> int:
        return scoring.live_score(self.state, self.ship)

    def condition(self):
        return self.ship.condition(len(self.contents.hostiles))

    def remove_entity(self, entity: Entity) -> None:
        """Remove a destroyed entity and update the galaxy and mission tallies."""
        self.contents.remove(entity)
        summary = self.galaxy.get(*self.ship.quadrant)

        if entity.kind == EntityKind.HOSTILE:
            summary.hostiles = max(0, summary.hostiles - 1)
            self.state.hostiles_remaining = max(0, self.state.hostiles_remaining - 1)
        elif entity.kind == EntityKind.RESUPPLY:
            summary.resupply = max(0, summary.resupply - 1)
            self.state.resupply_remaining = max(0, self.state.resupply_remaining - 1)
            sx, sy = self.ship.sector
            self.ship.docked = any(
                is_adjacent(sx, sy, s.x, s.y) for s in self.contents.resupply_stations
            )
        elif entity.kind == EntityKind.OBSTACLE:
            summary.obstacles = max(0, summary.obstacles - 1)

    # -------------------------------------------------------------- commands

    def navigate(self, course: float, warp: float) -> NavigationResult:
        self._ensure_active()
        result = navigate(self, course, warp)
        self.state.log(*result.messages)
        if not result.success:
            return result
        if result.collision is not None:
            self._end(Outcome.DEFEAT, DefeatReason.COLLISION)
            return result
        self._finish_action(counter_attack=True)
        return result

    def fire_phasers(self, amount: int) -> PhaserResult:
        self._ensure_active()
        result = fire_phasers(self, amount)
        self.state.log(*result.messages)
        if result.success:
            self._finish_action(counter_attack=True)
        return result

    def fire_torpedo(self, course: float) -> TorpedoResult:
        self._ensure_active()
        result = fire_torpedo(self, course)
        self.state.log(*result.messages)
        if result.success:
            self._finish_action(counter_attack=True)
        return result

    def adjust_shields(self, amount: int) -> ShieldResult:
        self._ensure_active()
        result = adjust_shields(self, amount)
        self.state.log(*result.messages)
        if result.success:
            self._finish_action(counter_attack=False)
        return result

    def resign(self) -> None:
        """End the mission as a defeat at the player's request."""
        self._ensure_active()
        self._end(Outcome.DEFEAT, DefeatReason.RESIGNED)

    def advance_turn(self) -> None:
        """Passive repair, stardate +1, then the turn-boundary terminal checks."""
        if self.game_over:
            return

        for system in passive_repair(self.ship, self.config.repair_multiplier):
            self.state.log(f"{system.value} repaired and back online.")
        self.state.stardate += STARDATE_INCREMENT

        if self.ship.energy <= 0 and not self.ship.docked:
            self._end(Outcome.DEFEAT, DefeatReason.ENERGY_DEPLETED)
        elif (
            self.state.stardates_used >= self.state.stardate_limit
            and self.state.hostiles_remaining > 0
        ):
            self._end(Outcome.DEFEAT, DefeatReason.TIME_EXPIRED)
        elif self.state.hostiles_remaining == 0:
            self._end(Outcome.VICTORY)

    # ------------------------------------------------------------ read-only

    def check_system(self, system: ShipSystem) -> Optional[str]:
        return check_system(self.ship, system)

    def short_range_scan(self) -> CommandResult:
        """Sector grid of the current quadrant, indexed [y][x].

        Cells hold an EntityKind (SHIP for the player) or None.
        """
        blocked = self.check_system(ShipSystem.SHORT_RANGE_SENSORS)
        if blocked:
            return CommandResult(success=False, messages=[blocked])

        grid: List[List[Optional[EntityKind]]] = [
            [None] * QUADRANT_SIZE for _ in range(QUADRANT_SIZE)
        ]
        for entity in self.contents.entities:
            grid[entity.y][entity.x] = entity.kind
        sx, sy = self.ship.sector
        grid[sy][sx] = EntityKind.SHIP
        return CommandResult(success=True, data=grid)

    def long_range_scan(self) -> CommandResult:
        """Summaries of the 3x3 block around the ship, None outside the galaxy.

        Every scanned quadrant is marked visited.
        """
        blocked = self.check_system(ShipSystem.LONG_RANGE_SENSORS)
        if blocked:
            return CommandResult(success=False, messages=[blocked])

        qx, qy = self.ship.quadrant
        rows: List[List[Optional[QuadrantSummary]]] = []
        for y in range(qy - 1, qy + 2):
            row = []
            for x in range(qx - 1, qx + 2):
                if self.galaxy.in_bounds(x, y):
                    summary = self.galaxy.get(x, y)
                    summary.visited = True
                    row.append(summary)
                else:
                    row.append(None)
            rows.append(row)
        return CommandResult(success=True, data=rows)

    def damage_report(self) -> CommandResult:
        """Health of every system in table order."""
        data = [(system, self.ship.damage[system]) for system in ALL_SYSTEMS]
        return CommandResult(success=True, data=data)

    def library_computer(self, function: int) -> CommandResult:
        """Run a library computer function.

        Args:
            function: 1 = hostile distances and courses, 2 = status report,
                3 = galactic record

        Returns:
            CommandResult whose data is a list of TargetSolution (1), None
            (2) or the GalaxyMap (3)
        """
        blocked = self.check_system(ShipSystem.COMPUTER)
        if blocked:
            return CommandResult(success=False, messages=[blocked])

        if function == 1:
            sx, sy = self.ship.sector
            solutions = [
                TargetSolution(
                    sector=h.sector,
                    distance=euclidean_distance(sx, sy, h.x, h.y),
                    course=course_between(sx, sy, h.x, h.y),
                    energy=h.energy,
                )
                for h in self.contents.hostiles
            ]
            messages = [] if solutions else ["No hostiles in this quadrant."]
            return CommandResult(success=True, messages=messages, data=solutions)
        if function == 2:
            return CommandResult(success=True)
        if function == 3:
            return CommandResult(success=True, data=self.galaxy)
        return CommandResult(success=False, messages=["Computer function must be 1, 2 or 3."])

    # -------------------------------------------------------------- internal

    def _ensure_active(self) -> None:
        if self.game_over:
            raise MissionOverError("The mission is over")

    def _finish_action(self, counter_attack: bool) -> None:
        """Post-resolver sequence shared by every turn-consuming command."""
        if self.state.hostiles_remaining == 0:
            self._end(Outcome.VICTORY)
            return
        if self.ship.energy <= 0 and not self.ship.docked:
            self._end(Outcome.DEFEAT, DefeatReason.ENERGY_DEPLETED)
            return

        if counter_attack:
            attack = hostile_counter_attack(self)
            self.state.log(*attack.messages)
            if attack.events:
                logger.debug(
                    "Counter-attack: %d shots, %d damage", len(attack.events), attack.total_damage
                )
            if self.ship.energy <= 0:
                self._end(Outcome.DEFEAT, DefeatReason.DESTROYED)
                return

        self.advance_turn()

    def _end(self, outcome: Outcome, reason: Optional[DefeatReason] = None) -> None:
        """Transition to game over and compute the score exactly once."""
        if self.game_over:
            return

        self.state.outcome = outcome
        self.state.defeat_reason = reason
        if reason in (
            DefeatReason.COLLISION,
            DefeatReason.DESTROYED,
            DefeatReason.ENERGY_DEPLETED,
        ):
            self.ship.destroyed = True

        self._score = scoring.compute_score(self.state, self.ship)

        if outcome == Outcome.VICTORY:
            self.state.log(
                "*** MISSION ACCOMPLISHED ***",
                f"All hostile vessels destroyed by stardate {self.state.stardate}.",
            )
        else:
            self.state.log("*** MISSION FAILED ***", DEFEAT_MESSAGES[reason])
        self.state.log(f"Final score: {self._score.total} (Grade {self._score.grade})")

        logger.info(
            "Mission ended: %s%s, score %d",
            outcome.name,
            f" ({reason.name})" if reason else "",
            self._score.total,
        )
