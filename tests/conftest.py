"""Shared builders for hand-made missions and a scripted random source."""

from startrek.engine import Mission
from startrek.models import (
    Entity,
    EntityKind,
    GalaxyMap,
    GameConfig,
    MissionState,
    QuadrantContents,
    ShipState,
)
from startrek.utils import GameRNG


class ScriptedRNG(GameRNG):
    """GameRNG whose random(), uniform() and randint() rolls can be queued up front.

    Once a queue runs dry the seeded generator takes over.
    """

    def __init__(self, randoms=(), uniforms=(), seed=0, randints=()):
        super().__init__(seed)
        self.randoms = list(randoms)
        self.uniforms = list(uniforms)
        self.randints = list(randints)

    def random(self) -> float:
        if self.randoms:
            return self.randoms.pop(0)
        return super().random()

    def uniform(self, a: float, b: float) -> float:
        if self.uniforms:
            return self.uniforms.pop(0)
        return super().uniform(a, b)

    def randint(self, a: int, b: int) -> int:
        if self.randints:
            return self.randints.pop(0)
        return super().randint(a, b)


def hostile(x, y, energy=200, shields=0):
    return Entity(EntityKind.HOSTILE, x, y, energy=energy, shields=shields)


def station(x, y):
    return Entity(EntityKind.RESUPPLY, x, y)


def star(x, y):
    return Entity(EntityKind.OBSTACLE, x, y)


def build_mission(
    entities=(),
    quadrant=(3, 3),
    sector=(4, 4),
    energy=3000,
    torpedoes=10,
    shields=0,
    stardate=2250,
    stardate_limit=30,
    hostiles_elsewhere=0,
    config=None,
    rng=None,
):
    """Mission with a hand-placed current quadrant.

    Args:
        entities: Entities of the current quadrant
        quadrant: The ship's quadrant
        sector: The ship's sector
        hostiles_elsewhere: Extra hostiles counted in quadrant (7, 7)
    """
    config = config or GameConfig()
    galaxy = GalaxyMap()
    contents = QuadrantContents(qx=quadrant[0], qy=quadrant[1], entities=list(entities))

    summary = galaxy.get(*quadrant)
    summary.hostiles = len(contents.hostiles)
    summary.resupply = len(contents.resupply_stations)
    summary.obstacles = len(contents.obstacles)
    summary.visited = True
    if hostiles_elsewhere:
        galaxy.get(7, 7).hostiles += hostiles_elsewhere

    ship = ShipState(
        quadrant=quadrant,
        sector=sector,
        energy=energy,
        max_energy=config.initial_energy,
        shields=shields,
        shields_up=shields > 0,
        torpedoes=torpedoes,
        max_torpedoes=config.initial_torpedoes,
    )
    total = galaxy.total_hostiles()
    state = MissionState(
        stardate=stardate,
        initial_stardate=stardate,
        stardate_limit=stardate_limit,
        hostiles_remaining=total,
        hostiles_at_start=total,
        resupply_remaining=galaxy.total_resupply(),
    )
    return Mission(config, rng or ScriptedRNG(), galaxy, contents, ship, state)
