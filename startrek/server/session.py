"""Game session management for HTTP play."""

import logging
import uuid
from dataclasses import dataclass

from ..engine import Mission
from ..interface.command_processor import CommandProcessor
from ..models import GameConfig, ShipSystem
from ..utils import GameRNG
from ..utils.leaderboard import HighScoreTable

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """Manages one game session.

    Owns the command processor (and through it the mission) for a single
    player. Sessions never share engine state.
    """

    id: str
    processor: CommandProcessor
    seed: int
    score_submitted: bool = False

    @property
    def mission(self) -> Mission:
        return self.processor.mission

    def get_state(self) -> dict:
        """Serialize the player-visible mission state.

        Returns:
            Dictionary with ship, mission and current quadrant data
        """
        mission = self.mission
        ship = mission.ship
        state = mission.state
        return {
            "stardate": state.stardate,
            "initialStardate": state.initial_stardate,
            "stardateLimit": state.stardate_limit,
            "stardatesRemaining": state.stardates_remaining,
            "hostilesRemaining": state.hostiles_remaining,
            "hostilesAtStart": state.hostiles_at_start,
            "resupplyRemaining": state.resupply_remaining,
            "outcome": state.outcome.value,
            "defeatReason": state.defeat_reason.value if state.defeat_reason else None,
            "gameOver": state.game_over,
            "victory": state.victory,
            "condition": mission.condition().value,
            "liveScore": mission.live_score(),
            "ship": {
                "quadrant": list(ship.quadrant),
                "sector": list(ship.sector),
                "energy": ship.energy,
                "maxEnergy": ship.max_energy,
                "shields": ship.shields,
                "shieldsUp": ship.shields_up,
                "torpedoes": ship.torpedoes,
                "maxTorpedoes": ship.max_torpedoes,
                "docked": ship.docked,
                "damage": {system.name: ship.damage[system] for system in ShipSystem},
            },
            "quadrant": self._serialize_quadrant(),
            "awaitingInput": self.processor.awaiting_input,
            "prompt": self.processor.prompt,
        }

    def _serialize_quadrant(self) -> list[dict]:
        """Entities of the current quadrant (hidden when sensors are down)."""
        if not self.mission.ship.damage.is_operational(ShipSystem.SHORT_RANGE_SENSORS):
            return []
        return [
            {
                "kind": entity.kind.value,
                "x": entity.x,
                "y": entity.y,
            }
            for entity in self.mission.contents.entities
        ]


class GameSessionManager:
    """Manages all active game sessions.

    In-memory storage; the high score table is shared and file-backed.
    """

    def __init__(self, scores: HighScoreTable | None = None):
        self.sessions: dict[str, GameSession] = {}
        self.scores = scores or HighScoreTable()

    async def create_session(self, config: GameConfig, seed: int | None = None) -> GameSession:
        """Create a new game session.

        Args:
            config: Mission configuration
            seed: Optional RNG seed for determinism

        Returns:
            Newly created GameSession
        """
        game_id = f"game-{uuid.uuid4().hex[:8]}"

        if seed is None:
            seed = uuid.uuid4().int % (2**32)

        mission = Mission.new(config, GameRNG(seed))
        session = GameSession(id=game_id, processor=CommandProcessor(mission), seed=seed)
        self.sessions[game_id] = session

        logger.info(f"Created game {game_id}: difficulty={config.difficulty.name}, seed={seed}")
        return session

    def get(self, game_id: str) -> GameSession | None:
        """Get a game session by ID.

        Args:
            game_id: Game session ID

        Returns:
            GameSession if found, None otherwise
        """
        return self.sessions.get(game_id)

    def delete(self, game_id: str) -> bool:
        """Delete a game session.

        Args:
            game_id: Game session ID

        Returns:
            True if deleted, False if not found
        """
        if game_id in self.sessions:
            del self.sessions[game_id]
            logger.info(f"Deleted game {game_id}")
            return True
        return False

    async def cleanup_all(self):
        """Clean up all sessions (called on shutdown)."""
        logger.info(f"Cleaning up {len(self.sessions)} game sessions")
        self.sessions.clear()
