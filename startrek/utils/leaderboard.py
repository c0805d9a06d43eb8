"""High score table persisted as JSON.

The file holds the top scores and the last name entered, so the next
high score prompt can offer it as the default:

    {
      "scores": [{"name": "KIR", "score": 2958, "grade": "A", "date": "2026-10-19"}],
      "lastPlayerName": "KIR"
    }
"""

import json
import logging
from dataclasses import asdict, dataclass
from datetime import date
from pathlib import Path
from typing import Any, List, Optional, Union

from .constants import DEFAULT_PLAYER_NAME, LEADERBOARD_SIZE, PLAYER_NAME_LENGTH

logger = logging.getLogger(__name__)

DEFAULT_SCORES_FILE = "high_scores.json"


@dataclass
class HighScoreEntry:
    """One row of the high score table."""

    name: str  # Upper-cased, exactly PLAYER_NAME_LENGTH characters
    score: int
    grade: str
    date: str  # ISO date the score was recorded


def normalize_name(name: str) -> str:
    """Upper-case a player name and fit it to PLAYER_NAME_LENGTH characters.

    Examples:
        >>> normalize_name("kirk")
        'KIR'
        >>> normalize_name("al")
        'AL '
    """
    cleaned = name.strip().upper()[:PLAYER_NAME_LENGTH]
    if not cleaned:
        return DEFAULT_PLAYER_NAME
    return cleaned.ljust(PLAYER_NAME_LENGTH)


def resolve_scores_path(filepath: Union[str, Path] = DEFAULT_SCORES_FILE) -> Path:
    """Resolve a scores file path (relative paths land in the state directory).

    Example:
        resolve_scores_path("scores.json")  # state/scores.json
        resolve_scores_path("/tmp/scores.json")  # absolute path unchanged
    """
    path = Path(filepath)
    if not path.is_absolute():
        state_dir = Path(__file__).parent.parent.parent / "state"
        path = state_dir / path
    return path


class HighScoreTable:
    """Top LEADERBOARD_SIZE scores, highest first, plus the last player name."""

    def __init__(self, filepath: Union[str, Path] = DEFAULT_SCORES_FILE):
        """Load the table from disk if the file exists.

        Args:
            filepath: Scores file (relative paths resolve into state/)

        Raises:
            ValueError: If the file exists but is not valid JSON
        """
        self.path = resolve_scores_path(filepath)
        self.entries: List[HighScoreEntry] = []
        self.last_player_name: str = DEFAULT_PLAYER_NAME
        self.load()

    def load(self) -> None:
        if not self.path.exists():
            return

        with open(self.path) as f:
            data = json.load(f)

        self.entries = [_deserialize_entry(item) for item in data.get("scores", [])]
        self.entries.sort(key=lambda e: e.score, reverse=True)
        del self.entries[LEADERBOARD_SIZE:]
        self.last_player_name = data.get("lastPlayerName", DEFAULT_PLAYER_NAME)
        logger.debug("Loaded %d high scores from %s", len(self.entries), self.path)

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "scores": [asdict(entry) for entry in self.entries],
            "lastPlayerName": self.last_player_name,
        }
        with open(self.path, "w") as f:
            json.dump(data, f, indent=2)

    def is_high_score(self, score: int) -> bool:
        """True if score would earn a place in the table."""
        if score <= 0:
            return False
        if len(self.entries) < LEADERBOARD_SIZE:
            return True
        return score > self.entries[-1].score

    def add(self, name: str, score: int, grade: str, when: Optional[date] = None) -> Optional[int]:
        """Record a score if it qualifies and save the table.

        Args:
            name: Player name (normalized to 3 upper-case characters)
            score: Final total
            grade: Letter grade
            when: Date of the game (defaults to today)

        Returns:
            1-based rank of the new entry, or None if it did not qualify
        """
        if not self.is_high_score(score):
            return None

        entry = HighScoreEntry(
            name=normalize_name(name),
            score=score,
            grade=grade,
            date=(when or date.today()).isoformat(),
        )
        # Ties keep the earlier entry ahead
        rank = sum(1 for e in self.entries if e.score >= score)
        self.entries.insert(rank, entry)
        del self.entries[LEADERBOARD_SIZE:]
        self.last_player_name = entry.name
        self.save()

        logger.info("High score %d by %s at rank %d", score, entry.name, rank + 1)
        return rank + 1

    def to_list(self) -> List[dict]:
        return [asdict(entry) for entry in self.entries]


def _deserialize_entry(data: dict[str, Any]) -> HighScoreEntry:
    return HighScoreEntry(
        name=normalize_name(str(data["name"])),
        score=int(data["score"]),
        grade=str(data["grade"]),
        date=str(data["date"]),
    )
