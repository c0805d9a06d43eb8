"""Console player for plain-terminal sessions.

This module provides the HumanPlayer class which reads bridge commands
from stdin, feeds them to a CommandProcessor and prints the results. At
the end of a mission it records qualifying scores in the high score table.
"""

import logging
from typing import Optional

from ..engine import Mission
from ..utils.leaderboard import HighScoreTable
from .command_processor import CommandProcessor

logger = logging.getLogger(__name__)


class HumanPlayer:
    """Command-line controller for one player.

    Handles the read-eval-print loop, high score entry and the choice to
    start another mission.
    """

    def __init__(self, mission: Mission, scores: Optional[HighScoreTable] = None):
        """Initialize console player.

        Args:
            mission: Mission to play
            scores: High score table (scores are not recorded if None)
        """
        self.processor = CommandProcessor(mission)
        self.scores = scores

    def play(self) -> None:
        """Run missions until the player declines another one."""
        self._print_lines(self.processor.mission.state.messages)
        print("Type HELP for a list of commands.")
        print()

        while True:
            try:
                command = input(f"{self.processor.prompt} ").strip()
            except (KeyboardInterrupt, EOFError):
                print("\nExiting. Thanks for playing!")
                return

            was_over = self.processor.mission.game_over
            self._print_lines(self.processor.process(command))

            if self.processor.mission.game_over and not was_over:
                self._record_score()
                if not self._ask_yes_no("Start a new mission? (y/n) "):
                    print("Thanks for playing!")
                    return
                self._print_lines(self.processor.new_game())

    def _record_score(self) -> None:
        """Offer a high score entry for the finished mission."""
        score = self.processor.mission.score
        if self.scores is None or score is None:
            return
        if not self.scores.is_high_score(score.total):
            return

        default = self.scores.last_player_name
        try:
            name = input(f"New high score! Enter your initials [{default}]: ").strip()
        except (KeyboardInterrupt, EOFError):
            name = ""
        rank = self.scores.add(name or default, score.total, score.grade)
        if rank is not None:
            print(f"Recorded at position {rank}.")
        self.show_high_scores()

    def show_high_scores(self) -> None:
        if self.scores is not None:
            print_high_scores(self.scores)

    def _ask_yes_no(self, question: str) -> bool:
        try:
            answer = input(question).strip().lower()
        except (KeyboardInterrupt, EOFError):
            return False
        return answer in ("y", "yes")

    def _print_lines(self, lines) -> None:
        for line in lines:
            print(line)


def print_high_scores(scores: HighScoreTable) -> None:
    """Print the high score table."""
    print()
    print("=== HIGH SCORES ===")
    if not scores.entries:
        print("No scores recorded yet")
    for i, entry in enumerate(scores.entries, 1):
        print(f"{i:2d}. {entry.name}  {entry.score:6d}  {entry.grade}  {entry.date}")
    print()
