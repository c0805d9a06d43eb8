#!/usr/bin/env python3
"""Star Trek - Main entry point.

A turn-based tactical simulation: hunt down every hostile vessel in an
8x8 galaxy before the stardate deadline runs out.
"""

import argparse
import logging
import sys

from startrek.engine import Mission
from startrek.interface.human_player import HumanPlayer, print_high_scores
from startrek.models import Difficulty, GameConfig
from startrek.utils import GameRNG
from startrek.utils.leaderboard import DEFAULT_SCORES_FILE, HighScoreTable


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Star Trek - Turn-based tactical space simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                  # Start a new mission (text mode)
  %(prog)s --tui                            # Start with terminal user interface (TUI)
  %(prog)s --difficulty admiral --seed 42   # Hard mission with a fixed galaxy
  %(prog)s --show-scores                    # Print the high score table and exit
        """,
    )

    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.CAPTAIN.value,
        help="Difficulty: cadet, captain or admiral (default: captain)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible galaxy (default: unseeded)",
    )
    parser.add_argument(
        "--scores",
        type=str,
        metavar="FILE",
        default=DEFAULT_SCORES_FILE,
        help=f"High score file (default: state/{DEFAULT_SCORES_FILE})",
    )
    parser.add_argument(
        "--show-scores",
        action="store_true",
        help="Print the high score table and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Use terminal user interface (TUI) instead of basic text mode",
    )

    args = parser.parse_args()

    # Use DEBUG level when --debug flag is set, otherwise WARNING to keep the console clean
    log_level = logging.DEBUG if args.debug else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        scores = HighScoreTable(args.scores)
    except ValueError as e:
        print(f"Error reading high score file {args.scores}: {e}")
        sys.exit(1)

    if args.show_scores:
        print_high_scores(scores)
        return

    config = GameConfig.for_difficulty(Difficulty(args.difficulty))
    mission = Mission.new(config, GameRNG(args.seed))

    if args.tui:
        from startrek.interface.tui_app import StarTrekTUI

        StarTrekTUI(mission, scores).run()
    else:
        print("\n" + "=" * 60)
        print("STAR TREK")
        print("=" * 60)
        print()
        HumanPlayer(mission, scores).play()


if __name__ == "__main__":
    main()
