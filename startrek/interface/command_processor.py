"""Command processing between raw input and the Mission.

The processor owns the one piece of conversational state in the game: a
command entered without arguments prompts for each value in turn, and the
next input lines are consumed as those values rather than parsed as new
commands.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..engine import Mission
from ..models import GameConfig
from .command_parser import (
    ARGUMENTS,
    HELP_TEXT,
    CommandKind,
    CommandParseError,
    CommandParser,
    ParsedCommand,
)
from .renderer import MapRenderer

logger = logging.getLogger(__name__)

RESTART_COMMANDS = ("NEW", "RESTART")
DEFAULT_PROMPT = "Command:"


@dataclass
class PendingCommand:
    """A command still collecting arguments from follow-up input."""

    kind: CommandKind
    args: List[float] = field(default_factory=list)

    @property
    def prompt(self) -> str:
        return ARGUMENTS[self.kind][len(self.args)].prompt


class CommandProcessor:
    """Feeds player input to a Mission and collects the narrative output."""

    def __init__(
        self,
        mission: Mission,
        parser: Optional[CommandParser] = None,
        renderer: Optional[MapRenderer] = None,
    ):
        self.mission = mission
        self.parser = parser or CommandParser()
        self.renderer = renderer or MapRenderer()
        self.pending: Optional[PendingCommand] = None

    @property
    def awaiting_input(self) -> bool:
        return self.pending is not None

    @property
    def prompt(self) -> str:
        """Prompt for the next input line."""
        if self.pending is not None:
            return self.pending.prompt
        if self.mission.game_over:
            return "Type NEW to start a new mission:"
        return DEFAULT_PROMPT

    def reset(self) -> None:
        """Drop any pending follow-up."""
        self.pending = None

    def new_game(self, config: Optional[GameConfig] = None) -> List[str]:
        """Replace the mission with a fresh one.

        Args:
            config: Configuration for the new mission (defaults to the
                current mission's)

        Returns:
            The new mission's briefing lines
        """
        self.reset()
        self.mission = Mission.new(config or self.mission.config, self.mission.rng)
        return list(self.mission.state.messages)

    def process(self, raw: str) -> List[str]:
        """Handle one line of input.

        Args:
            raw: Input line as typed

        Returns:
            Message lines produced by this input
        """
        text = raw.strip()
        if self.mission.game_over and self.pending is None:
            if text.upper() in RESTART_COMMANDS:
                return self.new_game()
            return self._emit(["The mission is over. Type NEW to start a new mission."])

        start = len(self.mission.state.messages)
        try:
            if self.pending is not None:
                self._continue(text)
            else:
                self._start(text)
        except CommandParseError as e:
            self.pending = None
            self.mission.state.log(e.message)
        except Exception:
            self.pending = None
            logger.error("Command %r failed", text, exc_info=True)
            self.mission.state.log("Command could not be completed due to an internal fault.")
        return self.mission.state.messages[start:]

    def _emit(self, lines: List[str]) -> List[str]:
        self.mission.state.log(*lines)
        return lines

    def _start(self, text: str) -> None:
        command = self.parser.parse(text)
        if command.needs_input:
            self.pending = PendingCommand(kind=command.kind)
            self.mission.state.log(self.pending.prompt)
            return
        self._dispatch(command)

    def _continue(self, text: str) -> None:
        pending = self.pending
        if not text:
            self.pending = None
            self.mission.state.log("Command cancelled.")
            return

        argument = ARGUMENTS[pending.kind][len(pending.args)]
        pending.args.append(self.parser.parse_argument(argument, text))
        if len(pending.args) < len(ARGUMENTS[pending.kind]):
            self.mission.state.log(pending.prompt)
            return

        self.pending = None
        self._dispatch(ParsedCommand(kind=pending.kind, args=pending.args))

    def _dispatch(self, command: ParsedCommand) -> None:
        """Route a complete command to the mission."""
        mission = self.mission
        kind = command.kind
        args = command.args
        logger.debug("Dispatching %s %s", kind.value, args)

        if kind == CommandKind.NAVIGATE:
            mission.navigate(args[0], args[1])
        elif kind == CommandKind.PHASERS:
            mission.fire_phasers(int(args[0]))
        elif kind == CommandKind.TORPEDO:
            mission.fire_torpedo(args[0])
        elif kind == CommandKind.SHIELDS:
            mission.adjust_shields(int(args[0]))
        elif kind == CommandKind.SHORT_RANGE_SCAN:
            result = mission.short_range_scan()
            if result.success:
                self._show(self.renderer.render_short_range(result.data))
                self._show(self.renderer.render_status(mission))
            mission.state.log(*result.messages)
        elif kind == CommandKind.LONG_RANGE_SCAN:
            result = mission.long_range_scan()
            if result.success:
                qx, qy = mission.ship.quadrant
                mission.state.log(f"Long range scan for quadrant {qx},{qy}")
                self._show(self.renderer.render_long_range(result.data))
            mission.state.log(*result.messages)
        elif kind == CommandKind.DAMAGE_REPORT:
            result = mission.damage_report()
            self._show(self.renderer.render_damage_report(result.data))
        elif kind == CommandKind.COMPUTER:
            self._computer(int(args[0]))
        elif kind == CommandKind.HELP:
            self._show(HELP_TEXT)
        elif kind == CommandKind.QUIT:
            mission.resign()

        if mission.game_over and mission.score is not None:
            self._show(self.renderer.render_score(mission.score))

    def _computer(self, function: int) -> None:
        mission = self.mission
        result = mission.library_computer(function)
        if result.success:
            if function == 1 and result.data:
                self._show(self.renderer.render_targets(result.data))
            elif function == 2:
                self._show(self.renderer.render_status(mission))
            elif function == 3:
                mission.state.log("Cumulative galactic record")
                self._show(
                    self.renderer.render_galactic_record(result.data, mission.ship.quadrant)
                )
        mission.state.log(*result.messages)

    def _show(self, text: str) -> None:
        self.mission.state.log(*text.split("\n"))
