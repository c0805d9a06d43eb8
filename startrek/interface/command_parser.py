"""Command parser for the bridge console.

This module turns raw input like "nav 3 2.5" into a ParsedCommand. Every
alias, arity and numeric range check happens here, before anything
reaches the engine.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from ..utils.constants import COURSE_RANGE, WARP_RANGE


class ErrorType(Enum):
    """Classification of command input errors."""
    UNKNOWN_COMMAND = "unknown_command"
    SYNTAX_ERROR = "syntax_error"
    VALIDATION_ERROR = "validation_error"


class CommandParseError(Exception):
    """Raised when command parsing fails with classification."""

    def __init__(self, error_type: ErrorType, message: str):
        """Initialize parse error.

        Args:
            error_type: Classification of the error
            message: Human-readable error message
        """
        self.error_type = error_type
        self.message = message
        super().__init__(message)


class CommandKind(Enum):
    """Canonical command names."""

    NAVIGATE = "NAV"
    SHORT_RANGE_SCAN = "SRS"
    LONG_RANGE_SCAN = "LRS"
    PHASERS = "PHA"
    TORPEDO = "TOR"
    SHIELDS = "SHE"
    DAMAGE_REPORT = "DAM"
    COMPUTER = "COM"
    HELP = "HELP"
    QUIT = "QUIT"


ALIASES: Dict[str, CommandKind] = {
    "NAV": CommandKind.NAVIGATE,
    "NAVIGATE": CommandKind.NAVIGATE,
    "MOVE": CommandKind.NAVIGATE,
    "WARP": CommandKind.NAVIGATE,
    "SRS": CommandKind.SHORT_RANGE_SCAN,
    "SR": CommandKind.SHORT_RANGE_SCAN,
    "SHORT": CommandKind.SHORT_RANGE_SCAN,
    "LRS": CommandKind.LONG_RANGE_SCAN,
    "LR": CommandKind.LONG_RANGE_SCAN,
    "LONG": CommandKind.LONG_RANGE_SCAN,
    "PHA": CommandKind.PHASERS,
    "PHASER": CommandKind.PHASERS,
    "PHASERS": CommandKind.PHASERS,
    "TOR": CommandKind.TORPEDO,
    "TORPEDO": CommandKind.TORPEDO,
    "TORPEDOES": CommandKind.TORPEDO,
    "PHOTON": CommandKind.TORPEDO,
    "SHE": CommandKind.SHIELDS,
    "SHIELD": CommandKind.SHIELDS,
    "SHIELDS": CommandKind.SHIELDS,
    "DAM": CommandKind.DAMAGE_REPORT,
    "DAMAGE": CommandKind.DAMAGE_REPORT,
    "STATUS": CommandKind.DAMAGE_REPORT,
    "COM": CommandKind.COMPUTER,
    "COMPUTER": CommandKind.COMPUTER,
    "CALC": CommandKind.COMPUTER,
    "HELP": CommandKind.HELP,
    "?": CommandKind.HELP,
    "QUIT": CommandKind.QUIT,
    "EXIT": CommandKind.QUIT,
    "Q": CommandKind.QUIT,
    "XXX": CommandKind.QUIT,
}


@dataclass(frozen=True)
class Argument:
    """A numeric command argument and its accepted range.

    Attributes:
        name: Name used in prompts and messages
        minimum: Lowest accepted value (None for unbounded)
        maximum: Highest accepted value (None for unbounded)
        exclusive_minimum: Reject values equal to minimum
        nonzero: Reject zero
        integer: Reject fractional values
        prompt: Follow-up prompt text
        error: Message for out-of-range values
    """

    name: str
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    exclusive_minimum: bool = False
    nonzero: bool = False
    integer: bool = False
    prompt: str = ""
    error: str = ""

    def validate(self, value: float) -> None:
        """Raise CommandParseError if value is outside the accepted range."""
        too_low = self.minimum is not None and (
            value <= self.minimum if self.exclusive_minimum else value < self.minimum
        )
        too_high = self.maximum is not None and value > self.maximum
        if too_low or too_high or (self.nonzero and value == 0):
            raise CommandParseError(ErrorType.VALIDATION_ERROR, self.error)
        if self.integer and value != int(value):
            raise CommandParseError(ErrorType.VALIDATION_ERROR, self.error)


COURSE = Argument(
    "course",
    minimum=COURSE_RANGE[0],
    maximum=COURSE_RANGE[1],
    prompt="Course (1-9):",
    error="Course must be between 1 and 9 (1 = north, clockwise).",
)
WARP = Argument(
    "warp",
    minimum=WARP_RANGE[0],
    maximum=WARP_RANGE[1],
    prompt="Warp factor (0.1-8):",
    error="Warp factor must be between 0.1 and 8.",
)
PHASER_ENERGY = Argument(
    "energy",
    minimum=0,
    exclusive_minimum=True,
    integer=True,
    prompt="Energy to fire:",
    error="Phaser energy must be a positive whole number.",
)
SHIELD_ENERGY = Argument(
    "energy",
    nonzero=True,
    integer=True,
    prompt="Energy to shields (negative lowers):",
    error="Shield transfer must be a non-zero whole number.",
)
COMPUTER_FUNCTION = Argument(
    "function",
    minimum=1,
    maximum=3,
    integer=True,
    prompt="Computer function (1 = targets, 2 = status, 3 = galactic record):",
    error="Computer function must be 1, 2 or 3.",
)

ARGUMENTS: Dict[CommandKind, List[Argument]] = {
    CommandKind.NAVIGATE: [COURSE, WARP],
    CommandKind.PHASERS: [PHASER_ENERGY],
    CommandKind.TORPEDO: [COURSE],
    CommandKind.SHIELDS: [SHIELD_ENERGY],
    CommandKind.COMPUTER: [COMPUTER_FUNCTION],
}

USAGE: Dict[CommandKind, str] = {
    CommandKind.NAVIGATE: "NAV <course 1-9> <warp 0.1-8>",
    CommandKind.PHASERS: "PHA <energy>",
    CommandKind.TORPEDO: "TOR <course 1-9>",
    CommandKind.SHIELDS: "SHE <energy>",
    CommandKind.COMPUTER: "COM <1-3>",
}

HELP_TEXT = """\
Commands:
  NAV <course> <warp>   Navigate. Course 1-9 (1 = north, clockwise), warp 0.1-8
  SRS                   Short range sensor scan of this quadrant
  LRS                   Long range sensor scan of surrounding quadrants
  PHA <energy>          Fire phasers at all hostiles in the quadrant
  TOR <course>          Fire a photon torpedo
  SHE <energy>          Transfer energy to shields (negative to lower)
  DAM                   Damage and status report
  COM <1-3>             Library computer: 1 targets, 2 status, 3 galactic record
  HELP                  Show this help
  QUIT                  Resign command
Commands given without arguments prompt for each value.

Course:    8  1  2
            \\ | /
          7 - E - 3
            / | \\
           6  5  4

Map: E = your ship, K = hostile, B = resupply station, * = star"""


@dataclass
class ParsedCommand:
    """A validated command.

    Attributes:
        kind: Canonical command
        args: Validated numeric arguments (empty to prompt for them)
    """

    kind: CommandKind
    args: List[float] = field(default_factory=list)

    @property
    def needs_input(self) -> bool:
        """True if arguments must still be collected by follow-up prompts."""
        return len(self.args) < len(ARGUMENTS.get(self.kind, []))


class CommandParser:
    """Parse bridge console input into ParsedCommands."""

    def parse(self, command: str) -> ParsedCommand:
        """Parse a command string.

        Accepted forms are a command word or alias followed by either no
        arguments (prompt mode) or exactly the arguments the command takes.

        Args:
            command: Raw input line

        Returns:
            ParsedCommand with validated arguments

        Raises:
            CommandParseError: If the command is unknown, has the wrong
                number of arguments, or an argument is out of range
        """
        parts = command.strip().upper().split()
        if not parts:
            raise CommandParseError(ErrorType.SYNTAX_ERROR, "Enter a command. Type HELP for a list.")

        word, raw_args = parts[0], parts[1:]
        kind = ALIASES.get(word)
        if kind is None:
            raise CommandParseError(
                ErrorType.UNKNOWN_COMMAND,
                f"Unknown command: '{word}'. Type HELP for a list of commands.",
            )

        expected = ARGUMENTS.get(kind, [])
        if not raw_args:
            return ParsedCommand(kind=kind)
        if len(raw_args) != len(expected):
            if expected:
                message = (
                    f"{kind.value} takes 0 or {len(expected)} argument"
                    f"{'s' if len(expected) > 1 else ''}. Usage: {USAGE[kind]}"
                )
            else:
                message = f"{kind.value} takes no arguments."
            raise CommandParseError(ErrorType.SYNTAX_ERROR, message)

        args = [self.parse_argument(arg, raw) for arg, raw in zip(expected, raw_args)]
        return ParsedCommand(kind=kind, args=args)

    def parse_argument(self, argument: Argument, raw: str) -> float:
        """Parse and validate one numeric argument.

        Args:
            argument: Argument definition
            raw: Text entered by the player

        Returns:
            The value as a float

        Raises:
            CommandParseError: If raw is not a number or is out of range
        """
        text = raw.strip()
        try:
            value = float(text)
        except ValueError:
            raise CommandParseError(
                ErrorType.SYNTAX_ERROR,
                f"Invalid {argument.name}: '{text}' is not a number",
            )
        if not math.isfinite(value):
            raise CommandParseError(
                ErrorType.SYNTAX_ERROR,
                f"Invalid {argument.name}: '{text}' is not a number",
            )
        argument.validate(value)
        return value
