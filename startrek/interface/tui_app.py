"""Textual TUI application for the bridge console.

This module provides a Terminal User Interface using the Textual framework.
It displays the short range scan, the ship status and a terminal log with
an inline command input.
"""

from typing import Optional

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.widgets import Footer, Header, Input, RichLog, Static

from ..engine import Mission
from ..utils.leaderboard import HighScoreTable
from .command_parser import HELP_TEXT
from .command_processor import CommandProcessor
from .renderer import MapRenderer


class MapPanel(Static):
    """Widget to display the short range scan."""

    def __init__(self, *args, **kwargs):
        """Initialize map panel."""
        super().__init__(*args, **kwargs)
        self.renderer = MapRenderer()
        self.border_title = "Short Range Scan"

    def update_map(self, mission: Mission) -> None:
        """Update the map display.

        Args:
            mission: Current mission
        """
        result = mission.short_range_scan()
        if result.success:
            self.update(escape(self.renderer.render_short_range(result.data)))
        else:
            self.update(escape(" ".join(result.messages)))


class StatusPanel(Static):
    """Widget to display ship and mission status."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.renderer = MapRenderer()
        self.border_title = "Status"

    def update_status(self, mission: Mission) -> None:
        self.update(escape(self.renderer.render_status(mission)))


class TerminalPanel(RichLog):
    """Terminal-style panel with inline command input and responses."""

    def __init__(self, *args, **kwargs):
        """Initialize terminal panel."""
        super().__init__(*args, highlight=False, markup=True, wrap=True, **kwargs)

    def show_command(self, command: str) -> None:
        """Echo the command that was entered.

        Args:
            command: Command string entered by user
        """
        self.write(f"[bold cyan]>[/bold cyan] {escape(command)}")

    def show_lines(self, lines) -> None:
        """Show engine output, one log line per message."""
        for line in lines:
            self.write(escape(line))

    def show_response(self, message: str) -> None:
        """Show a response from the console itself, highlighted in green."""
        self.write(f"[green]{escape(message)}[/green]")


class StarTrekTUI(App):
    """Bridge console TUI application."""

    # Disable command palette (Ctrl+P) - we use custom keybindings
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    #top_row {
        height: 12;
    }

    #map_container {
        width: 1fr;
        border: solid green;
    }

    #status_container {
        width: 1fr;
        border: solid blue;
    }

    #terminal_container {
        height: 1fr;
        border: solid cyan;
    }

    TerminalPanel {
        height: 1fr;
        overflow-y: auto;
        border: none;
    }

    #input_row {
        dock: bottom;
        height: 1;
        background: $surface;
    }

    #prompt_label {
        width: auto;
        background: $surface;
        color: cyan;
        padding: 0;
    }

    #command_input {
        width: 1fr;
        height: 1;
        background: $surface;
        border: none;
        padding: 0;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=True),
        Binding("ctrl+h", "show_help", "Help", show=True),
    ]

    def __init__(self, mission: Mission, scores: Optional[HighScoreTable] = None, *args, **kwargs):
        """Initialize the TUI app.

        Args:
            mission: Mission to play
            scores: High score table (scores are not recorded if None)
        """
        super().__init__(*args, **kwargs)
        self.processor = CommandProcessor(mission)
        self.scores = scores
        self.awaiting_name = False
        self.map_panel = None
        self.status_panel = None
        self.terminal_panel = None
        self.prompt_label = None

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()

        with Horizontal(id="top_row"):
            self.map_panel = MapPanel(id="map_container")
            yield self.map_panel
            self.status_panel = StatusPanel(id="status_container")
            yield self.status_panel

        terminal_container = Container(id="terminal_container")
        terminal_container.border_title = "Terminal"
        with terminal_container:
            self.terminal_panel = TerminalPanel()
            yield self.terminal_panel
            with Horizontal(id="input_row"):
                self.prompt_label = Static(escape(self._prompt()), id="prompt_label")
                yield self.prompt_label
                yield Input(placeholder="", id="command_input")

        yield Footer()

    def on_mount(self) -> None:
        """Show the briefing and focus the input."""
        self.refresh_display()
        if self.terminal_panel:
            self.terminal_panel.show_lines(self.processor.mission.state.messages)
            self.terminal_panel.write("Type HELP for a list of commands.")
            self.terminal_panel.write("")
        self.query_one("#command_input", Input).focus()

    def refresh_display(self) -> None:
        """Refresh the map, status and prompt."""
        mission = self.processor.mission
        if self.map_panel:
            self.map_panel.update_map(mission)
        if self.status_panel:
            self.status_panel.update_status(mission)
        if self.prompt_label:
            self.prompt_label.update(escape(self._prompt()))

    def _prompt(self) -> str:
        if self.awaiting_name:
            return "Initials> "
        return f"{self.processor.prompt} "

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle input submission.

        Args:
            event: Input submission event
        """
        command = event.value.strip()
        event.input.value = ""

        terminal = self.terminal_panel
        if not terminal:
            return
        terminal.show_command(command)

        if self.awaiting_name:
            self._record_score(command)
        else:
            was_over = self.processor.mission.game_over
            terminal.show_lines(self.processor.process(command))
            if self.processor.mission.game_over and not was_over:
                self._offer_high_score()
        terminal.write("")

        self.refresh_display()
        event.input.focus()

    def _offer_high_score(self) -> None:
        score = self.processor.mission.score
        if self.scores is None or score is None or not self.scores.is_high_score(score.total):
            return
        self.awaiting_name = True
        self.terminal_panel.show_response(
            f"New high score! Enter your initials (blank for {self.scores.last_player_name})."
        )

    def _record_score(self, name: str) -> None:
        self.awaiting_name = False
        score = self.processor.mission.score
        rank = self.scores.add(name or self.scores.last_player_name, score.total, score.grade)
        if rank is not None:
            self.terminal_panel.show_response(f"Recorded at position {rank}.")
        self.terminal_panel.show_lines(["Type NEW to start a new mission."])

    def action_show_help(self) -> None:
        """Show the command help in the terminal."""
        if self.terminal_panel:
            self.terminal_panel.show_lines(HELP_TEXT.split("\n"))

    def action_quit(self) -> None:
        """Quit the application."""
        self.exit()
