"""Tests for the Textual bridge console."""

import asyncio

from conftest import build_mission
from textual.widgets import Input

from startrek.interface.tui_app import StarTrekTUI
from startrek.utils.leaderboard import HighScoreTable


def run_app(app, *commands):
    """Mount the app headless and submit each command through the input box."""

    async def drive():
        async with app.run_test() as pilot:
            for command in commands:
                app.query_one("#command_input", Input).value = command
                await pilot.press("enter")
                await pilot.pause()

    asyncio.run(drive())


def test_command_reaches_mission():
    mission = build_mission(hostiles_elsewhere=1)
    app = StarTrekTUI(mission)

    run_app(app, "nav 3 1")

    assert app.processor.mission.ship.sector == (5, 4)
    assert app.processor.mission.state.stardate == 2251


def test_galactic_record_brackets_are_not_markup():
    """Bracketed map cells are written literally."""
    app = StarTrekTUI(build_mission(hostiles_elsewhere=1))

    run_app(app, "com 3")

    assert "Cumulative galactic record" in app.processor.mission.state.messages


def test_high_score_initials(tmp_path):
    mission = build_mission(hostiles_elsewhere=0)
    mission.state.hostiles_at_start = 1
    scores = HighScoreTable(tmp_path / "scores.json")
    app = StarTrekTUI(mission, scores)

    run_app(app, "she 10", "spk")

    assert mission.state.victory
    assert not app.awaiting_name
    assert scores.entries[0].name == "SPK"
