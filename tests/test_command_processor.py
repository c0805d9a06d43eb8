"""Tests for the command processor and its follow-up prompt mode."""

from unittest.mock import MagicMock

from conftest import build_mission, hostile

from startrek.interface.command_processor import DEFAULT_PROMPT, CommandProcessor


def make_processor(**kwargs):
    kwargs.setdefault("hostiles_elsewhere", 1)
    return CommandProcessor(build_mission(**kwargs))


def test_full_command_dispatches():
    """Test that a complete command runs immediately."""
    processor = make_processor()

    lines = processor.process("nav 3 1")

    assert processor.mission.ship.sector == (5, 4)
    assert any("Energy used: 10" in line for line in lines)
    assert processor.prompt == DEFAULT_PROMPT


def test_prompt_mode_collects_arguments():
    """Test that a bare command prompts for each argument in turn."""
    processor = make_processor()

    assert processor.process("nav") == ["Course (1-9):"]
    assert processor.awaiting_input
    assert processor.prompt == "Course (1-9):"

    assert processor.process("3") == ["Warp factor (0.1-8):"]
    assert processor.prompt == "Warp factor (0.1-8):"

    processor.process("2")

    assert not processor.awaiting_input
    assert processor.mission.ship.sector == (6, 4)


def test_follow_up_input_is_not_parsed_as_command():
    """Test that a number entered at a prompt is taken as the argument."""
    processor = make_processor(shields=0)

    processor.process("she")
    processor.process("250")

    assert processor.mission.ship.shields == 250


def test_blank_follow_up_cancels():
    """Test that an empty line abandons the pending command."""
    processor = make_processor()
    processor.process("tor")

    lines = processor.process("")

    assert lines == ["Command cancelled."]
    assert not processor.awaiting_input
    assert processor.mission.ship.torpedoes == 10


def test_invalid_follow_up_clears_pending():
    """Test that a bad argument reports the error and ends prompt mode."""
    processor = make_processor()
    processor.process("tor")

    lines = processor.process("abc")

    assert any("not a number" in line for line in lines)
    assert not processor.awaiting_input
    assert processor.mission.ship.torpedoes == 10


def test_parse_error_reported():
    """Test that unknown commands come back as messages."""
    processor = make_processor()

    lines = processor.process("jump 3")

    assert lines == ["Unknown command: 'JUMP'. Type HELP for a list of commands."]
    assert processor.mission.state.stardate == 2250


def test_rejected_command_reports_reason():
    """Test that engine rejections are surfaced."""
    processor = make_processor()

    lines = processor.process("pha 100")

    assert lines == ["No hostile vessels in this quadrant. Phasers not fired."]


def test_internal_fault_is_contained():
    """Test that an unexpected engine error becomes a generic message."""
    processor = make_processor()
    processor.mission.navigate = MagicMock(side_effect=RuntimeError("boom"))

    lines = processor.process("nav 3 1")

    assert lines == ["Command could not be completed due to an internal fault."]
    assert not processor.mission.game_over


def test_short_range_scan_output():
    """Test that SRS renders the grid and status block."""
    processor = make_processor(entities=[hostile(5, 4)])

    lines = processor.process("srs")

    assert lines[0] == "   0 1 2 3 4 5 6 7"
    assert lines[5] == " 4 . . . . E K . ."
    assert "Condition:     RED" in lines


def test_long_range_scan_output():
    processor = make_processor()

    lines = processor.process("lrs")

    assert lines[0] == "Long range scan for quadrant 3,3"
    assert lines[1] == "+-----+-----+-----+"


def test_computer_targets():
    processor = make_processor(entities=[hostile(7, 4)])

    lines = processor.process("com 1")

    assert lines[0] == "Sector   Distance  Course  Energy"
    assert len(lines) == 2


def test_help():
    processor = make_processor()

    lines = processor.process("help")

    assert lines[0] == "Commands:"


def test_quit_shows_score_and_blocks_commands():
    """Test the game-over flow: score card, refusal, then NEW."""
    processor = make_processor()

    lines = processor.process("quit")

    assert "*** MISSION FAILED ***" in lines
    assert "FINAL SCORE" in lines
    assert processor.prompt == "Type NEW to start a new mission:"

    assert processor.process("srs") == ["The mission is over. Type NEW to start a new mission."]

    old = processor.mission
    briefing = processor.process("new")

    assert processor.mission is not old
    assert not processor.mission.game_over
    assert briefing == processor.mission.state.messages
