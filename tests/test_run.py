"""Tests for the run.py entry point."""

import io
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from run import main


def run_main(argv, line):
    out = io.StringIO()
    code = main(argv, stdin=io.StringIO(line), stdout=out)
    return code, out.getvalue()


def test_batch_mode_is_default_without_tty():
    code, output = run_main([], "0 1 0 1 0 1 0\n")
    assert code == 0
    assert output == "WINNER: Player 1\n"


def test_custom_dimensions():
    code, output = run_main(["--width", "4", "--height", "4"],
                            "0 2 1 3 2 0 3 1 0 2 1 3 2 0 3 1\n")
    assert code == 0
    assert output == "DRAW\n"


def test_invalid_dimensions():
    code, output = run_main(["--width", "3"], "0\n")
    assert code == 1
    assert output.startswith("couldn't init board: width must be at least 4")


def test_incomplete_game_exit_code():
    code, output = run_main([], "0 1\n")
    assert code == 1
    assert "incomplete game" in output


def test_rejected_move_exit_code():
    code, output = run_main([], "0 7\n")
    assert code == 1
    assert output.startswith("error playing game: move at pos 2 caused an error: ")


def test_bad_input_exit_code():
    code, output = run_main([], "0 zero\n")
    assert code == 1
    assert 'input "zero" in pos 2' in output


def test_forced_interactive_mode():
    code, output = run_main(["--interactive"], "0\n1\n0\n1\n0\n1\n0\n")
    assert code == 0
    assert "Player 2 enter a column: " in output
    assert output.endswith("WINNER: Player 1\n")


def test_interactive_eof_exit_code():
    code, output = run_main(["--interactive", "--debug_level", "none"], "")
    assert code == 1
    assert output.endswith("EOF while scanning\n")
