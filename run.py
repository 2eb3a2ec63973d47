#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four rules engine

Runs an interactive two-player game when a terminal is attached, and a
batch game from a single line of piped moves otherwise.
"""

import argparse
import os
import sys

# Add the project root to Python path to ensure imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from connect4.debug import debug, DebugLevel
from connect4.game.board import Board
from connect4.game.errors import Connect4Error
from connect4.interfaces.cli import IncompleteGame, InputError, play_batch, play_interactive
from connect4.utils import DEFAULT_COLS, DEFAULT_ROWS


def configure_debug(args):
    """Configure debug level based on args.debug or args.debug_level."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Connect Four',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
    Examples:

    # Play an interactive game on the standard 7x6 board
    python run.py

    # Play a whole game from a line of moves (player 1 moves first)
    echo 0 1 0 1 0 1 0 | python run.py

    # Use a larger board and show debug logging on stderr
    echo 0 1 0 1 0 1 0 | python run.py --width 9 --height 8 --debug
    """
    )
    parser.add_argument('--width',
        type=int,
        default=DEFAULT_COLS,
        help='Number of columns (at least 4)')
    parser.add_argument('--height',
        type=int,
        default=DEFAULT_ROWS,
        help='Number of rows (at least 4)')
    parser.add_argument('--debug',
        action='store_true',
        help='Enable debug mode with detailed logging')
    parser.add_argument('--debug_level',
        choices=[level.name.lower() for level in DebugLevel],
        default='warning',
        help='Logging level when --debug is not given')
    parser.add_argument('--interactive',
        action=argparse.BooleanOptionalAction,
        default=None,
        help='Force interactive or batch mode (default: interactive when stdin is a TTY)')
    return parser


def main(argv=None, stdin=None, stdout=None) -> int:
    """Main entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    configure_debug(args)

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    try:
        board = Board(args.width, args.height)
    except Connect4Error as e:
        print(f"couldn't init board: {e}", file=stdout)
        return 1

    interactive = args.interactive
    if interactive is None:
        interactive = stdin.isatty()
    debug.debug(f"Starting {'interactive' if interactive else 'batch'} game on "
                f"{board.width}x{board.height} board", "run")

    try:
        if interactive:
            play_interactive(board, stdin, stdout)
        else:
            play_batch(board, stdin, stdout)
    except InputError as e:
        print(e, file=stdout)
        return 1
    except IncompleteGame as e:
        print(e, file=stdout)
        return 1
    except Connect4Error as e:
        print(f"error playing game: {e}", file=stdout)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
