"""
cli.py - Command-line runners for Connect Four

This module provides the two ways of driving a Board from a terminal:
an interactive loop that prompts each player in turn, and a batch runner
that reads a single line of space-delimited columns from a pipe.
"""

import sys
from typing import List, Optional, TextIO

from connect4.debug import debug
from connect4.game.board import Board, Outcome
from connect4.game.errors import Connect4Error
from connect4.game.rules import winning_line
from connect4.utils import Player

USAGE = """For interactive mode, run with a terminal attached:
> python run.py

For non-interactive mode (no TTY attached), pipe in a list of space-delimited columns:
> echo [list of space-delimited columns] | python run.py

Example:
> echo 0 1 0 1 0 1 0 | python run.py
"""


class InputError(Exception):
    """Raised when the runner cannot read or parse its input."""


class IncompleteGame(Exception):
    """Raised when a batch of moves ends without a winner or a draw."""


def format_outcome(outcome: Outcome) -> str:
    """Get the result line printed when a game ends."""
    if outcome.is_draw:
        return "DRAW"
    return f"WINNER: Player {outcome.winner}"


def parse_moves(line: str, width: int) -> List[int]:
    """
    Parse a line of space-delimited column numbers.

    Args:
        line: The raw input line
        width: Board width, used in error messages

    Returns:
        List of columns in input order

    Raises:
        InputError: If the line is empty or a token is not a number
    """
    tokens = line.split()
    if not tokens:
        raise InputError(f"no moves given, expected numbers from 0 to {width - 1}")

    moves = []
    for position, token in enumerate(tokens, start=1):
        try:
            moves.append(int(token))
        except ValueError:
            raise InputError(
                f'input "{token}" in pos {position} is invalid, '
                f'must be a number from 0 to {width - 1}') from None
    return moves


def _log_winning_line(board: Board, column: int) -> None:
    row = board.column_fill[column] + 1
    line = winning_line(board.grid, row, column)
    if line:
        debug.info(f"Winning line: {line}", "cli")


def play_batch(board: Board, stream: TextIO = None, out: TextIO = None) -> Optional[Outcome]:
    """
    Play a whole game from a single line of moves.

    Args:
        board: A fresh board
        stream: Input stream holding the moves (defaults to stdin)
        out: Output stream for the result (defaults to stdout)

    Returns:
        The game Outcome, or None if there was no input at all (the usage
        text is printed instead)

    Raises:
        InputError: If the moves cannot be parsed
        BatchPositionError: If a move is rejected by the board
        IncompleteGame: If the moves run out before the game ends
    """
    stream = stream or sys.stdin
    out = out or sys.stdout

    line = stream.readline()
    if not line:
        debug.warning("No moves on input, printing usage", "cli")
        print(USAGE, file=out)
        return None

    moves = parse_moves(line, board.width)
    debug.debug(f"Playing {len(moves)} moves: {moves}", "cli")

    debug.start_timer("batch")
    outcome = board.place_all_pieces(moves)
    debug.end_timer("batch", "cli")

    if outcome is None:
        raise IncompleteGame("incomplete game -- did not result in a winner or a draw")

    debug.debug(f"Final board:\n{board.render()}", "cli")
    print(format_outcome(outcome), file=out)
    return outcome


def read_column(stream: TextIO, out: TextIO, player: Player, width: int) -> Optional[int]:
    """
    Prompt a player for a column.

    Returns:
        The column entered, or None if the line was empty or not a number

    Raises:
        InputError: If the input stream is exhausted
    """
    print(f"Player {int(player)} enter a column: ", end="", file=out, flush=True)
    line = stream.readline()
    if not line:
        raise InputError("EOF while scanning")

    text = line.strip()
    if not text:
        print(f"Please enter a number between 0 and {width - 1}", file=out)
        return None

    try:
        return int(text)
    except ValueError:
        print(f"Error with input, please enter a number between 0 and {width - 1}", file=out)
        return None


def play_interactive(board: Board, stream: TextIO = None, out: TextIO = None) -> Outcome:
    """
    Play a game with both players entering moves at the terminal.

    Malformed input and rejected moves re-prompt the same player.

    Args:
        board: A fresh board
        stream: Input stream for moves (defaults to stdin)
        out: Output stream for prompts and the board (defaults to stdout)

    Returns:
        The Outcome that ended the game

    Raises:
        InputError: If the input ends before the game does
    """
    stream = stream or sys.stdin
    out = out or sys.stdout
    player = Player.ONE

    while True:
        column = read_column(stream, out, player, board.width)
        if column is None:
            continue

        try:
            outcome = board.place_piece(column, player)
        except Connect4Error as e:
            debug.debug(f"Rejected move {column} for player {int(player)}: {e}", "cli")
            print(f"Error processing move: {e}", file=out)
            continue

        print(board.render(), file=out)

        if outcome is not None:
            if not outcome.is_draw:
                _log_winning_line(board, column)
            print(format_outcome(outcome), file=out)
            return outcome

        player = player.other()
