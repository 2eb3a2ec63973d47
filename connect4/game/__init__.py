"""
connect4.game - Core game mechanics for Connect Four

This package contains the board representation, the win and draw rules,
and the errors raised for illegal placements.
"""

from connect4.game.board import Board, Outcome
from connect4.game.errors import (BatchPositionError, ColumnFull, ColumnOutOfRange,
                                  Connect4Error, GameAlreadyFinished,
                                  InvalidDimensions, InvalidPlayer)

__all__ = ['Board', 'Outcome', 'Connect4Error', 'InvalidDimensions',
           'GameAlreadyFinished', 'ColumnOutOfRange', 'ColumnFull',
           'InvalidPlayer', 'BatchPositionError']
