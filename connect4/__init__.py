"""
connect4 - Connect Four rules engine

This package provides the Connect Four board state machine (piece placement,
column capacity tracking, win and draw detection) together with interactive
and batch command-line runners.
"""

# Version number
__version__ = '0.1.0'
