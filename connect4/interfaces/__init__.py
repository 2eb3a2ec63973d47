"""
connect4.interfaces - User interfaces for Connect Four

This package contains the command-line runners that drive a Board,
either interactively from a terminal or from a single line of batch moves.
"""

# Don't import anything here to avoid circular imports
__all__ = []
