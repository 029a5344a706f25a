"""
TicTacToe with Time Travel
==========================
Two players take turns on a 3x3 grid. Every move is kept in a history list,
and clicking an entry jumps back to that board. Playing from an earlier board
discards the moves that came after it.
"""

__version__ = "1.0.0"
