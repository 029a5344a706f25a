"""
Logic module for TicTacToe.
Handles board history, win detection, and move rules.
"""

from .board import Player, Board, empty_board, board_from_string
from .config import GameConfig
from .game_state import GameState, GameStatus, StatusKind
from .move_validator import MoveValidator, ValidationResult
from .session import GameSession
from .win_checker import WinChecker, WinResult
