"""
Move validator for TicTacToe.
Validates that moves and history jumps follow the rules.
"""

from typing import Optional, List, TYPE_CHECKING
from dataclasses import dataclass

from .config import GameConfig
from .win_checker import WinChecker

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Cell index must be 0-8
    2. Can only place on empty cells
    3. Game must not already be won
    4. Jumps must land on an existing history entry
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, game_state: "GameState", cell: int) -> ValidationResult:
        """
        Validate a move on the currently displayed board.

        Args:
            game_state: Current game state.
            cell: Cell to place a marker on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # bool is an int subclass but never a cell
        if not isinstance(cell, int) or isinstance(cell, bool):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell!r}. Must be an integer."
            )

        # Check if cell is in valid range
        if not (0 <= cell < GameConfig.CELL_COUNT):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        board = game_state.current_board

        # Check if game is over
        winner = self.win_checker.check_winner(board)
        if winner is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over! {winner.value} won."
            )

        # Check if cell is empty
        if board[cell] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {cell} is already occupied by {board[cell].value}"
            )

        return ValidationResult(is_valid=True)

    def validate_jump(self, game_state: "GameState", move: int) -> ValidationResult:
        """
        Validate a jump to a history entry.

        Args:
            game_state: Current game state.
            move: History index to jump to.

        Returns:
            ValidationResult.
        """
        if not isinstance(move, int) or isinstance(move, bool):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid move {move!r}. Must be an integer."
            )

        last = len(game_state.history) - 1
        if not (0 <= move <= last):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid move {move}. Must be 0-{last}."
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: "GameState") -> List[int]:
        """
        Get all cells the current player may play.

        Args:
            game_state: Current game state.

        Returns:
            List of cell indices; empty once the game is won or the board is full.
        """
        board = game_state.current_board

        if self.win_checker.check_winner(board) is not None:
            return []

        return game_state.get_empty_cells()
