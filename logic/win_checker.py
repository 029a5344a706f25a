"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board, Player


Line = Tuple[int, int, int]


@dataclass(frozen=True)
class WinResult:
    """The winner of a board and the line that won it."""
    winner: Player
    line: Line


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same marker in a row
    (horizontally, vertically, or diagonally)

    Lines are checked in the order of WINNING_LINES and the first full line
    is reported. A board with two full lines can only be built by hand, never
    by alternating play; in that case rows beat columns beat diagonals.
    """

    # All possible winning lines (as flat cell indices)
    WINNING_LINES: Tuple[Line, ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def evaluate(self, board: Board) -> Optional[WinResult]:
        """
        Classify a board.

        Args:
            board: The 9-cell board.

        Returns:
            WinResult with the winner and winning line, or None if no winner.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return WinResult(winner=winner, line=line)

        return None

    def check_winner(self, board: Board) -> Optional[Player]:
        """Get the winning Player, or None if no winner yet."""
        result = self.evaluate(board)
        return result.winner if result else None

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """Get the winning line as cell indices, or None."""
        result = self.evaluate(board)
        return result.line if result else None

    def _check_line(self, board: Board, line: Line) -> Optional[Player]:
        """Return the marker filling the whole line, or None."""
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def is_board_full(self, board: Board) -> bool:
        """Check if no empty cells remain."""
        return all(cell is not None for cell in board)

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        return self.is_board_full(board) and self.evaluate(board) is None


# Quick test
if __name__ == "__main__":
    from .board import board_from_string

    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    result = checker.evaluate(board_from_string("XXX/.O./O.."))
    print(f"Test 1 (horizontal): {result}")
    assert result == WinResult(Player.X, (0, 1, 2))

    # Test 2: Vertical win
    result = checker.evaluate(board_from_string("OX./OX./O.."))
    print(f"Test 2 (vertical): {result}")
    assert result == WinResult(Player.O, (0, 3, 6))

    # Test 3: No winner
    result = checker.evaluate(board_from_string("XO./.O./..."))
    print(f"Test 3 (no winner): {result}")
    assert result is None

    # Test 4: Draw (full board, no winner)
    is_draw = checker.check_draw(board_from_string("XOX/XOO/OXX"))
    print(f"Test 4 (draw): is_draw = {is_draw}")
    assert is_draw

    print("\nWinChecker test done!")
