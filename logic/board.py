"""
Board representation for TicTacToe.
A board is an immutable 9-cell snapshot; index i is row i // 3, column i % 3.
"""

from enum import Enum
from typing import Optional, List, Tuple

from .config import GameConfig


class Player(Enum):
    """The two markers in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


# None means empty, otherwise the marker occupying the cell
Cell = Optional[Player]
Board = Tuple[Cell, ...]


def empty_board() -> Board:
    """Create the initial empty board."""
    return (None,) * GameConfig.CELL_COUNT


def board_from_string(text: str) -> Board:
    """
    Build a board from a compact string such as "XOX/XOO/OXX".

    Any character other than X or O (e.g. "." or "-") is an empty cell.
    Slashes and whitespace are ignored.

    Args:
        text: Nine cell characters, row by row.

    Returns:
        The board.
    """
    chars = [c for c in text if c not in "/ \n"]
    if len(chars) != GameConfig.CELL_COUNT:
        raise ValueError(f"Expected {GameConfig.CELL_COUNT} cells, got {len(chars)}")

    cells: List[Cell] = []
    for c in chars:
        if c.upper() == "X":
            cells.append(Player.X)
        elif c.upper() == "O":
            cells.append(Player.O)
        else:
            cells.append(None)
    return tuple(cells)


def place(board: Board, index: int, player: Player) -> Board:
    """Return a copy of board with index set to player."""
    cells = list(board)
    cells[index] = player
    return tuple(cells)


def cell_to_row_col(index: int) -> Tuple[int, int]:
    """Convert a flat cell index (0-8) to (row, col)."""
    return divmod(index, GameConfig.BOARD_SIZE)


def format_board(board: Board) -> str:
    """
    Render a board as a box-drawn grid with cell indices on empty squares.

    Args:
        board: The board.

    Returns:
        Multi-line string.
    """
    size = GameConfig.BOARD_SIZE
    lines = ["┌───┬───┬───┐"]

    for row in range(size):
        row_str = "│"
        for col in range(size):
            index = row * size + col
            cell = board[index]
            # Empty cells show their index so the console player can pick them
            text = str(index) if cell is None else cell.value
            row_str += f" {text} │"
        lines.append(row_str)

        if row < size - 1:
            lines.append("├───┼───┼───┤")

    lines.append("└───┴───┴───┘")
    return "\n".join(lines)
