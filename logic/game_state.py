"""
Game state management for TicTacToe.
Tracks the board history, the displayed move, and whose turn it is.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from .board import Board, Player, empty_board, place, format_board
from .config import GameConfig
from .move_validator import MoveValidator
from .win_checker import WinChecker, WinResult, Line


class StatusKind(Enum):
    """Where the displayed game stands."""
    IN_PROGRESS = "in_progress"
    WINNER = "winner"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """
    Status of the displayed board, derived on demand.
    """
    kind: StatusKind
    text: str                               # e.g. "Next player: O"
    winner: Optional[Player] = None         # Set when kind is WINNER
    line: Optional[Line] = None             # Winning cells when kind is WINNER
    next_player: Optional[Player] = None    # Set when kind is IN_PROGRESS


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - History of board snapshots (index 0 is the empty board)
    - Which snapshot is displayed (current_move)

    Whose turn it is and whether the game is won or drawn are never stored;
    they are recomputed from the history and current_move.
    """

    history: List[Board] = field(default_factory=lambda: [empty_board()])

    # Index into history of the displayed board
    current_move: int = 0

    win_checker: WinChecker = field(default_factory=WinChecker, repr=False, compare=False)
    validator: Optional[MoveValidator] = field(default=None, repr=False, compare=False)

    def __post_init__(self):
        if self.validator is None:
            self.validator = MoveValidator(self.win_checker)

    @property
    def current_board(self) -> Board:
        """The displayed board."""
        return self.history[self.current_move]

    @property
    def is_x_next(self) -> bool:
        """True when X moves next (even history index)."""
        return self.current_move % 2 == 0

    @property
    def current_player(self) -> Player:
        """The marker that moves next on the displayed board."""
        first = Player(GameConfig.FIRST_MARKER)
        return first if self.is_x_next else first.opposite()

    @property
    def move_count(self) -> int:
        """Number of moves recorded in history."""
        return len(self.history) - 1

    def player_for_move(self, move: int) -> Optional[Player]:
        """
        Get the marker placed at a history index.

        Args:
            move: History index (1 or more).

        Returns:
            X for odd moves, O for even moves, None for the empty start.
        """
        if move < 1:
            return None
        first = Player(GameConfig.FIRST_MARKER)
        return first if move % 2 == 1 else first.opposite()

    def play_move(self, cell: int) -> bool:
        """
        Place the current player's marker on a cell.

        Any history after the displayed move is discarded before the new
        board is appended.

        Args:
            cell: Cell index (0-8).

        Returns:
            True if move was accepted, False if it was rejected.
        """
        result = self.validator.validate_move(self, cell)
        if not result.is_valid:
            if GameConfig.VERBOSE:
                print(result.error_message)
            return False

        next_board = place(self.current_board, cell, self.current_player)

        # Drop the "future" boards, then append
        self.history = self.history[:self.current_move + 1] + [next_board]
        self.current_move = len(self.history) - 1

        return True

    def jump_to(self, move: int) -> bool:
        """
        Display an earlier (or later) board from history.

        History is left untouched; the next player follows from move parity.

        Args:
            move: History index.

        Returns:
            True if the jump was accepted.
        """
        result = self.validator.validate_jump(self, move)
        if not result.is_valid:
            if GameConfig.VERBOSE:
                print(result.error_message)
            return False

        self.current_move = move
        return True

    def get_empty_cells(self) -> List[int]:
        """Get all empty cell indices on the displayed board."""
        return [i for i, cell in enumerate(self.current_board) if cell is None]

    def get_winner(self) -> Optional[WinResult]:
        """Winner and winning line of the displayed board, if any."""
        return self.win_checker.evaluate(self.current_board)

    def get_status(self) -> GameStatus:
        """
        Derive the status of the displayed board.

        Returns:
            WINNER if a line is complete, DRAW if the board is full,
            otherwise IN_PROGRESS with the next player.
        """
        result = self.get_winner()

        if result is not None:
            return GameStatus(
                kind=StatusKind.WINNER,
                text=GameConfig.STATUS_WINNER.format(marker=result.winner.value),
                winner=result.winner,
                line=result.line,
            )

        if self.win_checker.check_draw(self.current_board):
            return GameStatus(kind=StatusKind.DRAW, text=GameConfig.STATUS_DRAW)

        player = self.current_player
        return GameStatus(
            kind=StatusKind.IN_PROGRESS,
            text=GameConfig.STATUS_NEXT.format(marker=player.value),
            next_player=player,
        )

    @property
    def is_game_over(self) -> bool:
        """True if the displayed board is won or drawn."""
        return self.get_status().kind != StatusKind.IN_PROGRESS

    def move_descriptions(self) -> List[str]:
        """
        Labels for the history list, one per snapshot.

        Returns:
            ["Restart the game", "Go to move #1", ...]
        """
        return [
            GameConfig.HISTORY_MOVE.format(move=move) if move > 0 else GameConfig.HISTORY_START
            for move in range(len(self.history))
        ]

    def copy(self) -> "GameState":
        """Create an independent copy of the game state."""
        return GameState(
            history=list(self.history),
            current_move=self.current_move,
            win_checker=self.win_checker,
        )

    def format_board(self) -> str:
        """The displayed board plus a status line."""
        header = f"Move {self.current_move} of {self.move_count}"
        return f"{header}\n{format_board(self.current_board)}\n{self.get_status().text}"

    def print_board(self):
        """Print the board to console."""
        print("\n" + self.format_board())


# Quick test
if __name__ == "__main__":
    print("Testing GameState...")

    game = GameState()

    # X wins across the top row
    for cell in [0, 3, 1, 4, 2]:
        print(f"\n{game.current_player.value} moves to {cell}")
        game.play_move(cell)
        game.print_board()

    print("\nJumping back to move 2...")
    game.jump_to(2)
    game.print_board()

    print("\nGame state test done!")
