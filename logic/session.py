"""
Game session for TicTacToe.
Connects a presentation layer (Tkinter UI or console) to the game state.
"""

from typing import Callable, List, Optional

from .board import Board, Player
from .game_state import GameState
from .win_checker import WinResult


# callback(board, current_player, win_result)
RenderCallback = Callable[[Board, Player, Optional[WinResult]], None]


class GameSession:
    """
    One game, from empty board until the window closes.

    The presentation layer forwards clicks here and registers render
    callbacks. Callbacks run after every accepted move or jump, never
    after a rejected one.
    """

    def __init__(self, game_state: Optional[GameState] = None):
        self.game_state = game_state or GameState()
        self._callbacks: List[RenderCallback] = []

    def subscribe(self, callback: RenderCallback):
        """Register a render callback."""
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def unsubscribe(self, callback: RenderCallback):
        """Remove a render callback, if registered."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def render(self):
        """Invoke every render callback with the displayed state."""
        board = self.game_state.current_board
        player = self.game_state.current_player
        result = self.game_state.get_winner()

        for callback in list(self._callbacks):
            callback(board, player, result)

    def cell_clicked(self, cell: int) -> bool:
        """Play the current player's marker on a cell."""
        accepted = self.game_state.play_move(cell)
        if accepted:
            self.render()
        return accepted

    def history_clicked(self, move: int) -> bool:
        """Jump to a history entry."""
        accepted = self.game_state.jump_to(move)
        if accepted:
            self.render()
        return accepted

    def restart(self) -> bool:
        """Go back to the empty board. Later moves stay in history until overwritten."""
        return self.history_clicked(0)
