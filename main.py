"""
Main entry point for TicTacToe with time travel.

Launches the Tkinter UI by default, or a console game with --no-ui.

Console commands:
    0-8     Place a marker on that cell
    j N     Jump to move N in the history
    h       Show the history
    q       Quit
"""

from typing import Callable, Optional

from logic.board import Board, Player
from logic.game_state import GameState
from logic.session import GameSession
from logic.win_checker import WinResult


JUMP_USAGE = "Usage: j N (jump to move N)"
CELL_USAGE = "Type 0-8, 'j N', 'h' or 'q'."


class TicTacToeConsole:
    """
    Console controller for TicTacToe.

    Game flow:
    1. The board and status are printed
    2. The player types a cell number or a history command
    3. The session validates it and the board is re-printed
    4. Repeat until the player quits
    """

    def __init__(self, session: Optional[GameSession] = None,
                 input_func: Callable[[str], str] = input):
        self.session = session or GameSession()
        self.input_func = input_func
        self.is_running = False

        self.session.subscribe(self._on_render)

    @property
    def game_state(self) -> GameState:
        return self.session.game_state

    def _on_render(self, board: Board, current_player: Player, result: Optional[WinResult]):
        """Render callback: print the displayed board."""
        self.game_state.print_board()
        print(self.prompt_hint())

    def prompt_hint(self) -> str:
        """What the player can do next on the displayed board."""
        if self.game_state.is_game_over:
            return "Game over. Type 'j N' to go back to move N, or 'q' to quit."

        cells = self.game_state.validator.get_valid_moves(self.game_state)
        return "Open cells: " + " ".join(str(cell) for cell in cells)

    def print_history(self):
        """Print the history list, marking the displayed move."""
        print("\nHistory:")
        for move, description in enumerate(self.game_state.move_descriptions()):
            marker = "→" if move == self.game_state.current_move else " "
            print(f" {marker} {move}: {description}")

    def handle_command(self, command: str) -> bool:
        """
        Process one line of input.

        Args:
            command: The raw input line.

        Returns:
            False if the player asked to quit, True otherwise.
        """
        parts = command.strip().lower().split()
        if not parts:
            return True

        if parts[0] in ("q", "quit", "exit"):
            return False

        if parts[0] in ("h", "history"):
            self.print_history()
            return True

        if parts[0] in ("j", "jump"):
            if len(parts) != 2:
                print(JUMP_USAGE)
                return True
            try:
                move = int(parts[1])
            except ValueError:
                print(JUMP_USAGE)
                return True
            self.session.history_clicked(move)
            return True

        if parts[0].isdigit():
            # isdigit() also accepts characters such as "²" that int() refuses
            try:
                cell = int(parts[0])
            except ValueError:
                print(CELL_USAGE)
                return True
            self.session.cell_clicked(cell)
            return True

        print(f"Unknown command: {command.strip()!r}. {CELL_USAGE}")
        return True

    def start(self):
        """Run the console game loop."""
        print("\nStarting TicTacToe game...")
        print("Type a cell (0-8), 'j N' to jump to move N, 'h' for history, 'q' to quit\n")

        self.is_running = True
        self.session.render()

        while self.is_running:
            try:
                command = self.input_func("> ")
            except EOFError:
                break
            self.is_running = self.handle_command(command)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe with time travel")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args()

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI()
        ui.run()
        return

    # Console mode (--no-ui)
    console = TicTacToeConsole()

    try:
        console.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
