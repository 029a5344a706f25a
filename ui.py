"""
TicTacToe UI
A graphical interface for TicTacToe with time travel using Tkinter.

Shows:
- The 3x3 board (winning line highlighted)
- Game status (winner, draw, or next player)
- Move history; click an entry to jump back to that board
"""

import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from logic.board import Board, Player, cell_to_row_col
from logic.config import GameConfig
from logic.session import GameSession
from logic.win_checker import WinResult


class UIConfig:
    """
    Look and feel of the Tkinter window.
    """

    WINDOW_TITLE = "Tic Tac Toe"
    MIN_WIDTH = 560
    MIN_HEIGHT = 480

    BG_COLOR = '#1a1a2e'
    CELL_BG = '#16213e'
    CELL_FONT = ('Segoe UI', 24, 'bold')
    WIN_BG = '#10b981'
    WIN_FG = 'white'

    MARKER_COLORS = {
        Player.X: '#60a5fa',   # Blue
        Player.O: '#f472b6',   # Pink
    }

    HISTORY_BG = '#2d3748'
    HISTORY_ACTIVE_BG = '#6366f1'


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(self, session: Optional[GameSession] = None):
        """Initialize the UI."""
        self.session = session or GameSession()

        self.board_cells: List[tk.Button] = []
        self.history_buttons: List[tk.Button] = []

        # Create UI
        self._create_ui()

        self.session.subscribe(self._on_render)
        self.session.render()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(UIConfig.WINDOW_TITLE)
        self.root.configure(bg=UIConfig.BG_COLOR)
        self.root.minsize(UIConfig.MIN_WIDTH, UIConfig.MIN_HEIGHT)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=UIConfig.BG_COLOR)
        style.configure('TLabel', background=UIConfig.BG_COLOR, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 14, 'bold'), foreground='#ffd700')

        # Left panel - Board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        ttk.Label(left_frame, text="🎮 Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 5))

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        board_frame = ttk.Frame(left_frame)
        board_frame.pack(pady=10)

        for index in range(GameConfig.CELL_COUNT):
            row, col = cell_to_row_col(index)
            cell = tk.Button(
                board_frame,
                text="",
                font=UIConfig.CELL_FONT,
                width=3,
                height=1,
                bg=UIConfig.CELL_BG,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self.session.cell_clicked(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        # Right panel - History
        self.right_frame = ttk.Frame(main_frame, width=220)
        self.right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        self.right_frame.pack_propagate(False)

        ttk.Label(self.right_frame, text="📜 Game History", style='Title.TLabel').pack(pady=(0, 10))

        # Packed before the history so a long history never pushes it out of the window
        self.quit_button = tk.Button(
            self.right_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=20,
            command=self._quit
        )
        self.quit_button.pack(side=tk.BOTTOM, pady=10)

        self.history_frame = ttk.Frame(self.right_frame)
        self.history_frame.pack(fill=tk.BOTH, expand=True)

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_render(self, board: Board, current_player: Player, result: Optional[WinResult]):
        """Render callback from the session."""
        self._update_board_display(board, result)
        self._update_status()
        self._update_history()

    def _update_board_display(self, board: Board, result: Optional[WinResult]):
        """Update the board grid display."""
        winning_cells = result.line if result else ()

        for index, marker in enumerate(board):
            cell = self.board_cells[index]

            if index in winning_cells:
                cell.configure(text=marker.value, bg=UIConfig.WIN_BG, fg=UIConfig.WIN_FG)
            elif marker is None:
                cell.configure(text="", bg=UIConfig.CELL_BG)
            else:
                cell.configure(
                    text=marker.value,
                    bg=UIConfig.CELL_BG,
                    fg=UIConfig.MARKER_COLORS[marker]
                )

    def _update_status(self):
        """Update the status label."""
        self.status_label.configure(text=self.session.game_state.get_status().text)

    def _update_history(self):
        """Rebuild the history list."""
        for button in self.history_buttons:
            button.destroy()
        self.history_buttons = []

        game_state = self.session.game_state
        for move, description in enumerate(game_state.move_descriptions()):
            is_current = move == game_state.current_move
            button = tk.Button(
                self.history_frame,
                text=description,
                font=('Segoe UI', 10, 'bold' if is_current else 'normal'),
                bg=UIConfig.HISTORY_ACTIVE_BG if is_current else UIConfig.HISTORY_BG,
                fg='white',
                width=20,
                command=lambda m=move: self.session.history_clicked(m)
            )
            button.pack(pady=2)
            self.history_buttons.append(button)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.session.unsubscribe(self._on_render)
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI()
    ui.run()


if __name__ == "__main__":
    main()
