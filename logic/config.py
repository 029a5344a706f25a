"""
Game configuration for TicTacToe.
Board geometry and the text shown to the player.
"""


class GameConfig:
    """
    Configuration class for game settings.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, stored as a flat list of cells
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # X always moves first (even history index -> X to move)
    FIRST_MARKER = "X"

    # ==================== TEXT SETTINGS ====================
    STATUS_WINNER = "Winner: {marker}"
    STATUS_DRAW = "It's a draw!"
    STATUS_NEXT = "Next player: {marker}"

    HISTORY_START = "Restart the game"
    HISTORY_MOVE = "Go to move #{move}"

    # ==================== DEBUG SETTINGS ====================
    # Print the reason when a move or jump is rejected
    VERBOSE = True
