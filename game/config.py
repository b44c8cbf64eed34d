"""
Game configuration for TicTacToe.
All the settings for the rules engine, the opponent, and the front ends.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the opponent and the look of the UI.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, indexed 0-8 in row-major order
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # ==================== OPPONENT SETTINGS ====================
    # The human always plays X and moves first
    OPPONENT_MARK = "O"

    # "Thinking" delay before the opponent's move is applied (milliseconds)
    OPPONENT_DELAY_MS = 600

    # ==================== CONFETTI SETTINGS ====================
    CONFETTI_DURATION_MS = 5000
    CONFETTI_COUNT = 150
    CONFETTI_FRAME_MS = 16  # ~60 FPS
    CONFETTI_COLORS = [
        "#0ea5e9",
        "#38bdf8",
        "#7dd3fc",
        "#ec4899",
        "#f472b6",
        "#10b981",
        "#fbbf24",
        "#f97316",
    ]

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "Tic-Tac-Toe"
    BG_COLOR = "#1a1a2e"
    CELL_COLOR = "#16213e"
    CELL_FOCUS_COLOR = "#1f2f57"
    WIN_CELL_COLOR = "#065f46"
    X_COLOR = "#38bdf8"
    O_COLOR = "#f472b6"
    TEXT_COLOR = "white"
    CELL_FONT = ("Segoe UI", 32, "bold")
    LABEL_FONT = ("Segoe UI", 12)
    TITLE_FONT = ("Segoe UI", 18, "bold")

    # ==================== SNAPSHOT SETTINGS ====================
    # Size of saved board images (pixels, square)
    SNAPSHOT_SIZE = 300

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = True


def log(message: str):
    """Print a diagnostic message when DEBUG_MODE is on."""
    if GameConfig.DEBUG_MODE:
        print(message)
