"""
TicTacToe game engine.
Handles game state, rules, and the AI opponent.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import (
    Mark,
    GameMode,
    GameStatus,
    GameSession,
    Move,
    new_session,
    empty_board,
    get_empty_cells,
    index_to_cell,
    cell_to_index,
)
from .win_checker import WinChecker, WIN_LINES, check_win, check_draw
from .move_validator import MoveValidator, InvalidMoveReason, ValidationResult
from .rules import RulesEngine, MoveOutcome, MoveResult, apply_move, reset
from .ai_player import AIPlayer, NO_MOVE, select_move
