"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass

from .game_state import GameSession, CELL_COUNT


class InvalidMoveReason(Enum):
    """Why a move was rejected."""
    OUT_OF_RANGE = "out_of_range"
    GAME_INACTIVE = "game_inactive"
    CELL_OCCUPIED = "cell_occupied"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[InvalidMoveReason] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be on the board (0-8)
    3. Can only place on empty cells
    """

    def validate_move(self, session: GameSession, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            session: Current game session.
            index: Board index to place the mark on (0-8).

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        # Check if game is over
        if not session.active:
            return ValidationResult(
                is_valid=False,
                reason=InvalidMoveReason.GAME_INACTIVE,
                error_message="Game is already over!"
            )

        # Check if index is in valid range
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                reason=InvalidMoveReason.OUT_OF_RANGE,
                error_message=f"Invalid position {index!r}. Must be 0-{CELL_COUNT - 1}."
            )

        # Check if cell is empty
        occupant = session.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                reason=InvalidMoveReason.CELL_OCCUPIED,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, session: GameSession) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            Valid board indices, empty once the game is over.
        """
        if not session.active:
            return []
        return session.get_empty_cells()
