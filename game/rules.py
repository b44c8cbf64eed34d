"""
Rules engine for TicTacToe.
Applies validated moves to a session and detects wins and draws.
"""

from enum import Enum
from typing import Optional
from dataclasses import dataclass

from .game_state import GameSession, Mark, Move
from .move_validator import MoveValidator, InvalidMoveReason
from .win_checker import WinChecker, WinLine


class MoveOutcome(Enum):
    """What happened when a move was requested."""
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"
    INVALID = "invalid"


@dataclass
class MoveResult:
    """Result of a move request."""
    outcome: MoveOutcome
    index: Optional[int] = None
    player: Optional[Mark] = None
    line: Optional[WinLine] = None           # Set on WIN
    reason: Optional[InvalidMoveReason] = None  # Set on INVALID
    error_message: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.outcome != MoveOutcome.INVALID

    @property
    def is_terminal(self) -> bool:
        return self.outcome in (MoveOutcome.WIN, MoveOutcome.DRAW)


class RulesEngine:
    """
    Owns the move path for a session.

    Every move, human or opponent, goes through apply_move so the
    board is always re-validated here, whatever the caller filtered.
    """

    def __init__(self):
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

    def apply_move(self, session: GameSession, index: int) -> MoveResult:
        """
        Place the current player's mark at index.

        Args:
            session: The session to mutate.
            index: Board index (0-8).

        Returns:
            MoveResult. An INVALID result leaves the session untouched.
        """
        validation = self.validator.validate_move(session, index)
        if not validation.is_valid:
            return MoveResult(
                outcome=MoveOutcome.INVALID,
                index=index,
                player=session.current_player,
                reason=validation.reason,
                error_message=validation.error_message,
            )

        player = session.current_player
        session.board[index] = player
        session.moves.append(Move(player=player, index=index, move_number=len(session.moves)))

        line = self.win_checker.get_winning_line(session.board)
        if line is not None:
            session.active = False
            session.winner = player
            session.winning_line = line
            return MoveResult(outcome=MoveOutcome.WIN, index=index, player=player, line=line)

        # Win takes precedence over a full board
        if self.win_checker.check_draw(session.board):
            session.active = False
            return MoveResult(outcome=MoveOutcome.DRAW, index=index, player=player)

        session.current_player = player.opposite()
        return MoveResult(outcome=MoveOutcome.CONTINUE, index=index, player=player)

    def reset(self, session: GameSession) -> GameSession:
        """Reinitialise the session: empty board, X to move, active."""
        return session.reset()


_engine = RulesEngine()


def apply_move(session: GameSession, index: int) -> MoveResult:
    """Apply a move through the shared rules engine."""
    return _engine.apply_move(session, index)


def reset(session: GameSession) -> GameSession:
    """Reset a session in place and return it."""
    return _engine.reset(session)
