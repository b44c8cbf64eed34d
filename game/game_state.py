"""
Game state management for TicTacToe.
Tracks the board, current player, game mode, and the moves of the current game.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

from .config import GameConfig


class Mark(Enum):
    """The two player marks."""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        """Get the opposite mark."""
        return Mark.O if self == Mark.X else Mark.X


class GameMode(Enum):
    """How the game is played."""
    TWO_PLAYER = "two-player"
    VS_OPPONENT = "vs-computer"


class GameStatus(Enum):
    """Where the session is in its lifecycle."""
    AWAITING_MOVE = "awaiting_move"
    WON = "won"
    DRAWN = "drawn"


# A cell is a Mark, or None when empty
Cell = Optional[Mark]
Board = List[Cell]

CELL_COUNT = GameConfig.CELL_COUNT
OPPONENT_MARK = Mark(GameConfig.OPPONENT_MARK)


def empty_board() -> Board:
    """Create a fresh board with all 9 cells empty."""
    return [None] * CELL_COUNT


def index_to_cell(index: int) -> Tuple[int, int]:
    """Convert a board index (0-8) to (row, col)."""
    return divmod(index, GameConfig.BOARD_SIZE)


def cell_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a board index (0-8)."""
    return row * GameConfig.BOARD_SIZE + col


def get_empty_cells(board: Board) -> List[int]:
    """
    Get all empty cells on the board.

    Args:
        board: The board to scan.

    Returns:
        Empty indices in ascending order.
    """
    return [index for index, cell in enumerate(board) if cell is None]


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Mark            # Who made the move
    index: int              # Board index (0-8)
    move_number: int        # Which move this is (0-8)


@dataclass
class GameSession:
    """
    The complete state of one TicTacToe game.

    Tracks:
    - The 9-cell board (row-major)
    - Current player
    - Whether moves are still accepted
    - Winner and winning line, once the game is won
    - Move history of the current game
    """

    mode: GameMode = GameMode.TWO_PLAYER

    # The board - None means empty, otherwise the Mark placed there
    board: Board = field(default_factory=empty_board)

    # Current player's turn (X always starts)
    current_player: Mark = Mark.X

    # False once the game is won or drawn
    active: bool = True

    # Game result
    winner: Optional[Mark] = None
    winning_line: Optional[Tuple[int, int, int]] = None

    # Move history
    moves: List[Move] = field(default_factory=list)

    def __post_init__(self):
        if len(self.board) != CELL_COUNT:
            raise ValueError(f"Board must have {CELL_COUNT} cells, got {len(self.board)}")
        for cell in self.board:
            if cell is not None and not isinstance(cell, Mark):
                raise ValueError(f"Invalid cell value: {cell!r}")

    @property
    def status(self) -> GameStatus:
        """Get the state-machine view of the session."""
        if self.active:
            return GameStatus.AWAITING_MOVE
        if self.winner is not None:
            return GameStatus.WON
        return GameStatus.DRAWN

    @property
    def opponent_mark(self) -> Optional[Mark]:
        """The mark played by the automated opponent, or None in two-player mode."""
        if self.mode == GameMode.VS_OPPONENT:
            return OPPONENT_MARK
        return None

    def is_opponent_turn(self) -> bool:
        """True when the automated opponent should move next."""
        return (
            self.active
            and self.mode == GameMode.VS_OPPONENT
            and self.current_player == OPPONENT_MARK
        )

    def get_empty_cells(self) -> List[int]:
        """Get all empty cells on this session's board."""
        return get_empty_cells(self.board)

    def copy(self) -> "GameSession":
        """Create a deep copy of the session."""
        return GameSession(
            mode=self.mode,
            board=list(self.board),
            current_player=self.current_player,
            active=self.active,
            winner=self.winner,
            winning_line=self.winning_line,
            moves=list(self.moves),
        )

    def reset(self) -> "GameSession":
        """
        Reinitialise the session for a new game in the same mode.

        Returns:
            The same session, for chaining.
        """
        self.board = empty_board()
        self.current_player = Mark.X
        self.active = True
        self.winner = None
        self.winning_line = None
        self.moves = []
        return self

    def format_board(self) -> str:
        """Format the board as text for the console."""
        lines = []
        for row in range(GameConfig.BOARD_SIZE):
            cells = []
            for col in range(GameConfig.BOARD_SIZE):
                index = cell_to_index(row, col)
                mark = self.board[index]
                # Empty cells show their 1-9 number
                cells.append(mark.value if mark else str(index + 1))
            lines.append(" " + " │ ".join(cells))
            if row < GameConfig.BOARD_SIZE - 1:
                lines.append("───┼───┼───")
        return "\n".join(lines)


def new_session(mode: GameMode = GameMode.TWO_PLAYER) -> GameSession:
    """Create a fresh session: empty board, X to move."""
    if not isinstance(mode, GameMode):
        raise TypeError(f"mode must be a GameMode, got {mode!r}")
    return GameSession(mode=mode)
