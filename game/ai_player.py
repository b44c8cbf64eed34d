"""
AI player for TicTacToe.
Uses a fixed-priority heuristic to choose a move: win, block, center,
corner, edge.
"""

import random
from typing import Optional, List

from .game_state import Board, Mark, OPPONENT_MARK, get_empty_cells, index_to_cell
from .win_checker import WinChecker

# Returned when the board has no empty cell
NO_MOVE = -1

CENTER = 4
CORNERS = (0, 2, 6, 8)
EDGES = (1, 3, 5, 7)


class AIPlayer:
    """
    A greedy TicTacToe opponent.

    It takes a win when one is available and blocks the other player's
    immediate win, then prefers the center, a corner, and an edge.
    It only looks one move ahead, so it can be beaten with a fork.
    """

    def __init__(self, mark: Mark = OPPONENT_MARK, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: O).
            rng: Random source for corner/edge tie-breaks.
        """
        if not isinstance(mark, Mark):
            raise TypeError(f"mark must be a Mark, got {mark!r}")
        self.mark = mark
        self.rng = rng or random.Random()
        self.win_checker = WinChecker()

        # Which rule picked the last move (for debugging)
        self.last_reason: Optional[str] = None

    def select_move(self, board: Board) -> int:
        """
        Choose a move for the current board.

        The board is left exactly as it was passed in.

        Args:
            board: The 9-cell board.

        Returns:
            Board index of the chosen move, or NO_MOVE if the board is full.
        """
        empty = get_empty_cells(board)
        if not empty:
            self.last_reason = None
            return NO_MOVE

        # 1. Win now
        index = self._find_winning_move(board, empty, self.mark)
        if index is not None:
            self.last_reason = "win"
            return index

        # 2. Block the other player's immediate win
        index = self._find_winning_move(board, empty, self.mark.opposite())
        if index is not None:
            self.last_reason = "block"
            return index

        # 3. Center
        if CENTER in empty:
            self.last_reason = "center"
            return CENTER

        # 4. Corner
        corners = [c for c in CORNERS if c in empty]
        if corners:
            self.last_reason = "corner"
            return self.rng.choice(corners)

        # 5. Edge
        edges = [e for e in EDGES if e in empty]
        if edges:
            self.last_reason = "edge"
            return self.rng.choice(edges)

        # Unreachable on a 3x3 board, kept for completeness
        self.last_reason = "fallback"
        return self.rng.choice(empty)

    def _find_winning_move(self, board: Board, empty: List[int], mark: Mark) -> Optional[int]:
        """
        Find the first empty index (ascending) where mark would complete a line.

        Works on a scratch copy so the caller's board is never touched.
        """
        scratch = list(board)
        for index in empty:
            scratch[index] = mark
            won = self.win_checker.get_winning_line(scratch) is not None
            scratch[index] = None
            if won:
                return index
        return None

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.

        Returns:
            A string describing the suggested move.
        """
        index = self.select_move(board)

        if index == NO_MOVE:
            return "No moves available!"

        row, col = index_to_cell(index)
        return f"Place {self.mark.value} on cell {index + 1} (row {row}, col {col}) [{self.last_reason}]"


def select_move(board: Board, mark: Mark = OPPONENT_MARK, rng: Optional[random.Random] = None) -> int:
    """Choose a move for mark with a one-off AIPlayer."""
    return AIPlayer(mark, rng).select_move(board)


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    X, O = Mark.X, Mark.O
    ai = AIPlayer(O)

    # X is about to win with cell 2
    board = [X, X, None,
             None, O, None,
             None, None, None]
    print(ai.get_move_suggestion(board))

    # O can win with cell 2
    board = [O, O, None,
             None, X, X,
             None, None, None]
    print(ai.get_move_suggestion(board))

    print("\nAIPlayer test done!")
