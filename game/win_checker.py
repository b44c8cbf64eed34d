"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Sequence, Tuple

from .game_state import Board, Cell, Mark

WinLine = Tuple[int, int, int]

# All possible winning lines (board indices), in reporting order
WIN_LINES: Tuple[WinLine, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WIN_LINES

    def get_winning_line(self, board: Sequence[Cell]) -> Optional[WinLine]:
        """
        Get the winning line if there is one.

        When more than one line is complete, the first one in
        WINNING_LINES order is reported.

        Args:
            board: The 9-cell board.

        Returns:
            The winning line as a tuple of indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None

    def get_winner(self, board: Sequence[Cell]) -> Optional[Mark]:
        """
        Check if there's a winner.

        Args:
            board: The 9-cell board.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def _check_line(self, board: Sequence[Cell], line: WinLine) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Returns:
            The Mark if all 3 cells hold it, None otherwise.
        """
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def check_draw(self, board: Sequence[Cell]) -> bool:
        """
        Check if the board is full.

        A full board can also be a winning board, so callers must
        check for a winner first.
        """
        return all(cell is not None for cell in board)


_checker = WinChecker()


def check_win(board: Board) -> Optional[WinLine]:
    """Return the first complete line on the board, or None."""
    return _checker.get_winning_line(board)


def check_draw(board: Board) -> bool:
    """True iff no cell is empty."""
    return _checker.check_draw(board)


# Quick test
if __name__ == "__main__":
    print("Testing WinChecker...")

    X, O = Mark.X, Mark.O

    # Test 1: Horizontal win
    board = [X, X, X,
             None, O, None,
             O, None, None]
    print(f"Test 1 (horizontal): line = {check_win(board)}")

    # Test 2: Diagonal win
    board = [O, X, None,
             None, O, X,
             None, None, O]
    print(f"Test 2 (diagonal): line = {check_win(board)}")

    # Test 3: Draw (full board, no winner)
    board = [X, O, X,
             X, O, O,
             O, X, X]
    print(f"Test 3 (draw): line = {check_win(board)}, full = {check_draw(board)}")

    print("\nWinChecker test done!")
