"""
Main entry point for TicTacToe.

This script ties together:
- Logic (game session, rules, AI opponent)
- Console play (--no-ui)
- The Tkinter UI (default)

Run this script to play TicTacToe!
"""

import random
import time
from typing import Callable, Optional

from game import (
    GameConfig,
    GameMode,
    AIPlayer,
    MoveOutcome,
    MoveResult,
    NO_MOVE,
    apply_move,
    cell_to_index,
    new_session,
    reset,
)
from game.config import log


MODE_NAMES = {
    "two-player": GameMode.TWO_PLAYER,
    "vs-computer": GameMode.VS_OPPONENT,
}

COMMANDS = {"q", "r", "m", "s"}


def parse_cell(text: str) -> int:
    """
    Parse a cell typed by the player.

    Accepts a cell number 1-9 or "row,col" with 0-2 values.

    Returns:
        Board index (0-8).

    Raises:
        ValueError: If the text is not a cell on the board.
    """
    text = text.strip()
    try:
        if "," not in text:
            number = int(text)
        else:
            row, col = (int(part) for part in text.split(",", 1))
    except ValueError:
        raise ValueError("Invalid input. Enter a cell number 1-9 or row,col (e.g., 1,1).") from None

    if "," not in text:
        if not 1 <= number <= GameConfig.CELL_COUNT:
            raise ValueError(f"Invalid cell {number}. Must be 1-{GameConfig.CELL_COUNT}.")
        return number - 1

    if not (0 <= row < GameConfig.BOARD_SIZE and 0 <= col < GameConfig.BOARD_SIZE):
        raise ValueError(f"Invalid row/column ({row}, {col}). Must be between 0 and 2.")
    return cell_to_index(row, col)


class ConsoleGame:
    """
    Console front end for TicTacToe.

    Game flow:
    1. Player X types a cell
    2. The move goes through the rules engine
    3. In vs-computer mode, the computer (O) "thinks" then plays
    4. Repeat until someone wins or it's a draw, then offer a new game
    """

    def __init__(
        self,
        mode: GameMode = GameMode.TWO_PLAYER,
        delay_ms: int = GameConfig.OPPONENT_DELAY_MS,
        ai: Optional[AIPlayer] = None,
        input_func: Callable[[str], str] = input,
        sleep_func: Callable[[float], None] = time.sleep,
        snapshot_path: Optional[str] = None
    ):
        """
        Initialize the console game.

        Args:
            mode: Two players, or against the computer.
            delay_ms: Computer "thinking" delay.
            ai: Opponent to use (default: AIPlayer playing O).
            input_func: Where player input comes from.
            sleep_func: How the thinking delay is waited out.
            snapshot_path: Save the final board here when the game ends.
        """
        self.session = new_session(mode)
        self.delay_ms = delay_ms
        self.ai = ai or AIPlayer()
        self.input_func = input_func
        self.sleep_func = sleep_func
        self.snapshot_path = snapshot_path
        self.is_running = False

    def start(self):
        """Start the game loop."""
        print("\n" + "="*60)
        print(f"   TicTacToe - {self._mode_name()}")
        print("="*60)
        print("Enter a cell 1-9 or row,col. Commands: r=restart, m=change mode, s=save, q=quit\n")

        self.is_running = True
        self._show_board()
        while self.is_running:
            if self.session.is_opponent_turn():
                self._opponent_move()
                continue

            if not self.session.active:
                self._show_game_result()
                answer = self.input_func("Play again? [y/N/m] ").strip().lower()
                if answer == "y":
                    self.restart()
                elif answer == "m":
                    self.change_mode()
                else:
                    self.is_running = False
                continue

            self._human_turn()

        print("Goodbye!")

    def _human_turn(self):
        text = self.input_func(f"{self._turn_label()} > ").strip().lower()
        if text in COMMANDS:
            self._handle_command(text)
            return

        try:
            index = parse_cell(text)
        except ValueError as e:
            print(f"!! {e}")
            return

        result = apply_move(self.session, index)
        if not result.is_valid:
            print(f"!! {result.error_message}")
            return
        self._after_move(result)

    def _opponent_move(self):
        """Let the computer think, then play through the rules engine."""
        print("Computer is thinking...")
        self.sleep_func(self.delay_ms / 1000.0)

        index = self.ai.select_move(self.session.board)
        if index == NO_MOVE:
            log("Computer found no move")
            return

        result = apply_move(self.session, index)
        log(f"Computer ({self.ai.last_reason}) -> cell {index + 1}")
        self._after_move(result)

    def _after_move(self, result: MoveResult):
        print(f"\n{result.player.value} plays cell {result.index + 1}")
        self._show_board()
        if result.outcome == MoveOutcome.WIN:
            log(f"Winning line: {[i + 1 for i in result.line]}")
        if result.is_terminal and self.snapshot_path:
            self.save_snapshot(self.snapshot_path)

    def _handle_command(self, command: str):
        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
        elif command == "r":
            self.restart()
        elif command == "m":
            self.change_mode()
        elif command == "s":
            self.save_snapshot(f"tictactoe_{int(time.time())}.png")

    def restart(self):
        """Reset the game for a new round in the same mode."""
        print("\nResetting game...")
        reset(self.session)
        self._show_board()

    def change_mode(self):
        """Switch between two-player and vs-computer, starting a new game."""
        mode = (GameMode.VS_OPPONENT if self.session.mode == GameMode.TWO_PLAYER
                else GameMode.TWO_PLAYER)
        self.session = new_session(mode)
        print(f"\nMode: {self._mode_name()}")
        self._show_board()

    def save_snapshot(self, path: str):
        """Write the board to a PNG."""
        from board_image import save_board

        save_board(self.session.board, path, self.session.winning_line)
        print(f"Saved: {path}")

    def _mode_name(self) -> str:
        return "Two Player" if self.session.mode == GameMode.TWO_PLAYER else "vs Computer"

    def _turn_label(self) -> str:
        if self.session.current_player == self.session.opponent_mark:
            return "Computer's Turn"
        return f"Player {self.session.current_player.value}'s Turn"

    def _show_board(self):
        print()
        print(self.session.format_board())
        print()

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        winner = self.session.winner
        if winner is None:
            print("\n🤝 It's a Draw!")
        elif self.session.mode == GameMode.VS_OPPONENT:
            if winner == self.session.opponent_mark:
                print("\n🤖 Computer Wins!")
            else:
                print("\n🎉 You Win!")
        else:
            print(f"\n🎉 Player {winner.value} Wins!")

        print("\n" + "="*60)


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--mode",
        choices=sorted(MODE_NAMES),
        default="two-player",
        help="Game mode for console play"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.OPPONENT_DELAY_MS,
        help="Computer 'thinking' delay in milliseconds"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the computer's random corner/edge choices"
    )
    parser.add_argument(
        "--save-board",
        metavar="PATH",
        default=None,
        help="Console mode: save a PNG of the final board"
    )

    args = parser.parse_args(argv)
    ai = AIPlayer(rng=random.Random(args.seed))

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(delay_ms=args.delay, ai=ai)
        ui.run()
        return

    game = ConsoleGame(
        mode=MODE_NAMES[args.mode],
        delay_ms=args.delay,
        ai=ai,
        snapshot_path=args.save_board
    )

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")


if __name__ == "__main__":
    main()
