"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- Mode selection (two players, or against the computer)
- The 3x3 board, playable with the mouse or the keyboard
- Turn indicator and game result
- Confetti when someone wins
"""

import math
import time
import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from game import (
    GameConfig,
    GameMode,
    GameSession,
    AIPlayer,
    MoveOutcome,
    MoveResult,
    NO_MOVE,
    apply_move,
    new_session,
    reset,
)
from game.config import log
from board_image import save_board
from confetti import ConfettiField


ARROW_KEYS = ("Up", "Down", "Left", "Right")


def next_focus_index(index: int, key: str) -> int:
    """
    Get the cell reached from index with an arrow key.

    Up/Down wrap to the opposite row, Left/Right wrap inside the row.
    """
    n = GameConfig.BOARD_SIZE
    if key == "Up":
        return index - n if index >= n else index + n * (n - 1)
    if key == "Down":
        return index + n if index < n * (n - 1) else index - n * (n - 1)
    if key == "Left":
        return index + n - 1 if index % n == 0 else index - 1
    if key == "Right":
        return index - (n - 1) if index % n == n - 1 else index + 1
    return index


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    Holds no game rules: every move goes through game.apply_move and the
    opponent's choice comes from AIPlayer.
    """

    def __init__(self, delay_ms: int = GameConfig.OPPONENT_DELAY_MS, ai: Optional[AIPlayer] = None):
        """Initialize the UI."""
        self.delay_ms = delay_ms
        self.ai = ai or AIPlayer()
        self.session: Optional[GameSession] = None

        # Pending scheduled callbacks
        self.opponent_job: Optional[str] = None
        self.confetti_job: Optional[str] = None
        self.confetti_stop_job: Optional[str] = None
        self.opponent_thinking = False

        self.confetti: Optional[ConfettiField] = None
        self.confetti_canvas: Optional[tk.Canvas] = None

        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BG_COLOR)
        self.root.minsize(420, 520)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BG_COLOR)
        style.configure('TLabel', background=GameConfig.BG_COLOR, foreground=GameConfig.TEXT_COLOR,
                        font=GameConfig.LABEL_FONT)
        style.configure('Title.TLabel', font=GameConfig.TITLE_FONT, foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 14, 'bold'), foreground='#ffd700')

        header = ttk.Frame(self.root)
        header.pack(fill=tk.X, padx=10, pady=(10, 0))
        ttk.Label(header, text="Tic-Tac-Toe", style='Title.TLabel').pack()
        self.mode_label = ttk.Label(header, text="")
        self.mode_label.pack()
        self.turn_label = ttk.Label(header, text="Select Game Mode", style='Status.TLabel')
        self.turn_label.pack(pady=5)

        # Mode selection screen
        self.mode_frame = ttk.Frame(self.root)
        self.two_player_btn = self._make_button(
            self.mode_frame, "👥 Two Player", '#10b981',
            lambda: self.select_mode(GameMode.TWO_PLAYER)
        )
        self.two_player_btn.pack(pady=10)
        self._make_button(
            self.mode_frame, "🤖 vs Computer", '#6366f1',
            lambda: self.select_mode(GameMode.VS_OPPONENT)
        ).pack(pady=10)

        # Game screen
        self.game_frame = ttk.Frame(self.root)

        self.board_frame = ttk.Frame(self.game_frame)
        self.board_frame.pack(pady=10)

        self.cells: List[tk.Button] = []
        for index in range(GameConfig.CELL_COUNT):
            row, col = divmod(index, GameConfig.BOARD_SIZE)
            cell = tk.Button(
                self.board_frame,
                text="",
                font=GameConfig.CELL_FONT,
                width=3,
                height=1,
                bg=GameConfig.CELL_COLOR,
                fg=GameConfig.TEXT_COLOR,
                activebackground=GameConfig.CELL_FOCUS_COLOR,
                relief='ridge',
                borderwidth=2,
                takefocus=True,
                command=lambda i=index: self.on_cell(i)
            )
            cell.grid(row=row, column=col, padx=2, pady=2)
            cell.bind("<Return>", lambda e, i=index: self._on_cell_key(i))
            cell.bind("<space>", lambda e, i=index: self._on_cell_key(i))
            for key in ARROW_KEYS:
                cell.bind(f"<{key}>", lambda e, i=index, k=key: self._move_focus(i, k))
            self.cells.append(cell)

        self.message_label = ttk.Label(self.game_frame, text="", style='Status.TLabel')
        self.message_label.pack(pady=5)

        control_frame = ttk.Frame(self.game_frame)
        control_frame.pack(pady=10)
        self._make_button(control_frame, "🔄 Restart", '#6366f1', self.restart).pack(side=tk.LEFT, padx=5)
        self._make_button(control_frame, "⇄ Change Mode", '#2d3748', self.show_mode_selection).pack(
            side=tk.LEFT, padx=5)

        self.root.bind("<Key-s>", lambda e: self.save_snapshot())
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

        self.show_mode_selection()

    def _make_button(self, parent, text: str, color: str, command) -> tk.Button:
        return tk.Button(
            parent,
            text=text,
            font=('Segoe UI', 11, 'bold'),
            bg=color,
            fg='white',
            activebackground=color,
            width=14,
            command=command
        )

    # ==================== SCREENS ====================

    def select_mode(self, mode: GameMode):
        """Start a new game in the chosen mode."""
        log(f"Mode selected: {mode.value}")
        self._cancel_jobs()
        self.session = new_session(mode)

        self.mode_frame.pack_forget()
        self.game_frame.pack(fill=tk.BOTH, expand=True)
        self.mode_label.configure(
            text="👥 Two Player Mode" if mode == GameMode.TWO_PLAYER else "🤖 vs Computer Mode"
        )
        self._refresh()
        self.cells[0].focus_set()

    def show_mode_selection(self):
        """Go back to the mode selection screen."""
        self._cancel_jobs()
        self.session = None

        self.game_frame.pack_forget()
        self.mode_frame.pack(pady=30)
        self.mode_label.configure(text="")
        self.turn_label.configure(text="Select Game Mode")
        self.two_player_btn.focus_set()

    def restart(self):
        """Restart the game in the current mode."""
        if self.session is None:
            return
        log("Restarting game...")
        self._cancel_jobs()
        reset(self.session)
        self._refresh()

    # ==================== INPUT ====================

    def on_cell(self, index: int):
        """Handle a click or Enter/space on a cell."""
        if self.session is None or self.opponent_thinking:
            return

        result = apply_move(self.session, index)
        if not result.is_valid:
            log(f"Move rejected: {result.error_message}")
            return

        log(f"{result.player.value} -> cell {index + 1}")
        self._after_move(result)

    def _on_cell_key(self, index: int):
        # "break" stops Tk's own space-invokes-button binding
        self.on_cell(index)
        return "break"

    def _move_focus(self, index: int, key: str):
        if self.opponent_thinking:
            return "break"
        self.cells[next_focus_index(index, key)].focus_set()
        return "break"

    # ==================== OPPONENT ====================

    def _schedule_opponent(self):
        """Let the computer 'think', then play."""
        self.opponent_thinking = True
        for cell in self.cells:
            cell.configure(state='disabled')
        self.turn_label.configure(text="Computer's Turn")
        self.opponent_job = self.root.after(self.delay_ms, self._opponent_move)

    def _opponent_move(self):
        """Apply the computer's move (runs on the UI thread)."""
        self.opponent_job = None
        self.opponent_thinking = False

        # Restart or mode change during the delay cancels the move
        if self.session is None or not self.session.is_opponent_turn():
            self._refresh()
            return

        try:
            index = self.ai.select_move(self.session.board)
            if index == NO_MOVE:
                self._refresh()
                return
            result = apply_move(self.session, index)
            log(f"Computer ({self.ai.last_reason}) -> cell {index + 1}")
            self._after_move(result)
        except Exception as e:
            print(f"Opponent error: {e}")
            self._refresh()

    # ==================== DISPLAY ====================

    def _after_move(self, result: MoveResult):
        self._refresh()
        if result.outcome == MoveOutcome.WIN:
            self.start_confetti()
        elif self.session.is_opponent_turn():
            self._schedule_opponent()

    def _refresh(self):
        """Redraw the board and labels from the session."""
        session = self.session
        if session is None:
            return

        winning = set(session.winning_line or ())
        for index, cell in enumerate(self.cells):
            mark = session.board[index]
            bg = GameConfig.WIN_CELL_COLOR if index in winning else GameConfig.CELL_COLOR
            fg = GameConfig.TEXT_COLOR
            if mark is not None:
                fg = GameConfig.X_COLOR if mark.value == "X" else GameConfig.O_COLOR
            state = 'normal' if session.active and mark is None else 'disabled'
            cell.configure(text=mark.value if mark else "", bg=bg, fg=fg,
                           disabledforeground=fg, state=state)

        self.message_label.configure(text=self._result_message())
        if not session.active:
            self.turn_label.configure(text="Game Over")
        elif session.current_player == session.opponent_mark:
            self.turn_label.configure(text="Computer's Turn")
        else:
            self.turn_label.configure(text=f"Player {session.current_player.value}'s Turn")

    def _result_message(self) -> str:
        session = self.session
        if session.active:
            return ""
        if session.winner is None:
            return "🤝 It's a Draw!"
        if session.mode == GameMode.VS_OPPONENT:
            return "🤖 Computer Wins!" if session.winner == session.opponent_mark else "🎉 You Win!"
        return f"🎉 Player {session.winner.value} Wins!"

    def save_snapshot(self):
        """Save the board as a PNG (the 's' key)."""
        if self.session is None:
            return
        filename = f"tictactoe_{int(time.time())}.png"
        save_board(self.session.board, filename, self.session.winning_line)
        print(f"Saved: {filename}")

    # ==================== CONFETTI ====================

    def start_confetti(self):
        """Rain confetti over the board for a few seconds."""
        self.stop_confetti()
        self.root.update_idletasks()
        width = self.board_frame.winfo_width()
        height = self.board_frame.winfo_height()

        self.confetti_canvas = tk.Canvas(self.board_frame, bg=GameConfig.BG_COLOR, highlightthickness=0)
        self.confetti_canvas.place(x=0, y=0, relwidth=1, relheight=1)
        self._draw_board_on_canvas(width, height)
        self.confetti = ConfettiField(width, height)

        self._animate_confetti()
        self.confetti_stop_job = self.root.after(GameConfig.CONFETTI_DURATION_MS, self.stop_confetti)

    def _draw_board_on_canvas(self, width: int, height: int):
        """Paint the marks underneath the confetti."""
        canvas = self.confetti_canvas
        n = GameConfig.BOARD_SIZE
        cw, ch = width / n, height / n
        winning = set(self.session.winning_line or ())
        for index, mark in enumerate(self.session.board):
            row, col = divmod(index, n)
            x0, y0 = col * cw, row * ch
            fill = GameConfig.WIN_CELL_COLOR if index in winning else GameConfig.CELL_COLOR
            canvas.create_rectangle(x0 + 2, y0 + 2, x0 + cw - 2, y0 + ch - 2, fill=fill, outline='')
            if mark is not None:
                color = GameConfig.X_COLOR if mark.value == "X" else GameConfig.O_COLOR
                canvas.create_text(x0 + cw / 2, y0 + ch / 2, text=mark.value,
                                   font=GameConfig.CELL_FONT, fill=color)

    def _animate_confetti(self):
        if self.confetti is None or self.confetti_canvas is None:
            return
        canvas = self.confetti_canvas
        canvas.delete("confetti")

        for p in self.confetti.particles():
            if p.shape == "circle":
                r = p.size / 2
                canvas.create_oval(p.x - r, p.y - r, p.x + r, p.y + r,
                                   fill=p.color, outline='', tags="confetti")
            else:
                # Rotated rectangle, 1 x 0.6 of the particle size
                angle = math.radians(p.rotation)
                cos_a, sin_a = math.cos(angle), math.sin(angle)
                hw, hh = p.size / 2, p.size * 0.3
                points = []
                for dx, dy in ((-hw, -hh), (hw, -hh), (hw, hh), (-hw, hh)):
                    points.extend((p.x + dx * cos_a - dy * sin_a, p.y + dx * sin_a + dy * cos_a))
                canvas.create_polygon(points, fill=p.color, outline='', tags="confetti")

        self.confetti.step()
        self.confetti_job = self.root.after(GameConfig.CONFETTI_FRAME_MS, self._animate_confetti)

    def stop_confetti(self):
        """Stop the celebration and remove the overlay."""
        for job in (self.confetti_job, self.confetti_stop_job):
            if job is not None:
                self.root.after_cancel(job)
        self.confetti_job = None
        self.confetti_stop_job = None
        self.confetti = None
        if self.confetti_canvas is not None:
            self.confetti_canvas.destroy()
            self.confetti_canvas = None

    # ==================== LIFECYCLE ====================

    def _cancel_jobs(self):
        if self.opponent_job is not None:
            self.root.after_cancel(self.opponent_job)
            self.opponent_job = None
        self.opponent_thinking = False
        self.stop_confetti()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_jobs()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.OPPONENT_DELAY_MS,
        help="Computer 'thinking' delay in milliseconds"
    )

    args = parser.parse_args()

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(delay_ms=args.delay)
    ui.run()


if __name__ == "__main__":
    main()
