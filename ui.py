"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- The 3x3 board (click a cell, or use the arrow keys and Enter/Space)
- Game status and screen-reader style announcements
- Errors from the move log service
- Controls: New Game, Reset, Sound toggle, theme toggle

Move log requests run in a background thread, one at a time; the board
and the New Game/Reset buttons stay disabled until the request is done.
"""

import tkinter as tk
from typing import Optional, List

from logic.game_state import GameStatus, NUM_CELLS, BOARD_SIZE
from move_log.config import ServiceConfig
from game_session import GameSession
from theme import ThemeManager
from worker import BackgroundWorker


class TicTacToeUI:
    """
    Main UI class for TicTacToe.
    """

    def __init__(
        self,
        session: GameSession,
        config: Optional[ServiceConfig] = None,
        theme: Optional[ThemeManager] = None,
        auto_refresh: bool = True
    ):
        """
        Initialize the UI.

        Args:
            session: The game session to display and drive.
            config: Service configuration (refresh interval).
            theme: Theme manager.
            auto_refresh: Re-read the move log periodically to pick up the
                other player's moves.
        """
        self.session = session
        self.config = config or ServiceConfig()
        self.theme = theme or ThemeManager()
        self.auto_refresh = auto_refresh
        self.is_running = False

        self.cells: List[tk.Button] = []

        # Results come back on the Tk thread
        self.worker = BackgroundWorker(self._schedule)

        # Create UI
        self._create_ui()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Tic Tac Toe")
        self.root.minsize(380, 520)

        self.main_frame = tk.Frame(self.root)
        self.main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Theme toggle (top right)
        self.theme_btn = tk.Button(
            self.main_frame,
            font=('Segoe UI', 9),
            command=self._toggle_theme
        )
        self.theme_btn.pack(anchor=tk.E)

        self.title_label = tk.Label(
            self.main_frame,
            text="Tic Tac Toe",
            font=('Segoe UI', 20, 'bold')
        )
        self.title_label.pack(pady=(0, 5))

        # Status bar
        self.status_label = tk.Label(self.main_frame, font=('Segoe UI', 13, 'bold'))
        self.status_label.pack(pady=5)

        # Board
        self.board_frame = tk.Frame(self.main_frame)
        self.board_frame.pack(pady=10)

        for index in range(NUM_CELLS):
            row, col = divmod(index, BOARD_SIZE)
            cell = tk.Button(
                self.board_frame,
                text="",
                font=('Segoe UI', 28, 'bold'),
                width=3,
                height=1,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell(i)
            )
            cell.grid(row=row, column=col, padx=3, pady=3)
            cell.bind("<Return>", lambda e, i=index: self._on_cell(i))
            cell.bind("<space>", lambda e, i=index: self._on_cell(i))
            for key, shift in (("Right", 1), ("Left", -1), ("Down", BOARD_SIZE), ("Up", -BOARD_SIZE)):
                cell.bind(f"<{key}>", lambda e, i=index, s=shift: self._focus_cell(i + s))
            self.cells.append(cell)

        # Announcements and errors
        self.announce_label = tk.Label(self.main_frame, font=('Segoe UI', 10))
        self.announce_label.pack(pady=(5, 0))

        self.error_label = tk.Label(self.main_frame, font=('Segoe UI', 10), wraplength=340)
        self.error_label.pack()

        # Controls
        self.control_frame = tk.Frame(self.main_frame)
        self.control_frame.pack(pady=10)

        self.new_game_btn = tk.Button(
            self.control_frame,
            text="New Game",
            font=('Segoe UI', 10, 'bold'),
            width=10,
            command=self._new_game
        )
        self.new_game_btn.pack(side=tk.LEFT, padx=4)

        self.reset_btn = tk.Button(
            self.control_frame,
            text="Reset",
            font=('Segoe UI', 10, 'bold'),
            width=10,
            command=self._reset_game
        )
        self.reset_btn.pack(side=tk.LEFT, padx=4)

        self.sound_btn = tk.Button(
            self.control_frame,
            font=('Segoe UI', 10),
            width=10,
            command=self._toggle_sound
        )
        self.sound_btn.pack(side=tk.LEFT, padx=4)

        self.badge_label = tk.Label(self.main_frame, font=('Segoe UI', 9, 'italic'))
        self.badge_label.pack()

        # Quit button
        self.quit_btn = tk.Button(
            self.main_frame,
            text="Quit",
            font=('Segoe UI', 10),
            width=30,
            command=self._quit
        )
        self.quit_btn.pack(pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

        self._apply_theme()

    def _apply_theme(self):
        """Color every widget from the current palette."""
        p = self.theme.palette
        self.root.configure(bg=p['bg'])
        for frame in (self.main_frame, self.board_frame, self.control_frame):
            frame.configure(bg=p['bg'])
        for label in (self.title_label, self.status_label, self.announce_label, self.badge_label):
            label.configure(bg=p['bg'], fg=p['text'])
        self.announce_label.configure(fg=p['muted'])
        self.badge_label.configure(fg=p['muted'])
        self.error_label.configure(bg=p['bg'], fg=p['error'])
        for btn in (self.new_game_btn, self.reset_btn, self.sound_btn, self.theme_btn, self.quit_btn):
            btn.configure(bg=p['button'], fg=p['button_text'], activebackground=p['panel'])
        self.theme_btn.configure(text=self.theme.toggle_label)
        self._update_display()

    def _update_display(self):
        """Redraw the board and labels from the session."""
        state = self.session.state
        p = self.theme.palette
        loading = self.worker.busy
        cells_locked = loading or state.status != GameStatus.PLAYING

        for index, cell in enumerate(self.cells):
            mark = state.board[index]
            bg = p['cell_win'] if index in state.winning_line else p['cell']
            if mark is None:
                cell.configure(
                    text="",
                    bg=bg,
                    state='disabled' if cells_locked else 'normal'
                )
            else:
                cell.configure(
                    text=mark.value,
                    bg=bg,
                    fg=p['x'] if mark.value == "X" else p['o'],
                    disabledforeground=p['x'] if mark.value == "X" else p['o'],
                    state='disabled'
                )

        self.status_label.configure(text=self.session.status_text)
        self.announce_label.configure(text=self.session.announcement)
        self.error_label.configure(text=self.session.error or "")
        self.sound_btn.configure(text="Sound On" if self.session.sound_enabled else "Sound Off")
        self.badge_label.configure(text="loading..." if loading else state.status.value)
        for btn in (self.new_game_btn, self.reset_btn):
            btn.configure(state='disabled' if loading else 'normal')

    def _schedule(self, callback):
        """Run callback on the Tk thread (safe to call from any thread)."""
        if self.is_running:
            self.root.after(0, callback)

    def _submit(self, action) -> bool:
        """Start a session call in the background, unless one is running."""
        if not self.worker.submit(action, on_done=self._update_display):
            return False
        self._update_display()
        return True

    def _on_cell(self, index: int):
        """Handle a click (or Enter/Space) on a cell."""
        self._submit(lambda: self.session.make_move(index))

    def _focus_cell(self, index: int):
        if 0 <= index < NUM_CELLS:
            self.cells[index].focus_set()

    def _new_game(self):
        self._submit(self.session.new_game)

    def _reset_game(self):
        self._submit(self.session.reset_game)

    def _toggle_sound(self):
        self.session.toggle_sound()
        self._update_display()

    def _toggle_theme(self):
        self.theme.toggle()
        self._apply_theme()

    def _refresh_loop(self):
        """Re-read the move log in the background."""
        if not self.is_running:
            return

        # Skipped while a move or reset is in flight; it re-reads the log anyway
        self._submit(self.session.refresh)

        # Schedule next refresh
        if self.is_running and self.auto_refresh:
            self.root.after(self.config.REFRESH_INTERVAL_MS, self._refresh_loop)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.is_running = False
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Load the game and run the UI main loop."""
        self.is_running = True
        self._refresh_loop()
        self.cells[0].focus_set()
        self.root.mainloop()
