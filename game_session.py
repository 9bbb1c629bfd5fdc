"""
Game session for TicTacToe.

Owns the displayed game state. Every trigger (load, move, reset, periodic
refresh) re-reads the move log and rebuilds the state with derive(); the
state is replaced, never edited in place.
"""

from typing import Optional

from logic.game_state import GameState, GameStatus, Move, derive
from logic.move_validator import MoveValidator
from move_log.client import MoveLogClient
from move_log.errors import MoveLogError
from audio.player import SoundPlayer


class GameSession:
    """
    Coordinates the move log, the derived state, sounds and announcements.

    Flow for a move:
    1. Check the move locally (MoveValidator)
    2. Append it to the move log
    3. Re-read the whole log and derive the new state
    """

    def __init__(
        self,
        client: MoveLogClient,
        game_id: str,
        sound: Optional[SoundPlayer] = None
    ):
        """
        Initialize the session.

        Args:
            client: Move log client (remote or simulated).
            game_id: Which game's log to follow.
            sound: Sound player, or None for no sound.
        """
        self.client = client
        self.game_id = game_id
        self.sound = sound
        self.validator = MoveValidator()

        self.state = GameState()
        self.error: Optional[str] = None
        self.announcement = "Game started. Player X begins."

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------

    def refresh(self) -> bool:
        """
        Re-read the move log and rebuild the state.

        Returns:
            True if the log was read. On failure the previous state is kept
            and the reason is stored in self.error.
        """
        try:
            moves = self.client.fetch_moves(self.game_id)
        except MoveLogError as e:
            self._fail(e)
            return False

        previous = self.state
        self.state = derive(moves)
        self.error = None
        self._announce_transition(previous, self.state)
        return True

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark at a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move reached the log and the state was rebuilt.
        """
        result = self.validator.validate_move(self.state.status, self.state.board, index)
        if not result.is_valid:
            self.announcement = result.error_message
            self._play("invalid")
            return False

        move = Move(index=index, player=self.state.current_player)
        try:
            self.client.append_move(self.game_id, move)
        except MoveLogError as e:
            self._play("invalid")
            # Another player may have taken the cell; show the log as it is now
            self.refresh()
            self._fail(e)
            return False

        self._play("place")
        return self.refresh()

    def reset_game(self) -> bool:
        """
        Clear the move log and start over.

        Returns:
            True if the log was cleared and re-read.
        """
        try:
            self.client.reset(self.game_id)
        except MoveLogError as e:
            self._fail(e)
            return False

        if not self.refresh():
            return False

        self._play("reset")
        self.announcement = "Board reset. Player X begins."
        return True

    def new_game(self) -> bool:
        """Start a brand new game (sound setting is kept)."""
        return self.reset_game()

    def toggle_sound(self) -> bool:
        """
        Turn sound effects on or off.

        Returns:
            The new setting.
        """
        if self.sound is None:
            return False
        self.sound.enabled = not self.sound.enabled
        return self.sound.enabled

    @property
    def sound_enabled(self) -> bool:
        return self.sound is not None and self.sound.enabled

    # ------------------------------------------------------------------
    # Display helpers
    # ------------------------------------------------------------------

    @property
    def status_text(self) -> str:
        """One-line status for the status bar."""
        if self.state.status == GameStatus.WON:
            return f"Player {self.state.winner.value} wins!"
        if self.state.status == GameStatus.DRAW:
            return "Draw! No more moves."
        return f"Player {self.state.current_player.value}'s turn"

    def _announce_transition(self, previous: GameState, current: GameState):
        """Announce (and sound) what changed between two derived states."""
        if current == previous:
            return

        if current.status == GameStatus.WON:
            if previous.status != GameStatus.WON:
                self.announcement = f"Player {current.winner.value} wins!"
                self._play("win")
        elif current.status == GameStatus.DRAW:
            if previous.status != GameStatus.DRAW:
                self.announcement = "Game ended in a draw."
                self._play("draw")
        else:
            self.announcement = f"Player {current.current_player.value}'s turn."

    def _fail(self, error: MoveLogError):
        self.error = error.message
        self.announcement = error.message

    def _play(self, name: str):
        if self.sound is not None:
            self.sound.play(name)
