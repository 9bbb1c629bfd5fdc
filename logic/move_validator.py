"""
Move validator for TicTacToe.
Checks a move locally before it is sent to the move log.
"""

from typing import Optional, List, Sequence, Any
from dataclasses import dataclass
from .game_state import GameState, GameStatus, NUM_CELLS


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves before submission.

    Rules:
    1. Game must still be in progress
    2. Cell must be on the board (0-8)
    3. Can only place on empty cells

    The move log itself may still reject a move that passed here, since
    another player can change it at any time.
    """

    def validate_move(
        self,
        status: GameStatus,
        board: Sequence[Any],
        index: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            status: Current game status.
            board: Current board (9 cells, None for empty).
            index: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if status != GameStatus.PLAYING:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over."
            )

        # Check if index is on the board
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid move. Cell {index} is off the board."
            )

        # Check if cell is empty
        if board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message="Invalid move. Cell is already occupied."
            )

        return ValidationResult(is_valid=True)

    def can_apply(self, status: GameStatus, board: Sequence[Any], index: int) -> bool:
        """True if the move may be submitted."""
        return self.validate_move(status, board, index).is_valid

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of cell indices.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()


def can_apply(status: GameStatus, board: Sequence[Any], index: int) -> bool:
    """Module-level shortcut for MoveValidator().can_apply()."""
    return MoveValidator().can_apply(status, board, index)
