"""
Win checker for TicTacToe.
Checks if a player has won or if the board is full.
"""

from typing import Optional, Sequence, Tuple, Any
from dataclasses import dataclass


# All possible winning lines, in the order they are checked
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
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


@dataclass(frozen=True)
class WinResult:
    """Result of evaluating a board."""
    winner: Optional[Any] = None
    line: Tuple[int, ...] = ()


def evaluate(board: Sequence[Any]) -> WinResult:
    """
    Check if there's a winner.

    Lines are checked rows first (top to bottom), then columns (left to
    right), then the two diagonals. The first complete line wins, so a
    board with several complete lines always gives the same answer.

    Args:
        board: 9 cells, row-major. None means empty.

    Returns:
        WinResult with the winning mark and line, or an empty WinResult.
    """
    for a, b, c in WINNING_LINES:
        mark = board[a]
        if mark is not None and mark == board[b] == board[c]:
            return WinResult(winner=mark, line=(a, b, c))
    return WinResult()


def is_full(board: Sequence[Any]) -> bool:
    """True if no empty cells remain."""
    return all(cell is not None for cell in board)


# Quick test
if __name__ == "__main__":
    print("Testing win checker...")

    # Test 1: Horizontal win
    result = evaluate(["X", "X", "X", None, "O", None, "O", None, None])
    print(f"Test 1 (horizontal): {result}")
    assert result.winner == "X" and result.line == (0, 1, 2)

    # Test 2: Diagonal win
    result = evaluate(["O", None, "X", None, "O", "X", None, None, "O"])
    print(f"Test 2 (diagonal): {result}")
    assert result.winner == "O" and result.line == (0, 4, 8)

    # Test 3: Draw (full board, no winner)
    board = ["X", "O", "X", "X", "O", "O", "O", "X", "X"]
    print(f"Test 3 (draw): winner = {evaluate(board).winner}, full = {is_full(board)}")
    assert evaluate(board).winner is None and is_full(board)

    print("\nWinChecker test done!")
