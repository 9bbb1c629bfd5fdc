"""
Errors raised when the move log cannot be read or changed.
"""

from typing import Optional


class MoveLogError(Exception):
    """The move log could not be read, appended to, or cleared."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class MoveRejectedError(MoveLogError):
    """The move log refused a move (e.g. the cell is already taken)."""
