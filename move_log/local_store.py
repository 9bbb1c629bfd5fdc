"""
In-process move log.
Stands in for the remote service when playing offline.
"""

from typing import Dict, List

from logic.game_state import Move, derive
from .errors import MoveRejectedError


class LocalMoveStore:
    """
    Keeps one move list per game id in memory.

    Applies the same rule as the service: a move onto an occupied or
    off-board cell is rejected.
    """

    def __init__(self):
        self._games: Dict[str, List[dict]] = {}

    def fetch_moves(self, game_id: str) -> List[dict]:
        """Snapshot of a game's moves (callers get their own copy)."""
        return [dict(entry) for entry in self._games.get(game_id, [])]

    def append_move(self, game_id: str, move: Move) -> dict:
        """
        Append a move to a game's log.

        Args:
            game_id: The game.
            move: The move to append.

        Returns:
            The stored entry.

        Raises:
            MoveRejectedError: If the cell is off the board or occupied.
        """
        entry = move.to_dict()
        if Move.from_dict(entry) is None:
            raise MoveRejectedError(f"Cell {move.index} is off the board.", status_code=400)

        log = self._games.setdefault(game_id, [])
        if derive(log).board[move.index] is not None:
            raise MoveRejectedError(f"Cell {move.index} is already occupied.", status_code=409)

        log.append(entry)
        return dict(entry)

    def reset(self, game_id: str):
        """Clear a game's log."""
        self._games[game_id] = []
