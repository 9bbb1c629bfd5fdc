"""
Client for the move-history service.
Reads, appends to, and clears a game's move log over HTTP.
"""

from typing import Optional, List, Any

import requests

from logic.game_state import Move
from .config import ServiceConfig
from .errors import MoveLogError, MoveRejectedError
from .local_store import LocalMoveStore


class MoveLogClient:
    """
    Client for the remote move log.

    The service owns the log; this client only takes snapshots of it and
    sends single changes. Nothing is retried here: a failed call raises
    MoveLogError and the caller decides what to do.
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        simulate: bool = False,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize the client.

        Args:
            config: Service configuration.
            simulate: If True, keep the log in memory instead of calling
                the service.
            session: HTTP session to use (a new one by default).
        """
        self.config = config or ServiceConfig()
        self.simulate = simulate

        self.local_store: Optional[LocalMoveStore] = None
        self.session: Optional[requests.Session] = None
        if simulate:
            self.local_store = LocalMoveStore()
        else:
            self.session = session or requests.Session()
            self.session.headers.update({"Accept": "application/json"})

    def fetch_moves(self, game_id: str) -> List[Any]:
        """
        Get the ordered move log for a game.

        Args:
            game_id: The game.

        Returns:
            The raw log entries, oldest first. Entries are not checked
            here; derive() skips the malformed ones.
        """
        if self.simulate:
            moves = self.local_store.fetch_moves(game_id)
            print(f"[SIM] Fetched {len(moves)} moves for game '{game_id}'")
            return moves

        data = self._request("GET", game_id)

        # Accept a bare list or a {"moves": [...]} envelope
        if isinstance(data, dict):
            data = data.get("moves")
        if not isinstance(data, list):
            raise MoveLogError("Move service returned an unexpected response.")
        return data

    def append_move(self, game_id: str, move: Move):
        """
        Append one move to a game's log.

        Args:
            game_id: The game.
            move: The move to append.

        Raises:
            MoveRejectedError: If the service refused the move.
            MoveLogError: If the service could not be reached.
        """
        if self.simulate:
            print(f"[SIM] Appending {move.player.value} at cell {move.index} to game '{game_id}'")
            self.local_store.append_move(game_id, move)
            return

        self._request("POST", game_id, payload=move.to_dict())

    def reset(self, game_id: str):
        """Clear a game's move log."""
        if self.simulate:
            print(f"[SIM] Clearing game '{game_id}'")
            self.local_store.reset(game_id)
            return

        self._request("DELETE", game_id)

    def close(self):
        """Release the HTTP session."""
        if self.session is not None:
            self.session.close()

    def _request(self, method: str, game_id: str, payload: Optional[dict] = None) -> Any:
        """
        Send a request to the moves endpoint of a game.

        Returns:
            The decoded JSON body, or None for an empty body.
        """
        url = self.config.moves_url(game_id)
        if self.config.DEBUG_MODE:
            print(f"{method} {url} {payload if payload is not None else ''}")

        try:
            response = self.session.request(
                method,
                url,
                json=payload,
                timeout=self.config.TIMEOUT_S
            )
        except requests.Timeout as e:
            raise MoveLogError(f"Move service timed out: {e}") from e
        except requests.RequestException as e:
            raise MoveLogError(f"Could not reach move service: {e}") from e

        if self.config.DEBUG_MODE:
            print(f"  -> {response.status_code}")

        if not response.ok:
            message = self._error_message(response)
            if method == "POST" and 400 <= response.status_code < 500:
                raise MoveRejectedError(message, status_code=response.status_code)
            raise MoveLogError(message, status_code=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise MoveLogError("Move service returned invalid JSON.") from e

    def _error_message(self, response: requests.Response) -> str:
        """Pull a readable message out of an error response."""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            for key in ("error", "detail", "message"):
                if isinstance(body.get(key), str):
                    return body[key]

        return f"Move service error ({response.status_code})."
