"""
Move log service configuration.
Where the move-history service lives and how we talk to it.
"""


class ServiceConfig:
    """
    Configuration for the move log service.
    Change these values based on your setup!
    """

    # ==================== SERVICE SETTINGS ====================
    BASE_URL = "http://localhost:3001/api"
    GAME_ID = "default"

    # Seconds before a request is given up on
    TIMEOUT_S = 5.0

    # Endpoint for a game's move list, relative to BASE_URL
    MOVES_PATH = "/games/{game_id}/moves"

    # ==================== SYNC SETTINGS ====================
    # How often the UI re-reads the log to pick up the other player's moves
    REFRESH_INTERVAL_MS = 2000

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False

    def moves_url(self, game_id: str) -> str:
        """Full URL of a game's move list."""
        return self.BASE_URL.rstrip("/") + self.MOVES_PATH.format(game_id=game_id)
