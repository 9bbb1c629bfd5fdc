"""
Move log module for TicTacToe.
Talks to the remote move-history service (or an in-process stand-in).
"""

from .config import ServiceConfig
from .errors import MoveLogError, MoveRejectedError
from .local_store import LocalMoveStore
from .client import MoveLogClient
