"""
Logic module for TicTacToe.
Derives game state from a move log, detects wins and draws, validates moves.
"""

from .win_checker import WinResult, WINNING_LINES, evaluate, is_full
from .game_state import GameState, GameStatus, Move, Player, derive, next_player
from .move_validator import MoveValidator, ValidationResult, can_apply
