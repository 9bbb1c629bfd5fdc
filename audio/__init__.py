"""
Audio module for TicTacToe.
Short synthesized tones for moves, wins, draws and mistakes.
"""

from .config import SoundConfig
from .tones import make_tone, to_stereo
from .player import SoundPlayer
