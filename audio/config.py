"""
Sound configuration for TicTacToe.
"""


class SoundConfig:
    """
    Configuration for sound effects.
    """

    # ==================== MIXER SETTINGS ====================
    SAMPLE_RATE = 44100
    CHANNELS = 2
    BUFFER_SIZE = 512

    # Sound on at startup
    ENABLED = True

    # ==================== TONES ====================
    # name: (frequency Hz, duration ms, waveform, gain 0-1)
    TONES = {
        "place": (660, 90, "sine", 0.07),
        "win": (880, 260, "triangle", 0.06),
        "draw": (330, 180, "sawtooth", 0.05),
        "reset": (520, 120, "square", 0.05),
        "invalid": (140, 160, "square", 0.06),
    }
