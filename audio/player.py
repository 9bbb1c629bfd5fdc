"""
Sound effects player.
Plays the configured tones through the pygame mixer.
"""

import os
from typing import Optional, Dict

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

from .config import SoundConfig
from .tones import make_tone, to_stereo


class SoundPlayer:
    """
    Plays short tones for game events.

    Falls back to simulation (printed traces) when there is no audio device.
    """

    def __init__(self, config: Optional[SoundConfig] = None, simulate: bool = False):
        """
        Initialize the sound player.

        Args:
            config: Sound configuration.
            simulate: If True, don't open the audio device.
        """
        self.config = config or SoundConfig()
        self.simulate = simulate
        self.enabled = self.config.ENABLED
        self._sounds: Dict[str, "pygame.mixer.Sound"] = {}

        if not simulate:
            self._init_mixer()

    def _init_mixer(self):
        """Open the audio device."""
        try:
            pygame.mixer.init(
                frequency=self.config.SAMPLE_RATE,
                size=-16,
                channels=self.config.CHANNELS,
                buffer=self.config.BUFFER_SIZE
            )
        except pygame.error as e:
            print(f"WARNING: No audio device ({e}). Running in simulation mode.")
            self.simulate = True

    def play(self, name: str) -> bool:
        """
        Play a named tone.

        Args:
            name: One of the tones in SoundConfig.TONES.

        Returns:
            True if the tone was played (or simulated).
        """
        if not self.enabled:
            return False
        if name not in self.config.TONES:
            print(f"WARNING: Unknown sound '{name}'")
            return False

        if self.simulate:
            freq, duration_ms, waveform, _ = self.config.TONES[name]
            print(f"[SIM] Playing '{name}' ({freq} Hz {waveform}, {duration_ms} ms)")
            return True

        self._get_sound(name).play()
        return True

    def _get_sound(self, name: str) -> "pygame.mixer.Sound":
        """Build a tone on first use and keep it."""
        if name not in self._sounds:
            freq, duration_ms, waveform, gain = self.config.TONES[name]
            samples = make_tone(freq, duration_ms, waveform, gain, self.config.SAMPLE_RATE)
            if self.config.CHANNELS == 2:
                samples = to_stereo(samples)
            self._sounds[name] = pygame.mixer.Sound(buffer=samples.tobytes())
        return self._sounds[name]

    def play_place(self) -> bool:
        return self.play("place")

    def play_win(self) -> bool:
        return self.play("win")

    def play_draw(self) -> bool:
        return self.play("draw")

    def play_reset(self) -> bool:
        return self.play("reset")

    def play_invalid(self) -> bool:
        return self.play("invalid")

    def close(self):
        """Release the audio device."""
        self._sounds.clear()
        if not self.simulate and pygame.mixer.get_init():
            pygame.mixer.quit()
