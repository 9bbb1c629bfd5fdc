"""
Tone synthesis.
Builds 16-bit PCM sample arrays for simple oscillator waveforms.
"""

import numpy as np

WAVEFORMS = ("sine", "triangle", "sawtooth", "square")


def make_tone(
    freq: float,
    duration_ms: int,
    waveform: str = "sine",
    gain: float = 0.05,
    sample_rate: int = 44100
) -> np.ndarray:
    """
    Generate a mono tone.

    Args:
        freq: Frequency in Hz.
        duration_ms: Length in milliseconds.
        waveform: One of sine, triangle, sawtooth, square.
        gain: Peak amplitude, 0-1.
        sample_rate: Samples per second.

    Returns:
        int16 array of samples.
    """
    if waveform not in WAVEFORMS:
        raise ValueError(f"Unknown waveform: {waveform}")

    n_samples = int(sample_rate * duration_ms / 1000)
    t = np.arange(n_samples) / sample_rate
    phase = (freq * t) % 1.0  # position within each cycle, 0-1

    if waveform == "sine":
        wave = np.sin(2 * np.pi * phase)
    elif waveform == "triangle":
        wave = 1.0 - 4.0 * np.abs(phase - 0.5)
    elif waveform == "sawtooth":
        wave = 2.0 * phase - 1.0
    else:
        wave = np.where(phase < 0.5, 1.0, -1.0)

    gain = float(np.clip(gain, 0.0, 1.0))
    return (wave * gain * 32767).astype(np.int16)


def to_stereo(samples: np.ndarray) -> np.ndarray:
    """Duplicate a mono tone into two channels (shape: n x 2)."""
    return np.ascontiguousarray(np.column_stack((samples, samples)))
