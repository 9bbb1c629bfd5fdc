"""
Test script for the audio module.
Checks tone synthesis and the simulated player (no audio device needed).

Usage:
    python test_audio.py      # or: pytest test_audio.py
"""

import sys

import numpy as np

from audio.config import SoundConfig
from audio.player import SoundPlayer
from audio.tones import WAVEFORMS, make_tone, to_stereo


def test_tone_length_and_type():
    samples = make_tone(660, 90, "sine", 0.07, sample_rate=44100)
    assert samples.dtype == np.int16
    assert len(samples) == 3969  # 44100 * 0.090


def test_tone_respects_gain():
    for waveform in WAVEFORMS:
        samples = make_tone(440, 50, waveform, 0.05)
        peak = np.abs(samples.astype(np.int32)).max()
        assert 0 < peak <= int(0.05 * 32767), f"{waveform} peak {peak}"


def test_square_wave_has_two_levels():
    samples = make_tone(140, 160, "square", 0.06)
    assert len(np.unique(samples)) == 2


def test_gain_is_clipped():
    samples = make_tone(440, 20, "square", 5.0)
    assert np.abs(samples.astype(np.int32)).max() == 32767


def test_unknown_waveform():
    try:
        make_tone(440, 20, "noise")
    except ValueError:
        return
    raise AssertionError("ValueError not raised")


def test_to_stereo():
    mono = make_tone(440, 10)
    stereo = to_stereo(mono)
    assert stereo.shape == (len(mono), 2)
    assert np.array_equal(stereo[:, 0], stereo[:, 1])
    assert stereo.flags["C_CONTIGUOUS"]


def test_configured_tones_build():
    config = SoundConfig()
    for name, (freq, duration_ms, waveform, gain) in config.TONES.items():
        samples = make_tone(freq, duration_ms, waveform, gain, config.SAMPLE_RATE)
        assert len(samples) > 0, name


def test_simulated_player():
    player = SoundPlayer(simulate=True)
    assert player.play_place()
    assert player.play_win()
    assert player.play_draw()
    assert player.play_reset()
    assert player.play_invalid()
    assert not player.play("fanfare")

    player.enabled = False
    assert not player.play_place()
    player.close()


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Audio Tests")
    print("="*60)

    tests = {name: fn for name, fn in globals().items() if name.startswith("test_") and callable(fn)}

    results = {}
    for name, test in tests.items():
        try:
            test()
            results[name] = True
        except AssertionError as e:
            print(f"  ✗ {name} FAILED: {e}")
            results[name] = False

    print("\n" + "="*60)
    for name, passed in results.items():
        print(f"  {name}: {'✓ PASS' if passed else '✗ FAIL'}")
    print("="*60)

    return 0 if all(results.values()) else 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
