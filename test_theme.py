"""
Test script for the theme manager.

Usage:
    python test_theme.py      # or: pytest test_theme.py
"""

import json
import sys
import tempfile
from pathlib import Path

from theme import ThemeConfig, ThemeManager


def test_default_theme_without_preference():
    with tempfile.TemporaryDirectory() as tmp:
        manager = ThemeManager(preference_file=Path(tmp) / "theme.json")
        assert manager.theme == "light"
        assert manager.palette == ThemeConfig.PALETTES["light"]
        assert manager.toggle_label == "Dark"


def test_toggle_is_remembered():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "prefs" / "theme.json"

        manager = ThemeManager(preference_file=path)
        assert manager.toggle() == "dark"
        assert json.loads(path.read_text()) == {"theme": "dark"}

        assert ThemeManager(preference_file=path).theme == "dark"

        assert manager.toggle() == "light"
        assert ThemeManager(preference_file=path).theme == "light"


def test_bad_preference_falls_back_to_default():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "theme.json"

        path.write_text("{not json")
        assert ThemeManager(preference_file=path).theme == "light"

        path.write_text(json.dumps({"theme": "neon"}))
        assert ThemeManager(preference_file=path).theme == "light"

        path.write_text(json.dumps(["dark"]))
        assert ThemeManager(preference_file=path).theme == "light"


def test_palettes_have_the_same_colors():
    light, dark = ThemeConfig.PALETTES["light"], ThemeConfig.PALETTES["dark"]
    assert light.keys() == dark.keys()


def test_every_test_script_exits_with_its_result():
    # Run as a script, a failing test must give a non-zero exit code
    scripts = sorted(Path(__file__).parent.glob("test_*.py"))
    assert len(scripts) >= 5

    for script in scripts:
        source = script.read_text(encoding="utf-8")
        assert "def run_all_tests():" in source, script.name
        assert "sys.exit(run_all_tests())" in source, script.name
        assert "results[name] = False" in source, script.name


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Theme Tests")
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
