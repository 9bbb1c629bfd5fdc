"""
Light/dark theme for the TicTacToe UI.
The chosen theme is remembered between runs in a small JSON file.
"""

import json
from pathlib import Path
from typing import Optional, Dict


class ThemeConfig:
    """
    Colors and preference file for the UI themes.
    """

    DEFAULT_THEME = "light"

    # Where the chosen theme is remembered
    PREFERENCE_FILE = Path.home() / ".tictactoe" / "theme.json"

    PALETTES = {
        "light": {
            "bg": "#f8f9fa",
            "panel": "#ffffff",
            "cell": "#ffffff",
            "cell_win": "#fde68a",
            "text": "#212529",
            "muted": "#6c757d",
            "x": "#2563eb",
            "o": "#e11d48",
            "error": "#b91c1c",
            "button": "#4a6fa5",
            "button_text": "#ffffff",
        },
        "dark": {
            "bg": "#1a1a2e",
            "panel": "#16213e",
            "cell": "#16213e",
            "cell_win": "#065f46",
            "text": "#ffffff",
            "muted": "#a0aec0",
            "x": "#00d4ff",
            "o": "#ff6b6b",
            "error": "#f87171",
            "button": "#6366f1",
            "button_text": "#ffffff",
        },
    }


class ThemeManager:
    """
    Tracks the current theme and saves it when it changes.
    """

    def __init__(self, config: Optional[ThemeConfig] = None, preference_file: Optional[Path] = None):
        self.config = config or ThemeConfig()
        self.preference_file = Path(preference_file or self.config.PREFERENCE_FILE)
        self.theme = self._load()

    @property
    def palette(self) -> Dict[str, str]:
        return self.config.PALETTES[self.theme]

    @property
    def toggle_label(self) -> str:
        """Button text: offers the other theme."""
        return "Dark" if self.theme == "light" else "Light"

    def toggle(self) -> str:
        """Switch between light and dark. Returns the new theme."""
        self.theme = "dark" if self.theme == "light" else "light"
        self._save()
        return self.theme

    def _load(self) -> str:
        """Read the saved theme, or the default if there is none."""
        try:
            saved = json.loads(self.preference_file.read_text()).get("theme")
        except (OSError, ValueError, AttributeError):
            return self.config.DEFAULT_THEME

        if saved in self.config.PALETTES:
            return saved
        return self.config.DEFAULT_THEME

    def _save(self):
        try:
            self.preference_file.parent.mkdir(parents=True, exist_ok=True)
            self.preference_file.write_text(json.dumps({"theme": self.theme}))
        except OSError as e:
            print(f"WARNING: Could not save theme preference: {e}")
