"""
config.py - Persistent configuration and save-game storage
Handles settings.json (display / performance / audio preferences) and
savegame.json (coins, upgrades, achievements, daily reward).
"""

import json
import logging
import os
import sys

logger = logging.getLogger(__name__)


def _get_base_dir():
    """
    Return the directory where the .exe (or main.py) lives.

    When frozen with PyInstaller the bundle's temp folder is deleted on
    exit, so user files go next to the executable instead.
    """
    if getattr(sys, "frozen", False):
        return os.path.dirname(sys.executable)
    # Running from source: project root is one level up from ball_blast/
    return os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


_CONFIG_DIR = _get_base_dir()
CONFIG_PATH = os.path.join(_CONFIG_DIR, "settings.json")
SAVE_PATH = os.path.join(_CONFIG_DIR, "savegame.json")

# ── Available options ────────────────────────────────────
RESOLUTION_OPTIONS = [
    (800, 600),
    (1280, 720),
    (1600, 900),
    (1920, 1080),
]

SCREEN_MODE_OPTIONS = ["windowed", "fullscreen"]

FPS_OPTIONS = [30, 60, 120, 144]

# ── Defaults ─────────────────────────────────────────────
DEFAULTS = {
    "display": {
        "resolution": [1280, 720],
        "screen_mode": "windowed",
    },
    "performance": {
        "fps": 60,
        "vsync": False,
    },
    "audio": {
        "sfx_volume": 0.5,
    },
}


class Config:
    """
    Game preferences with persistence to settings.json.

    The simulation advances one fixed tick per frame, so ``fps`` is also
    the game speed.
    """

    def __init__(self, path=None):
        self.path = path or CONFIG_PATH

        # Display
        self.resolution = list(DEFAULTS["display"]["resolution"])
        self.screen_mode = DEFAULTS["display"]["screen_mode"]

        # Performance
        self.fps = DEFAULTS["performance"]["fps"]
        self.vsync = DEFAULTS["performance"]["vsync"]

        # Audio
        self.sfx_volume: float = DEFAULTS["audio"]["sfx_volume"]

        self.load()

    # ── Persistence ──────────────────────────────────────

    def load(self):
        """Load settings from disk. Uses defaults for missing or invalid keys."""
        if not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Ignoring unreadable %s: %s", self.path, exc)
            return
        if not isinstance(data, dict):
            return

        display = data.get("display", {})
        if isinstance(display, dict):
            res = display.get("resolution")
            if isinstance(res, list) and tuple(res) in RESOLUTION_OPTIONS:
                self.resolution = list(res)
            mode = display.get("screen_mode")
            if mode in SCREEN_MODE_OPTIONS:
                self.screen_mode = mode

        perf = data.get("performance", {})
        if isinstance(perf, dict):
            if perf.get("fps") in FPS_OPTIONS:
                self.fps = perf["fps"]
            self.vsync = bool(perf.get("vsync", self.vsync))

        audio = data.get("audio", {})
        if isinstance(audio, dict):
            try:
                sv = float(audio.get("sfx_volume", self.sfx_volume))
            except (TypeError, ValueError):
                sv = self.sfx_volume
            self.sfx_volume = max(0.0, min(1.0, sv))

    def save(self):
        """Save current settings to disk."""
        data = {
            "display": {
                "resolution": self.resolution,
                "screen_mode": self.screen_mode,
            },
            "performance": {
                "fps": self.fps,
                "vsync": self.vsync,
            },
            "audio": {
                "sfx_volume": self.sfx_volume,
            },
        }
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4)
        except OSError as exc:
            logger.warning("Could not write %s: %s", self.path, exc)

    # ── Helpers ───────────────────────────────────────────

    @property
    def display_width(self):
        return self.resolution[0]

    @property
    def display_height(self):
        return self.resolution[1]

    @property
    def fullscreen(self):
        return self.screen_mode == "fullscreen"

    def resolution_label(self):
        return f"{self.resolution[0]}x{self.resolution[1]}"

    def __repr__(self):
        return (
            f"Config(res={self.resolution_label()}, "
            f"mode={self.screen_mode}, "
            f"fps={self.fps}, vsync={self.vsync})"
        )


class ProgressStore:
    """Key-value blob storage for the progression state (one JSON file)."""

    def __init__(self, path=None):
        self.path = path or SAVE_PATH

    def load(self):
        """Return the saved dict, or None when there is no usable save."""
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as exc:
            logger.warning("Save file %s is unreadable, starting fresh: %s", self.path, exc)
            return None
        if not isinstance(data, dict):
            logger.warning("Save file %s has unexpected content, starting fresh", self.path)
            return None
        return data

    def save(self, data):
        """Write the blob. Returns False instead of raising on I/O errors."""
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not write save file %s: %s", self.path, exc)
            return False
        return True
