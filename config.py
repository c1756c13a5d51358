"""
Configuration settings for Find the Randomness.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str):
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw, 0)
    except ValueError:
        print(f"[config] WARN: ignoring {name}={raw!r} (not an integer)")
        return None


# Window settings
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
FPS = 60
PROTOTYPE_VERSION = "0.1.0"
GAME_TITLE = "Find the Randomness"

# Colors
COLOR_BACKGROUND = (0x22, 0x22, 0x22)
COLOR_BLACK = (0, 0, 0)
COLOR_WHITE = (0xEE, 0xEE, 0xEE)
COLOR_SELECTRUM = (0xEE, 0xCC, 0x22)

# Selectrum outline thickness (pixels)
SELECTRUM_WIDTH = 3

# Start in fullscreen, then F11 toggles
START_FULLSCREEN = _env_flag("RANDOMNESS_FULLSCREEN", True)

# Fixed seed (integer, hex allowed). Unset means "seed from the clock".
SIM_SEED = _env_int("RANDOMNESS_SEED")

# Seed label in the bottom-left corner
SHOW_SEED_LABEL = _env_flag("RANDOMNESS_SHOW_SEED", True)

# Debug logging for the driver (print-based, tag-prefixed)
DEBUG = _env_flag("RANDOMNESS_DEBUG", False)
