from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Headless pygame (safe for CI / no-window environments)
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
for p in (PROJECT_ROOT, PROJECT_ROOT / "tools"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from randomness.sim import perf_stats  # noqa: E402
from randomness.sim.contracts import DrawWH  # noqa: E402

ZERO_SEED = bytes(16)


@pytest.fixture(autouse=True)
def _reset_perf_stats() -> None:
    perf_stats.reset_all()


@pytest.fixture
def draw_wh() -> DrawWH:
    return DrawWH(w=1280.0, h=720.0)
