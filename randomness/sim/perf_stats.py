"""
Tiny global counters for the per-frame pipeline.

This intentionally stays very lightweight (ints only), so it can be left enabled.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class _LayoutStats:
    recomputes: int = 0


@dataclass
class _FrameStats:
    updates: int = 0
    commands_pushed: int = 0


layout = _LayoutStats()
frames = _FrameStats()


def reset_layout() -> None:
    layout.recomputes = 0


def reset_frames() -> None:
    frames.updates = 0
    frames.commands_pushed = 0


def reset_all() -> None:
    reset_layout()
    reset_frames()
