"""
Headless replay: feed a scripted input sequence through the core and print the
board and cursor path. No window, no pygame.

Input script tokens (comma or space separated):
  U D L R   - up/down/left/right pressed
  I         - interact pressed
  .         - empty frame (no flags)
  0x...     - raw flag value, e.g. 0x108

Usage:
  python tools/replay.py --seed 0 --inputs "R,R,D,I"
  python tools/replay.py --seed 42 --inputs "R R R R R R R R R" --json
  python tools/replay.py --seed 7 --inputs "D,D,L" --check
"""

from __future__ import annotations

import argparse
import json
import re
import sys
from pathlib import Path
from typing import Any

# Ensure imports work when running as `python tools/replay.py`
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from randomness.input import (  # noqa: E402
    INPUT_DOWN_PRESSED,
    INPUT_FLAGS_MASK,
    INPUT_INTERACT_PRESSED,
    INPUT_LEFT_PRESSED,
    INPUT_RIGHT_PRESSED,
    INPUT_UP_PRESSED,
)
from randomness.sim.contracts import DrawWH  # noqa: E402
from randomness.sim.determinism import seed_from_int  # noqa: E402
from randomness.state import CommandBuffer, State, update  # noqa: E402

TOKEN_FLAGS = {
    "U": INPUT_UP_PRESSED,
    "D": INPUT_DOWN_PRESSED,
    "L": INPUT_LEFT_PRESSED,
    "R": INPUT_RIGHT_PRESSED,
    "I": INPUT_INTERACT_PRESSED,
    ".": 0,
}


def parse_inputs(script: str) -> list[int]:
    flags: list[int] = []
    for token in re.split(r"[,\s]+", script.strip()):
        if not token:
            continue
        upper = token.upper()
        if upper in TOKEN_FLAGS:
            flags.append(TOKEN_FLAGS[upper])
            continue
        try:
            value = int(token, 0)
        except ValueError:
            raise ValueError(f"unknown input token {token!r}") from None
        if not 0 <= value <= INPUT_FLAGS_MASK:
            raise ValueError(f"input flags out of 16-bit range: {token!r}")
        flags.append(value)
    return flags


def run_replay(seed: int, inputs: list[int], draw_wh: DrawWH) -> dict[str, Any]:
    """Run the frames and return a JSON-friendly transcript."""
    state = State.from_seed(seed_from_int(seed))
    commands = CommandBuffer()
    initial_board = state.board.pretty()

    path: list[list[int]] = []
    for flags in inputs:
        update(state, commands, flags, draw_wh)
        cursor = state.board.ui_pos
        path.append([cursor.x.value, cursor.y.value])

    return {
        "seed": int(seed),
        "board": initial_board,
        "lit": state.board.lit_count(),
        "inputs": list(inputs),
        "cursor_path": path,
        "final_board": state.board.pretty(cursor=state.board.ui_pos),
        "last_frame": [cmd.to_dict() for cmd in commands],
    }


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Headless input replay")
    ap.add_argument("--seed", type=lambda s: int(s, 0), default=0, help="128-bit seed (decimal or 0x hex)")
    ap.add_argument("--inputs", type=str, default="", help="input script, see module docstring")
    ap.add_argument("--width", type=float, default=1280.0, help="surface width")
    ap.add_argument("--height", type=float, default=720.0, help="surface height")
    ap.add_argument("--json", action="store_true", help="emit machine-readable JSON")
    ap.add_argument("--check", action="store_true", help="run twice and fail if the transcripts differ")
    ns = ap.parse_args(argv)

    try:
        inputs = parse_inputs(ns.inputs)
        transcript = run_replay(ns.seed, inputs, DrawWH(ns.width, ns.height))
    except ValueError as e:
        print(f"[replay] ERROR: {e}")
        return 2

    if ns.check:
        again = run_replay(ns.seed, inputs, DrawWH(ns.width, ns.height))
        if again != transcript:
            print("[replay] FAIL: two runs with the same seed and inputs diverged")
            return 1
        print("[replay] PASS: replay is deterministic")

    if ns.json:
        print(json.dumps(transcript, indent=2))
    else:
        print(f"[replay] seed={transcript['seed']} lit={transcript['lit']}/64 frames={len(inputs)}")
        print(transcript["board"])
        for i, (x, y) in enumerate(transcript["cursor_path"]):
            print(f"[replay] frame {i}: flags=0x{inputs[i]:04X} cursor=({x}, {y})")
        print(transcript["final_board"])

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
