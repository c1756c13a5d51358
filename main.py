"""
Find the Randomness - an 8x8 grid of lit and unlit tiles rolled from a seed.

Usage:
    python main.py [--seed <int>] [--windowed]

Controls:
    Arrows / WASD  - Move the cursor
    Space / Enter  - Interact
    F11            - Toggle fullscreen
"""
import argparse

from config import SIM_SEED, START_FULLSCREEN
from randomness.sim.determinism import resolve_seed, seed_from_int


def _seed_arg(text: str) -> int:
    try:
        value = int(text, 0)
        seed_from_int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid seed {text!r}: {e}")
    return value


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find the Randomness - a seeded 8x8 tile grid"
    )
    parser.add_argument(
        "--seed",
        type=_seed_arg,
        default=None,
        help="128-bit seed (decimal or 0x hex). Default: RANDOMNESS_SEED, else the clock"
    )
    parser.add_argument(
        "--windowed",
        action="store_true",
        help="Start in a window instead of fullscreen"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    seed = resolve_seed(args.seed, SIM_SEED)
    try:
        seed_from_int(seed)
    except ValueError as e:
        print(f"[main] ERROR: bad RANDOMNESS_SEED {seed}: {e}")
        return 2
    # Printed so an interesting board can be replayed with --seed.
    print(seed)

    # Imported late so --help works without a display.
    from randomness.engine import GameEngine

    game = GameEngine(seed=seed, fullscreen=START_FULLSCREEN and not args.windowed)
    game.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
