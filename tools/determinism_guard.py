"""
Determinism guard (static check).

Purpose:
- Keep the simulation core reproducible: same seed -> same board, same inputs -> same cursor path.

What we flag (in core code):
- Wall-clock-ish time: time.time(), time.monotonic(), time.time_ns(), datetime.now(), pygame ticks
- Any other randomness source: random.*, os.urandom(), secrets.*
- Python's hash() (process-randomized by default)
- pygame imports (the core must stay renderer-agnostic)

We intentionally DO NOT scan:
- randomness/graphics/** and randomness/engine.py (driver + rendering)
- randomness/sim/determinism.py (the one place allowed to read the clock for a default seed)
"""

from __future__ import annotations

import argparse
import ast
import json
from pathlib import Path
from typing import Iterable


PROJECT_ROOT = Path(__file__).resolve().parents[1]


DEFAULT_SCAN_DIRS = [
    PROJECT_ROOT / "randomness",
]

DEFAULT_EXCLUDES = [
    PROJECT_ROOT / "randomness" / "graphics",
    PROJECT_ROOT / "randomness" / "engine.py",
    PROJECT_ROOT / "randomness" / "sim" / "determinism.py",
]


_RANDOM_ATTRS = {
    "random",
    "randint",
    "uniform",
    "choice",
    "choices",
    "shuffle",
    "sample",
    "seed",
    "randrange",
    "getrandbits",
}

_TIME_ATTRS_FORBIDDEN = {
    "time",
    "time_ns",
    "monotonic",
    "monotonic_ns",
    "perf_counter",
}

_DATETIME_ATTRS_FORBIDDEN = {
    "now",
    "utcnow",
    "today",
}


def _is_under(path: Path, parent: Path) -> bool:
    try:
        path.resolve().relative_to(parent.resolve())
        return True
    except ValueError:
        return False


def _iter_py_files(roots: Iterable[Path], *, excludes: list[Path]) -> list[Path]:
    out: list[Path] = []
    for root in roots:
        if not root.exists():
            continue
        if root.is_file() and root.suffix.lower() == ".py":
            out.append(root)
            continue
        for p in root.rglob("*.py"):
            if any(_is_under(p, ex) for ex in excludes):
                continue
            out.append(p)
    return sorted(set(out))


def _attr_chain(node: ast.AST) -> list[str] | None:
    """
    For Attribute chains, return list like ["pygame", "time", "get_ticks"].
    For Names, return ["name"].
    """
    if isinstance(node, ast.Name):
        return [node.id]
    if isinstance(node, ast.Attribute):
        base = _attr_chain(node.value)
        if base is None:
            return None
        return [*base, node.attr]
    return None


def _display_path(file: Path) -> str:
    try:
        return str(file.resolve().relative_to(PROJECT_ROOT))
    except ValueError:
        return str(file)


def _violation(kind: str, file: Path, node: ast.AST, detail: str) -> dict:
    return {
        "kind": kind,
        "file": _display_path(file),
        "line": int(getattr(node, "lineno", 0) or 0),
        "col": int(getattr(node, "col_offset", 0) or 0),
        "detail": detail,
    }


def _check_call(chain: list[str], file_path: Path, node: ast.Call) -> dict | None:
    if chain[:2] == ["pygame", "time"]:
        return _violation("wall_clock_time", file_path, node, "Core code must not read pygame's clock.")

    if len(chain) == 2 and chain[0] == "time" and chain[1] in _TIME_ATTRS_FORBIDDEN:
        return _violation(
            "wall_clock_time",
            file_path,
            node,
            f"Avoid time.{chain[1]}() in core code; seeds come from randomness.sim.determinism.",
        )

    if chain[-1] in _DATETIME_ATTRS_FORBIDDEN and ("datetime" in chain or "date" in chain):
        return _violation("wall_clock_time", file_path, node, "Avoid datetime.now()/utcnow()/today() in core code.")

    if len(chain) == 2 and chain[0] == "random" and chain[1] in _RANDOM_ATTRS:
        return _violation(
            "foreign_rng",
            file_path,
            node,
            "Use randomness.sim.xorshift.Xs (seeded) instead of random.* in core code.",
        )

    if chain == ["os", "urandom"] or chain[0] == "secrets":
        return _violation("foreign_rng", file_path, node, "OS entropy makes boards unreproducible.")

    if chain == ["hash"]:
        return _violation(
            "unstable_hash",
            file_path,
            node,
            "Avoid Python hash() for deterministic behavior; use explicit indices or zlib.crc32.",
        )

    return None


def scan_file(file_path: Path) -> list[dict]:
    try:
        src = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        src = file_path.read_text(encoding="utf-8", errors="replace")

    try:
        tree = ast.parse(src, filename=str(file_path))
    except SyntaxError as e:
        return [
            {
                "kind": "parse_error",
                "file": _display_path(file_path),
                "line": int(getattr(e, "lineno", 0) or 0),
                "col": int(getattr(e, "offset", 0) or 0),
                "detail": f"SyntaxError: {e}",
            }
        ]

    findings: list[dict] = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            if any(alias.name.split(".")[0] == "pygame" for alias in node.names):
                findings.append(_violation("render_dependency", file_path, node, "Core code must not import pygame."))
            continue

        if isinstance(node, ast.ImportFrom):
            if (node.module or "").split(".")[0] == "pygame":
                findings.append(_violation("render_dependency", file_path, node, "Core code must not import pygame."))
            continue

        if not isinstance(node, ast.Call):
            continue

        chain = _attr_chain(node.func)
        if not chain:
            continue

        finding = _check_call(chain, file_path, node)
        if finding is not None:
            findings.append(finding)

    return findings


def scan_paths(roots: Iterable[Path], *, excludes: list[Path] | None = None) -> list[dict]:
    files = _iter_py_files(roots, excludes=list(DEFAULT_EXCLUDES if excludes is None else excludes))
    all_findings: list[dict] = []
    for f in files:
        all_findings.extend(scan_file(f))
    return all_findings


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Static determinism guard (core code)")
    ap.add_argument(
        "--paths",
        nargs="*",
        default=[],
        help="Optional paths to scan (files or dirs). Default scans randomness/ minus the driver.",
    )
    ap.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    ns = ap.parse_args(argv)

    roots = [Path(p) for p in ns.paths] if ns.paths else list(DEFAULT_SCAN_DIRS)
    all_findings = scan_paths(roots)

    if ns.json:
        print(json.dumps({"findings": all_findings}, indent=2))
    else:
        if not all_findings:
            print("[determinism_guard] PASS: no violations found")
        else:
            print(f"[determinism_guard] FAIL: {len(all_findings)} violation(s)")
            for v in all_findings:
                print(f"- {v['file']}:{v['line']}:{v['col']} [{v['kind']}] {v['detail']}")

    return 0 if not all_findings else 1


if __name__ == "__main__":
    raise SystemExit(main())
