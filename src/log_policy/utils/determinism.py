"""Determinism utilities for CI-reproducible output.

When --ci / --deterministic mode is enabled:
- Elapsed time is pinned to a fixed value
- Paths are normalized to root-relative POSIX strings
- Floating point values are rounded

Two runs over an unchanged tree then produce byte-identical output.
"""

from __future__ import annotations

from pathlib import Path

# Elapsed time reported in CI mode (seconds)
FIXED_ELAPSED = 0.0


def deterministic_elapsed(elapsed: float, ci_mode: bool = False) -> float:
    """Return *elapsed* unchanged, or FIXED_ELAPSED in CI mode."""
    if ci_mode:
        return FIXED_ELAPSED
    return elapsed


def normalize_path(path: Path, root: Path) -> str:
    """Convert a path to a root-relative, POSIX-normalized string.

    Ensures consistent paths across Windows/Linux/macOS. Paths that are
    not under *root* are returned as POSIX strings unchanged.
    """
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def round_float(value: float, places: int = 4) -> float:
    """Round a float to fixed decimal places for stability."""
    return round(value, places)
