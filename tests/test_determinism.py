"""Unit tests for the determinism helpers used by --ci mode."""

from __future__ import annotations

from pathlib import Path

from log_policy.utils.determinism import (
    FIXED_ELAPSED,
    deterministic_elapsed,
    normalize_path,
    round_float,
)


class TestDeterminismUtilities:
    def test_fixed_elapsed_constant(self):
        assert FIXED_ELAPSED == 0.0

    def test_elapsed_pinned_in_ci_mode(self):
        assert deterministic_elapsed(12.5, ci_mode=True) == FIXED_ELAPSED

    def test_elapsed_unchanged_outside_ci_mode(self):
        assert deterministic_elapsed(0.123456789) == 0.123456789

    def test_normalize_path_relative_to_root(self):
        root = Path("/work/repo")
        assert normalize_path(root / "src" / "main.rs", root) == "src/main.rs"

    def test_normalize_path_outside_root(self):
        assert normalize_path(Path("/other/x.rs"), Path("/work/repo")) == "/other/x.rs"

    def test_normalize_path_dot_root(self):
        assert normalize_path(Path("src/lib.rs"), Path(".")) == "src/lib.rs"

    def test_round_float(self):
        assert round_float(1.23456) == 1.2346
        assert round_float(1.23456, places=2) == 1.23
