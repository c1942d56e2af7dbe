"""Shared utilities for log_policy."""

from log_policy.utils.determinism import (
    FIXED_ELAPSED,
    deterministic_elapsed,
    normalize_path,
    round_float,
)
from log_policy.utils.exit_codes import ExitCode

__all__ = [
    "ExitCode",
    # Determinism utilities
    "FIXED_ELAPSED",
    "deterministic_elapsed",
    "normalize_path",
    "round_float",
]
