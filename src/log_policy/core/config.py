"""Scan configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

# Directories never descended into (build output, VCS metadata, dependency cache).
DEFAULT_EXCLUDE_DIRS = frozenset({"target", ".git", "node_modules"})

DEFAULT_EXTENSION = ".rs"

# The only place log:: calls are permitted.
DEFAULT_ALLOWED_LOCATION = "src/utils/logging"


@dataclass(frozen=True)
class ScanConfig:
    """Immutable scan configuration.

    The forbidden pattern itself is fixed in ``core.scanner`` and is not
    configurable.
    """

    root: Path = field(default_factory=lambda: Path("."))
    extension: str = DEFAULT_EXTENSION
    allowed_location: str = DEFAULT_ALLOWED_LOCATION
    exclude_dirs: frozenset[str] = DEFAULT_EXCLUDE_DIRS
    long_line_threshold: int = 200
    ci_mode: bool = False
