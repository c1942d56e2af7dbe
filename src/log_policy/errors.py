"""Errors that stop a scan before a report can be produced."""

from __future__ import annotations

from pathlib import Path


class ScanError(RuntimeError):
    """Base class for failures that abort the whole run (exit code 2)."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{detail}: {path}")


class ScanRootError(ScanError):
    """Raised when the scan root is missing or cannot be listed."""


class ScanReadError(ScanError):
    """Raised when a candidate file cannot be read or decoded as UTF-8."""
