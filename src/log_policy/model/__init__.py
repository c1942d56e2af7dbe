"""Value types passed from the scanner to the reporters."""

from __future__ import annotations

from log_policy.model.scan_result import ScanResult
from log_policy.model.violation import Violation

__all__ = ["ScanResult", "Violation"]
