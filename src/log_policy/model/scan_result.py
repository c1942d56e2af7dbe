"""ScanResult — everything one run of the scanner produced."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from log_policy import __version__
from log_policy.model.violation import Violation
from log_policy.utils.determinism import deterministic_elapsed, normalize_path

SCHEMA_VERSION = "log_policy_scan_v1"


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Immutable scan outcome.

    ``violations`` keep encounter order (traversal order, then in-file
    order). Reporters re-sort for display.
    """

    root: Path
    violations: tuple[Violation, ...] = field(default_factory=tuple)
    files_scanned: int = 0
    elapsed_seconds: float = 0.0

    @property
    def total_violations(self) -> int:
        return len(self.violations)

    @property
    def ok(self) -> bool:
        return not self.violations

    def per_file_counts(self) -> dict[Path, int]:
        """Violation count per file, keyed in sorted path order."""
        counts = Counter(v.file for v in self.violations)
        return {path: counts[path] for path in sorted(counts)}

    def violations_for(self, path: Path) -> list[Violation]:
        return [v for v in self.violations if v.file == path]

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self, *, ci_mode: bool = False) -> dict[str, Any]:
        """Produce the JSON report matching ``scan_result.schema.json``."""
        per_file = self.per_file_counts()
        return {
            "schema_version": SCHEMA_VERSION,
            "tool_version": __version__,
            "summary": {
                "files_scanned": self.files_scanned,
                "elapsed_seconds": deterministic_elapsed(
                    self.elapsed_seconds, ci_mode=ci_mode
                ),
                "violations_total": self.total_violations,
                "files_with_violations": len(per_file),
                "by_file": {
                    normalize_path(path, self.root): count
                    for path, count in per_file.items()
                },
            },
            "violations": [
                v.to_dict(self.root)
                for v in sorted(self.violations, key=Violation.sort_key)
            ],
        }
