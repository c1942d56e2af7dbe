"""Violation — one forbidden ``log::`` call found outside the allowed module."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from log_policy.utils.determinism import normalize_path


@dataclass(frozen=True, slots=True)
class Violation:
    """Immutable record of a single match.

    ``column_start``/``column_end`` are 0-based UTF-8 byte offsets into
    ``line_text``; ``line_number`` is 1-based.
    """

    file: Path
    line_number: int
    column_start: int
    column_end: int
    line_text: str

    def __post_init__(self) -> None:
        if self.line_number < 1:
            raise ValueError(f"line_number must be >= 1, got {self.line_number}")
        if not 0 <= self.column_start <= self.column_end <= self.byte_length:
            raise ValueError(
                f"column range [{self.column_start}, {self.column_end}) "
                f"does not fit a line of {self.byte_length} bytes"
            )
        # Columns must fall on character boundaries.
        self.char_span()

    @property
    def byte_length(self) -> int:
        return len(self.line_text.encode("utf-8"))

    def char_span(self) -> tuple[int, int]:
        """The matched span as string offsets into ``line_text``."""
        raw = self.line_text.encode("utf-8")
        start = len(raw[: self.column_start].decode("utf-8"))
        end = len(raw[: self.column_end].decode("utf-8"))
        return start, end

    @property
    def matched_text(self) -> str:
        start, end = self.char_span()
        return self.line_text[start:end]

    def sort_key(self) -> tuple[Path, int, int]:
        return (self.file, self.line_number, self.column_start)

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self, root: Path) -> dict:
        return {
            "path": normalize_path(self.file, root),
            "line": self.line_number,
            "column_start": self.column_start,
            "column_end": self.column_end,
            "match": self.matched_text,
            "line_text": self.line_text,
        }
