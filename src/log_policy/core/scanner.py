"""Scanner — walks a tree and collects forbidden ``log::`` calls.

The pattern is fixed: a ``log::`` path followed by one of the severity
levels below, as a whole word. ``xlog::info`` and ``log::infoy`` do not
match; ``log::info!`` and ``log::warn(`` do.
"""

from __future__ import annotations

import logging
import re
import time
from pathlib import Path

from log_policy.core.config import ScanConfig
from log_policy.core.discover import is_allowed_location, iter_candidate_files
from log_policy.core.position import locate
from log_policy.errors import ScanReadError
from log_policy.model import ScanResult, Violation

_logger = logging.getLogger(__name__)

FORBIDDEN_LEVELS: tuple[str, ...] = ("info", "warn", "debug", "trace")

# Compiled at import so a malformed pattern fails before any file is read.
FORBIDDEN_PATTERN = re.compile(r"\blog::(" + "|".join(FORBIDDEN_LEVELS) + r")\b")


def describe_pattern() -> str:
    """Human form of the forbidden pattern, e.g. ``log::{info|warn|...}``."""
    return "log::{" + "|".join(FORBIDDEN_LEVELS) + "}"


def read_source(path: Path) -> str:
    """Read *path* as UTF-8, keeping line endings as they are on disk."""
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ScanReadError(path, f"failed to decode file as UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise ScanReadError(path, f"failed to read file ({exc.strerror or exc})") from exc


def scan_text(path: Path, text: str) -> list[Violation]:
    """Return one Violation per pattern match in *text*, top to bottom."""
    violations: list[Violation] = []
    for m in FORBIDDEN_PATTERN.finditer(text):
        pos = locate(text, m.start(), m.end())
        violations.append(
            Violation(
                file=path,
                line_number=pos.line_number,
                column_start=pos.column_start,
                column_end=pos.column_end,
                line_text=pos.line_text,
            )
        )
    return violations


def scan(config: ScanConfig) -> ScanResult:
    """Scan ``config.root`` and return every violation outside the allowed module.

    Exempt files still count towards ``files_scanned``. The first file that
    cannot be read aborts the scan with ``ScanReadError``.
    """
    started = time.perf_counter()
    _logger.debug("Scanning %s for %s", config.root, describe_pattern())

    violations: list[Violation] = []
    files_scanned = 0
    for path in iter_candidate_files(
        config.root,
        extension=config.extension,
        exclude_dirs=config.exclude_dirs,
    ):
        files_scanned += 1
        if is_allowed_location(path, config.allowed_location, config.extension):
            _logger.debug("Exempt: %s", path)
            continue
        violations.extend(scan_text(path, read_source(path)))

    elapsed = time.perf_counter() - started
    _logger.debug(
        "Scanned %d files in %.3fs, %d violation(s)",
        files_scanned,
        elapsed,
        len(violations),
    )
    return ScanResult(
        root=config.root,
        violations=tuple(violations),
        files_scanned=files_scanned,
        elapsed_seconds=elapsed,
    )
