"""File discovery — find candidate source files and decide exemptions."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from log_policy.core.config import (
    DEFAULT_ALLOWED_LOCATION,
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_EXTENSION,
)
from log_policy.errors import ScanRootError

_logger = logging.getLogger(__name__)


def is_scan_candidate(path: Path, extension: str = DEFAULT_EXTENSION) -> bool:
    """True iff *path* carries the target source extension."""
    return path.suffix == extension


def is_allowed_location(
    path: Path,
    allowed: str = DEFAULT_ALLOWED_LOCATION,
    extension: str = DEFAULT_EXTENSION,
) -> bool:
    """True iff *path* lies in the module where ``log::`` calls are permitted.

    Plain string matching: nothing is resolved, so relative and absolute
    forms of the same path both match.
    """
    # Normalize path separators for cross-platform stability
    text = str(path).replace("\\", "/")
    return allowed in text or text.endswith(allowed + extension)


def iter_candidate_files(
    root: Path,
    *,
    extension: str = DEFAULT_EXTENSION,
    exclude_dirs: frozenset[str] = DEFAULT_EXCLUDE_DIRS,
) -> Iterator[Path]:
    """Yield regular files under *root* that pass ``is_scan_candidate``.

    Excluded directories are pruned before descent. Entries below *root*
    that cannot be listed are skipped; *root* itself must be listable.
    Order is deterministic (names sorted at every level).
    """

    def _on_error(exc: OSError) -> None:
        if exc.filename is not None and Path(exc.filename) == root:
            raise ScanRootError(root, f"cannot list scan root ({exc.strerror})") from exc
        _logger.debug("Skipping unreadable entry %s: %s", exc.filename, exc)

    if not root.is_dir():
        raise ScanRootError(root, "scan root is not a directory")

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        dirnames[:] = sorted(d for d in dirnames if d not in exclude_dirs)
        current = Path(dirpath)
        for name in sorted(filenames):
            path = current / name
            if not is_scan_candidate(path, extension):
                continue
            try:
                if path.is_symlink() or not path.is_file():
                    continue
            except OSError as exc:
                _logger.debug("Skipping unreadable entry %s: %s", path, exc)
                continue
            yield path
