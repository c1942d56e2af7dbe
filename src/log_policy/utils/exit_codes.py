"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — no forbidden logging calls outside the allowed module
  1   Violation — one or more forbidden calls found
  2   Error — unreadable scan root, unreadable file, usage error
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
