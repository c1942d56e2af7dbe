"""Canonical JSON serialization — the single dump path for CLI output.

Guarantees:
  - Stable key ordering (``sort_keys=True``)
  - Trailing newline at EOF
  - ``Path`` objects → POSIX strings
  - Optional CI-mode float rounding (4 digits)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import IO, Any, Mapping

from log_policy.utils.determinism import round_float


def _to_builtin(obj: Any, *, ci_mode: bool) -> Any:
    """Convert the report's value types into JSON-safe builtins."""
    if obj is None or isinstance(obj, (str, int, bool)):
        return obj
    if isinstance(obj, float):
        return round_float(obj) if ci_mode else obj
    if isinstance(obj, Path):
        return obj.as_posix()
    if isinstance(obj, Mapping):
        return {str(k): _to_builtin(v, ci_mode=ci_mode) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_builtin(v, ci_mode=ci_mode) for v in obj]
    raise TypeError(f"cannot serialize {type(obj).__name__} to JSON")


def stable_json_dumps(obj: Any, *, ci_mode: bool = False, indent: int | None = 2) -> str:
    """Serialize *obj* with sorted keys and a trailing newline."""
    built = _to_builtin(obj, ci_mode=ci_mode)
    return json.dumps(built, indent=indent, sort_keys=True, ensure_ascii=False) + "\n"


def stable_json_dump(
    obj: Any,
    fp: IO[str],
    *,
    ci_mode: bool = False,
    indent: int | None = 2,
) -> None:
    fp.write(stable_json_dumps(obj, ci_mode=ci_mode, indent=indent))
