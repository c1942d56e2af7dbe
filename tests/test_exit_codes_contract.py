"""Exit code contract tests — enforce stable CLI exit semantics.

Code  Meaning
----  -------
  0   Success — no forbidden logging calls outside the allowed module
  1   Violation — one or more forbidden calls found
  2   Error — unreadable root or file, usage error
"""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

import pytest

from log_policy.utils.exit_codes import ExitCode

REPO_ROOT = Path(__file__).resolve().parents[1]
FIXTURE = REPO_ROOT / "tests" / "fixtures" / "repos" / "rust_mixed"


def _run(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    env = {**os.environ}
    # Plain output regardless of the caller's terminal settings.
    for key in ("FORCE_COLOR", "TTY_COMPATIBLE"):
        env.pop(key, None)
    env["TERM"] = "dumb"
    env["PYTHONPATH"] = str(REPO_ROOT / "src") + (
        os.pathsep + env["PYTHONPATH"] if env.get("PYTHONPATH") else ""
    )
    return subprocess.run(
        [sys.executable, "-m", "log_policy", *args],
        capture_output=True,
        text=True,
        env=env,
        cwd=str(cwd) if cwd else None,
    )


def _write(root: Path, rel: str, text: str) -> None:
    p = root / rel
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


def test_exit_code_values_are_stable() -> None:
    assert [int(c) for c in ExitCode] == [0, 1, 2]


class TestCleanTrees:
    """Nothing to report → exit 0."""

    def test_empty_directory_returns_0(self, tmp_path: Path) -> None:
        r = _run(str(tmp_path))
        assert r.returncode == ExitCode.SUCCESS, r.stderr
        assert "Scanned 0 .rs files" in r.stdout
        assert r.stderr == ""

    def test_only_exempt_matches_returns_0(self, tmp_path: Path) -> None:
        _write(tmp_path, "src/utils/logging.rs", "log::info!();\n")
        _write(tmp_path, "src/lib.rs", "pub fn f() {}\n")
        r = _run(str(tmp_path))
        assert r.returncode == ExitCode.SUCCESS, r.stdout
        assert "Scanned 2 .rs files" in r.stdout
        assert "No forbidden" in r.stdout

    def test_defaults_to_current_directory(self, tmp_path: Path) -> None:
        _write(tmp_path, "src/lib.rs", "pub fn f() {}\n")
        r = _run(cwd=tmp_path)
        assert r.returncode == ExitCode.SUCCESS, r.stderr
        assert "Scanned 1 .rs files" in r.stdout


class TestViolations:
    """At least one non-exempt match → exit 1."""

    def test_fixture_repo_returns_1(self) -> None:
        r = _run(str(FIXTURE))
        assert r.returncode == ExitCode.VIOLATION, r.stderr
        assert "Found 3 forbidden logging usage(s)" in r.stdout
        assert r.stderr.strip() == "ERROR: 3 violations in 2 files. See details above."

    def test_current_directory_violation_returns_1(self, tmp_path: Path) -> None:
        _write(tmp_path, "a.rs", "\n\n\n\nlog::debug(\"x\")\n")
        _write(tmp_path, "src/utils/logging.rs", 'log::trace("y")\n')
        r = _run(cwd=tmp_path)
        assert r.returncode == ExitCode.VIOLATION
        assert 'a.rs:5: log::debug("x")' in r.stdout

    def test_json_mode_keeps_exit_code(self) -> None:
        r = _run(str(FIXTURE), "--json")
        assert r.returncode == ExitCode.VIOLATION
        assert r.stderr.strip() == "ERROR: 3 violations in 2 files. See details above."


class TestErrors:
    """Scan could not complete → exit 2, no partial report."""

    def test_missing_root_returns_2(self, tmp_path: Path) -> None:
        missing = tmp_path / "does-not-exist"
        r = _run(str(missing))
        assert r.returncode == ExitCode.ERROR
        assert str(missing) in r.stderr
        assert r.stdout == ""

    def test_invalid_utf8_returns_2(self, tmp_path: Path) -> None:
        _write(tmp_path, "a.rs", "log::info!();\n")
        (tmp_path / "b.rs").write_bytes(b"\xc3\x28 log::info\n")
        r = _run(str(tmp_path))
        assert r.returncode == ExitCode.ERROR
        assert "b.rs" in r.stderr
        assert "Found" not in r.stdout

    @pytest.mark.skipif(
        sys.platform == "win32" or os.geteuid() == 0,
        reason="permission bits are not enforced",
    )
    def test_unreadable_root_returns_2(self, tmp_path: Path) -> None:
        root = tmp_path / "locked"
        root.mkdir()
        root.chmod(0)
        try:
            r = _run(str(root))
        finally:
            root.chmod(0o755)
        assert r.returncode == ExitCode.ERROR
        assert str(root) in r.stderr

    def test_unknown_flag_returns_2(self) -> None:
        r = _run("--no-such-flag")
        assert r.returncode == ExitCode.ERROR


def test_verbose_flag_logs_to_stderr(tmp_path: Path) -> None:
    _write(tmp_path, "src/utils/logging.rs", "log::info!();\n")
    r = _run(str(tmp_path), "-v")
    assert r.returncode == ExitCode.SUCCESS
    assert "Scanning" in r.stderr
    assert "Exempt:" in r.stderr
