"""CLI entry-point for log_policy.

Usage:
    python -m log_policy                 # scan the current directory
    python -m log_policy <path>
    python -m log_policy <path> --json
    python -m log_policy <path> --ci     # byte-identical output across runs
    python -m log_policy -v              # debug logging on stderr

Exit codes: 0 = clean, 1 = violations found, 2 = scan could not complete.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from log_policy import __version__
from log_policy.core.config import ScanConfig
from log_policy.core.scanner import describe_pattern, scan
from log_policy.errors import ScanError
from log_policy.reports.console import ConsoleReporter
from log_policy.reports.json_report import render_json
from log_policy.utils.exit_codes import ExitCode

_logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="log-policy-check",
        description=(
            f"Report {describe_pattern()} calls made outside the allowed logging module."
        ),
    )
    p.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=None,
        help="Root directory to scan (default: current directory).",
    )
    p.add_argument(
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Print the JSON report to stdout instead of the text report.",
    )
    p.add_argument(
        "--ci",
        "--deterministic",
        dest="ci_mode",
        action="store_true",
        default=False,
        help="Deterministic output (elapsed time pinned to zero).",
    )
    p.add_argument(
        "--no-color",
        dest="no_color",
        action="store_true",
        default=False,
        help="Disable terminal colors.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug logging on stderr.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = clean, 1 = violations, 2 = error)."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    root = args.path if args.path is not None else Path.cwd()
    config = ScanConfig(root=root, ci_mode=args.ci_mode)

    try:
        result = scan(config)
    except ScanError as exc:
        _logger.debug("Scan aborted", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return ExitCode.ERROR

    if args.json_out:
        sys.stdout.write(render_json(result, ci_mode=args.ci_mode))
        if not result.ok:
            # Fixed stderr summary line, identical in text and JSON modes.
            print(
                f"ERROR: {result.total_violations} violations in "
                f"{len(result.per_file_counts())} files. See details above.",
                file=sys.stderr,
            )
            return ExitCode.VIOLATION
        return ExitCode.SUCCESS

    # None defers to rich's own NO_COLOR / terminal detection.
    no_color = True if args.no_color else None
    out = Console(highlight=False, soft_wrap=True, no_color=no_color)
    err = Console(stderr=True, highlight=False, soft_wrap=True, no_color=no_color)
    return ConsoleReporter(out, err, config).report(result)


if __name__ == "__main__":
    raise SystemExit(main())
