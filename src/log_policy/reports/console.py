"""Human-readable report on a rich console.

Everything goes to ``out`` except the one-line error summary, which goes
to ``err``. Source lines are emitted as raw segments, so brackets are never
read as console markup and tabs reach the terminal unexpanded.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console, ConsoleOptions, RenderResult
from rich.segment import Segment
from rich.style import Style
from rich.text import Text

from log_policy.core.config import ScanConfig
from log_policy.core.scanner import describe_pattern
from log_policy.model import ScanResult, Violation
from log_policy.utils.determinism import deterministic_elapsed
from log_policy.utils.exit_codes import ExitCode

_HEADING = "bold underline"
_MATCH = "bold red"


def format_elapsed(seconds: float) -> str:
    """Largest unit keeping the value at or above one, two decimals."""
    if seconds >= 1.0:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.2f}\u00b5s"
    return f"{seconds * 1e9:.2f}ns"


class SourceLine:
    """``<path>:<line>: <source line>`` with the matched span emphasized.

    Yields segments directly; ``Text`` would expand tabs in the source.
    """

    def __init__(self, v: Violation) -> None:
        self.violation = v

    def segments(self) -> list[Segment]:
        v = self.violation
        start, end = v.char_span()
        return [
            Segment(f"    {v.file}:"),
            Segment(str(v.line_number), Style.parse("yellow")),
            Segment(": " + v.line_text[:start]),
            Segment(v.line_text[start:end], Style.parse(_MATCH)),
            Segment(v.line_text[end:]),
            Segment.line(),
        ]

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield from self.segments()


class ConsoleReporter:
    """Renders a ScanResult and decides the exit status."""

    def __init__(self, out: Console, err: Console, config: ScanConfig) -> None:
        self._out = out
        self._err = err
        self._config = config

    def report(self, result: ScanResult) -> ExitCode:
        self._print_summary(result)
        if result.ok:
            self._out.print(
                Text(f"No forbidden {describe_pattern()} usages found.", style="green")
            )
            return ExitCode.SUCCESS

        per_file = result.per_file_counts()
        self._out.print(
            Text(f"Found {result.total_violations} forbidden logging usage(s)", style=_MATCH)
        )
        self._out.print()
        self._print_file_table(per_file)
        self._print_details(result, per_file)
        self._print_guidance()

        self._err.print(
            Text.assemble(
                ("ERROR:", _MATCH),
                f" {result.total_violations} violations in {len(per_file)} files."
                " See details above.",
            )
        )
        return ExitCode.VIOLATION

    # ------------------------------------------------------------------

    def _print_summary(self, result: ScanResult) -> None:
        elapsed = deterministic_elapsed(result.elapsed_seconds, ci_mode=self._config.ci_mode)
        self._out.print(Text("==== Logging Usage Check ====", style="bold"))
        self._out.print(
            Text(
                f"Scanned {result.files_scanned} {self._config.extension} files "
                f"in {format_elapsed(elapsed)}"
            )
        )

    def _print_file_table(self, per_file: dict[Path, int]) -> None:
        self._out.print(Text("Summary by file:", style=_HEADING))
        for path, count in per_file.items():
            self._out.print(Text.assemble("  ", (f"{count:>3}x", "yellow"), f"  {path}"))
        self._out.print()

    def _print_details(self, result: ScanResult, per_file: dict[Path, int]) -> None:
        self._out.print(Text("Details:", style=_HEADING))
        for path, count in per_file.items():
            self._out.print(Text.assemble(("File:", "bold cyan"), f" {path}"))
            self._out.print(Text(f"  {count} violations"))
            for v in result.violations_for(path):
                self._out.print(SourceLine(v), soft_wrap=True, end="")
                # Notice only; the full line is still printed above.
                if v.byte_length > self._config.long_line_threshold:
                    self._out.print(Text("      ...(line truncated)", style="dim"))
            self._out.print()

    def _print_guidance(self) -> None:
        self._out.print(Text("Guidance:", style=_HEADING))
        self._out.print(
            Text.assemble(
                "  - Allowed location: ",
                (self._config.allowed_location, "bold green"),
            )
        )
        self._out.print(Text("  - Suggested fixes:"))
        self._out.print(Text("    * Move logging calls to the allowed module."))
        self._out.print(
            Text(
                "    * Use other facilities (e.g. return values, events) instead of "
                "direct log calls where appropriate."
            )
        )
        self._out.print()
