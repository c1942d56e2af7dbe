"""Reports — render a ScanResult for people (console) or machines (JSON)."""

from log_policy.reports.console import ConsoleReporter
from log_policy.reports.json_report import render_json

__all__ = [
    "ConsoleReporter",
    "render_json",
]
