"""log_policy — keeps ``log::`` calls inside the designated logging module."""

__all__ = [
    "__version__",
    "scan",
    "ScanConfig",
    "ScanResult",
    "Violation",
]
__version__ = "0.1.0"

from log_policy.core.config import ScanConfig  # noqa: E402, F401
from log_policy.core.scanner import scan  # noqa: E402, F401
from log_policy.model import ScanResult, Violation  # noqa: E402, F401
