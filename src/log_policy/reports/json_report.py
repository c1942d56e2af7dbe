"""Machine-readable report, validated against the published schema."""

from __future__ import annotations

from log_policy.contracts.load import validate_instance
from log_policy.model import ScanResult
from log_policy.utils.json_norm import stable_json_dumps

SCHEMA_NAME = "scan_result.schema.json"


def render_json(result: ScanResult, *, ci_mode: bool = False) -> str:
    """Serialize *result*; raises ``jsonschema.ValidationError`` on drift."""
    payload = result.to_dict(ci_mode=ci_mode)
    validate_instance(payload, SCHEMA_NAME)
    return stable_json_dumps(payload, ci_mode=ci_mode)
