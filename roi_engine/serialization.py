"""Convert engine dataclasses into JSON-safe dicts.

``math.inf`` payback values and NaN have no JSON encoding; both become
``None`` so clients render them as "N/A", the same as an undefined IRR.
"""

from __future__ import annotations

import math
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any

from roi_engine.engine.service import CalculationResult


def json_safe(value: Any) -> Any:
    """Recursively replace non-finite floats and enums with JSON values."""
    if is_dataclass(value) and not isinstance(value, type):
        return json_safe(asdict(value))
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [json_safe(v) for v in value]
    return value


def calculation_result_to_dict(result: CalculationResult) -> dict[str, Any]:
    """Serialize a full project calculation."""
    return {
        "project_name": result.project_name,
        "totals": json_safe(result.totals),
        "risk": json_safe(result.risk),
        "metrics": json_safe(result.metrics),
        "cash_flow_projection": json_safe(result.cash_flow_projection),
        "recommendation": json_safe(result.recommendation),
    }
