from __future__ import annotations

import math
from typing import Any, Optional

from ..core.exceptions import ValidationError


def require_positive_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(value):
        raise ValidationError(f"{field_name} must be finite")
    if value <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return float(value)


def optional_coordinate(value: Any, field_name: str, *, limit: float) -> Optional[float]:
    """Validate an optional latitude/longitude value within ``[-limit, limit]``."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is invalid")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field_name} is invalid") from exc
    if not -limit <= number <= limit:
        raise ValidationError(f"{field_name} out of range")
    return number
