"""Lenient value coercion for provider-supplied fields."""
from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any, Iterable, Optional


def to_float(value: Any) -> Optional[float]:
    """Return ``value`` as a finite float, or ``None`` when it cannot be read as one."""
    if value is None or isinstance(value, bool):
        return None
    try:
        converted = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(converted) or math.isinf(converted):
        return None
    return converted


def to_int(value: Any) -> Optional[int]:
    converted = to_float(value)
    if converted is None:
        return None
    return int(converted)


def number_or(value: Any, default: float) -> float:
    converted = to_float(value)
    return default if converted is None else converted


def to_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def to_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def to_string_tuple(values: Any) -> tuple[str, ...]:
    if values is None or isinstance(values, (str, bytes)):
        return ()
    if not isinstance(values, Iterable):
        return ()
    result: list[str] = []
    for item in values:
        text = to_text(item)
        if text:
            result.append(text)
    return tuple(result)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
