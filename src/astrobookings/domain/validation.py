"""
Field checks shared by the rocket, launch and customer validators.

Input payloads are plain mappings (decoded JSON objects). A key that is absent
means "not supplied"; a key mapped to ``None`` means "explicitly cleared".
"""

import math
import re
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

_ISO_DATE_TIME = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}")


def select_fields(data: Mapping[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    """
    Keep only the supplied keys that belong to the record.

    Args:
        data: Raw input payload
        fields: Updatable field names

    Returns:
        New dict with the known keys that are present in ``data``
    """
    return {name: data[name] for name in fields if name in data}


def merge_fields(
    current: Mapping[str, Any], data: Mapping[str, Any], fields: Iterable[str]
) -> dict[str, Any]:
    """
    Merge a partial update over the current field values.

    Absent keys keep their current value; explicit ``None`` replaces it.
    """
    fields = tuple(fields)
    merged = {name: current.get(name) for name in fields}
    merged.update(select_fields(data, fields))
    return merged


def is_blank(value: Any) -> bool:
    """True for ``None`` and for strings that are empty after trimming."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def as_integer(value: Any) -> int | None:
    """
    Interpret ``value`` as an integer.

    Booleans are rejected. Floats are accepted only when integral (JSON ``5.0``).

    Returns:
        The integer, or None if ``value`` is not an integer
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    return None


def as_number(value: Any) -> int | float | None:
    """
    Interpret ``value`` as a finite real number.

    Integers must fit in a finite float.

    Returns:
        The number, or None for booleans, strings, NaN and infinities
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        try:
            return value if math.isfinite(float(value)) else None
        except OverflowError:
            return None
    if isinstance(value, float) and math.isfinite(value):
        return value
    return None


def parse_date_time(value: Any) -> datetime | None:
    """
    Parse an ISO 8601 date-time into an aware UTC datetime.

    Strings must carry a time component; a trailing ``Z`` is accepted and naive
    values are read as UTC. Already-parsed datetimes pass through normalized.

    Returns:
        Aware datetime in UTC, or None if ``value`` is not a valid date-time
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not _ISO_DATE_TIME.match(text):
            return None
        if text.endswith(("Z", "z")):
            text = f"{text[:-1]}+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except (ValueError, OverflowError):
        # Offset pushes the instant outside the datetime range
        return None


def utc_now() -> datetime:
    """Default clock for date validation."""
    return datetime.now(UTC)
