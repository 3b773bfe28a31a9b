"""Site-wide ordering of resources.

``compare`` returns a negative, zero or positive int like a classic ``cmp``
function, or ``None`` when the two objects cannot be ranked against each other.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, date, datetime, time
from functools import cmp_to_key
from typing import Any, TypeVar

T = TypeVar("T")


def _as_datetime(value: date) -> datetime:
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min)
    if value.tzinfo is not None:
        return value.astimezone(UTC).replace(tzinfo=None)
    return value


def _is_date_like(value: Any) -> bool:
    return isinstance(value, date)


def _spaceship(left: Any, right: Any) -> int | None:
    try:
        if left < right:
            return -1
        if left > right:
            return 1
        if left == right:
            return 0
    except TypeError:
        return None
    return None


def compare(a: Any, b: Any) -> int | None:
    """Compare two resources by date, breaking ties by source path."""
    if not hasattr(b, "metadata"):
        return None

    a_date = a.metadata.get("date")
    b_date = b.metadata.get("date")

    if _is_date_like(a_date) and _is_date_like(b_date):
        cmp = _spaceship(_as_datetime(a_date), _as_datetime(b_date))
    else:
        cmp = _spaceship(a_date, b_date)

    if not cmp:
        cmp = _spaceship(a.path, b.path)
    return cmp


def _cmp_or_zero(a: Any, b: Any) -> int:
    return compare(a, b) or 0


def sort_resources(resources: Iterable[T], *, reverse: bool = False) -> list[T]:
    """Return ``resources`` sorted oldest first (newest first with ``reverse``)."""
    return sorted(resources, key=cmp_to_key(_cmp_or_zero), reverse=reverse)
