# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Date parsing helpers used by the validation rules.

Request parameters arrive as strings, ``date`` or ``datetime`` values. These
helpers turn all of them into timezone-aware UTC datetimes so they can be
compared without naive/aware mixing errors.

Design Decisions:
-----------------
1. Naive datetimes are assumed to be UTC
2. A plain ``date`` means midnight UTC of that day
3. Strings are ISO 8601 (``2024-06-01``, ``2024-06-01T10:00:00Z``) or one of
   the relative keywords ``now``, ``today``, ``tomorrow``, ``yesterday``
"""

from datetime import date, datetime, time, timedelta, timezone


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime) -> datetime:
    """Return ``dt`` as timezone-aware UTC, assuming UTC for naive values."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _relative(keyword: str) -> datetime | None:
    now = utc_now()
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    offsets = {
        "today": midnight,
        "tomorrow": midnight + timedelta(days=1),
        "yesterday": midnight - timedelta(days=1),
        "now": now,
    }
    return offsets.get(keyword)


def parse_date(value: object) -> datetime | None:
    """Interpret ``value`` as a point in time.

    Args:
        value: A ``datetime``, ``date`` or string.

    Returns:
        Timezone-aware UTC datetime, or None if ``value`` is not a date.
    """
    if isinstance(value, datetime):
        return ensure_utc(value)

    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    relative = _relative(text.lower())
    if relative is not None:
        return relative

    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None

    return ensure_utc(parsed)


def is_valid_date(value: object) -> bool:
    return parse_date(value) is not None
