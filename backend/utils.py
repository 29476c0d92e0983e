"""Utility helpers used across backend modules."""

from __future__ import annotations

import random
import string
import time
from datetime import datetime, timezone

_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(value: int) -> str:
    """Return ``value`` written in base 36."""

    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_id() -> str:
    """Return a short, probably unique identifier.

    The id is the current time in milliseconds followed by eleven random
    characters, both in base 36. It is not cryptographically secure.
    """

    stamp = _to_base36(int(time.time() * 1000))
    suffix = "".join(random.choice(_BASE36) for _ in range(11))
    return stamp + suffix


def now_iso() -> str:
    """Return the current UTC time as an ISO-8601 string with a ``Z`` suffix."""

    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_date(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware ``datetime``.

    Naive timestamps are interpreted as local time.
    """

    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return dt
