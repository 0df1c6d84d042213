"""Identity and timestamp generation shared by every collection."""

import random
import string
import time
from datetime import datetime, timezone

_BASE36 = string.digits + string.ascii_lowercase
_RANDOM_LENGTH = 10


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_id() -> str:
    """Return a new record id: base36 epoch milliseconds + 10 random base36 chars.

    Unique enough for one writer at a time; not cryptographically guaranteed.
    """
    millis = time.time_ns() // 1_000_000
    suffix = "".join(random.choices(_BASE36, k=_RANDOM_LENGTH))
    return _to_base36(millis) + suffix


def now_timestamp() -> str:
    """Current UTC time as ISO 8601 with milliseconds, e.g. 2026-10-19T08:00:00.000Z."""
    return (
        datetime.now(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )
