"""Unit tests for id and timestamp generation."""

import re
from datetime import datetime

from consult_tracker.application.services import generate_id, now_timestamp

ID_PATTERN = re.compile(r"[0-9a-z]{18,}")


def test_generate_id_format():
    assert ID_PATTERN.fullmatch(generate_id())


def test_generate_id_is_unique_across_many_calls():
    ids = {generate_id() for _ in range(2000)}
    assert len(ids) == 2000


def test_now_timestamp_is_iso_utc_with_milliseconds():
    stamp = now_timestamp()

    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", stamp)
    parsed = datetime.fromisoformat(stamp.replace("Z", "+00:00"))
    assert parsed.utcoffset().total_seconds() == 0
