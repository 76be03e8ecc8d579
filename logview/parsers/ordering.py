"""Display ordering for transcript records."""
from __future__ import annotations

from typing import Iterable

from logview.date_utils import timestamp_sort_key
from logview.models import RawRecord


def record_sort_key(record: RawRecord) -> tuple[int, int]:
    # Concurrent writers can share a millisecond; the write sequence breaks ties.
    return timestamp_sort_key(record.createdAt), record.sequence


def order(records: Iterable[RawRecord]) -> list[RawRecord]:
    """Return records oldest first, ties broken by ascending sequence number."""
    return sorted(records, key=record_sort_key)
