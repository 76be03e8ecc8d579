"""Order and decode a whole transcript for the rendering layer."""
from __future__ import annotations

from typing import Iterable

from logview.models import Block, FormattedRecord, RawRecord
from logview.parsers.decoder import decode
from logview.parsers.ordering import order


def block_key(record_id: str, block: Block, index: int) -> str:
    """Stable key for per-block UI state (expanded, copied)."""
    return f"{record_id}-{block.kind}-{index}"


def format_record(record: RawRecord) -> FormattedRecord:
    log = decode(record.content)
    return FormattedRecord(
        id=record.id,
        createdAt=record.createdAt,
        sequence=record.sequence,
        log=log,
        blockKeys=[block_key(record.id, block, index) for index, block in enumerate(log.blocks)],
    )


def format_transcript(records: Iterable[RawRecord]) -> list[FormattedRecord]:
    return [format_record(record) for record in order(records)]
