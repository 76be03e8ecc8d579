"""Transcript decoding API consumed by the session log panel."""
from __future__ import annotations

import logging
import time
from collections import Counter

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from logview import config
from logview.models import FormattedLog, FormattedRecord, RawRecord
from logview.observability import record_batch_latency, record_decoded, start_span
from logview.parsers import decode, format_transcript

logger = logging.getLogger("logview.transcripts")

transcripts_router = APIRouter(prefix="/api/transcripts", tags=["transcripts"])


class DecodeRequest(BaseModel):
    content: str = ""


class FormatRequest(BaseModel):
    records: list[RawRecord] = Field(default_factory=list)


class FormatResponse(BaseModel):
    items: list[FormattedRecord]
    total: int


@transcripts_router.post("/decode", response_model=FormattedLog)
def decode_content(req: DecodeRequest):
    """Decode a single record payload."""
    log = decode(req.content)
    record_decoded(log.category)
    return log


@transcripts_router.post("/format", response_model=FormatResponse)
def format_records(req: FormatRequest):
    """Order a batch of records and decode each one for display."""
    total = len(req.records)
    if total > config.MAX_RECORDS:
        raise HTTPException(
            status_code=413,
            detail=f"Too many records: {total} (limit {config.MAX_RECORDS})",
        )

    started = time.perf_counter()
    with start_span("logview.format_transcript", {"records": total}):
        items = format_transcript(req.records)
    duration_ms = (time.perf_counter() - started) * 1000
    record_batch_latency("format", duration_ms)

    categories = Counter(item.log.category for item in items)
    for category, count in categories.items():
        record_decoded(category, count)
    logger.debug("Formatted %d records in %.1fms (%s)", total, duration_ms, dict(categories))

    return FormatResponse(items=items, total=total)
