"""Transcript decoding."""

from logview.parsers.decoder import decode
from logview.parsers.ordering import order
from logview.parsers.transcript import block_key, format_record, format_transcript

__all__ = [
    "decode",
    "order",
    "block_key",
    "format_record",
    "format_transcript",
]
