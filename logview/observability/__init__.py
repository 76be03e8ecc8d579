"""Observability helpers."""

from logview.observability.otel import (
    initialize,
    shutdown,
    start_span,
    record_decoded,
    record_batch_latency,
)

__all__ = [
    "initialize",
    "shutdown",
    "start_span",
    "record_decoded",
    "record_batch_latency",
]
