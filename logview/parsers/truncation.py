"""Truncation and preview rules shared by every block the decoder builds."""
from __future__ import annotations

from dataclasses import dataclass

ELLIPSIS = "..."

TOOL_ARG_VALUE_LIMIT = 40
TOOL_ARG_PREVIEW_PAIRS = 3
TOOL_RESULT_LIMIT = 300
THINKING_PREVIEW_LIMIT = 200
HOOK_STDOUT_LIMIT = 200
RESULT_TEXT_LIMIT = 500
PLAIN_TEXT_LIMIT = 500
JSON_FRAGMENT_LIMIT = 100


@dataclass(frozen=True)
class Preview:
    preview: str
    truncated: bool
    extra: str | None = None


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}{ELLIPSIS}"


def is_truncated(text: str, limit: int) -> bool:
    return len(text) > limit


def hidden_chars(text: str, limit: int) -> str | None:
    if len(text) <= limit:
        return None
    return f"+{len(text) - limit} chars"


def generate_preview(text: str, limit: int) -> Preview:
    """Cut long free text (thinking traces) at ``limit`` with a "+N more" hint."""
    if len(text) <= limit:
        return Preview(preview=text, truncated=False)
    return Preview(
        preview=text[:limit],
        truncated=True,
        extra=f"+{len(text) - limit} more",
    )
