"""Decode a single transcript record into display blocks.

``decode`` is total: whatever the payload looks like (plain text, a JSON
event, a truncated JSON fragment, or JSON serialized twice) it returns a
``FormattedLog`` with at least one block. Unknown shapes degrade to a raw
view of the data instead of raising.
"""
from __future__ import annotations

import logging
from typing import Any

from logview.models import Block, FormattedLog
from logview.parsers.events import (
    AssistantEvent,
    ErrorEvent,
    Event,
    ResultEvent,
    SystemEvent,
    Unrecognized,
    UserEvent,
    classify_event,
)
from logview.parsers.json_values import (
    as_text,
    is_number,
    looks_json_shaped,
    looks_like_json_document,
    pretty_json,
    unwrap_double_encoded,
)
from logview.parsers.tags import (
    COLOR_ASSISTANT,
    COLOR_FAILURE,
    COLOR_MUTED,
    COLOR_SUCCESS,
    COLOR_SYSTEM,
    COLOR_TOOL_RESULT,
    ICON_BULLET,
    ICON_DATA,
    ICON_ERROR,
    ICON_HOOK,
    ICON_INBOUND,
    ICON_INFO,
    ICON_INIT,
    ICON_MESSAGE,
    ICON_NONE,
    ICON_OK,
    ICON_THINKING,
    ICON_TOOL,
)
from logview.parsers.tool_calls import format_tool_input, format_tool_name
from logview.parsers.tool_results import normalize_tool_result
from logview.parsers.truncation import (
    HOOK_STDOUT_LIMIT,
    JSON_FRAGMENT_LIMIT,
    PLAIN_TEXT_LIMIT,
    RESULT_TEXT_LIMIT,
    THINKING_PREVIEW_LIMIT,
    generate_preview,
    hidden_chars,
    is_truncated,
    truncate,
)

logger = logging.getLogger("logview.decoder")

UNRECOGNIZED_MESSAGE = "Unrecognized message format"
UNRECOGNIZED_TOOL_RESULT = "Unrecognized tool result format"
JSON_DATA_PREVIEW = "JSON data"
THINKING_PLACEHOLDER = "Thinking..."


def _is_present(value: Any) -> bool:
    return value is not None and value is not False and value != ""


def _display_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    return pretty_json(value)


def _truncated_text_block(text: str, limit: int, icon: str) -> Block:
    truncated = is_truncated(text, limit)
    return Block(
        kind="text",
        icon=icon,
        preview=truncate(text, limit),
        full=text if truncated else None,
        expandable=truncated,
        extra=hidden_chars(text, limit),
    )


def _raw_json_block(preview: str, full: str, icon: str, expandable: bool = True) -> Block:
    return Block(kind="raw_json", icon=icon, preview=preview, full=full, expandable=expandable)


# ── system ──────────────────────────────────────────────────────────

def _decode_system(event: SystemEvent) -> FormattedLog:
    payload = event.payload
    subtype = event.subtype

    if subtype == "init":
        model = as_text(payload.get("model")) or "unknown"
        tools = payload.get("tools")
        tool_count = len(tools) if isinstance(tools, list) else 0
        block = Block(kind="text", icon=ICON_INIT, preview=f"Session started ({model}, {tool_count} tools)")
    elif subtype == "hook_response":
        hook_name = as_text(payload.get("hook_name")) or "unknown"
        header = f"Hook: {hook_name}"
        stdout = payload.get("stdout")
        if isinstance(stdout, str) and stdout:
            truncated = is_truncated(stdout, HOOK_STDOUT_LIMIT)
            block = Block(
                kind="text",
                icon=ICON_HOOK,
                preview=f"{header}\n{truncate(stdout, HOOK_STDOUT_LIMIT)}",
                full=f"{header}\n{stdout}" if truncated else None,
                expandable=truncated,
                extra=hidden_chars(stdout, HOOK_STDOUT_LIMIT),
            )
        else:
            block = Block(kind="text", icon=ICON_HOOK, preview=header)
    else:
        message = payload.get("message")
        if not _is_present(message):
            message = payload.get("content")
        text = _display_value(message) if _is_present(message) else pretty_json(payload)
        block = Block(kind="text", icon=ICON_INFO, preview=text)

    return FormattedLog(
        category=f"system/{subtype}" if subtype else "system",
        color=COLOR_SYSTEM,
        blocks=[block],
    )


# ── assistant ───────────────────────────────────────────────────────

def _tool_call_block(part: dict[str, Any]) -> Block:
    raw_name = part.get("name")
    name = raw_name if isinstance(raw_name, str) and raw_name else "unknown"
    raw_input = part.get("input")
    args = raw_input if isinstance(raw_input, dict) else {}
    return Block(
        kind="tool_call",
        icon=ICON_TOOL,
        label=format_tool_name(name),
        preview=format_tool_input(args),
        full=pretty_json(raw_input if raw_input is not None else {}),
        expandable=len(args) > 0,
    )


def _thinking_block(part: dict[str, Any]) -> Block:
    thinking = part.get("thinking")
    text = thinking if isinstance(thinking, str) and thinking else THINKING_PLACEHOLDER
    preview = generate_preview(text, THINKING_PREVIEW_LIMIT)
    return Block(
        kind="thinking",
        icon=ICON_THINKING,
        preview=preview.preview,
        full=text if preview.truncated else None,
        expandable=preview.truncated,
        extra=preview.extra,
    )


def _decode_assistant(event: AssistantEvent) -> FormattedLog:
    blocks: list[Block] = []
    for part in event.content or []:
        if not isinstance(part, dict):
            continue
        part_type = part.get("type")
        if part_type == "text":
            blocks.append(Block(kind="text", icon=ICON_MESSAGE, preview=as_text(part.get("text"))))
        elif part_type == "tool_use":
            blocks.append(_tool_call_block(part))
        elif part_type == "thinking":
            blocks.append(_thinking_block(part))

    if not blocks:
        logger.debug("Assistant event without renderable content blocks")
        blocks = [_raw_json_block(UNRECOGNIZED_MESSAGE, pretty_json(event.payload), ICON_MESSAGE)]

    return FormattedLog(category="assistant", color=COLOR_ASSISTANT, blocks=blocks)


# ── user (tool results) ─────────────────────────────────────────────

def _decode_user(event: UserEvent) -> FormattedLog:
    blocks: list[Block] = []
    if _is_present(event.tool_use_result):
        blocks.append(normalize_tool_result(event.tool_use_result))
    else:
        for part in event.content or []:
            if isinstance(part, dict) and part.get("type") == "tool_result":
                # Nested results carry an explicit is_error; their text is not scanned.
                blocks.append(normalize_tool_result(part.get("content"), is_error=part.get("is_error"), mode="flag"))

    if not blocks:
        logger.debug("User event without tool results")
        blocks = [_raw_json_block(UNRECOGNIZED_TOOL_RESULT, pretty_json(event.payload), ICON_INBOUND)]

    return FormattedLog(category="tool_result", color=COLOR_TOOL_RESULT, blocks=blocks)


# ── result ──────────────────────────────────────────────────────────

def format_result_summary(payload: dict[str, Any]) -> str:
    parts: list[str] = []
    subtype = as_text(payload.get("subtype"))
    if subtype:
        parts.append(subtype)
    num_turns = payload.get("num_turns")
    if num_turns is not None:
        parts.append(f"{as_text(num_turns)} turns")
    duration_ms = payload.get("duration_ms")
    if is_number(duration_ms) and duration_ms:
        parts.append(f"{duration_ms / 1000:.1f}s")
    cost = payload.get("total_cost_usd")
    if is_number(cost) and cost:
        parts.append(f"${cost:.4f}")
    return f"Done ({', '.join(parts)})" if parts else "Done"


def _decode_result(event: ResultEvent) -> FormattedLog:
    payload = event.payload
    failed = bool(payload.get("is_error"))
    blocks = [
        Block(
            kind="summary",
            icon=ICON_ERROR if failed else ICON_OK,
            preview=format_result_summary(payload),
            isError=failed,
        )
    ]

    result = payload.get("result")
    result_text = as_text(result) if _is_present(result) else ""
    if result_text:
        blocks.append(_truncated_text_block(result_text, RESULT_TEXT_LIMIT, ICON_NONE))

    return FormattedLog(
        category="result",
        color=COLOR_FAILURE if failed else COLOR_SUCCESS,
        blocks=blocks,
    )


# ── error ───────────────────────────────────────────────────────────

def _decode_error(event: ErrorEvent) -> FormattedLog:
    payload = event.payload
    for key in ("error", "message"):
        value = payload.get(key)
        if _is_present(value):
            text = _display_value(value)
            break
    else:
        text = pretty_json(payload)

    return FormattedLog(
        category="error",
        color=COLOR_FAILURE,
        blocks=[Block(kind="text", icon=ICON_ERROR, preview=text, isError=True)],
    )


# ── fallbacks ───────────────────────────────────────────────────────

def _decode_unrecognized(content: str) -> FormattedLog:
    if looks_like_json_document(content):
        return FormattedLog(
            category="data",
            color=COLOR_MUTED,
            blocks=[_raw_json_block(JSON_DATA_PREVIEW, content, ICON_DATA)],
        )

    if looks_json_shaped(content):
        # Partial or malformed JSON: show the head as code with the rest behind expand.
        return FormattedLog(
            category="log",
            color=COLOR_MUTED,
            blocks=[
                _raw_json_block(
                    truncate(content, JSON_FRAGMENT_LIMIT),
                    content,
                    ICON_DATA,
                    expandable=is_truncated(content, JSON_FRAGMENT_LIMIT),
                )
            ],
        )

    return FormattedLog(
        category="log",
        color=COLOR_MUTED,
        blocks=[_truncated_text_block(content, PLAIN_TEXT_LIMIT, ICON_BULLET)],
    )


def _dispatch(event: Event, original: str) -> FormattedLog:
    if isinstance(event, SystemEvent):
        return _decode_system(event)
    if isinstance(event, AssistantEvent):
        return _decode_assistant(event)
    if isinstance(event, UserEvent):
        return _decode_user(event)
    if isinstance(event, ResultEvent):
        return _decode_result(event)
    if isinstance(event, ErrorEvent):
        return _decode_error(event)
    if isinstance(event, Unrecognized):
        return _decode_unrecognized(original)
    raise TypeError(f"Unhandled event variant: {type(event).__name__}")


def decode(content: str) -> FormattedLog:
    """Decode one record's text payload into a ``FormattedLog``."""
    text = content if isinstance(content, str) else as_text(content)
    effective = unwrap_double_encoded(text)
    event = classify_event(effective)
    try:
        return _dispatch(event, text)
    except Exception:
        logger.warning(
            "Failed to decode %s record; showing raw content",
            type(event).__name__,
            exc_info=True,
        )
        return _decode_unrecognized(text)
