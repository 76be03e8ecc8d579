"""JSON helpers shared by the transcript decoder.

Every helper here is total: malformed input, unserializable values, and
pathologically nested documents are reported through return values, never
through exceptions.
"""
from __future__ import annotations

import json
from typing import Any

_MISSING = object()


def _reject_constant(token: str) -> Any:
    raise ValueError(f"{token} is not valid JSON")


def try_parse_json(raw: str) -> tuple[bool, Any]:
    """Return ``(ok, value)``; ``ok`` is False when ``raw`` is not a JSON document."""
    if not isinstance(raw, str) or not raw.strip():
        return False, None
    try:
        return True, json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return False, None


def parse_json_object(raw: str) -> dict[str, Any] | None:
    ok, value = try_parse_json(raw)
    if ok and isinstance(value, dict):
        return value
    return None


def pretty_json(value: Any) -> str:
    """Two-space indented JSON, keeping non-ASCII text readable."""
    try:
        return json.dumps(value, indent=2, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError):
        return str(value)


def compact_json(value: Any) -> str:
    """Separator-free JSON, matching how browsers serialize payloads."""
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError, RecursionError):
        return str(value)


def looks_like_json_document(content: str) -> bool:
    """True when ``content`` is wrapped in matching braces/brackets and parses."""
    trimmed = (content or "").strip()
    wrapped = (trimmed.startswith("{") and trimmed.endswith("}")) or (
        trimmed.startswith("[") and trimmed.endswith("]")
    )
    if not wrapped:
        return False
    ok, _ = try_parse_json(trimmed)
    return ok


def looks_json_shaped(content: str) -> bool:
    """Approximate check for truncated or malformed JSON fragments."""
    trimmed = (content or "").strip()
    return '"' in trimmed and (":" in trimmed or "{" in trimmed or "[" in trimmed)


def unwrap_double_encoded(content: str) -> str:
    """Reverse one level of accidental double JSON encoding.

    ``"{\\"type\\":\\"error\\"}"`` becomes ``{"type":"error"}``. Anything that
    is not a JSON string literal holding a JSON document comes back unchanged.
    """
    ok, parsed = try_parse_json(content)
    if not ok or not isinstance(parsed, str):
        return content
    inner = parsed.strip()
    if not (inner.startswith("{") or inner.startswith("[")):
        return content
    inner_ok, _ = try_parse_json(parsed)
    return parsed if inner_ok else content


def pick(node: Any, *path: str, default: Any = None) -> Any:
    current: Any = node
    for key in path:
        if not isinstance(current, dict):
            return default
        current = current.get(key, _MISSING)
        if current is _MISSING:
            return default
    return current


def as_text(value: Any) -> str:
    """Coerce a JSON value into display text (``None`` becomes empty)."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return compact_json(value)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
