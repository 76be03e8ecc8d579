"""Formatting for assistant tool invocations."""
from __future__ import annotations

from typing import Any

from logview import config
from logview.parsers.json_values import compact_json
from logview.parsers.truncation import TOOL_ARG_PREVIEW_PAIRS, TOOL_ARG_VALUE_LIMIT, truncate


def format_tool_name(name: str, namespace: str | None = None) -> str:
    """Shorten namespaced MCP tool names: ``mcp__search__query`` -> ``search:query``."""
    marker = namespace or config.MCP_NAMESPACE
    parts = name.split("__")
    if len(parts) >= 3 and parts[0] == marker:
        return f"{parts[1]}:{parts[2]}"
    return name


def _format_arg_value(value: Any) -> str:
    if isinstance(value, str):
        return truncate(value, TOOL_ARG_VALUE_LIMIT)
    return truncate(compact_json(value), TOOL_ARG_VALUE_LIMIT)


def format_tool_input(args: dict[str, Any]) -> str:
    if not args:
        return ""

    entries = list(args.items())
    formatted = ", ".join(
        f"{key}={_format_arg_value(value)}" for key, value in entries[:TOOL_ARG_PREVIEW_PAIRS]
    )
    remaining = len(entries) - TOOL_ARG_PREVIEW_PAIRS
    suffix = f", +{remaining} more" if remaining > 0 else ""
    return f"({formatted}{suffix})"
