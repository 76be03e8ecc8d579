"""Normalize tool outcomes (shell output, JSON payloads, plain text) into blocks."""
from __future__ import annotations

from typing import Any

from logview import config
from logview.models import Block
from logview.parsers.json_values import as_text, pretty_json, try_parse_json
from logview.parsers.tags import ICON_ERROR, ICON_OK
from logview.parsers.truncation import TOOL_RESULT_LIMIT, hidden_chars, is_truncated, truncate

_STDERR_SEPARATOR = "\n\nSTDERR:\n"
_INTERRUPTED_MARKER = "[interrupted]"
_EMPTY_OUTPUT = "(empty output)"


def _display_stdout(stdout: str) -> str:
    # Some tools JSON-encode their stdout; only structured payloads are reformatted.
    ok, inner = try_parse_json(stdout)
    if ok and isinstance(inner, (dict, list)):
        return pretty_json(inner)
    return stdout


def _format_shell_result(parsed: dict[str, Any]) -> str:
    stdout = as_text(parsed.get("stdout"))
    stderr = as_text(parsed.get("stderr"))
    interrupted = bool(parsed.get("interrupted"))

    display = _display_stdout(stdout)
    if stderr:
        display += (_STDERR_SEPARATOR if display else "") + stderr
    if interrupted:
        display += ("\n" if display else "") + _INTERRUPTED_MARKER
    return display or _EMPTY_OUTPUT


def tool_result_display(raw: str) -> str:
    """Turn the raw tool outcome text into the string shown to the user."""
    ok, parsed = try_parse_json(raw)
    if not ok:
        return raw
    if isinstance(parsed, dict) and ("stdout" in parsed or "stderr" in parsed):
        return _format_shell_result(parsed)
    if isinstance(parsed, (dict, list)):
        return pretty_json(parsed)
    return raw


def detect_tool_error(raw: str, is_error: Any = None, mode: str | None = None) -> bool:
    """Decide whether a tool outcome is a failure.

    ``heuristic`` mode also flags any output mentioning "Error"/"error", which
    misfires on legitimate output containing those words; ``flag`` mode trusts
    only the explicit ``is_error`` marker.
    """
    explicit = bool(is_error)
    if (mode or config.TOOL_RESULT_ERROR_MODE) == "flag":
        return explicit
    return explicit or "Error" in raw or "error" in raw


def normalize_tool_result(raw: Any, *, is_error: Any = None, mode: str | None = None) -> Block:
    text = as_text(raw)
    display = tool_result_display(text)
    failed = detect_tool_error(text, is_error, mode)
    return Block(
        kind="tool_result",
        icon=ICON_ERROR if failed else ICON_OK,
        preview=truncate(display, TOOL_RESULT_LIMIT),
        full=display,
        expandable=is_truncated(display, TOOL_RESULT_LIMIT),
        isError=failed,
        extra=hidden_chars(display, TOOL_RESULT_LIMIT),
    )
