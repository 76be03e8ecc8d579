"""Typed view over the event shapes found in agent transcripts.

Each recognized ``type`` discriminant maps to one frozen dataclass. Anything
else (parse failures, non-object JSON, unknown discriminants) becomes
``Unrecognized`` so the decoder's dispatch stays exhaustive.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from logview.parsers.json_values import pick, try_parse_json


@dataclass(frozen=True)
class SystemEvent:
    subtype: str
    payload: dict[str, Any] = field(repr=False)


@dataclass(frozen=True)
class AssistantEvent:
    content: list[Any] | None
    payload: dict[str, Any] = field(repr=False)


@dataclass(frozen=True)
class UserEvent:
    tool_use_result: Any
    content: list[Any] | None
    payload: dict[str, Any] = field(repr=False)


@dataclass(frozen=True)
class ResultEvent:
    payload: dict[str, Any] = field(repr=False)


@dataclass(frozen=True)
class ErrorEvent:
    payload: dict[str, Any] = field(repr=False)


@dataclass(frozen=True)
class Unrecognized:
    parsed: bool
    value: Any = None


Event = Union[SystemEvent, AssistantEvent, UserEvent, ResultEvent, ErrorEvent, Unrecognized]


def _content_list(payload: dict[str, Any]) -> list[Any] | None:
    content = pick(payload, "message", "content")
    return content if isinstance(content, list) else None


def classify_event(text: str) -> Event:
    ok, value = try_parse_json(text)
    if not ok:
        return Unrecognized(parsed=False)
    if not isinstance(value, dict):
        return Unrecognized(parsed=True, value=value)

    event_type = value.get("type")
    if event_type == "system":
        subtype = value.get("subtype")
        return SystemEvent(subtype=subtype if isinstance(subtype, str) else "", payload=value)
    if event_type == "assistant":
        return AssistantEvent(content=_content_list(value), payload=value)
    if event_type == "user":
        return UserEvent(
            tool_use_result=value.get("tool_use_result"),
            content=_content_list(value),
            payload=value,
        )
    if event_type == "result":
        return ResultEvent(payload=value)
    if event_type == "error":
        return ErrorEvent(payload=value)
    return Unrecognized(parsed=True, value=value)
