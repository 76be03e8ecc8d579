"""Pydantic models matching the frontend TypeScript types."""
from __future__ import annotations
from pydantic import AliasChoices, BaseModel, Field
from typing import Literal, Optional

BlockKind = Literal["text", "tool_call", "thinking", "tool_result", "summary", "raw_json"]


# ── Input records ───────────────────────────────────────────────────

class RawRecord(BaseModel):
    id: str
    createdAt: str
    sequence: int = Field(default=0, validation_alias=AliasChoices("sequence", "lineNumber"))
    content: str = ""


# ── Decoded output ──────────────────────────────────────────────────

class Block(BaseModel):
    kind: BlockKind
    icon: str = ""
    label: Optional[str] = None  # tool_call only
    preview: str = ""
    full: Optional[str] = None
    expandable: bool = False
    isError: bool = False
    extra: Optional[str] = None  # "+142 chars", "+57 more"


class FormattedLog(BaseModel):
    category: str
    color: str = "tertiary"
    blocks: list[Block] = Field(min_length=1)


class FormattedRecord(BaseModel):
    id: str
    createdAt: str
    sequence: int = 0
    log: FormattedLog
    blockKeys: list[str] = Field(default_factory=list)
