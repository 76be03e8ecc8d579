#!/usr/bin/env python3
"""Decode a transcript file into display blocks.

Each input line is either a record object
(``{"id": ..., "createdAt": ..., "sequence": ..., "content": ...}``) or a raw
payload line, which becomes a record sequenced by its line number.

Usage:
  python logview/scripts/decode_transcript.py session.jsonl
  python logview/scripts/decode_transcript.py session.jsonl --json
  python logview/scripts/decode_transcript.py session.jsonl --full
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from pydantic import ValidationError

from logview.models import FormattedRecord, RawRecord
from logview.parsers import format_transcript
from logview.parsers.json_values import parse_json_object

logger = logging.getLogger("logview.scripts.decode_transcript")


def _record_from_line(line: str, line_number: int) -> RawRecord:
    payload = parse_json_object(line)
    is_envelope = (
        payload is not None
        and "id" in payload
        and "createdAt" in payload
        and isinstance(payload.get("content"), str)
    )
    if is_envelope:
        candidate = dict(payload)
        if "sequence" not in candidate and "lineNumber" not in candidate:
            candidate["sequence"] = line_number
        try:
            return RawRecord.model_validate(candidate)
        except ValidationError as exc:
            logger.debug("Line %d is not a record envelope (%s); decoding it as content", line_number, exc)
    return RawRecord(id=f"line-{line_number}", createdAt="", sequence=line_number, content=line)


def load_records(path: Path) -> list[RawRecord]:
    records: list[RawRecord] = []
    for line_number, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        if not line.strip():
            continue
        records.append(_record_from_line(line, line_number))
    return records


def render_text(item: FormattedRecord, show_full: bool = False) -> list[str]:
    lines = [f"[{item.log.category}] {item.id}"]
    for block in item.log.blocks:
        head = f"  {block.icon or '-'}"
        if block.label:
            head += f" {block.label}"
        body = block.full if show_full and block.full else block.preview
        text_lines = body.splitlines() or [""]
        lines.append(f"{head} {text_lines[0]}".rstrip())
        lines.extend(f"      {extra_line}" for extra_line in text_lines[1:])
        if block.extra and not show_full:
            lines.append(f"      ({block.extra})")
    return lines


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("path", help="JSONL transcript file")
    parser.add_argument("--json", action="store_true", help="Print decoded records as JSON")
    parser.add_argument("--full", action="store_true", help="Show full content instead of previews")
    args = parser.parse_args(argv)

    path = Path(args.path)
    if not path.is_file():
        print(f"Transcript not found: {path}")
        return 1

    items = format_transcript(load_records(path))

    if args.json:
        print(json.dumps([item.model_dump(exclude_none=True) for item in items], indent=2, ensure_ascii=False))
        return 0

    for item in items:
        print("\n".join(render_text(item, show_full=args.full)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
