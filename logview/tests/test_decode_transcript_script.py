import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from logview.scripts import decode_transcript


class DecodeTranscriptScriptTests(unittest.TestCase):
    def _write(self, lines: list[str]) -> Path:
        tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(tmpdir.cleanup)
        path = Path(tmpdir.name) / "session.jsonl"
        path.write_text("\n".join(lines), encoding="utf-8")
        return path

    def _run(self, argv: list[str]) -> tuple[int, str]:
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            code = decode_transcript.main(argv)
        return code, buffer.getvalue()

    def test_raw_lines_become_records_in_file_order(self) -> None:
        path = self._write(
            [
                '{"type":"system","subtype":"init","model":"m1","tools":["a"]}',
                "",
                "plain text line",
            ]
        )

        records = decode_transcript.load_records(path)

        self.assertEqual([r.id for r in records], ["line-1", "line-3"])
        self.assertEqual([r.sequence for r in records], [1, 3])

    def test_record_envelopes_are_respected(self) -> None:
        path = self._write(
            [
                json.dumps({"id": "b", "createdAt": "2026-02-16T10:00:01Z", "lineNumber": 2, "content": "later"}),
                json.dumps({"id": "a", "createdAt": "2026-02-16T10:00:00Z", "lineNumber": 1, "content": "earlier"}),
                json.dumps({"type": "system", "content": "not an envelope"}),
            ]
        )

        records = decode_transcript.load_records(path)

        self.assertEqual([r.id for r in records], ["b", "a", "line-3"])
        self.assertEqual(records[0].sequence, 2)
        self.assertEqual(records[2].content, json.dumps({"type": "system", "content": "not an envelope"}))

    def test_json_output(self) -> None:
        path = self._write(['{"type":"error","error":"boom"}'])

        code, output = self._run([str(path), "--json"])

        self.assertEqual(code, 0)
        payload = json.loads(output)
        self.assertEqual(payload[0]["log"]["category"], "error")
        self.assertEqual(payload[0]["log"]["blocks"][0]["preview"], "boom")
        self.assertNotIn("label", payload[0]["log"]["blocks"][0])

    def test_text_output_shows_labels_and_extras(self) -> None:
        path = self._write(
            [
                json.dumps(
                    {
                        "type": "assistant",
                        "message": {"content": [{"type": "tool_use", "name": "mcp__fs__read", "input": {"path": "/a"}}]},
                    }
                ),
                json.dumps({"type": "user", "tool_use_result": "o" * 310}),
            ]
        )

        code, output = self._run([str(path)])

        self.assertEqual(code, 0)
        self.assertIn("[assistant] line-1", output)
        self.assertIn("tool fs:read (path=/a)", output)
        self.assertIn("(+10 chars)", output)

    def test_missing_file(self) -> None:
        code, output = self._run(["/nonexistent/session.jsonl"])
        self.assertEqual(code, 1)
        self.assertIn("Transcript not found", output)


if __name__ == "__main__":
    unittest.main()
