import json
import unittest

from logview.parsers.json_values import (
    looks_json_shaped,
    looks_like_json_document,
    pick,
    try_parse_json,
    unwrap_double_encoded,
)
from logview.parsers.truncation import generate_preview, truncate


class UnwrapTests(unittest.TestCase):
    def test_double_encoded_object_is_unwrapped(self) -> None:
        inner = '{"type":"error","error":"boom"}'
        self.assertEqual(unwrap_double_encoded(json.dumps(inner)), inner)

    def test_double_encoded_array_with_whitespace_is_unwrapped(self) -> None:
        inner = '  [1, 2]'
        self.assertEqual(unwrap_double_encoded(json.dumps(inner)), inner)

    def test_single_encoded_documents_are_untouched(self) -> None:
        content = '{"type":"error"}'
        self.assertEqual(unwrap_double_encoded(content), content)

    def test_json_string_that_is_not_a_document_is_untouched(self) -> None:
        for content in ('"hello"', json.dumps("{not json"), json.dumps("[broken")):
            with self.subTest(content=content):
                self.assertEqual(unwrap_double_encoded(content), content)

    def test_garbage_is_untouched(self) -> None:
        for content in ("", "plain", '{"a":', "[" * 3000):
            self.assertEqual(unwrap_double_encoded(content), content)

    def test_only_one_level_is_removed(self) -> None:
        twice = json.dumps(json.dumps('{"a":1}'))
        self.assertEqual(unwrap_double_encoded(twice), twice)


class JsonHeuristicsTests(unittest.TestCase):
    def test_document_detection_requires_matching_wrappers(self) -> None:
        self.assertTrue(looks_like_json_document(' {"a": 1} '))
        self.assertTrue(looks_like_json_document("[]"))
        self.assertFalse(looks_like_json_document('{"a": 1'))
        self.assertFalse(looks_like_json_document("{not: json}"))
        self.assertFalse(looks_like_json_document("42"))

    def test_json_shaped_fragments(self) -> None:
        self.assertTrue(looks_json_shaped('"key": 1'))
        self.assertTrue(looks_json_shaped('["a'))
        self.assertFalse(looks_json_shaped("key: value"))
        self.assertFalse(looks_json_shaped('he said "hi"'))

    def test_try_parse_reports_failure(self) -> None:
        self.assertEqual(try_parse_json("{"), (False, None))
        self.assertEqual(try_parse_json("null"), (True, None))

    def test_non_json_number_literals_are_rejected(self) -> None:
        for raw in ("NaN", "[Infinity]", '{"x": -Infinity}'):
            with self.subTest(raw=raw):
                self.assertEqual(try_parse_json(raw), (False, None))
        self.assertFalse(looks_like_json_document("[NaN]"))
        self.assertEqual(unwrap_double_encoded(json.dumps("[Infinity]")), json.dumps("[Infinity]"))

    def test_pick_walks_nested_dicts(self) -> None:
        payload = {"message": {"content": [1]}}
        self.assertEqual(pick(payload, "message", "content"), [1])
        self.assertIsNone(pick(payload, "message", "missing"))
        self.assertIsNone(pick({"message": "text"}, "message", "content"))


class TruncationTests(unittest.TestCase):
    def test_truncate_appends_ellipsis_only_when_needed(self) -> None:
        self.assertEqual(truncate("abc", 3), "abc")
        self.assertEqual(truncate("abcd", 3), "abc...")

    def test_generate_preview(self) -> None:
        short = generate_preview("abc", 5)
        self.assertEqual((short.preview, short.truncated, short.extra), ("abc", False, None))

        long = generate_preview("abcdefgh", 5)
        self.assertEqual((long.preview, long.truncated, long.extra), ("abcde", True, "+3 more"))


if __name__ == "__main__":
    unittest.main()
