import unittest
from unittest.mock import patch

from fastapi import HTTPException
from fastapi.testclient import TestClient

from logview import main
from logview.models import RawRecord
from logview.routers import transcripts as transcripts_router


class TranscriptsRouterTests(unittest.TestCase):
    def test_decode_content_returns_formatted_log(self) -> None:
        log = transcripts_router.decode_content(transcripts_router.DecodeRequest(content='{"type":"error","error":"boom"}'))
        self.assertEqual(log.category, "error")
        self.assertEqual(log.blocks[0].preview, "boom")

    def test_format_records_orders_and_counts(self) -> None:
        req = transcripts_router.FormatRequest(
            records=[
                RawRecord(id="b", createdAt="2026-02-16T10:00:00Z", sequence=2, content="second"),
                RawRecord(id="a", createdAt="2026-02-16T10:00:00Z", sequence=1, content="first"),
            ]
        )

        with patch.object(transcripts_router, "record_decoded") as record_decoded:
            response = transcripts_router.format_records(req)

        self.assertEqual(response.total, 2)
        self.assertEqual([item.id for item in response.items], ["a", "b"])
        self.assertEqual([item.log.blocks[0].preview for item in response.items], ["first", "second"])
        record_decoded.assert_called_once_with("log", 2)

    def test_format_records_rejects_oversized_batches(self) -> None:
        req = transcripts_router.FormatRequest(
            records=[RawRecord(id=str(i), createdAt="", sequence=i, content="") for i in range(3)]
        )
        with patch.object(transcripts_router.config, "MAX_RECORDS", 2):
            with self.assertRaises(HTTPException) as ctx:
                transcripts_router.format_records(req)
        self.assertEqual(ctx.exception.status_code, 413)

    def test_format_request_accepts_line_number_records(self) -> None:
        req = transcripts_router.FormatRequest.model_validate(
            {"records": [{"id": "r1", "createdAt": "2026-02-16T10:00:00Z", "lineNumber": 4, "content": "hi"}]}
        )
        self.assertEqual(req.records[0].sequence, 4)


class TranscriptsHttpTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(main.app)

    def test_health(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "ok")

    def test_decode_endpoint(self) -> None:
        resp = self.client.post("/api/transcripts/decode", json={"content": '{"type":"error","error":"boom"}'})

        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["category"], "error")
        self.assertEqual(body["blocks"][0]["preview"], "boom")
        self.assertTrue(body["blocks"][0]["isError"])

    def test_format_endpoint(self) -> None:
        records = [
            {"id": "b", "createdAt": "2026-02-16T10:00:01Z", "lineNumber": 2, "content": "second"},
            {"id": "a", "createdAt": "2026-02-16T10:00:00Z", "lineNumber": 1, "content": "first"},
        ]

        resp = self.client.post("/api/transcripts/format", json={"records": records})

        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["total"], 2)
        self.assertEqual([item["id"] for item in body["items"]], ["a", "b"])
        self.assertEqual(body["items"][0]["blockKeys"], ["a-text-0"])

    def test_format_endpoint_rejects_oversized_batches(self) -> None:
        records = [{"id": str(i), "createdAt": "", "sequence": i} for i in range(3)]
        with patch.object(transcripts_router.config, "MAX_RECORDS", 2):
            resp = self.client.post("/api/transcripts/format", json={"records": records})
        self.assertEqual(resp.status_code, 413)


if __name__ == "__main__":
    unittest.main()
