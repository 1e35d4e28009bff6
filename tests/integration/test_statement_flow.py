"""Integration tests for th_statement endpoints through the ASGI app."""

from config.settings import settings
from src.th_statement.api import router as statement_router


class TestHealth:
    async def test_health(self, client):
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestCreateStatement:
    async def test_json_statement(self, client, bigco_request):
        resp = await client.post("/api/v1/statements", json=bigco_request)
        assert resp.status_code == 200
        body = resp.json()
        assert body["code"] == 0
        data = body["data"]
        assert data["customer"] == "BigCo"
        assert data["total_amount_cents"] == 65000
        assert data["total_amount_display"] == "$650.00"
        assert data["volume_credits"] == 25
        assert data["lines"][0]["play_name"] == "Hamlet"
        sep = settings.STATEMENT_LINE_SEPARATOR
        assert data["text"] == sep.join([
            "Statement for BigCo",
            "  Hamlet: $650.00 (55 seats)",
            "Amount owed is $650.00",
            "You earned 25 credits",
        ]) + sep

    async def test_request_id_matches_header(self, client, bigco_request):
        resp = await client.post("/api/v1/statements", json=bigco_request)
        assert resp.json()["request_id"] == resp.headers["X-Request-ID"]

    async def test_text_statement(self, client, bigco_request):
        resp = await client.post("/api/v1/statements/text", json=bigco_request)
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/plain")
        assert resp.text.startswith("Statement for BigCo")
        assert "You earned 25 credits" in resp.text


class TestErrors:
    async def test_unknown_genre_returns_6001(self, client, bigco_request):
        bigco_request["plays"]["hamlet"]["type"] = "history"
        resp = await client.post("/api/v1/statements", json=bigco_request)
        assert resp.status_code == 422
        body = resp.json()
        assert body["code"] == 6001
        assert body["data"] is None
        assert "history" in body["message"]

    async def test_missing_play_returns_6002(self, client, bigco_request):
        bigco_request["plays"] = {}
        resp = await client.post("/api/v1/statements/text", json=bigco_request)
        assert resp.status_code == 422
        assert resp.json()["code"] == 6002

    async def test_negative_audience_rejected(self, client, bigco_request):
        bigco_request["invoice"]["performances"][0]["audience"] = -1
        resp = await client.post("/api/v1/statements", json=bigco_request)
        assert resp.status_code == 422
        # Request-body validation uses FastAPI's own 422 body, not the envelope
        detail = resp.json()["detail"]
        assert detail[0]["loc"][-1] == "audience"
        assert detail[0]["type"] == "greater_than_equal"


class TestUnexpectedFailure:
    async def test_returns_internal_error_envelope(self, client, bigco_request, monkeypatch):
        def _boom(req):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(statement_router._service, "create_statement", _boom)
        resp = await client.post("/api/v1/statements", json=bigco_request)
        assert resp.status_code == 500
        body = resp.json()
        assert body["code"] == 9002
        assert body["data"] is None
        assert "disk on fire" not in body["message"]
        assert body["request_id"] == resp.headers["X-Request-ID"]

    async def test_domain_errors_carry_request_id(self, client, bigco_request):
        bigco_request["plays"]["hamlet"]["type"] = "history"
        resp = await client.post("/api/v1/statements", json=bigco_request)
        assert resp.json()["request_id"] == resp.headers["X-Request-ID"]
