"""Tests for the transaction ledger client."""

from datetime import datetime, timezone
from decimal import Decimal

import httpx
import pytest

from src.data.ledger_client import LedgerClient, parse_transaction
from src.exceptions import LedgerAPIError
from src.models.cashflow import EntryKind


def _client(handler, token="secret") -> LedgerClient:
    return LedgerClient(
        base_url="http://ledger.test",
        token=token,
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


class TestParseTransaction:
    def test_full_record(self, ledger_page_json):
        entry = parse_transaction(ledger_page_json["content"][0])
        assert entry.id == "t4"
        assert entry.kind is EntryKind.EXPENSE
        assert entry.amount == Decimal("1200.5")
        assert entry.label == "Dinner"
        assert entry.category == "Cafe"
        assert entry.currency == "RUB"
        assert entry.occurred_at == datetime(2025, 3, 4, 18, 30, tzinfo=timezone.utc)

    def test_missing_category_and_note(self, ledger_page_json):
        entry = parse_transaction(ledger_page_json["content"][1])
        assert entry.kind is EntryKind.TRANSFER
        assert entry.category == ""
        entry = parse_transaction(ledger_page_json["content"][2])
        assert entry.label == ""

    def test_null_category_name(self, ledger_page_json):
        record = ledger_page_json["content"][0]
        record["category"] = {"id": "c2", "name": None}
        assert parse_transaction(record).category == ""


class TestGetTransactions:
    async def test_success(self, ledger_page_json):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(200, json=ledger_page_json)

        page = await _client(handler).get_transactions(page=0, size=4)

        request = seen["request"]
        assert request.url.path == "/api/v1/transactions"
        assert request.url.params["page"] == "0"
        assert request.url.params["size"] == "4"
        assert "type" not in request.url.params
        assert "q" not in request.url.params
        assert request.headers["Authorization"] == "Bearer secret"

        assert [e.id for e in page.entries] == ["t4", "t3", "t2", "t1"]
        assert page.total_pages == 6
        assert page.total_elements == 24
        assert page.first is True
        assert page.last is False

    async def test_filters_passed_through(self, ledger_page_json):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["params"] = request.url.params
            return httpx.Response(200, json=ledger_page_json)

        await _client(handler).get_transactions(page=2, kind=EntryKind.EXPENSE, query="rent")
        assert seen["params"]["page"] == "2"
        assert seen["params"]["type"] == "EXPENSE"
        assert seen["params"]["q"] == "rent"

    async def test_no_token_no_auth_header(self, ledger_page_json):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["headers"] = request.headers
            return httpx.Response(200, json=ledger_page_json)

        await _client(handler, token="").get_transactions()
        assert "Authorization" not in seen["headers"]

    async def test_empty_page(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"content": [], "totalElements": 0, "totalPages": 0})

        page = await _client(handler).get_transactions()
        assert page.entries == []
        assert page.total_pages == 0

    async def test_unauthorized_uses_error_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(401, json={"status": 401, "error": "Unauthorized", "message": "Token expired"})

        with pytest.raises(LedgerAPIError) as exc:
            await _client(handler).get_transactions()
        assert exc.value.status_code == 401
        assert str(exc.value) == "Token expired"
        assert exc.value.error_body["error"] == "Unauthorized"

    async def test_server_error_without_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="boom")

        with pytest.raises(LedgerAPIError) as exc:
            await _client(handler).get_transactions()
        assert exc.value.status_code == 500
        assert str(exc.value) == "HTTP 500"
        assert exc.value.error_body is None

    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        with pytest.raises(LedgerAPIError, match="timeout"):
            await _client(handler).get_transactions()

    async def test_malformed_record(self, ledger_page_json):
        ledger_page_json["content"][0]["type"] = "REFUND"

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=ledger_page_json)

        with pytest.raises(LedgerAPIError, match="Invalid transaction data"):
            await _client(handler).get_transactions()

    async def test_invalid_json(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        with pytest.raises(LedgerAPIError, match="invalid JSON"):
            await _client(handler).get_transactions()
