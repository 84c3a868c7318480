"""HTTP client for the external transaction ledger API."""

import logging
from datetime import datetime
from decimal import Decimal

import httpx

from src.config import settings
from src.exceptions import LedgerAPIError
from src.models.cashflow import CashFlowEntry, EntryKind, LedgerPage

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def _parse_timestamp(raw: str | None) -> datetime | None:
    if not raw:
        return None
    # Instants are serialized with a trailing Z
    return datetime.fromisoformat(raw.replace("Z", "+00:00"))


def parse_transaction(txn: dict) -> CashFlowEntry:
    """Map one transaction record to a ledger entry."""
    category = txn.get("category") or {}
    return CashFlowEntry(
        id=txn["id"],
        label=txn.get("note") or "",
        kind=EntryKind(txn["type"]),
        amount=Decimal(str(txn["amount"])),
        category=category.get("name") or "",
        occurred_at=_parse_timestamp(txn.get("occurredAt")),
        currency=txn.get("currency"),
    )


def parse_page(data: dict) -> LedgerPage:
    entries = [parse_transaction(txn) for txn in data.get("content", [])]
    return LedgerPage(
        entries=entries,
        total_elements=data.get("totalElements", len(entries)),
        total_pages=data.get("totalPages", 1),
        number=data.get("number", 0),
        size=data.get("size", len(entries)),
        first=data.get("first", True),
        last=data.get("last", True),
    )


class LedgerClient:
    """Client for the paginated transaction feed (newest first)."""

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.ledger_api_base).rstrip("/")
        self.token = token if token is not None else settings.ledger_api_token
        self.timeout = timeout or settings.http_timeout_seconds
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    async def get_transactions(
        self,
        page: int = 0,
        size: int | None = None,
        kind: EntryKind | None = None,
        query: str | None = None,
    ) -> LedgerPage:
        """Fetch one page of transactions.

        Raises:
            LedgerAPIError: On timeout, HTTP errors, or invalid response
        """
        params: dict[str, str | int] = {"page": page, "size": size or settings.ledger_page_size}
        # Empty filters are left off the query string
        if kind is not None:
            params["type"] = kind.value
        if query:
            params["q"] = query

        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                response = await client.get(
                    f"{API_PREFIX}/transactions", params=params, headers=self._headers()
                )
                response.raise_for_status()
                data = response.json()
            except httpx.TimeoutException as e:
                logger.warning("Ledger request timed out after %ss", self.timeout)
                raise LedgerAPIError(f"Ledger API timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise self._status_error(e.response) from e
            except httpx.HTTPError as e:
                logger.warning("Ledger request failed: %s", e)
                raise LedgerAPIError(f"Ledger API unreachable: {e}") from e
            except ValueError as e:
                raise LedgerAPIError("Ledger API returned invalid JSON") from e

        try:
            return parse_page(data)
        except (KeyError, ValueError, TypeError, AttributeError, ArithmeticError) as e:
            raise LedgerAPIError(f"Invalid transaction data from ledger: {e}") from e

    @staticmethod
    def _status_error(response: httpx.Response) -> LedgerAPIError:
        try:
            body = response.json()
        except ValueError:
            body = None
        message = (body or {}).get("message") if isinstance(body, dict) else None
        logger.warning("Ledger API returned %d: %s", response.status_code, message)
        return LedgerAPIError(
            message or f"HTTP {response.status_code}",
            status_code=response.status_code,
            error_body=body if isinstance(body, dict) else None,
        )
