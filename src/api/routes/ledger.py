"""Transaction ledger routes: one page of the external feed with running balances."""

import logging
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query

from src.api.deps import get_ledger_feed
from src.api.formatting import balance_row, money
from src.api.schemas import LedgerPageResponse
from src.calculator.ledger_feed import LedgerFeed
from src.exceptions import LedgerAPIError
from src.models.cashflow import EntryKind

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/ledger", tags=["ledger"])


@router.get("/transactions", response_model=LedgerPageResponse)
async def transactions(
    page: int = Query(0, ge=0),
    kind: EntryKind | None = Query(None, alias="type"),
    q: str | None = None,
    baseline: Decimal = Query(Decimal("0"), description="Balance before the oldest entry on the page"),
    feed: LedgerFeed = Depends(get_ledger_feed),
):
    try:
        ledger_page, views, totals = await feed.running_balance_page(
            page=page, kind=kind, query=q, baseline=baseline
        )
    except LedgerAPIError as e:
        logger.warning("Ledger page %d unavailable: %s", page, e)
        status = 401 if e.status_code == 401 else 502
        raise HTTPException(status_code=status, detail=str(e)) from e

    return LedgerPageResponse(
        rows=[balance_row(v) for v in views],
        income=money(totals.income),
        expense=money(totals.expense),
        balance=money(totals.balance),
        page=ledger_page.number,
        total_pages=ledger_page.total_pages,
        total_elements=ledger_page.total_elements,
        first=ledger_page.first,
        last=ledger_page.last,
        baseline=money(baseline),
    )
