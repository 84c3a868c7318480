"""Running balances for one page of the transaction ledger."""

import logging
from decimal import Decimal

from src.data.ledger_client import LedgerClient
from src.engine.ledger import ledger_totals, reconcile
from src.models.calculator import LedgerTotals
from src.models.cashflow import Direction, EntryKind, LedgerPage, RunningBalanceView

logger = logging.getLogger(__name__)


class LedgerFeed:
    def __init__(self, client: LedgerClient):
        self.client = client

    async def running_balance_page(
        self,
        page: int = 0,
        kind: EntryKind | None = None,
        query: str | None = None,
        baseline: Decimal = Decimal("0"),
    ) -> tuple[LedgerPage, list[RunningBalanceView], LedgerTotals]:
        """Fetch a page and annotate it with running balances, newest first.

        The feed only exposes one page at a time, so balances start from
        `baseline` at the oldest entry on the page. With the default of 0
        they are page-local and reset on every page; pass the closing
        balance of the next-older page to carry a real balance forward.
        """
        ledger_page = await self.client.get_transactions(page=page, kind=kind, query=query)
        views = reconcile(baseline, ledger_page.entries, Direction.REVERSE)
        logger.debug(
            "Reconciled ledger page %d (%d entries) from baseline %s",
            ledger_page.number, len(ledger_page.entries), baseline,
        )
        return ledger_page, views, ledger_totals(ledger_page.entries)
