"""Rounding for values leaving the API. The engine itself never rounds."""

from decimal import Decimal, ROUND_HALF_UP

from src.api.schemas import BalanceRowResponse
from src.models.cashflow import RunningBalanceView

TWO_PLACES = Decimal("0.01")


def money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def pct(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def balance_row(view: RunningBalanceView) -> BalanceRowResponse:
    e = view.entry
    return BalanceRowResponse(
        id=e.id,
        label=e.label,
        kind=e.kind,
        amount=money(e.amount),
        category=e.category,
        occurred_at=e.occurred_at,
        running_balance=money(view.running_balance),
    )
