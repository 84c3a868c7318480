"""Manual balance sheet: editable income/expense rows with a running balance.

Rows live in memory only. Edits go through `apply_update`, which validates
before producing the new row set, so an invalid row never reaches the
reconciler.
"""

import logging
from dataclasses import dataclass, replace
from decimal import Decimal

from src.calculator.bounds import to_decimal
from src.engine.ledger import balance_totals, reconcile
from src.exceptions import InvalidDomainInput
from src.models.calculator import BalanceTotals
from src.models.cashflow import CashFlowEntry, Direction, EntryKind, RunningBalanceView

logger = logging.getLogger(__name__)

ROW_KINDS = (EntryKind.INCOME, EntryKind.EXPENSE)


@dataclass(frozen=True)
class SetLabel:
    row_id: int
    label: str


@dataclass(frozen=True)
class SetAmount:
    row_id: int
    amount: Decimal | str | int


@dataclass(frozen=True)
class SetKind:
    row_id: int
    kind: EntryKind | str


@dataclass(frozen=True)
class SetCategory:
    row_id: int
    category: str


RowUpdate = SetLabel | SetAmount | SetKind | SetCategory


def _amount(value: object) -> Decimal:
    amount = to_decimal("amount", value)
    if amount < 0:
        raise InvalidDomainInput("amount", value, "must not be negative")
    return amount


def _kind(value: EntryKind | str) -> EntryKind:
    try:
        kind = value if isinstance(value, EntryKind) else EntryKind(str(value).upper())
    except ValueError as e:
        raise InvalidDomainInput("kind", value, "must be INCOME or EXPENSE") from e
    if kind not in ROW_KINDS:
        raise InvalidDomainInput("kind", value, "must be INCOME or EXPENSE")
    return kind


def apply_update(rows: tuple[CashFlowEntry, ...], update: RowUpdate) -> tuple[CashFlowEntry, ...]:
    """Return a new row set with `update` applied to one row.

    Raises:
        InvalidDomainInput: the new value would make the row invalid
        KeyError: no row has `update.row_id`
    """
    if isinstance(update, SetLabel):
        changes = {"label": update.label}
    elif isinstance(update, SetAmount):
        changes = {"amount": _amount(update.amount)}
    elif isinstance(update, SetKind):
        changes = {"kind": _kind(update.kind)}
    elif isinstance(update, SetCategory):
        changes = {"category": update.category}
    else:
        raise TypeError(f"Unknown row update: {update!r}")

    if not any(r.id == update.row_id for r in rows):
        raise KeyError(update.row_id)
    return tuple(replace(r, **changes) if r.id == update.row_id else r for r in rows)


class BalanceSheet:
    def __init__(
        self,
        starting_balance: object = Decimal("0"),
        rows: tuple[CashFlowEntry, ...] | list[CashFlowEntry] = (),
    ):
        self._starting_balance = to_decimal("starting_balance", starting_balance)
        self._rows: tuple[CashFlowEntry, ...] = tuple(
            replace(row, kind=_kind(row.kind), amount=_amount(row.amount)) for row in rows
        )
        self._recompute()

    @classmethod
    def with_defaults(cls) -> "BalanceSheet":
        """A sheet seeded with a typical monthly budget."""
        return cls(rows=(
            CashFlowEntry(1, "Salary", EntryKind.INCOME, Decimal("80000"), "Work"),
            CashFlowEntry(2, "Apartment rent", EntryKind.EXPENSE, Decimal("25000"), "Housing"),
            CashFlowEntry(3, "Groceries", EntryKind.EXPENSE, Decimal("15000"), "Food"),
            CashFlowEntry(4, "Transport", EntryKind.EXPENSE, Decimal("5000"), "Transport"),
        ))

    @property
    def starting_balance(self) -> Decimal:
        return self._starting_balance

    @property
    def rows(self) -> tuple[CashFlowEntry, ...]:
        return self._rows

    def set_starting_balance(self, value: object) -> None:
        self._starting_balance = to_decimal("starting_balance", value)
        self._recompute()

    def add_row(
        self,
        label: str,
        amount: object,
        kind: EntryKind | str = EntryKind.EXPENSE,
        category: str = "",
    ) -> CashFlowEntry:
        if not label:
            raise InvalidDomainInput("label", label, "is required")
        if amount is None or amount == "":
            raise InvalidDomainInput("amount", amount, "is required")
        row = CashFlowEntry(
            id=max((r.id for r in self._rows), default=0) + 1,
            label=label,
            kind=_kind(kind),
            amount=_amount(amount),
            category=category,
        )
        self._rows = self._rows + (row,)
        self._recompute()
        return row

    def update(self, update: RowUpdate) -> None:
        self._rows = apply_update(self._rows, update)
        self._recompute()

    def delete_row(self, row_id: int) -> None:
        """Raises KeyError for an unknown row id, like `apply_update`."""
        if not any(r.id == row_id for r in self._rows):
            raise KeyError(row_id)
        self._rows = tuple(r for r in self._rows if r.id != row_id)
        self._recompute()

    def _recompute(self) -> None:
        self.views: list[RunningBalanceView] = reconcile(
            self._starting_balance, self._rows, Direction.FORWARD
        )
        self.totals: BalanceTotals = balance_totals(self._starting_balance, self._rows)
        logger.debug("Balance sheet recomputed: %d rows, total=%s", len(self._rows), self.totals.total)
