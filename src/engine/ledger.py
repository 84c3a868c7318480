"""Running-balance reconciliation for the balance sheet and the transaction feed.

Pure functions: entries in, annotated entries out. No I/O.
"""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from src.models.calculator import BalanceTotals, LedgerTotals
from src.models.cashflow import CashFlowEntry, Direction, EntryKind, RunningBalanceView


def signed_effect(entry: CashFlowEntry) -> Decimal:
    """Net effect of one entry on the running balance.

    Transfers move money between the user's own accounts and net to zero.
    """
    if entry.kind is EntryKind.INCOME:
        return entry.amount
    if entry.kind is EntryKind.EXPENSE:
        return -entry.amount
    return Decimal("0")


def _forward(starting_balance: Decimal, entries: Iterable[CashFlowEntry]) -> list[RunningBalanceView]:
    running = starting_balance
    views: list[RunningBalanceView] = []
    for entry in entries:
        running += signed_effect(entry)
        views.append(RunningBalanceView(entry=entry, running_balance=running))
    return views


def reconcile(
    starting_balance: Decimal,
    entries: Sequence[CashFlowEntry],
    direction: Direction = Direction.FORWARD,
) -> list[RunningBalanceView]:
    """Annotate each entry with the balance after applying it.

    FORWARD: entries are oldest first and are walked in the given order.
    REVERSE: entries are newest first (e.g. one page of the ledger feed).
    They are walked oldest to newest and the result is returned newest
    first again, so each row still shows the balance right after it
    happened.

    For a paginated feed the starting balance is whatever baseline the
    caller has; without one, pass 0 and the balances are page-local.
    """
    if direction is Direction.FORWARD:
        return _forward(starting_balance, entries)
    views = _forward(starting_balance, reversed(entries))
    views.reverse()
    return views


def balance_totals(starting_balance: Decimal, entries: Iterable[CashFlowEntry]) -> BalanceTotals:
    """Income, expense, net and closing total for the manual balance sheet."""
    income = Decimal("0")
    expense = Decimal("0")
    for entry in entries:
        if entry.kind is EntryKind.INCOME:
            income += entry.amount
        elif entry.kind is EntryKind.EXPENSE:
            expense += entry.amount
    net = income - expense
    return BalanceTotals(income=income, expense=expense, net=net, total=starting_balance + net)


def ledger_totals(entries: Iterable[CashFlowEntry]) -> LedgerTotals:
    """Income, expense and balance over one ledger page."""
    totals = balance_totals(Decimal("0"), entries)
    return LedgerTotals(income=totals.income, expense=totals.expense, balance=totals.net)
