from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum


class EntryKind(Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"
    TRANSFER = "TRANSFER"  # Ledger feed only; never on the manual balance sheet


class Direction(Enum):
    FORWARD = "forward"  # Oldest first
    REVERSE = "reverse"  # Newest first (paginated ledger)


@dataclass(frozen=True)
class CashFlowEntry:
    id: int | str
    label: str
    kind: EntryKind
    amount: Decimal
    category: str = ""
    occurred_at: datetime | None = None
    currency: str | None = None


@dataclass(frozen=True)
class RunningBalanceView:
    entry: CashFlowEntry
    running_balance: Decimal


@dataclass(frozen=True)
class LedgerPage:
    """One page of the external transaction feed, in the order it was served."""
    entries: list[CashFlowEntry]
    total_elements: int = 0
    total_pages: int = 0
    number: int = 0
    size: int = 0
    first: bool = True
    last: bool = True
