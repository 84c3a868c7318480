from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class AmortizationRow:
    period: int  # 1-based
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal  # Remaining after this period, never below zero


@dataclass(frozen=True)
class LoanSummary:
    principal: Decimal
    payment: Decimal
    periods: int
    total_paid: Decimal
    total_interest: Decimal  # Overpay

    @property
    def overpay_pct(self) -> Decimal:
        if self.principal == 0:
            return Decimal("0")
        return self.total_interest / self.principal * 100


class GrowthMode(Enum):
    COMPOUND = "compound"
    SIMPLE = "simple"


@dataclass(frozen=True)
class YearlyProjection:
    year: int  # 1-based
    ending_balance: Decimal
    total_contributed: Decimal
    profit: Decimal


@dataclass(frozen=True)
class GrowthSummary:
    final_balance: Decimal
    total_contributed: Decimal
    profit: Decimal
    profit_percent: Decimal
    yearly: list[YearlyProjection] = field(default_factory=list)


@dataclass(frozen=True)
class BalanceTotals:
    """Manual balance sheet totals."""
    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")
    net: Decimal = Decimal("0")
    total: Decimal = Decimal("0")  # Starting balance + net


@dataclass(frozen=True)
class LedgerTotals:
    """Totals over one ledger page. Transfers are excluded."""
    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")
    balance: Decimal = Decimal("0")
