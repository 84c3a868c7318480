"""Mortgage and consumer-credit calculator screens.

Each instance owns its inputs; every change recomputes synchronously.
"""

import logging
from decimal import Decimal

from src.calculator.bounds import (
    CREDIT_AMOUNT,
    CREDIT_MONTHS,
    CREDIT_RATE,
    MORTGAGE_DOWN_PAYMENT,
    MORTGAGE_PRICE,
    MORTGAGE_RATE,
    MORTGAGE_YEARS,
)
from src.engine.debt import amortization_schedule, loan_summary, yearly_debt_summary
from src.models.calculator import AmortizationRow, LoanSummary

logger = logging.getLogger(__name__)


def _warn_underpaying(rows: list[AmortizationRow]) -> None:
    for row in rows:
        if row.principal < 0:
            logger.warning(
                "Payment %s does not cover interest %s in period %d",
                row.payment, row.interest, row.period,
            )
            return


class MortgageCalculator:
    def __init__(
        self,
        price: object = Decimal("5000000"),
        down_payment: object = Decimal("1000000"),
        annual_rate: object = Decimal("12"),
        years: object = 20,
    ):
        self._price = MORTGAGE_PRICE.check(price)
        self._down_payment = MORTGAGE_DOWN_PAYMENT.check(down_payment, maximum=self._price)
        self._annual_rate = MORTGAGE_RATE.check(annual_rate)
        self._years = int(MORTGAGE_YEARS.check(years))
        self._recompute()

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def down_payment(self) -> Decimal:
        return self._down_payment

    @property
    def annual_rate(self) -> Decimal:
        return self._annual_rate

    @property
    def years(self) -> int:
        return self._years

    @property
    def months(self) -> int:
        return self._years * 12

    @property
    def principal(self) -> Decimal:
        return self._price - self._down_payment

    @property
    def down_payment_pct(self) -> Decimal:
        if self._price == 0:
            return Decimal("0")
        return self._down_payment / self._price * 100

    def set_price(self, value: object) -> None:
        price = MORTGAGE_PRICE.check(value)
        # The down payment slider tops out at the price
        self._down_payment = min(self._down_payment, price)
        self._price = price
        self._recompute()

    def set_down_payment(self, value: object) -> None:
        self._down_payment = MORTGAGE_DOWN_PAYMENT.check(value, maximum=self._price)
        self._recompute()

    def set_annual_rate(self, value: object) -> None:
        self._annual_rate = MORTGAGE_RATE.check(value)
        self._recompute()

    def set_years(self, value: object) -> None:
        self._years = int(MORTGAGE_YEARS.check(value))
        self._recompute()

    def _recompute(self) -> None:
        self.summary: LoanSummary = loan_summary(self.principal, self._annual_rate, self.months)
        self.schedule: list[AmortizationRow] = list(
            amortization_schedule(self.principal, self._annual_rate, self.months)
        )
        self.yearly = yearly_debt_summary(self.schedule)
        _warn_underpaying(self.schedule)
        logger.debug(
            "Mortgage recomputed: principal=%s rate=%s months=%d payment=%s",
            self.principal, self._annual_rate, self.months, self.summary.payment,
        )


class CreditCalculator:
    def __init__(
        self,
        amount: object = Decimal("500000"),
        annual_rate: object = Decimal("18"),
        months: object = 24,
    ):
        self._amount = CREDIT_AMOUNT.check(amount)
        self._annual_rate = CREDIT_RATE.check(annual_rate)
        self._months = int(CREDIT_MONTHS.check(months))
        self._recompute()

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def annual_rate(self) -> Decimal:
        return self._annual_rate

    @property
    def months(self) -> int:
        return self._months

    def set_amount(self, value: object) -> None:
        self._amount = CREDIT_AMOUNT.check(value)
        self._recompute()

    def set_annual_rate(self, value: object) -> None:
        self._annual_rate = CREDIT_RATE.check(value)
        self._recompute()

    def set_months(self, value: object) -> None:
        self._months = int(CREDIT_MONTHS.check(value))
        self._recompute()

    def preview(self, n: int = 3) -> list[AmortizationRow]:
        """First `n` rows of the schedule."""
        return self.schedule[:n]

    def _recompute(self) -> None:
        self.summary: LoanSummary = loan_summary(self._amount, self._annual_rate, self._months)
        self.schedule: list[AmortizationRow] = list(
            amortization_schedule(self._amount, self._annual_rate, self._months)
        )
        _warn_underpaying(self.schedule)
        logger.debug(
            "Credit recomputed: amount=%s rate=%s months=%d payment=%s",
            self._amount, self._annual_rate, self._months, self.summary.payment,
        )
