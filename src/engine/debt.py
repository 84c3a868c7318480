"""Amortization schedule computation for mortgages and consumer credit.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from collections.abc import Iterable, Iterator
from decimal import Decimal

from src.engine.annuity import decompose_period, monthly_rate, periodic_payment
from src.models.calculator import AmortizationRow, LoanSummary


def amortization_schedule(
    principal: Decimal,
    annual_rate: Decimal,
    periods: int,
) -> Iterator[AmortizationRow]:
    """Yield one row per month of a fixed-payment loan.

    Args:
        principal: Loan amount
        annual_rate: Annual nominal rate in percent (e.g. 12 for 12%)
        periods: Loan term in months, >= 1

    Each call returns a fresh generator; the schedule is a pure function of
    its three inputs.
    """
    r = monthly_rate(annual_rate)
    pmt = periodic_payment(r, periods, principal)
    balance = principal

    for period in range(1, periods + 1):
        interest, principal_paid = decompose_period(r, balance, pmt)
        balance -= principal_paid
        yield AmortizationRow(
            period=period,
            payment=pmt,
            principal=principal_paid,
            interest=interest,
            # Absorbs drift on the final period
            balance=max(Decimal("0"), balance),
        )


def loan_summary(principal: Decimal, annual_rate: Decimal, periods: int) -> LoanSummary:
    """Payment, total paid and total interest (overpay) for a loan."""
    pmt = periodic_payment(monthly_rate(annual_rate), periods, principal)
    total_paid = pmt * periods
    return LoanSummary(
        principal=principal,
        payment=pmt,
        periods=periods,
        total_paid=total_paid,
        total_interest=total_paid - principal,
    )


def yearly_debt_summary(rows: Iterable[AmortizationRow]) -> list[dict[str, Decimal]]:
    """Aggregate amortization rows by year.

    Returns list of dicts with keys: year, principal, interest, debt_service, ending_balance.
    A trailing partial year gets its own entry.
    """
    yearly: list[dict[str, Decimal]] = []
    year_principal = Decimal("0")
    year_interest = Decimal("0")
    year_debt_service = Decimal("0")
    last: AmortizationRow | None = None

    def close_year(row: AmortizationRow) -> None:
        yearly.append({
            "year": Decimal((row.period - 1) // 12 + 1),
            "principal": year_principal,
            "interest": year_interest,
            "debt_service": year_debt_service,
            "ending_balance": row.balance,
        })

    for row in rows:
        year_principal += row.principal
        year_interest += row.interest
        year_debt_service += row.payment
        last = row

        if row.period % 12 == 0:
            close_year(row)
            year_principal = Decimal("0")
            year_interest = Decimal("0")
            year_debt_service = Decimal("0")

    if last is not None and last.period % 12 != 0:
        close_year(last)

    return yearly
