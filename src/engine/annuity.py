"""Annuity math: fixed periodic payment and per-period split.

Pure functions: Decimal in, Decimal out. No I/O, no rounding.
"""

from decimal import Decimal

PERIODS_PER_YEAR = 12


def monthly_rate(annual_rate: Decimal) -> Decimal:
    """Convert an annual nominal percentage (12 means 12%) to a monthly decimal rate."""
    return annual_rate / 100 / PERIODS_PER_YEAR


def periodic_payment(periodic_rate: Decimal, period_count: int, principal: Decimal) -> Decimal:
    """Fixed payment that amortizes `principal` over `period_count` periods.

    The caller guarantees period_count >= 1.
    """
    if periodic_rate == 0:
        # Straight-line: the annuity formula divides by zero here
        return principal / period_count
    if principal == 0:
        return Decimal("0")

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + periodic_rate) ** period_count
    return principal * periodic_rate * factor / (factor - 1)


def decompose_period(
    periodic_rate: Decimal, remaining_balance: Decimal, payment: Decimal
) -> tuple[Decimal, Decimal]:
    """Split one payment into (interest, principal).

    Principal comes out negative when the payment does not cover the
    interest due. That is a valid result, not an error.
    """
    interest = remaining_balance * periodic_rate
    return interest, payment - interest
