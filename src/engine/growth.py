"""Investment growth projection: monthly contributions under compound or simple interest.

Pure functions. No I/O. No rounding inside the simulation.
"""

from collections.abc import Iterator
from decimal import Decimal

from src.engine.annuity import PERIODS_PER_YEAR, monthly_rate
from src.models.calculator import GrowthMode, GrowthSummary, YearlyProjection

# Typical annual returns offered as one-click presets (% per year)
RATE_PRESETS: dict[str, Decimal] = {
    "bank_deposit": Decimal("12"),
    "stocks_sp500": Decimal("15"),
    "real_estate": Decimal("10"),
    "gold": Decimal("8"),
    "crypto": Decimal("40"),  # High risk
}


def _step(balance: Decimal, contribution: Decimal, rate: Decimal, mode: GrowthMode) -> Decimal:
    if mode is GrowthMode.COMPOUND:
        # Contribution lands before the month's interest accrues
        return (balance + contribution) * (1 + rate)
    # Interest on the opening balance only
    return balance + contribution + balance * rate


def project_growth(
    initial: Decimal,
    monthly: Decimal,
    annual_rate: Decimal,
    years: int,
    mode: GrowthMode = GrowthMode.COMPOUND,
) -> Iterator[YearlyProjection]:
    """Year-end snapshots of balance vs. amount contributed.

    Simulates years * 12 months starting from `initial`. Yields one
    YearlyProjection per completed year (year 1 first).
    """
    r = monthly_rate(annual_rate)
    balance = initial

    for year in range(1, years + 1):
        for _ in range(PERIODS_PER_YEAR):
            balance = _step(balance, monthly, r, mode)
        contributed = initial + monthly * PERIODS_PER_YEAR * year
        yield YearlyProjection(
            year=year,
            ending_balance=balance,
            total_contributed=contributed,
            profit=balance - contributed,
        )


def growth_summary(
    initial: Decimal,
    monthly: Decimal,
    annual_rate: Decimal,
    years: int,
    mode: GrowthMode = GrowthMode.COMPOUND,
) -> GrowthSummary:
    """Final balance, profit and profit percent, with the yearly table."""
    yearly = list(project_growth(initial, monthly, annual_rate, years, mode))
    final = yearly[-1].ending_balance if yearly else initial
    contributed = initial + monthly * years * PERIODS_PER_YEAR
    profit = final - contributed
    profit_pct = profit / contributed * 100 if contributed != 0 else Decimal("0")

    return GrowthSummary(
        final_balance=final,
        total_contributed=contributed,
        profit=profit,
        profit_percent=profit_pct,
        yearly=yearly,
    )
