"""Investment growth calculator screen."""

import logging
from decimal import Decimal

from src.calculator.bounds import INVEST_INITIAL, INVEST_MONTHLY, INVEST_RATE, INVEST_YEARS
from src.engine.growth import RATE_PRESETS, growth_summary
from src.exceptions import InvalidDomainInput
from src.models.calculator import GrowthMode, GrowthSummary

logger = logging.getLogger(__name__)


def _mode(value: GrowthMode | str) -> GrowthMode:
    if isinstance(value, GrowthMode):
        return value
    try:
        return GrowthMode(value)
    except ValueError as e:
        raise InvalidDomainInput("mode", value, "must be 'compound' or 'simple'") from e


class InvestmentCalculator:
    def __init__(
        self,
        initial: object = Decimal("100000"),
        monthly: object = Decimal("10000"),
        annual_rate: object = Decimal("15"),
        years: object = 10,
        mode: GrowthMode | str = GrowthMode.COMPOUND,
    ):
        self._initial = INVEST_INITIAL.check(initial)
        self._monthly = INVEST_MONTHLY.check(monthly)
        self._annual_rate = INVEST_RATE.check(annual_rate)
        self._years = int(INVEST_YEARS.check(years))
        self._mode = _mode(mode)
        self._recompute()

    @property
    def initial(self) -> Decimal:
        return self._initial

    @property
    def monthly(self) -> Decimal:
        return self._monthly

    @property
    def annual_rate(self) -> Decimal:
        return self._annual_rate

    @property
    def years(self) -> int:
        return self._years

    @property
    def mode(self) -> GrowthMode:
        return self._mode

    @property
    def active_preset(self) -> str | None:
        """Name of the preset matching the current rate, if any."""
        for name, rate in RATE_PRESETS.items():
            if rate == self._annual_rate:
                return name
        return None

    def set_initial(self, value: object) -> None:
        self._initial = INVEST_INITIAL.check(value)
        self._recompute()

    def set_monthly(self, value: object) -> None:
        self._monthly = INVEST_MONTHLY.check(value)
        self._recompute()

    def set_annual_rate(self, value: object) -> None:
        self._annual_rate = INVEST_RATE.check(value)
        self._recompute()

    def set_years(self, value: object) -> None:
        self._years = int(INVEST_YEARS.check(value))
        self._recompute()

    def set_mode(self, value: GrowthMode | str) -> None:
        self._mode = _mode(value)
        self._recompute()

    def apply_preset(self, name: str) -> None:
        if name not in RATE_PRESETS:
            raise InvalidDomainInput("preset", name, f"unknown preset, expected one of {sorted(RATE_PRESETS)}")
        self.set_annual_rate(RATE_PRESETS[name])

    def _recompute(self) -> None:
        self.summary: GrowthSummary = growth_summary(
            self._initial, self._monthly, self._annual_rate, self._years, self._mode
        )
        logger.debug(
            "Investment recomputed: mode=%s years=%d final=%s",
            self._mode.value, self._years, self.summary.final_balance,
        )
