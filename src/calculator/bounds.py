"""Input ranges for the calculator screens.

Values outside these ranges never reach the engine.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from src.exceptions import InvalidDomainInput


def to_decimal(field: str, value: object) -> Decimal:
    """Coerce a user-supplied number to a finite Decimal."""
    if isinstance(value, bool):
        raise InvalidDomainInput(field, value, "not a number")
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError) as e:
        raise InvalidDomainInput(field, value, "not a number") from e
    if not result.is_finite():
        raise InvalidDomainInput(field, value, "must be finite")
    return result


@dataclass(frozen=True)
class InputBounds:
    name: str
    minimum: Decimal
    maximum: Decimal
    step: Decimal
    integral: bool = False

    def check(self, value: object, maximum: Decimal | None = None) -> Decimal:
        """Validate `value`; `maximum` overrides the static upper bound."""
        result = to_decimal(self.name, value)
        upper = self.maximum if maximum is None else min(self.maximum, maximum)
        if result < self.minimum or result > upper:
            raise InvalidDomainInput(self.name, value, f"must be between {self.minimum} and {upper}")
        if self.integral and result != result.to_integral_value():
            raise InvalidDomainInput(self.name, value, "must be a whole number")
        return result


# Mortgage
MORTGAGE_PRICE = InputBounds("price", Decimal("0"), Decimal("50000000"), Decimal("50000"))
MORTGAGE_DOWN_PAYMENT = InputBounds("down_payment", Decimal("0"), Decimal("50000000"), Decimal("50000"))
MORTGAGE_RATE = InputBounds("annual_rate", Decimal("1"), Decimal("30"), Decimal("0.1"))
MORTGAGE_YEARS = InputBounds("years", Decimal("1"), Decimal("30"), Decimal("1"), integral=True)

# Consumer credit
CREDIT_AMOUNT = InputBounds("amount", Decimal("10000"), Decimal("5000000"), Decimal("10000"))
CREDIT_RATE = InputBounds("annual_rate", Decimal("1"), Decimal("50"), Decimal("0.5"))
CREDIT_MONTHS = InputBounds("months", Decimal("1"), Decimal("84"), Decimal("1"), integral=True)

# Investment
INVEST_INITIAL = InputBounds("initial", Decimal("0"), Decimal("10000000"), Decimal("10000"))
INVEST_MONTHLY = InputBounds("monthly", Decimal("0"), Decimal("500000"), Decimal("1000"))
INVEST_RATE = InputBounds("annual_rate", Decimal("1"), Decimal("100"), Decimal("0.5"))
INVEST_YEARS = InputBounds("years", Decimal("1"), Decimal("40"), Decimal("1"), integral=True)
