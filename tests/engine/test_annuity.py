from decimal import Decimal

from src.engine.annuity import decompose_period, monthly_rate, periodic_payment


def _close(a: Decimal, b: Decimal, rel: Decimal = Decimal("0.001")) -> bool:
    return abs(a - b) <= abs(b) * rel


class TestMonthlyRate:
    def test_percent_to_monthly_decimal(self):
        assert monthly_rate(Decimal("12")) == Decimal("0.01")
        assert monthly_rate(Decimal("18")) == Decimal("0.015")

    def test_zero(self):
        assert monthly_rate(Decimal("0")) == 0


class TestPeriodicPayment:
    def test_mortgage_example(self):
        """4,000,000 at 12% for 20 years."""
        pmt = periodic_payment(Decimal("0.01"), 240, Decimal("4000000"))
        assert _close(pmt, Decimal("44037.51"))

    def test_credit_example(self):
        """500,000 at 18% for 24 months."""
        pmt = periodic_payment(Decimal("0.015"), 24, Decimal("500000"))
        assert _close(pmt, Decimal("24963.83"))

    def test_zero_rate_is_straight_line(self):
        principal = Decimal("4000000")
        assert periodic_payment(Decimal("0"), 240, principal) == principal / 240

    def test_zero_rate_uneven_division(self):
        principal = Decimal("1000")
        assert periodic_payment(Decimal("0"), 3, principal) == principal / 3

    def test_zero_principal(self):
        assert periodic_payment(Decimal("0.01"), 12, Decimal("0")) == 0

    def test_single_period_repays_principal_plus_interest(self):
        pmt = periodic_payment(Decimal("0.01"), 1, Decimal("1000"))
        assert abs(pmt - Decimal("1010")) < Decimal("1e-18")

    def test_total_covers_principal(self):
        principal = Decimal("250000")
        pmt = periodic_payment(Decimal("0.005"), 60, principal)
        assert pmt * 60 > principal


class TestDecomposePeriod:
    def test_first_credit_month(self):
        pmt = periodic_payment(Decimal("0.015"), 24, Decimal("500000"))
        interest, principal = decompose_period(Decimal("0.015"), Decimal("500000"), pmt)
        assert interest == Decimal("7500")
        assert principal == pmt - Decimal("7500")
        assert _close(principal, Decimal("17463.83"))

    def test_payment_below_interest_gives_negative_principal(self):
        interest, principal = decompose_period(Decimal("0.01"), Decimal("1000"), Decimal("5"))
        assert interest == Decimal("10")
        assert principal == Decimal("-5")

    def test_zero_rate(self):
        interest, principal = decompose_period(Decimal("0"), Decimal("1000"), Decimal("100"))
        assert interest == 0
        assert principal == Decimal("100")
