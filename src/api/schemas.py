"""Pydantic schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from src.models.calculator import GrowthMode
from src.models.cashflow import EntryKind
from src.models.preferences import Theme


# ---- Request schemas ----

class MortgageRequest(BaseModel):
    price: Decimal = Decimal("5000000")
    down_payment: Decimal = Decimal("1000000")
    annual_rate: Decimal = Field(Decimal("12"), description="Annual rate in percent")
    years: int = 20


class CreditRequest(BaseModel):
    amount: Decimal = Decimal("500000")
    annual_rate: Decimal = Field(Decimal("18"), description="Annual rate in percent")
    months: int = 24


class InvestmentRequest(BaseModel):
    initial: Decimal = Decimal("100000")
    monthly: Decimal = Decimal("10000")
    annual_rate: Decimal = Field(Decimal("15"), description="Annual rate in percent")
    years: int = 10
    mode: GrowthMode = GrowthMode.COMPOUND
    preset: str | None = Field(None, description="Overrides annual_rate when set")


class BalanceRowRequest(BaseModel):
    label: str
    kind: EntryKind = EntryKind.EXPENSE
    amount: Decimal
    category: str = ""


class BalanceSheetRequest(BaseModel):
    starting_balance: Decimal = Decimal("0")
    rows: list[BalanceRowRequest] = Field(default_factory=list)


class PreferencesUpdate(BaseModel):
    locale: str | None = None
    theme: Theme | None = None
    default_currency: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None


# ---- Response schemas ----

class AmortizationRowResponse(BaseModel):
    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


class YearlyDebtResponse(BaseModel):
    year: int
    principal: Decimal
    interest: Decimal
    debt_service: Decimal
    ending_balance: Decimal


class MortgageResponse(BaseModel):
    principal: Decimal
    down_payment_pct: Decimal
    monthly_payment: Decimal
    total_paid: Decimal
    overpay: Decimal
    yearly: list[YearlyDebtResponse]


class CreditResponse(BaseModel):
    monthly_payment: Decimal
    total_paid: Decimal
    overpay: Decimal
    schedule: list[AmortizationRowResponse]


class YearlyProjectionResponse(BaseModel):
    year: int
    ending_balance: Decimal
    total_contributed: Decimal
    profit: Decimal


class InvestmentResponse(BaseModel):
    final_balance: Decimal
    total_contributed: Decimal
    profit: Decimal
    profit_pct: Decimal
    preset: str | None = None
    yearly: list[YearlyProjectionResponse]


class RatePresetResponse(BaseModel):
    name: str
    annual_rate: Decimal


class BalanceRowResponse(BaseModel):
    id: int | str
    label: str
    kind: EntryKind
    amount: Decimal
    category: str
    occurred_at: datetime | None = None
    running_balance: Decimal


class BalanceSheetResponse(BaseModel):
    rows: list[BalanceRowResponse]
    income: Decimal
    expense: Decimal
    net: Decimal
    total: Decimal


class LedgerPageResponse(BaseModel):
    rows: list[BalanceRowResponse]
    income: Decimal
    expense: Decimal
    balance: Decimal
    page: int
    total_pages: int
    total_elements: int
    first: bool
    last: bool
    baseline: Decimal


class PreferencesResponse(BaseModel):
    locale: str
    theme: Theme
    default_currency: str
    display_name: str
    avatar_url: str | None = None
