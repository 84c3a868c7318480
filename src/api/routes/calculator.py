"""Calculator routes: mortgage, consumer credit, investment and balance sheet."""

from fastapi import APIRouter, HTTPException

from src.api.formatting import balance_row, money, pct
from src.api.schemas import (
    AmortizationRowResponse,
    BalanceSheetRequest,
    BalanceSheetResponse,
    CreditRequest,
    CreditResponse,
    InvestmentRequest,
    InvestmentResponse,
    MortgageRequest,
    MortgageResponse,
    RatePresetResponse,
    YearlyDebtResponse,
    YearlyProjectionResponse,
)
from src.calculator.balance_sheet import BalanceSheet
from src.calculator.investment import InvestmentCalculator
from src.calculator.loans import CreditCalculator, MortgageCalculator
from src.engine.growth import RATE_PRESETS
from src.exceptions import InvalidDomainInput

router = APIRouter(prefix="/api/v1/calculator", tags=["calculator"])


def _invalid(e: InvalidDomainInput) -> HTTPException:
    return HTTPException(status_code=422, detail={"field": e.field, "message": e.reason})


@router.post("/mortgage", response_model=MortgageResponse)
async def mortgage(req: MortgageRequest):
    try:
        calc = MortgageCalculator(req.price, req.down_payment, req.annual_rate, req.years)
    except InvalidDomainInput as e:
        raise _invalid(e) from e

    s = calc.summary
    return MortgageResponse(
        principal=money(calc.principal),
        down_payment_pct=pct(calc.down_payment_pct),
        monthly_payment=money(s.payment),
        total_paid=money(s.total_paid),
        overpay=money(s.total_interest),
        yearly=[
            YearlyDebtResponse(
                year=int(y["year"]),
                principal=money(y["principal"]),
                interest=money(y["interest"]),
                debt_service=money(y["debt_service"]),
                ending_balance=money(y["ending_balance"]),
            )
            for y in calc.yearly
        ],
    )


@router.post("/credit", response_model=CreditResponse)
async def credit(req: CreditRequest):
    try:
        calc = CreditCalculator(req.amount, req.annual_rate, req.months)
    except InvalidDomainInput as e:
        raise _invalid(e) from e

    s = calc.summary
    return CreditResponse(
        monthly_payment=money(s.payment),
        total_paid=money(s.total_paid),
        overpay=money(s.total_interest),
        schedule=[
            AmortizationRowResponse(
                period=row.period,
                payment=money(row.payment),
                principal=money(row.principal),
                interest=money(row.interest),
                balance=money(row.balance),
            )
            for row in calc.schedule
        ],
    )


@router.post("/investment", response_model=InvestmentResponse)
async def investment(req: InvestmentRequest):
    try:
        calc = InvestmentCalculator(req.initial, req.monthly, req.annual_rate, req.years, req.mode)
        if req.preset:
            calc.apply_preset(req.preset)
    except InvalidDomainInput as e:
        raise _invalid(e) from e

    s = calc.summary
    return InvestmentResponse(
        final_balance=money(s.final_balance),
        total_contributed=money(s.total_contributed),
        profit=money(s.profit),
        profit_pct=pct(s.profit_percent),
        preset=calc.active_preset,
        yearly=[
            YearlyProjectionResponse(
                year=y.year,
                ending_balance=money(y.ending_balance),
                total_contributed=money(y.total_contributed),
                profit=money(y.profit),
            )
            for y in s.yearly
        ],
    )


@router.get("/presets", response_model=list[RatePresetResponse])
async def presets():
    return [RatePresetResponse(name=name, annual_rate=rate) for name, rate in RATE_PRESETS.items()]


@router.post("/balance-sheet", response_model=BalanceSheetResponse)
async def balance_sheet(req: BalanceSheetRequest):
    try:
        sheet = BalanceSheet(starting_balance=req.starting_balance)
        for row in req.rows:
            sheet.add_row(row.label, row.amount, row.kind, row.category)
    except InvalidDomainInput as e:
        raise _invalid(e) from e

    t = sheet.totals
    return BalanceSheetResponse(
        rows=[balance_row(v) for v in sheet.views],
        income=money(t.income),
        expense=money(t.expense),
        net=money(t.net),
        total=money(t.total),
    )
