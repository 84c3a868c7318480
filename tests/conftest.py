"""Shared fixtures.

Ledger fixture: one page of the external feed, newest first, mixing income,
expense and a transfer between the user's own accounts.
"""

from decimal import Decimal

import pytest

from src.models.cashflow import CashFlowEntry, EntryKind


@pytest.fixture
def monthly_budget() -> list[CashFlowEntry]:
    """Salary in, rent and groceries out (oldest first)."""
    return [
        CashFlowEntry(1, "Salary", EntryKind.INCOME, Decimal("80000"), "Work"),
        CashFlowEntry(2, "Apartment rent", EntryKind.EXPENSE, Decimal("25000"), "Housing"),
        CashFlowEntry(3, "Groceries", EntryKind.EXPENSE, Decimal("15000"), "Food"),
    ]


@pytest.fixture
def ledger_page_json() -> dict:
    """Page 0 of the transaction feed as served by the ledger API."""
    return {
        "content": [
            {
                "id": "t4",
                "type": "EXPENSE",
                "amount": 1200.5,
                "currency": "RUB",
                "occurredAt": "2025-03-04T18:30:00Z",
                "category": {"id": "c2", "name": "Cafe", "type": "EXPENSE", "icon": None, "color": None},
                "note": "Dinner",
            },
            {
                "id": "t3",
                "type": "TRANSFER",
                "amount": 5000,
                "currency": "RUB",
                "occurredAt": "2025-03-03T09:00:00Z",
                "category": None,
                "note": "To savings",
            },
            {
                "id": "t2",
                "type": "EXPENSE",
                "amount": 25000,
                "currency": "RUB",
                "occurredAt": "2025-03-02T10:00:00Z",
                "category": {"id": "c1", "name": "Housing", "type": "EXPENSE", "icon": None, "color": None},
                "note": None,
            },
            {
                "id": "t1",
                "type": "INCOME",
                "amount": 80000,
                "currency": "RUB",
                "occurredAt": "2025-03-01T08:00:00Z",
                "category": {"id": "c0", "name": "Work", "type": "INCOME", "icon": None, "color": None},
                "note": "Salary",
            },
        ],
        "totalElements": 24,
        "totalPages": 6,
        "number": 0,
        "size": 4,
        "first": True,
        "last": False,
    }
