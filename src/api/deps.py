"""FastAPI dependency injection."""

import functools

from fastapi import Header

from src.calculator.ledger_feed import LedgerFeed
from src.config import settings
from src.data.ledger_client import LedgerClient
from src.data.preferences import PreferenceStore


@functools.lru_cache
def get_preference_store() -> PreferenceStore:
    return PreferenceStore(settings.preferences_db_path)


def get_ledger_feed(authorization: str | None = Header(None)) -> LedgerFeed:
    """Ledger feed using the caller's bearer token, or the configured one."""
    token = None
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization[7:]
    return LedgerFeed(LedgerClient(token=token))
