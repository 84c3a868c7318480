"""Exception types shared by the calculators, the ledger client and the API."""


class FinanceError(Exception):
    """Base exception for this application."""


class InvalidDomainInput(FinanceError):
    """A calculator input is outside the range the math is defined for."""

    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}={value!r}: {reason}")


class LedgerAPIError(FinanceError):
    """The external transaction ledger returned an error or bad data."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_body: dict | None = None,
    ):
        self.status_code = status_code
        self.error_body = error_body
        super().__init__(message)
