"""Loan quote exceptions."""

from decimal import Decimal

from .base import DomainException


class AmountExceedsCreditException(DomainException):
    """Raised when the purchase amount is above the borrower's tier limit."""

    def __init__(self, amount: Decimal, max_credit: Decimal):
        super().__init__(
            message=(
                f"Requested amount ${amount} exceeds your maximum credit limit "
                f"of ${max_credit}. Improve your reputation score to unlock "
                "higher limits."
            ),
            code="LOAN_AMOUNT_EXCEEDS_CREDIT",
        )
        self.amount = amount
        self.max_credit = max_credit


class InvalidLoanQuoteRequestException(DomainException):
    """Raised when a quote request is outside the accepted bounds."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_LOAN_QUOTE_REQUEST",
        )
