"""Data transfer objects for loan quote operations."""

from dataclasses import dataclass
from decimal import Decimal
from typing import List
from uuid import UUID

MIN_AMOUNT = Decimal("1")
MAX_AMOUNT = Decimal("10000")
MIN_TERM = 1
MAX_TERM = 12


@dataclass(frozen=True)
class LoanQuoteRequestDTO:
    """Input data for requesting a loan quote."""

    amount: Decimal
    merchant_id: UUID
    term: int

    def validate(self) -> List[str]:
        errors = []

        if not MIN_AMOUNT <= self.amount <= MAX_AMOUNT:
            errors.append(f"amount must be between {MIN_AMOUNT} and {MAX_AMOUNT}")

        if self.amount.as_tuple().exponent < -2:
            errors.append("amount cannot have more than 2 decimal places")

        if not MIN_TERM <= self.term <= MAX_TERM:
            errors.append(f"term must be between {MIN_TERM} and {MAX_TERM} months")

        return errors


@dataclass(frozen=True)
class ScheduledPaymentDTO:
    """Single payment within a quote response."""

    payment_number: int
    amount: float
    due_date: str


@dataclass(frozen=True)
class LoanQuoteResponse:
    """Response data for a loan quote."""

    amount: float
    guarantee: float
    loan_amount: float
    interest_rate: float
    total_repayment: float
    term: int
    schedule: List[ScheduledPaymentDTO]

    @classmethod
    def from_entity(cls, quote) -> "LoanQuoteResponse":
        return cls(
            amount=float(quote.amount),
            guarantee=float(quote.guarantee),
            loan_amount=float(quote.loan_amount),
            interest_rate=float(quote.interest_rate),
            total_repayment=float(quote.total_repayment),
            term=quote.term,
            schedule=[
                ScheduledPaymentDTO(
                    payment_number=payment.payment_number,
                    amount=float(payment.amount),
                    due_date=payment.due_date.isoformat(),
                )
                for payment in quote.schedule
            ],
        )
