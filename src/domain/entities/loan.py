"""Loan quote entities. Quotes are computed per request and never stored."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import List


@dataclass(frozen=True)
class ScheduledPayment:
    """A single monthly installment in a quoted repayment schedule."""

    payment_number: int
    amount: Decimal
    due_date: date

    def to_dict(self) -> dict:
        return {
            "payment_number": self.payment_number,
            "amount": float(self.amount),
            "due_date": self.due_date.isoformat(),
        }


@dataclass(frozen=True)
class LoanQuote:
    """
    Full breakdown of a BNPL loan offer.

    The guarantee is paid upfront; the loan amount is financed at the
    borrower's tier rate and repaid through ``schedule``.
    """

    amount: Decimal
    guarantee: Decimal
    loan_amount: Decimal
    interest_rate: Decimal
    total_repayment: Decimal
    term: int
    schedule: List[ScheduledPayment] = field(default_factory=list)

    @property
    def interest(self) -> Decimal:
        return self.total_repayment - self.loan_amount

    def to_dict(self) -> dict:
        return {
            "amount": float(self.amount),
            "guarantee": float(self.guarantee),
            "loan_amount": float(self.loan_amount),
            "interest_rate": float(self.interest_rate),
            "total_repayment": float(self.total_repayment),
            "term": self.term,
            "schedule": [payment.to_dict() for payment in self.schedule],
        }
