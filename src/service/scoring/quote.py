"""
Loan Quote math for the BNPL pricing engine.

A purchase is split 20/80 into an upfront guarantee and a financed loan.
The loan accrues simple interest at the tier rate over the term.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from src.domain.entities import LoanQuote

from .money import round2
from .schedule import generate_schedule

GUARANTEE_RATIO = Decimal("0.20")
LOAN_RATIO = Decimal("0.80")
MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class LoanBreakdown:
    """Intermediate figures of a quote before scheduling."""

    guarantee: Decimal
    loan_amount: Decimal
    interest: Decimal
    total_repayment: Decimal


def calculate_breakdown(
    amount: Decimal,
    interest_rate: Decimal,
    term: int,
) -> LoanBreakdown:
    """
    Split a purchase and compute simple interest on the financed part.

    Rounding to cents happens after each multiplication; interest itself
    is left unrounded until it is added to the principal.

    Args:
        amount: Purchase amount in USD
        interest_rate: Annual interest rate in percent
        term: Loan term in months

    Returns:
        The guarantee, loan amount, raw interest and rounded total
    """
    guarantee = round2(amount * GUARANTEE_RATIO)
    loan_amount = round2(amount * LOAN_RATIO)
    interest = loan_amount * (interest_rate / 100) * (Decimal(term) / MONTHS_PER_YEAR)
    total_repayment = round2(loan_amount + interest)

    return LoanBreakdown(
        guarantee=guarantee,
        loan_amount=loan_amount,
        interest=interest,
        total_repayment=total_repayment,
    )


def build_quote(
    amount: Decimal,
    interest_rate: Decimal,
    term: int,
    start: Optional[date] = None,
) -> LoanQuote:
    """Compute the full quote, including its repayment schedule."""
    breakdown = calculate_breakdown(amount, interest_rate, term)

    return LoanQuote(
        amount=amount,
        guarantee=breakdown.guarantee,
        loan_amount=breakdown.loan_amount,
        interest_rate=interest_rate,
        total_repayment=breakdown.total_repayment,
        term=term,
        schedule=generate_schedule(breakdown.total_repayment, term, start),
    )
