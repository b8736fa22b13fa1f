"""
Repayment Schedule generation.

Every payment except the last is the total divided by the term, truncated
to the cent. The last payment absorbs the rounding remainder so the
schedule always sums to the total exactly.
"""

import calendar
from datetime import date
from decimal import Decimal
from typing import List, Optional

from src.domain.entities import ScheduledPayment

from .money import floor2


def add_months(start: date, months: int) -> date:
    """
    Advance a date by whole calendar months.

    The day is clamped to the last day of the target month, so Jan 31
    plus one month is Feb 28 (or 29).
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def generate_schedule(
    total_repayment: Decimal,
    term: int,
    start: Optional[date] = None,
) -> List[ScheduledPayment]:
    """
    Build a monthly repayment schedule.

    Args:
        total_repayment: Total amount to be repaid (already rounded to cents)
        term: Number of monthly payments (>= 1)
        start: Date the schedule counts from (defaults to today)

    Returns:
        ``term`` payments numbered 1..term, due one month apart
    """
    if term < 1:
        raise ValueError(f"term must be at least 1, got {term}")

    start = start or date.today()
    monthly_payment = floor2(total_repayment / term)

    schedule = []
    allocated = Decimal("0")

    for number in range(1, term + 1):
        is_last = number == term
        amount = total_repayment - allocated if is_last else monthly_payment
        allocated += amount

        schedule.append(
            ScheduledPayment(
                payment_number=number,
                amount=amount,
                due_date=add_months(start, number),
            )
        )

    return schedule
