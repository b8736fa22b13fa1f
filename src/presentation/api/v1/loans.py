"""Loan quote API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.application.dto import LoanQuoteRequestDTO
from src.application.services import LoanService
from src.core.dependencies import get_current_wallet, get_loan_service
from src.core.metrics import record_quote, track_quote_latency
from src.domain.exceptions import DomainException
from src.presentation.schemas import (
    ErrorResponseSchema,
    LoanQuoteRequestSchema,
    LoanQuoteResponseSchema,
    ScheduledPaymentSchema,
)

loans_router = APIRouter(
    prefix="/loans",
    responses={
        400: {
            "model": ErrorResponseSchema,
            "description": "Invalid input or amount exceeds credit limit",
        },
        404: {"model": ErrorResponseSchema, "description": "Merchant not found"},
        503: {"model": ErrorResponseSchema, "description": "Scoring oracle unavailable"},
    },
)


@loans_router.post(
    "/quote",
    response_model=LoanQuoteResponseSchema,
    status_code=200,
    summary="Calculate Loan Quote",
    description="""Calculate loan terms from the borrower's reputation without opening a loan on-chain""",
    responses={
        200: {"description": "Loan quote calculated successfully"},
    },
)
async def create_loan_quote(
    request: LoanQuoteRequestSchema,
    wallet: Annotated[str, Depends(get_current_wallet)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> LoanQuoteResponseSchema:
    """
    Quote a BNPL purchase for the calling wallet.

    Returns the guarantee, financed amount, tier interest rate, total
    repayment and the monthly schedule.
    """
    dto = LoanQuoteRequestDTO(
        amount=request.amount,
        merchant_id=request.merchant,
        term=request.term,
    )

    try:
        with track_quote_latency():
            response = await loan_service.calculate_loan_quote(wallet, dto)
    except DomainException as exc:
        record_quote(exc.code.lower())
        raise

    record_quote("quoted", response.amount)

    return LoanQuoteResponseSchema(
        amount=response.amount,
        guarantee=response.guarantee,
        loan_amount=response.loan_amount,
        interest_rate=response.interest_rate,
        total_repayment=response.total_repayment,
        term=response.term,
        schedule=[
            ScheduledPaymentSchema(
                payment_number=payment.payment_number,
                amount=payment.amount,
                due_date=payment.due_date,
            )
            for payment in response.schedule
        ],
    )
