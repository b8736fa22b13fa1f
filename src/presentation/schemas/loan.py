"""Loan quote Pydantic schemas."""

from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LoanQuoteRequestSchema(BaseModel):
    """Schema for POST /v1/loans/quote request body."""

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "examples": [
                {
                    "amount": 500,
                    "merchant": "a1b2c3d4-e5f6-4890-abcd-ef1234567890",
                    "term": 4,
                }
            ]
        },
    )

    amount: Decimal = Field(
        ...,
        ge=1,
        le=10000,
        decimal_places=2,
        description="Total purchase amount in USD",
        examples=[500],
    )
    merchant: UUID = Field(
        ...,
        description="Merchant UUID",
        examples=["a1b2c3d4-e5f6-4890-abcd-ef1234567890"],
    )
    term: int = Field(
        ...,
        ge=1,
        le=12,
        strict=True,
        description="Loan term in months (1-12)",
        examples=[4],
    )


class ScheduledPaymentSchema(BaseModel):
    """Schema for a payment in the quote schedule."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    payment_number: int = Field(
        ...,
        ge=1,
        description="Sequential payment number",
        examples=[1],
    )
    amount: float = Field(
        ...,
        gt=0,
        description="Payment amount in USD",
        examples=[102.66],
    )
    due_date: str = Field(
        ...,
        description="Due date in ISO 8601 format (YYYY-MM-DD)",
        examples=["2026-11-18"],
    )


class LoanQuoteResponseSchema(BaseModel):
    """Schema for POST /v1/loans/quote response."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "amount": 500,
                    "guarantee": 100,
                    "loanAmount": 400,
                    "interestRate": 8,
                    "totalRepayment": 410.67,
                    "term": 4,
                    "schedule": [
                        {"paymentNumber": 1, "amount": 102.66, "dueDate": "2026-11-18"},
                        {"paymentNumber": 2, "amount": 102.66, "dueDate": "2026-12-18"},
                        {"paymentNumber": 3, "amount": 102.66, "dueDate": "2027-01-18"},
                        {"paymentNumber": 4, "amount": 102.69, "dueDate": "2027-02-18"},
                    ],
                }
            ]
        },
    )

    amount: float = Field(..., description="Total purchase amount in USD")
    guarantee: float = Field(..., description="Upfront guarantee deposit (20% of amount)")
    loan_amount: float = Field(..., description="Financed loan amount (80% of amount)")
    interest_rate: float = Field(
        ..., description="Annual interest rate percentage based on reputation"
    )
    total_repayment: float = Field(
        ..., description="Total amount to be repaid (loan + interest)"
    )
    term: int = Field(..., description="Loan term in months")
    schedule: list[ScheduledPaymentSchema] = Field(
        ..., description="Monthly repayment schedule"
    )
