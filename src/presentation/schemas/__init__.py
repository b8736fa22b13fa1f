"""Pydantic schemas for API request/response validation."""

from .reputation import ReputationResponseSchema
from .loan import (
    LoanQuoteRequestSchema,
    LoanQuoteResponseSchema,
    ScheduledPaymentSchema,
)
from .merchant import MerchantListResponseSchema, MerchantSummarySchema
from .error import ErrorResponseSchema

__all__ = [
    "ReputationResponseSchema",
    "LoanQuoteRequestSchema",
    "LoanQuoteResponseSchema",
    "ScheduledPaymentSchema",
    "MerchantListResponseSchema",
    "MerchantSummarySchema",
    "ErrorResponseSchema",
]
