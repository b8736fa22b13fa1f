"""Data Transfer Objects for application layer."""

from .loan import LoanQuoteRequestDTO, LoanQuoteResponse, ScheduledPaymentDTO
from .merchant import MerchantListResponse, MerchantSummary
from .reputation import ReputationResponse

__all__ = [
    "LoanQuoteRequestDTO",
    "LoanQuoteResponse",
    "ScheduledPaymentDTO",
    "MerchantListResponse",
    "MerchantSummary",
    "ReputationResponse",
]
