"""Application services (use cases)."""

from .reputation_service import CacheWriteResult, ReputationService
from .loan_service import LoanService
from .merchant_service import MerchantService

__all__ = [
    "CacheWriteResult",
    "ReputationService",
    "LoanService",
    "MerchantService",
]
