"""Domain Entities - Core business objects."""

from .reputation import ReputationSnapshot, Tier, WarmCacheRecord
from .loan import LoanQuote, ScheduledPayment
from .merchant import Merchant

__all__ = [
    "ReputationSnapshot",
    "Tier",
    "WarmCacheRecord",
    "LoanQuote",
    "ScheduledPayment",
    "Merchant",
]
