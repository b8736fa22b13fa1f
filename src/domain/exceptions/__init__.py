"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .loan import AmountExceedsCreditException, InvalidLoanQuoteRequestException
from .merchant import MerchantInactiveException, MerchantNotFoundException
from .reputation import InvalidWalletException, OracleUnavailableException

__all__ = [
    "DomainException",
    "AmountExceedsCreditException",
    "InvalidLoanQuoteRequestException",
    "MerchantInactiveException",
    "MerchantNotFoundException",
    "InvalidWalletException",
    "OracleUnavailableException",
]
