"""Merchant-related domain exceptions."""

from .base import DomainException


class MerchantNotFoundException(DomainException):
    """Raised when a merchant cannot be found."""

    def __init__(self, merchant_id: str):
        super().__init__(
            message="Merchant not found. Please provide a valid merchant ID.",
            code="MERCHANT_NOT_FOUND",
        )
        self.merchant_id = merchant_id


class MerchantInactiveException(DomainException):
    """Raised when a merchant exists but is not accepting new loans."""

    def __init__(self, merchant_id: str, merchant_name: str):
        super().__init__(
            message=f'Merchant "{merchant_name}" is not currently accepting new loans.',
            code="MERCHANT_INACTIVE",
        )
        self.merchant_id = merchant_id
