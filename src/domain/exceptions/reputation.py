"""Reputation and scoring oracle exceptions."""

from .base import DomainException


class OracleUnavailableException(DomainException):
    """Raised when the on-chain scoring oracle cannot return a score."""

    def __init__(self, message: str, wallet: str | None = None):
        super().__init__(
            message=message,
            code="ORACLE_UNAVAILABLE",
        )
        self.wallet = wallet


class InvalidWalletException(DomainException):
    """Raised when a wallet address is missing or not a Stellar public key."""

    def __init__(self, message: str = "Invalid or missing Stellar wallet address"):
        super().__init__(
            message=message,
            code="VALIDATION_INVALID_WALLET",
        )
