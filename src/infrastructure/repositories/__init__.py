"""Repository implementations."""

from .merchant_repository import PostgresMerchantRepository
from .reputation_repository import PostgresReputationCacheRepository
from .user_repository import PostgresUserRepository

__all__ = [
    "PostgresMerchantRepository",
    "PostgresReputationCacheRepository",
    "PostgresUserRepository",
]
