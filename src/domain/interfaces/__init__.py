"""
Domain Interfaces (Ports)
"""

from .cache import HotCache
from .clients import ScoringOracleClient
from .repositories import (
    MerchantRepository,
    ReputationCacheRepository,
    UserRepository,
)

__all__ = [
    "HotCache",
    "ScoringOracleClient",
    "MerchantRepository",
    "ReputationCacheRepository",
    "UserRepository",
]
