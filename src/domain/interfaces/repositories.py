"""Repository interfaces for data persistence."""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from src.domain.entities import Merchant, WarmCacheRecord


class ReputationCacheRepository(ABC):
    """
    Abstract repository for the warm reputation cache.

    Holds at most one record per user; records are checked for staleness by
    the caller, not expired by the store.
    """

    @abstractmethod
    async def get_by_wallet(self, wallet: str) -> Optional[WarmCacheRecord]:
        """
        Retrieve the warm record for a wallet.

        Args:
            wallet: Stellar wallet address

        Returns:
            The record if present, None otherwise
        """
        ...

    @abstractmethod
    async def upsert(self, record: WarmCacheRecord) -> WarmCacheRecord:
        """
        Insert or replace the record for ``record.user_id``.

        Args:
            record: The record to persist

        Returns:
            The persisted record
        """
        ...

    @abstractmethod
    async def delete_by_wallet(self, wallet: str) -> None:
        """Delete the warm record for a wallet, if any."""
        ...


class UserRepository(ABC):
    """Abstract lookup of internal user ids."""

    @abstractmethod
    async def find_user_id_by_wallet(self, wallet: str) -> Optional[str]:
        """
        Resolve the internal user id that owns a wallet.

        Args:
            wallet: Stellar wallet address

        Returns:
            The user id if the wallet is registered, None otherwise
        """
        ...


class MerchantRepository(ABC):
    """Abstract repository for the merchant directory."""

    @abstractmethod
    async def get_by_id(self, merchant_id: str) -> Optional[Merchant]:
        """
        Retrieve a merchant by ID.

        Args:
            merchant_id: The merchant's unique identifier

        Returns:
            The merchant if found, None otherwise
        """
        ...

    @abstractmethod
    async def list_active(
        self,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[List[Merchant], int]:
        """
        List active merchants.

        Args:
            limit: Maximum number of merchants to return
            offset: Number of merchants to skip

        Returns:
            The page of merchants and the total number of active merchants
        """
        ...
