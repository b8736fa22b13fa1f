"""External client interfaces."""

from abc import ABC, abstractmethod


class ScoringOracleClient(ABC):
    """
    Abstract client for the on-chain reputation oracle.

    The oracle is the source of truth for reputation scores. Calls are slow
    (network and consensus latency), so callers go through the reputation
    caches first.
    """

    @abstractmethod
    async def fetch_score(self, wallet: str) -> int:
        """
        Fetch the current reputation score for a wallet.

        Args:
            wallet: Stellar wallet address

        Returns:
            Integer score between 0 and 100

        Raises:
            OracleUnavailableException: If the chain call cannot complete
        """
        ...
