"""Offline stand-in for the scoring oracle."""

import asyncio

import structlog

from src.domain.interfaces import ScoringOracleClient

logger = structlog.get_logger(__name__)


class DeterministicScoringOracle(ScoringOracleClient):
    """
    Derives a stable pseudo-score from the wallet address.

    For local development and demos without a chain connection. The
    arithmetic is a 32-bit string hash reduced to 0-100; it carries no
    meaning beyond being repeatable per wallet.
    """

    def __init__(self, latency_seconds: float = 0.0):
        self._latency_seconds = latency_seconds

    async def fetch_score(self, wallet: str) -> int:
        if self._latency_seconds:
            await asyncio.sleep(self._latency_seconds)

        score = self.score_for(wallet)
        logger.debug("deterministic_oracle_score", wallet=wallet, score=score)
        return score

    @staticmethod
    def score_for(wallet: str) -> int:
        hash_value = 0
        for char in wallet:
            hash_value = ((hash_value << 5) - hash_value + ord(char)) & 0xFFFFFFFF

        # Reinterpret as signed 32-bit
        if hash_value >= 0x80000000:
            hash_value -= 0x100000000

        return abs(hash_value) % 101
