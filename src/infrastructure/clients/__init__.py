"""External API client implementations."""

from .oracle_client import HttpScoringOracleClient
from .deterministic_oracle import DeterministicScoringOracle

__all__ = [
    "HttpScoringOracleClient",
    "DeterministicScoringOracle",
]
