"""Reputation snapshot entity mirroring the on-chain score."""

import re
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

MIN_SCORE = 0
MAX_SCORE = 100

# Stellar Ed25519 public key: G followed by 55 base32 characters
STELLAR_WALLET_PATTERN = re.compile(r"G[A-Z2-7]{55}")


def is_valid_wallet(wallet: str) -> bool:
    """Check that a wallet looks like a Stellar public key."""
    return bool(STELLAR_WALLET_PATTERN.fullmatch(wallet))


class Tier(str, Enum):
    """Discrete reputation bracket that drives pricing and credit."""

    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"
    POOR = "poor"


@dataclass(frozen=True)
class ReputationSnapshot:
    """
    A reputation record as of a point in time.

    Tier, interest rate and max credit are always derived together from the
    score by the tier classifier; build snapshots with
    ``src.service.scoring.build_snapshot`` rather than by hand.

    Attributes:
        wallet: Stellar wallet address the score belongs to
        score: On-chain reputation score (0-100)
        tier: Reputation bracket for the score
        interest_rate: Annual interest rate in percent
        max_credit: Maximum purchase amount in USD
        last_updated: When the score was read from its source
    """

    wallet: str
    score: int
    tier: Tier
    interest_rate: Decimal
    max_credit: Decimal
    last_updated: datetime

    def __post_init__(self) -> None:
        if not MIN_SCORE <= self.score <= MAX_SCORE:
            raise ValueError(
                f"score must be between {MIN_SCORE} and {MAX_SCORE}, got {self.score}"
            )

    def to_dict(self) -> dict:
        """Convert to a JSON-friendly dictionary for the hot cache."""
        return {
            "wallet": self.wallet,
            "score": self.score,
            "tier": self.tier.value,
            "interest_rate": str(self.interest_rate),
            "max_credit": str(self.max_credit),
            "last_updated": self.last_updated.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ReputationSnapshot":
        """Rebuild a snapshot serialized with ``to_dict``."""
        return cls(
            wallet=data["wallet"],
            score=int(data["score"]),
            tier=Tier(data["tier"]),
            interest_rate=Decimal(data["interest_rate"]),
            max_credit=Decimal(data["max_credit"]),
            last_updated=datetime.fromisoformat(data["last_updated"]),
        )


@dataclass(frozen=True)
class WarmCacheRecord:
    """Persisted copy of the last score synced from the chain."""

    user_id: str
    wallet: str
    score: int
    tier: Tier
    last_synced_at: datetime
