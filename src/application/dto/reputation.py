"""Data transfer objects for reputation operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReputationResponse:
    """Response data for a wallet's reputation."""

    wallet: str
    score: int
    tier: str
    interest_rate: float
    max_credit: float
    last_updated: str

    @classmethod
    def from_entity(cls, snapshot) -> "ReputationResponse":
        return cls(
            wallet=snapshot.wallet,
            score=snapshot.score,
            tier=snapshot.tier.value,
            interest_rate=float(snapshot.interest_rate),
            max_credit=float(snapshot.max_credit),
            last_updated=snapshot.last_updated.isoformat(),
        )
