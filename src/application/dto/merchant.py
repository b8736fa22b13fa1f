"""Data transfer objects for merchant directory operations."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class MerchantSummary:
    """Public listing data for a merchant."""

    id: str
    wallet: str
    name: str
    logo: Optional[str]
    category: Optional[str]
    is_active: bool


@dataclass(frozen=True)
class MerchantListResponse:
    """A page of active merchants."""

    merchants: List[MerchantSummary]
    total: int
    limit: int
    offset: int

    @classmethod
    def from_entities(
        cls,
        merchants: list,
        total: int,
        limit: int,
        offset: int,
    ) -> "MerchantListResponse":
        return cls(
            merchants=[
                MerchantSummary(
                    id=m.id,
                    wallet=m.wallet,
                    name=m.name,
                    logo=m.logo,
                    category=m.category,
                    is_active=m.is_active,
                )
                for m in merchants
            ],
            total=total,
            limit=limit,
            offset=offset,
        )
