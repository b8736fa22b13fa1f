"""
Tier Policy Settings for the reputation pricing engine.

The tier table maps reputation score ranges to an interest rate and a
credit ceiling. It is policy, not code: change it through the environment
rather than by editing the classifier.

Environment variables use the SCORING_ prefix:
    SCORING_TIERS_JSON='[[90,"gold",5,5000],[75,"silver",8,3000],...]'

Usage:
    from src.service.scoring.settings import scoring_settings

    for tier in scoring_settings.tiers:
        ...

    # Or create custom settings for testing
    custom = ScoringSettings(tiers_json='[[0,"poor",18,500]]')
"""

import json
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.entities import Tier


@dataclass(frozen=True)
class TierTerms:
    """Financial terms granted to a reputation tier."""

    min_score: int
    tier: Tier
    interest_rate: Decimal
    max_credit: Decimal


class ScoringSettings(BaseSettings):
    """
    Configurable parameters for tier classification.

    All settings can be overridden via environment variables with SCORING_ prefix.
    Interest rates are annual percentages; credit limits are in USD.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCORING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    tiers_json: str = Field(
        default='[[90,"gold",5,5000],[75,"silver",8,3000],[60,"bronze",12,1500],[0,"poor",18,500]]',
        description=(
            "Tier table as JSON array: [[min_score, tier, interest_rate, max_credit], ...]"
        ),
    )

    @field_validator("tiers_json")
    @classmethod
    def validate_tiers_json(cls, v: str) -> str:
        """Validate that the tier table is parseable and covers every score."""
        try:
            tiers = json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")

        if not isinstance(tiers, list) or not tiers:
            raise ValueError("Tiers must be a non-empty list")

        min_scores = []
        for tier in tiers:
            if not isinstance(tier, list) or len(tier) != 4:
                raise ValueError(
                    "Each tier must be [min_score, tier, interest_rate, max_credit]"
                )
            min_score, name, rate, max_credit = tier
            if not isinstance(min_score, int) or not 0 <= min_score <= 100:
                raise ValueError(f"min_score must be an integer in 0-100: {min_score}")
            if name not in {t.value for t in Tier}:
                raise ValueError(f"Unknown tier: {name}")
            if rate < 0:
                raise ValueError(f"interest_rate cannot be negative: {rate}")
            if max_credit < 0:
                raise ValueError(f"max_credit cannot be negative: {max_credit}")
            min_scores.append(min_score)

        if len(set(min_scores)) != len(min_scores):
            raise ValueError("Tier thresholds must not overlap")
        if 0 not in min_scores:
            raise ValueError("Tier table must include a tier starting at score 0")
        return v

    @property
    def tiers(self) -> List[TierTerms]:
        """Tier table sorted from the highest threshold down."""
        rows = [
            TierTerms(
                min_score=min_score,
                tier=Tier(name),
                interest_rate=Decimal(str(rate)),
                max_credit=Decimal(str(max_credit)),
            )
            for min_score, name, rate, max_credit in json.loads(self.tiers_json)
        ]
        return sorted(rows, key=lambda row: row.min_score, reverse=True)


@lru_cache
def get_scoring_settings() -> ScoringSettings:
    """Get cached scoring settings instance."""
    return ScoringSettings()


scoring_settings = get_scoring_settings()
