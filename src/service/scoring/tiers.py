"""
Tier Classification for the reputation pricing engine.

Maps a raw on-chain score to the tier, interest rate and credit ceiling
that every downstream quote uses.
"""

from datetime import datetime

from src.domain.entities import ReputationSnapshot
from src.domain.entities.reputation import MAX_SCORE, MIN_SCORE

from .settings import ScoringSettings, TierTerms, scoring_settings


def classify_score(
    score: int,
    settings: ScoringSettings = scoring_settings,
) -> TierTerms:
    """
    Classify a reputation score into its tier terms.

    Args:
        score: Reputation score (0-100)
        settings: Scoring settings (uses defaults if not provided)

    Returns:
        The terms of the highest tier whose threshold the score meets

    Raises:
        ValueError: If the score is outside 0-100
    """
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise ValueError(f"score must be between {MIN_SCORE} and {MAX_SCORE}, got {score}")

    for terms in settings.tiers:
        if score >= terms.min_score:
            return terms

    # Unreachable with a validated table; the lowest tier starts at 0.
    raise ValueError(f"No tier configured for score {score}")


def build_snapshot(
    wallet: str,
    score: int,
    last_updated: datetime,
    settings: ScoringSettings = scoring_settings,
) -> ReputationSnapshot:
    """Create a snapshot whose tier terms are derived from ``score``."""
    terms = classify_score(score, settings)

    return ReputationSnapshot(
        wallet=wallet,
        score=score,
        tier=terms.tier,
        interest_rate=terms.interest_rate,
        max_credit=terms.max_credit,
        last_updated=last_updated,
    )
