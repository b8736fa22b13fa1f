"""
Reputation Pricing Module for the BNPL quote engine
"""

from .settings import ScoringSettings, TierTerms, scoring_settings
from .tiers import build_snapshot, classify_score
from .money import floor2, round2
from .schedule import add_months, generate_schedule
from .quote import (
    GUARANTEE_RATIO,
    LOAN_RATIO,
    LoanBreakdown,
    build_quote,
    calculate_breakdown,
)

__all__ = [
    # Settings
    "ScoringSettings",
    "TierTerms",
    "scoring_settings",
    # Tiers
    "build_snapshot",
    "classify_score",
    # Money
    "floor2",
    "round2",
    # Schedule
    "add_months",
    "generate_schedule",
    # Quote
    "GUARANTEE_RATIO",
    "LOAN_RATIO",
    "LoanBreakdown",
    "build_quote",
    "calculate_breakdown",
]
