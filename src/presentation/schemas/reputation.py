"""Reputation-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ReputationResponseSchema(BaseModel):
    """Schema for GET /v1/reputation/{wallet} response."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "wallet": "GABCDEFGHIJKLMNOPQRSTUVWXYZ234567ABCDEFGHIJKLMNOPQRSTUVW",
                    "score": 82,
                    "tier": "silver",
                    "interestRate": 8,
                    "maxCredit": 3000,
                    "lastUpdated": "2026-03-13T10:15:00+00:00",
                }
            ]
        },
    )

    wallet: str = Field(
        ...,
        description="Stellar wallet address",
    )
    score: int = Field(
        ...,
        ge=0,
        le=100,
        description="On-chain reputation score (0-100, higher is better)",
        examples=[82],
    )
    tier: str = Field(
        ...,
        description="Reputation tier: gold, silver, bronze or poor",
        examples=["silver"],
    )
    interest_rate: float = Field(
        ...,
        ge=0,
        description="Annual interest rate percentage for this tier",
        examples=[8],
    )
    max_credit: float = Field(
        ...,
        ge=0,
        description="Maximum purchase amount in USD for this tier",
        examples=[3000],
    )
    last_updated: str = Field(
        ...,
        description="When the score was read from its source (ISO 8601)",
    )
