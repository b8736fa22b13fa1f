"""Reputation API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from src.application.dto import ReputationResponse
from src.application.services import ReputationService
from src.core.dependencies import get_reputation_service
from src.domain.entities.reputation import is_valid_wallet
from src.domain.exceptions import InvalidWalletException
from src.presentation.schemas import ErrorResponseSchema, ReputationResponseSchema

reputation_router = APIRouter(
    prefix="/reputation",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid wallet address"},
        503: {"model": ErrorResponseSchema, "description": "Scoring oracle unavailable"},
    },
)


@reputation_router.get(
    "/{wallet}",
    response_model=ReputationResponseSchema,
    summary="Get Reputation",
    description="""
    Retrieve the reputation score and tier terms for a Stellar wallet.

    Served from the hot cache, then the warm cache (fresh for up to an
    hour), and only then from the on-chain scoring oracle.
    """,
    responses={
        200: {"description": "Reputation retrieved successfully"},
    },
)
async def get_reputation(
    wallet: Annotated[
        str,
        Path(description="Stellar wallet address (G + 55 base32 characters)"),
    ],
    reputation_service: Annotated[ReputationService, Depends(get_reputation_service)],
) -> ReputationResponseSchema:
    if not is_valid_wallet(wallet):
        raise InvalidWalletException("Invalid Stellar wallet address format")

    snapshot = await reputation_service.get_reputation_data(wallet)
    response = ReputationResponse.from_entity(snapshot)

    return ReputationResponseSchema(
        wallet=response.wallet,
        score=response.score,
        tier=response.tier,
        interest_rate=response.interest_rate,
        max_credit=response.max_credit,
        last_updated=response.last_updated,
    )
