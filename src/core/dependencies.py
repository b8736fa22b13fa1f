"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.singleflight import SingleFlight
from src.domain.entities.reputation import is_valid_wallet
from src.domain.exceptions import InvalidWalletException
from src.domain.interfaces import HotCache, ScoringOracleClient
from src.infrastructure.cache import hot_cache_manager
from src.infrastructure.database import get_db_session
from src.infrastructure.repositories import (
    PostgresMerchantRepository,
    PostgresReputationCacheRepository,
    PostgresUserRepository,
)
from src.infrastructure.clients import (
    DeterministicScoringOracle,
    HttpScoringOracleClient,
)
from src.application.services import LoanService, MerchantService, ReputationService

# Shared across requests so concurrent cold reads of one wallet
# collapse into a single oracle call.
oracle_single_flight = SingleFlight()


# Repository dependencies
async def get_reputation_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresReputationCacheRepository:
    """Get a ReputationCacheRepository instance."""
    return PostgresReputationCacheRepository(session)


async def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresUserRepository:
    """Get a UserRepository instance."""
    return PostgresUserRepository(session)


async def get_merchant_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresMerchantRepository:
    """Get a MerchantRepository instance."""
    return PostgresMerchantRepository(session)


# External client dependencies
def get_hot_cache() -> HotCache:
    """Get the shared hot cache."""
    return hot_cache_manager.cache


def get_oracle_client() -> ScoringOracleClient:
    """Get a ScoringOracleClient instance for the configured backend."""
    if settings.scoring_oracle_backend == "deterministic":
        return DeterministicScoringOracle()
    return HttpScoringOracleClient()


def get_single_flight() -> SingleFlight:
    """Get the process-wide oracle call de-duplicator."""
    return oracle_single_flight


# Identity
def get_current_wallet(
    x_wallet_address: Annotated[str | None, Header()] = None,
) -> str:
    """
    Resolve the borrower's wallet for the request.

    Stands in for the authenticated identity until token auth is wired in.
    """
    if not x_wallet_address or not is_valid_wallet(x_wallet_address):
        raise InvalidWalletException(
            "Invalid or missing wallet address. Provide a valid Stellar wallet "
            "in the X-Wallet-Address header."
        )
    return x_wallet_address


# Service dependencies
async def get_reputation_service(
    hot_cache: Annotated[HotCache, Depends(get_hot_cache)],
    reputation_repo: Annotated[
        PostgresReputationCacheRepository, Depends(get_reputation_repository)
    ],
    user_repo: Annotated[PostgresUserRepository, Depends(get_user_repository)],
    oracle_client: Annotated[ScoringOracleClient, Depends(get_oracle_client)],
    single_flight: Annotated[SingleFlight, Depends(get_single_flight)],
) -> ReputationService:
    """Get a ReputationService instance with all dependencies."""
    return ReputationService(
        hot_cache=hot_cache,
        reputation_repository=reputation_repo,
        user_repository=user_repo,
        oracle_client=oracle_client,
        single_flight=single_flight,
    )


async def get_loan_service(
    reputation_service: Annotated[ReputationService, Depends(get_reputation_service)],
    merchant_repo: Annotated[PostgresMerchantRepository, Depends(get_merchant_repository)],
) -> LoanService:
    """Get a LoanService instance."""
    return LoanService(
        reputation_service=reputation_service,
        merchant_repository=merchant_repo,
    )


async def get_merchant_service(
    merchant_repo: Annotated[PostgresMerchantRepository, Depends(get_merchant_repository)],
) -> MerchantService:
    """Get a MerchantService instance."""
    return MerchantService(merchant_repository=merchant_repo)
