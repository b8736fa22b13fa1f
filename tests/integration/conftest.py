"""
Fixtures for integration tests.

Provides:
- Test client for FastAPI app
- In-memory database seeded with users and merchants
- Mock scoring oracle and an in-process hot cache
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.main import app
from src.core.dependencies import (
    get_hot_cache,
    get_merchant_repository,
    get_oracle_client,
    get_reputation_repository,
    get_single_flight,
    get_user_repository,
)
from src.core.singleflight import SingleFlight
from src.infrastructure.cache import InMemoryHotCache
from src.infrastructure.database import Base
from src.infrastructure.database.models import MerchantModel, UserModel
from src.infrastructure.repositories import (
    PostgresMerchantRepository,
    PostgresReputationCacheRepository,
    PostgresUserRepository,
)
from tests.conftest import (
    ACTIVE_MERCHANT_ID,
    INACTIVE_MERCHANT_ID,
    WALLET_BRONZE,
    WALLET_GOLD,
    WALLET_POOR,
    WALLET_SILVER,
    MockScoringOracle,
)

USER_IDS = {
    WALLET_GOLD: "3f8a2b1c-0d4e-4f5a-8b6c-7d8e9f0a1b01",
    WALLET_SILVER: "3f8a2b1c-0d4e-4f5a-8b6c-7d8e9f0a1b02",
    WALLET_BRONZE: "3f8a2b1c-0d4e-4f5a-8b6c-7d8e9f0a1b03",
    WALLET_POOR: "3f8a2b1c-0d4e-4f5a-8b6c-7d8e9f0a1b04",
}

SECOND_ACTIVE_MERCHANT_ID = "7a6b5c4d-3e2f-4a1b-9c8d-7e6f5a4b3c2d"

MERCHANT_WALLET = "G" + "M" * 55


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session with seed data."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        session.add_all(
            [UserModel(id=user_id, wallet_address=wallet) for wallet, user_id in USER_IDS.items()]
        )
        session.add_all([
            MerchantModel(
                id=ACTIVE_MERCHANT_ID,
                wallet=MERCHANT_WALLET,
                name="Acme Electronics",
                category="electronics",
                is_active=True,
            ),
            MerchantModel(
                id=SECOND_ACTIVE_MERCHANT_ID,
                wallet=MERCHANT_WALLET,
                name="Blue Bikes",
                logo="https://cdn.example.com/blue-bikes.png",
                category="sports",
                is_active=True,
            ),
            MerchantModel(
                id=INACTIVE_MERCHANT_ID,
                wallet=MERCHANT_WALLET,
                name="Closed Shop",
                is_active=False,
            ),
        ])
        await session.commit()

        yield session


# =============================================================================
# Collaborator Fixtures
# =============================================================================

@pytest.fixture
def hot_cache() -> InMemoryHotCache:
    """Create a fresh in-process hot cache."""
    return InMemoryHotCache()


def _install_overrides(session: AsyncSession, hot_cache, oracle) -> None:
    single_flight = SingleFlight()

    async def override_get_reputation_repository():
        return PostgresReputationCacheRepository(session)

    async def override_get_user_repository():
        return PostgresUserRepository(session)

    async def override_get_merchant_repository():
        return PostgresMerchantRepository(session)

    app.dependency_overrides[get_reputation_repository] = override_get_reputation_repository
    app.dependency_overrides[get_user_repository] = override_get_user_repository
    app.dependency_overrides[get_merchant_repository] = override_get_merchant_repository
    app.dependency_overrides[get_hot_cache] = lambda: hot_cache
    app.dependency_overrides[get_oracle_client] = lambda: oracle
    app.dependency_overrides[get_single_flight] = lambda: single_flight


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    test_session: AsyncSession,
    hot_cache: InMemoryHotCache,
    mock_oracle: MockScoringOracle,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with mocked dependencies.

    This client:
    - Uses an in-memory SQLite database
    - Mocks the scoring oracle with fixed scores per wallet
    - Keeps the hot cache in process memory
    """
    _install_overrides(test_session, hot_cache, mock_oracle)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_failing_oracle(
    test_session: AsyncSession,
    hot_cache: InMemoryHotCache,
    failing_oracle: MockScoringOracle,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client where the scoring oracle always fails."""
    _install_overrides(test_session, hot_cache, failing_oracle)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def silver_headers() -> dict:
    """Headers identifying the silver-tier borrower (score 75)."""
    return {"X-Wallet-Address": WALLET_SILVER}


@pytest.fixture
def poor_headers() -> dict:
    """Headers identifying the poor-tier borrower (score 40)."""
    return {"X-Wallet-Address": WALLET_POOR}


@pytest.fixture
def quote_body() -> dict:
    """A quote request the silver borrower can afford."""
    return {
        "amount": 500,
        "merchant": ACTIVE_MERCHANT_ID,
        "term": 4,
    }
