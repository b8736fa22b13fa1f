"""
Shared test doubles.

Provides:
- Counting fakes for the hot cache, warm store and user lookup
- Mock scoring oracle with failure and gating modes
- Fake merchant directory
- Controllable clock
"""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional, Tuple

import pytest

from src.domain.entities import Merchant, WarmCacheRecord
from src.domain.exceptions import OracleUnavailableException
from src.domain.interfaces import (
    HotCache,
    MerchantRepository,
    ReputationCacheRepository,
    ScoringOracleClient,
    UserRepository,
)


def make_wallet(char: str) -> str:
    """Build a well-formed Stellar address from a single base32 character."""
    return "G" + char * 55


WALLET_GOLD = make_wallet("A")
WALLET_SILVER = make_wallet("B")
WALLET_BRONZE = make_wallet("C")
WALLET_POOR = make_wallet("D")
WALLET_UNREGISTERED = make_wallet("E")

DEFAULT_SCORES = {
    WALLET_GOLD: 95,
    WALLET_SILVER: 75,
    WALLET_BRONZE: 65,
    WALLET_POOR: 40,
    WALLET_UNREGISTERED: 82,
}

ACTIVE_MERCHANT_ID = "6f1c2a8e-3b7d-4e5f-9a0b-1c2d3e4f5a6b"
INACTIVE_MERCHANT_ID = "0a9b8c7d-6e5f-4a3b-8c1d-0e9f8a7b6c5d"
UNKNOWN_MERCHANT_ID = "11111111-2222-4333-8444-555555555555"


# =============================================================================
# Fakes
# =============================================================================

class FakeClock:
    """Wall clock that only moves when told to."""

    def __init__(self, now: Optional[datetime] = None):
        self.now = now or datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class FakeHotCache(HotCache):
    """Dictionary hot cache that counts calls and can be told to fail."""

    def __init__(self, fail_get: bool = False, fail_set: bool = False, fail_delete: bool = False):
        self.entries: Dict[str, dict] = {}
        self.ttls: Dict[str, int] = {}
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.fail_delete = fail_delete
        self.get_calls = 0
        self.set_calls = 0
        self.delete_calls = 0

    async def get(self, key: str) -> Optional[dict]:
        self.get_calls += 1
        if self.fail_get:
            raise ConnectionError("hot cache unreachable")
        return self.entries.get(key)

    async def set(self, key: str, value: dict, ttl_seconds: int) -> None:
        self.set_calls += 1
        if self.fail_set:
            raise ConnectionError("hot cache unreachable")
        self.entries[key] = value
        self.ttls[key] = ttl_seconds

    async def delete(self, key: str) -> None:
        self.delete_calls += 1
        if self.fail_delete:
            raise ConnectionError("hot cache unreachable")
        self.entries.pop(key, None)


class FakeReputationRepository(ReputationCacheRepository):
    """In-memory warm store keyed by wallet."""

    def __init__(self, fail_get: bool = False, fail_upsert: bool = False, fail_delete: bool = False):
        self.records: Dict[str, WarmCacheRecord] = {}
        self.fail_get = fail_get
        self.fail_upsert = fail_upsert
        self.fail_delete = fail_delete
        self.get_calls = 0
        self.upserts: List[WarmCacheRecord] = []
        self.delete_calls = 0

    async def get_by_wallet(self, wallet: str) -> Optional[WarmCacheRecord]:
        self.get_calls += 1
        if self.fail_get:
            raise RuntimeError("warm store unavailable")
        return self.records.get(wallet)

    async def upsert(self, record: WarmCacheRecord) -> WarmCacheRecord:
        self.upserts.append(record)
        if self.fail_upsert:
            raise RuntimeError("warm store write failed")
        self.records[record.wallet] = record
        return record

    async def delete_by_wallet(self, wallet: str) -> None:
        self.delete_calls += 1
        if self.fail_delete:
            raise RuntimeError("warm store delete failed")
        self.records.pop(wallet, None)


class FakeUserRepository(UserRepository):
    """Wallet to user id lookup backed by a dict."""

    def __init__(self, users: Optional[Dict[str, str]] = None):
        self.users = users if users is not None else {}
        self.call_count = 0

    async def find_user_id_by_wallet(self, wallet: str) -> Optional[str]:
        self.call_count += 1
        return self.users.get(wallet)


class MockScoringOracle(ScoringOracleClient):
    """
    Scoring oracle double.

    Returns fixed scores per wallet. With ``gate`` set, every call blocks
    until the event is released, which lets tests hold a call in flight.
    """

    def __init__(
        self,
        scores: Optional[Dict[str, int]] = None,
        default_score: int = 75,
        fail_mode: bool = False,
        gate: Optional[asyncio.Event] = None,
    ):
        self.scores = scores if scores is not None else dict(DEFAULT_SCORES)
        self.default_score = default_score
        self.fail_mode = fail_mode
        self.gate = gate
        self.call_count = 0
        self.calls: List[str] = []

    async def fetch_score(self, wallet: str) -> int:
        self.call_count += 1
        self.calls.append(wallet)

        if self.gate is not None:
            await self.gate.wait()

        if self.fail_mode:
            raise OracleUnavailableException("Scoring oracle unreachable", wallet=wallet)

        return self.scores.get(wallet, self.default_score)


class FakeMerchantRepository(MerchantRepository):
    """Merchant directory backed by a dict."""

    def __init__(self, merchants: Optional[List[Merchant]] = None):
        self.merchants = {m.id: m for m in (merchants or [])}
        self.call_count = 0

    async def get_by_id(self, merchant_id: str) -> Optional[Merchant]:
        self.call_count += 1
        return self.merchants.get(merchant_id)

    async def list_active(self, limit: int = 20, offset: int = 0) -> Tuple[List[Merchant], int]:
        active = sorted(
            (m for m in self.merchants.values() if m.is_active),
            key=lambda m: (m.name, m.id),
        )
        return active[offset:offset + limit], len(active)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_hot_cache() -> FakeHotCache:
    return FakeHotCache()


@pytest.fixture
def fake_reputation_repo() -> FakeReputationRepository:
    return FakeReputationRepository()


@pytest.fixture
def fake_user_repo() -> FakeUserRepository:
    return FakeUserRepository({
        WALLET_GOLD: "9d1e5c43-1f0a-4c55-9e38-2b9f6f0e8a01",
        WALLET_SILVER: "9d1e5c43-1f0a-4c55-9e38-2b9f6f0e8a02",
        WALLET_BRONZE: "9d1e5c43-1f0a-4c55-9e38-2b9f6f0e8a03",
        WALLET_POOR: "9d1e5c43-1f0a-4c55-9e38-2b9f6f0e8a04",
    })


@pytest.fixture
def mock_oracle() -> MockScoringOracle:
    return MockScoringOracle()


@pytest.fixture
def failing_oracle() -> MockScoringOracle:
    return MockScoringOracle(fail_mode=True)


@pytest.fixture
def fake_merchant_repo() -> FakeMerchantRepository:
    return FakeMerchantRepository([
        Merchant(id=ACTIVE_MERCHANT_ID, name="Acme Electronics", is_active=True),
        Merchant(id=INACTIVE_MERCHANT_ID, name="Closed Shop", is_active=False),
    ])
