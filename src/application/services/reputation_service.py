"""Reputation service - hybrid cache-aside reads of on-chain reputation."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

import structlog

from src.core.config import settings
from src.core.metrics import (
    record_cache_write_failure,
    record_lookup,
    record_oracle_coalesced,
    record_read_path_failure,
)
from src.core.singleflight import SingleFlight
from src.domain.entities import ReputationSnapshot, WarmCacheRecord
from src.domain.interfaces import (
    HotCache,
    ReputationCacheRepository,
    ScoringOracleClient,
    UserRepository,
)
from src.service.scoring import ScoringSettings, build_snapshot, scoring_settings

logger = structlog.get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class CacheWriteResult:
    """Outcome of one best-effort cache write."""

    layer: str
    ok: bool
    error: Optional[str] = None
    skipped: bool = False

    @classmethod
    def success(cls, layer: str) -> "CacheWriteResult":
        return cls(layer=layer, ok=True)

    @classmethod
    def failure(cls, layer: str, exc: Exception) -> "CacheWriteResult":
        return cls(layer=layer, ok=False, error=f"{type(exc).__name__}: {exc}")

    @classmethod
    def skip(cls, layer: str, reason: str) -> "CacheWriteResult":
        return cls(layer=layer, ok=True, error=reason, skipped=True)


class ReputationService:
    """
    Application service for reputation reads.

    Reads go hot cache -> warm cache -> scoring oracle, stopping at the first
    usable answer, and back-fill the faster layers on the way out. The oracle
    is the source of truth; both caches are disposable copies of its output.
    """

    HOT_LAYER = "hot"
    WARM_LAYER = "warm"
    ORACLE_FLIGHT = "oracle"
    FALLBACK_FLIGHT = "fallback"

    def __init__(
        self,
        hot_cache: HotCache,
        reputation_repository: ReputationCacheRepository,
        user_repository: UserRepository,
        oracle_client: ScoringOracleClient,
        single_flight: SingleFlight | None = None,
        ttl_seconds: int | None = None,
        warm_staleness: timedelta | None = None,
        clock: Callable[[], datetime] = utc_now,
        tier_settings: ScoringSettings = scoring_settings,
        key_prefix: str | None = None,
    ):
        self._hot_cache = hot_cache
        self._reputation_repo = reputation_repository
        self._user_repo = user_repository
        self._oracle = oracle_client
        self._single_flight = single_flight or SingleFlight()
        if ttl_seconds is None:
            ttl_seconds = settings.reputation_cache_ttl
        if warm_staleness is None:
            warm_staleness = timedelta(minutes=settings.reputation_warm_staleness_minutes)
        self._ttl_seconds = ttl_seconds
        self._warm_staleness = warm_staleness
        self._clock = clock
        self._tier_settings = tier_settings
        self._key_prefix = key_prefix or settings.reputation_cache_prefix

    def cache_key(self, wallet: str) -> str:
        """Hot cache key for a wallet."""
        return f"{self._key_prefix}:{wallet}"

    async def get_reputation_data(self, wallet: str) -> ReputationSnapshot:
        """
        Get the reputation snapshot for a wallet.

        Args:
            wallet: Stellar wallet address

        Returns:
            The freshest snapshot available within the cache policy

        Raises:
            OracleUnavailableException: If the caches cannot answer and the
                oracle is down even after the direct retry
        """
        log = logger.bind(wallet=wallet)

        try:
            return await self._read_through(wallet, log)
        except Exception as e:
            record_read_path_failure()
            log.error(
                "reputation_read_path_failed",
                error=str(e),
                error_type=type(e).__name__,
            )

        # Last resort: skip every cache and ask the chain directly.
        score = await self._fetch_score(self.FALLBACK_FLIGHT, wallet)
        snapshot = self._snapshot(wallet, score, self._clock())
        record_lookup("fallback", snapshot.tier.value)
        log.info("reputation_fallback_fetched", score=score, tier=snapshot.tier.value)
        return snapshot

    async def invalidate_reputation(self, wallet: str) -> None:
        """
        Drop both cached copies of a wallet's reputation.

        The next read goes to the oracle. A failure clearing one layer is
        logged and does not stop the other from being cleared.

        Args:
            wallet: Stellar wallet address
        """
        log = logger.bind(wallet=wallet)
        cleared = []

        try:
            await self._hot_cache.delete(self.cache_key(wallet))
            cleared.append(self.HOT_LAYER)
        except Exception as e:
            log.error("reputation_invalidate_failed", layer=self.HOT_LAYER, error=str(e))

        try:
            await self._reputation_repo.delete_by_wallet(wallet)
            cleared.append(self.WARM_LAYER)
        except Exception as e:
            log.error("reputation_invalidate_failed", layer=self.WARM_LAYER, error=str(e))

        log.info("reputation_invalidated", layers=cleared)

    async def _read_through(self, wallet: str, log) -> ReputationSnapshot:
        key = self.cache_key(wallet)

        # 1. Hot cache
        cached = await self._hot_cache.get(key)
        if cached:
            # Terms always come from the current tier table, not the cached copy.
            snapshot = self._snapshot(
                wallet,
                int(cached["score"]),
                datetime.fromisoformat(cached["last_updated"]),
            )
            record_lookup(self.HOT_LAYER, snapshot.tier.value)
            log.debug("reputation_hot_hit")
            return snapshot

        log.debug("reputation_hot_miss")

        # 2. Warm cache
        record = await self._reputation_repo.get_by_wallet(wallet)
        if record is not None and self._is_fresh(record):
            snapshot = self._snapshot(wallet, record.score, record.last_synced_at)
            self._report_writes(log, [await self._write_hot(snapshot)])
            record_lookup(self.WARM_LAYER, snapshot.tier.value)
            log.info("reputation_warm_hit", score=snapshot.score)
            return snapshot

        log.info("reputation_warm_miss", stale=record is not None)

        # 3. Oracle; concurrent misses for the same wallet share one call
        flight_key = self._flight_key(self.ORACLE_FLIGHT, wallet)
        shared = self._single_flight.is_in_flight(flight_key)
        score = await self._fetch_score(self.ORACLE_FLIGHT, wallet)
        snapshot = self._snapshot(wallet, score, self._clock())
        record_lookup("oracle", snapshot.tier.value)

        if shared:
            # The caller that issued the oracle request writes the caches.
            record_oracle_coalesced()
            log.info("reputation_oracle_shared", score=score)
            return snapshot

        log.info("reputation_oracle_fetched", score=score, tier=snapshot.tier.value)

        # 4. Persistence
        self._report_writes(log, await self._persist(snapshot))
        return snapshot

    def _flight_key(self, path: str, wallet: str) -> str:
        return f"{path}:{wallet}"

    async def _fetch_score(self, path: str, wallet: str) -> int:
        return await self._single_flight.do(
            self._flight_key(path, wallet), lambda: self._oracle.fetch_score(wallet)
        )

    def _is_fresh(self, record: WarmCacheRecord) -> bool:
        return self._clock() - record.last_synced_at < self._warm_staleness

    def _snapshot(self, wallet: str, score: int, last_updated: datetime) -> ReputationSnapshot:
        return build_snapshot(wallet, score, last_updated, self._tier_settings)

    async def _persist(self, snapshot: ReputationSnapshot) -> List[CacheWriteResult]:
        return [await self._write_hot(snapshot), await self._write_warm(snapshot)]

    async def _write_hot(self, snapshot: ReputationSnapshot) -> CacheWriteResult:
        try:
            await self._hot_cache.set(
                self.cache_key(snapshot.wallet),
                snapshot.to_dict(),
                self._ttl_seconds,
            )
        except Exception as e:
            return CacheWriteResult.failure(self.HOT_LAYER, e)
        return CacheWriteResult.success(self.HOT_LAYER)

    async def _write_warm(self, snapshot: ReputationSnapshot) -> CacheWriteResult:
        try:
            user_id = await self._user_repo.find_user_id_by_wallet(snapshot.wallet)
            if user_id is None:
                return CacheWriteResult.skip(self.WARM_LAYER, "unregistered_wallet")

            await self._reputation_repo.upsert(
                WarmCacheRecord(
                    user_id=user_id,
                    wallet=snapshot.wallet,
                    score=snapshot.score,
                    tier=snapshot.tier,
                    last_synced_at=snapshot.last_updated,
                )
            )
        except Exception as e:
            return CacheWriteResult.failure(self.WARM_LAYER, e)
        return CacheWriteResult.success(self.WARM_LAYER)

    def _report_writes(self, log, results: List[CacheWriteResult]) -> None:
        for result in results:
            if not result.ok:
                record_cache_write_failure(result.layer)
                log.warning(
                    "reputation_cache_degraded",
                    layer=result.layer,
                    error=result.error,
                )
            elif result.skipped:
                log.debug("reputation_cache_write_skipped", layer=result.layer, reason=result.error)
            else:
                log.debug("reputation_cache_written", layer=result.layer)
