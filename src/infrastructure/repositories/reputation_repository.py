"""PostgreSQL implementation of ReputationCacheRepository."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Tier, WarmCacheRecord
from src.domain.interfaces import ReputationCacheRepository
from src.infrastructure.database.models import ReputationCacheModel


class PostgresReputationCacheRepository(ReputationCacheRepository):
    """
    PostgreSQL implementation of the warm reputation cache.

    One row per user; the upsert is keyed by ``user_id``. Writes commit
    immediately, so a cached score survives even when the request that
    fetched it fails afterwards. Write failures roll the session back
    before re-raising so the request's session stays usable for the caller.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_wallet(self, wallet: str) -> Optional[WarmCacheRecord]:
        """Retrieve the warm record for a wallet."""
        stmt = select(ReputationCacheModel).where(
            ReputationCacheModel.wallet_address == wallet
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def upsert(self, record: WarmCacheRecord) -> WarmCacheRecord:
        """Insert or replace the record for the record's user."""
        model = ReputationCacheModel(
            user_id=record.user_id,
            wallet_address=record.wallet,
            score=record.score,
            tier=record.tier.value,
            last_synced_at=record.last_synced_at,
        )

        try:
            await self._session.merge(model)
            await self._session.commit()
        except SQLAlchemyError:
            await self._session.rollback()
            raise

        return record

    async def delete_by_wallet(self, wallet: str) -> None:
        """Delete the warm record for a wallet, if any."""
        stmt = delete(ReputationCacheModel).where(
            ReputationCacheModel.wallet_address == wallet
        )

        try:
            await self._session.execute(stmt)
            await self._session.commit()
        except SQLAlchemyError:
            await self._session.rollback()
            raise

    def _to_entity(self, model: ReputationCacheModel) -> WarmCacheRecord:
        """Convert database model to domain entity."""
        last_synced_at: datetime = model.last_synced_at
        # SQLite drops the offset; stored values are always UTC.
        if last_synced_at.tzinfo is None:
            last_synced_at = last_synced_at.replace(tzinfo=timezone.utc)

        return WarmCacheRecord(
            user_id=str(model.user_id),
            wallet=model.wallet_address,
            score=model.score,
            tier=Tier(model.tier),
            last_synced_at=last_synced_at,
        )
