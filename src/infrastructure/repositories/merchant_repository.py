"""PostgreSQL repository implementation for merchants."""

from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Merchant
from src.domain.interfaces import MerchantRepository
from src.infrastructure.database.models import MerchantModel


class PostgresMerchantRepository(MerchantRepository):
    """PostgreSQL-backed merchant directory."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, merchant_id: str) -> Optional[Merchant]:
        try:
            key = str(UUID(str(merchant_id)))
        except ValueError:
            return None

        stmt = select(MerchantModel).where(MerchantModel.id == key)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def list_active(
        self,
        limit: int = 20,
        offset: int = 0,
    ) -> Tuple[List[Merchant], int]:
        count_stmt = (
            select(func.count())
            .select_from(MerchantModel)
            .where(MerchantModel.is_active.is_(True))
        )
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            select(MerchantModel)
            .where(MerchantModel.is_active.is_(True))
            .order_by(MerchantModel.name, MerchantModel.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models], total

    def _to_entity(self, model: MerchantModel) -> Merchant:
        return Merchant(
            id=str(model.id),
            name=model.name,
            is_active=model.is_active,
            wallet=model.wallet,
            logo=model.logo,
            category=model.category,
        )
