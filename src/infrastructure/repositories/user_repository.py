"""PostgreSQL implementation of UserRepository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.interfaces import UserRepository
from src.infrastructure.database.models import UserModel


class PostgresUserRepository(UserRepository):
    """Resolves wallets to internal user ids."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_user_id_by_wallet(self, wallet: str) -> Optional[str]:
        stmt = select(UserModel.id).where(UserModel.wallet_address == wallet)
        result = await self._session.execute(stmt)
        user_id = result.scalar_one_or_none()

        return str(user_id) if user_id is not None else None
