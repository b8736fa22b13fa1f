"""Merchant service - handles merchant directory listing."""

import structlog

from src.application.dto import MerchantListResponse
from src.domain.interfaces import MerchantRepository

logger = structlog.get_logger(__name__)


class MerchantService:
    """Application service for the merchant directory."""

    def __init__(self, merchant_repository: MerchantRepository):
        self._merchant_repo = merchant_repository

    async def list_merchants(self, limit: int = 20, offset: int = 0) -> MerchantListResponse:
        """
        Return a page of active merchants.

        Args:
            limit: Maximum number of merchants to return
            offset: Number of merchants to skip

        Returns:
            MerchantListResponse with the page and the total active count
        """
        merchants, total = await self._merchant_repo.list_active(limit=limit, offset=offset)

        logger.info(
            "merchants_listed",
            count=len(merchants),
            total=total,
            limit=limit,
            offset=offset,
        )

        return MerchantListResponse.from_entities(merchants, total, limit, offset)
