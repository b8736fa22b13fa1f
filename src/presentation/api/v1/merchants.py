"""Merchant directory API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.application.services import MerchantService
from src.core.dependencies import get_merchant_service
from src.presentation.schemas import MerchantListResponseSchema, MerchantSummarySchema

merchants_router = APIRouter(prefix="/merchants")


@merchants_router.get(
    "",
    response_model=MerchantListResponseSchema,
    summary="List Merchants",
    description="List active merchants accepting BNPL purchases, with pagination.",
)
async def list_merchants(
    merchant_service: Annotated[MerchantService, Depends(get_merchant_service)],
    limit: Annotated[
        int,
        Query(ge=1, le=100, description="Number of merchants to return per page"),
    ] = 20,
    offset: Annotated[
        int,
        Query(ge=0, description="Number of merchants to skip"),
    ] = 0,
) -> MerchantListResponseSchema:
    response = await merchant_service.list_merchants(limit=limit, offset=offset)

    return MerchantListResponseSchema(
        merchants=[
            MerchantSummarySchema(
                id=m.id,
                wallet=m.wallet,
                name=m.name,
                logo=m.logo,
                category=m.category,
                is_active=m.is_active,
            )
            for m in response.merchants
        ],
        total=response.total,
        limit=response.limit,
        offset=response.offset,
    )
