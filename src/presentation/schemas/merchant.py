"""Merchant directory Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MerchantSummarySchema(BaseModel):
    """Schema for a merchant in the directory listing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(..., description="Unique identifier of the merchant")
    wallet: str = Field(..., description="Stellar wallet address of the merchant")
    name: str = Field(..., description="Display name of the merchant", examples=["TechStore"])
    logo: str | None = Field(None, description="URL of the merchant logo image")
    category: str | None = Field(
        None, description="Business category of the merchant", examples=["Electronics"]
    )
    is_active: bool = Field(..., description="Whether the merchant is currently active")


class MerchantListResponseSchema(BaseModel):
    """Schema for GET /v1/merchants response."""

    merchants: list[MerchantSummarySchema] = Field(
        ..., description="Page of active merchants"
    )
    total: int = Field(..., ge=0, description="Total number of active merchants")
    limit: int = Field(..., description="Page size used")
    offset: int = Field(..., description="Number of merchants skipped")
