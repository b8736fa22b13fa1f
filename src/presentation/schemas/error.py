"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["LOAN_AMOUNT_EXCEEDS_CREDIT"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=[
            "Requested amount $5000 exceeds your maximum credit limit of $500. "
            "Improve your reputation score to unlock higher limits."
        ],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "MERCHANT_NOT_FOUND",
                    "message": "Merchant not found. Please provide a valid merchant ID.",
                    "request_id": "abc123",
                }
            ]
        }
    }
