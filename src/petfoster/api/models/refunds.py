"""API models for refund endpoints.

Dates arrive as strings and are parsed by the engine, so malformed
values surface as ERR_PRICE_002 rather than a generic validation error.
"""

from pydantic import BaseModel, ConfigDict, Field


class RefundPreviewRequest(BaseModel):
    """Request to preview the refund for cancelling a booking."""

    model_config = ConfigDict(
        strict=False,
        json_schema_extra={
            "examples": [
                {
                    "total_price": 95000,
                    "start_date": "2026-07-15",
                    "end_date": "2026-07-24",
                    "cancel_at": "2026-07-14T09:30:00",
                }
            ]
        },
    )

    total_price: int = Field(
        ...,
        description="Total stored on the booking, in minor units",
        examples=[95000],
    )
    start_date: str = Field(..., description="First day of the stay (ISO date)")
    end_date: str = Field(..., description="Last day of the stay (ISO date)")
    cancel_at: str | None = Field(
        default=None,
        description="Cancellation time (ISO datetime), defaults to now",
    )


class CancellationCheckRequest(BaseModel):
    """Request to check whether a booking can be cancelled."""

    model_config = ConfigDict(strict=False)

    start_date: str = Field(..., description="First day of the stay (ISO date)")
    status: str = Field(..., description="Current booking status", examples=["confirmed"])


class RefundPolicyResponse(BaseModel):
    """Human-readable cancellation policy."""

    model_config = ConfigDict(frozen=True)

    rules: list[str] = Field(..., description="Policy lines in display order")
