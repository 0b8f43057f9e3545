"""Refund endpoints for cancellation previews.

The cancellation flow calls these with the total stored on the booking.
Nothing is refunded here; the payment side acts on the returned figures.
"""

from fastapi import APIRouter, Depends

from petfoster.api.dependencies import get_refund_policy_service
from petfoster.api.models.refunds import (
    CancellationCheckRequest,
    RefundPolicyResponse,
    RefundPreviewRequest,
)
from petfoster.models.refund import CancellationCheck, RefundCalculation
from petfoster.services.refund_policy_service import RefundPolicyService

router = APIRouter(tags=["refunds"])


@router.post(
    "/refunds/preview",
    summary="Preview a cancellation refund",
    description="""
Calculate the refund for cancelling a booking at `cancel_at` (default: now).

**Policy:**
- More than 48 hours before the start: full refund
- Within 48 hours: 70% refunded
- After the start: 70% of the unused days' share
""",
    response_model=RefundCalculation,
    responses={400: {"description": "Negative total, inverted range or bad date"}},
)
async def preview_refund(
    request: RefundPreviewRequest,
    service: RefundPolicyService = Depends(get_refund_policy_service),
) -> RefundCalculation:
    """Preview the refund for a cancellation."""
    return service.calculate_refund(
        request.total_price,
        request.start_date,
        request.end_date,
        request.cancel_at,
    )


@router.post(
    "/refunds/can-cancel",
    summary="Check whether a booking can be cancelled",
    response_model=CancellationCheck,
    responses={400: {"description": "Start date could not be parsed"}},
)
async def check_can_cancel(
    request: CancellationCheckRequest,
    service: RefundPolicyService = Depends(get_refund_policy_service),
) -> CancellationCheck:
    """Check cancellation eligibility for a booking status."""
    return service.can_cancel(request.start_date, request.status)


@router.get(
    "/refunds/policy",
    summary="Get the cancellation policy",
    response_model=RefundPolicyResponse,
)
async def get_refund_policy(
    service: RefundPolicyService = Depends(get_refund_policy_service),
) -> RefundPolicyResponse:
    """Return the cancellation policy text."""
    return RefundPolicyResponse(rules=service.get_policy_description())
