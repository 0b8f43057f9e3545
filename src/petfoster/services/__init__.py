"""Pricing, refund and order number services."""

from petfoster.services.order_number import (
    InMemoryOrderNumberRegistry,
    OrderNumberGenerator,
    OrderNumberRegistry,
    is_valid_order_number,
)
from petfoster.services.pricing import PricingService
from petfoster.services.refund_policy_service import RefundPolicyService

__all__ = [
    "InMemoryOrderNumberRegistry",
    "OrderNumberGenerator",
    "OrderNumberRegistry",
    "PricingService",
    "RefundPolicyService",
    "is_valid_order_number",
]
