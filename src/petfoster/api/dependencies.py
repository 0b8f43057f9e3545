"""FastAPI dependency injection providers for engine services.

Services are lazily instantiated and cached with @lru_cache.

Usage in routes:
    from petfoster.api.dependencies import get_pricing_service

    @router.get("/pricing/quote")
    async def quote(service: PricingService = Depends(get_pricing_service)):
        ...

Testing:
    Use reset_services() to clear cached instances between tests, or
    override with app.dependency_overrides.
"""

from functools import lru_cache

from petfoster.services.pricing import PricingService
from petfoster.services.refund_policy_service import RefundPolicyService


@lru_cache
def get_pricing_service() -> PricingService:
    """Get cached PricingService instance."""
    return PricingService()


@lru_cache
def get_refund_policy_service() -> RefundPolicyService:
    """Get cached RefundPolicyService instance.

    Returns:
        RefundPolicyService using the wall clock for the cancellation time.
    """
    return RefundPolicyService()


def reset_services() -> None:
    """Clear all cached service instances."""
    get_pricing_service.cache_clear()
    get_refund_policy_service.cache_clear()
