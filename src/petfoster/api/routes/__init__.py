"""API routes package.

Routers are organized by domain:

- pricing: Discount tiers and price quotes
- refunds: Refund previews, cancellation checks and policy text

All routers are registered in main.py with /api prefix.
"""

from petfoster.api.routes.pricing import router as pricing_router
from petfoster.api.routes.refunds import router as refunds_router

__all__ = [
    "pricing_router",
    "refunds_router",
]
