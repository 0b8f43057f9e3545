"""API-specific request/response models.

Engine value types (PriceBreakdown, RefundCalculation, CancellationCheck)
are in petfoster.models and are returned directly where possible.

Modules:
- pricing: Discount tier response
- refunds: Refund preview and cancellation check requests
"""

__all__: list[str] = []
