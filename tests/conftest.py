"""Pytest configuration and fixtures for the pricing engine tests.

This module provides reusable fixtures for testing:
- Environment defaults so settings are deterministic
- A fixed clock for refund and snapshot calculations
- Service instances wired to that clock
"""

import datetime as dt
import os
from typing import Generator
from zoneinfo import ZoneInfo

import pytest

# === Environment Setup ===

# Set before any petfoster import reads settings
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("PETFOSTER_TIMEZONE", "UTC")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

# Wall-clock "now" used by every clock-dependent test
FIXED_NOW = dt.datetime(2026, 7, 10, 12, 0, 0)


@pytest.fixture(autouse=True)
def reset_cached_singletons() -> Generator[None, None, None]:
    """Clear cached settings and API services before and after each test."""
    from petfoster.api.dependencies import reset_services
    from petfoster.config import get_settings

    get_settings.cache_clear()
    reset_services()
    yield
    get_settings.cache_clear()
    reset_services()


@pytest.fixture
def fixed_now() -> dt.datetime:
    """The naive local time the fixed clock returns."""
    return FIXED_NOW


@pytest.fixture
def utc() -> ZoneInfo:
    return ZoneInfo("UTC")


@pytest.fixture
def pricing_service(utc: ZoneInfo):
    """PricingService with a fixed clock."""
    from petfoster.services.pricing import PricingService

    return PricingService(tz=utc, clock=lambda: FIXED_NOW)


@pytest.fixture
def refund_service(utc: ZoneInfo):
    """RefundPolicyService whose default cancellation time is FIXED_NOW."""
    from petfoster.services.refund_policy_service import RefundPolicyService

    return RefundPolicyService(tz=utc, clock=lambda: FIXED_NOW)
