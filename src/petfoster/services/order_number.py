"""Booking order number generation.

Order numbers look like ``PF20241222123456``: a 2-4 letter prefix, the
booking date as YYYYMMDD, then 6 random digits. Uniqueness is enforced by
an injected registry (a database unique constraint in production, the
in-memory registry in tests and single-process tools).
"""

import datetime as dt
import random
import re
import string
import threading
from typing import Protocol

from petfoster.config import get_settings
from petfoster.models import InvalidArgumentError, OrderNumberExhaustedError
from petfoster.utils.dates import local_now
from petfoster.utils.logging import get_logger

logger = get_logger(__name__)

ORDER_NUMBER_PATTERN = re.compile(r"[A-Z]{2,4}\d{14,16}")
PREFIX_PATTERN = re.compile(r"[A-Z]{2,4}")


class OrderNumberRegistry(Protocol):
    """Records issued order numbers."""

    def claim(self, order_number: str) -> bool:
        """Reserve ``order_number``; False if it was already taken."""
        ...


class InMemoryOrderNumberRegistry:
    """Thread-safe registry backed by a set."""

    def __init__(self) -> None:
        self._issued: set[str] = set()
        self._lock = threading.Lock()

    def claim(self, order_number: str) -> bool:
        with self._lock:
            if order_number in self._issued:
                return False
            self._issued.add(order_number)
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._issued)

    def clear(self) -> None:
        with self._lock:
            self._issued.clear()


def is_valid_order_number(order_number: str | None) -> bool:
    """Check an order number's format."""
    return bool(order_number) and ORDER_NUMBER_PATTERN.fullmatch(order_number) is not None


class OrderNumberGenerator:
    """Generates unique booking order numbers.

    Usage:
        generator = OrderNumberGenerator(InMemoryOrderNumberRegistry())
        order_number = generator.generate()  # "PF20261017482913"
    """

    RANDOM_DIGITS = 6
    # Used once MAX_ATTEMPTS short numbers have collided
    EXTENDED_RANDOM_DIGITS = 8
    MAX_ATTEMPTS = 100

    def __init__(
        self,
        registry: OrderNumberRegistry,
        prefix: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            registry: Uniqueness check for issued numbers
            prefix: 2-4 uppercase letters, defaults to settings
            rng: Random source, seedable for tests
        """
        prefix = prefix or get_settings().order_prefix
        if not PREFIX_PATTERN.fullmatch(prefix):
            raise InvalidArgumentError(
                "Order prefix must be 2-4 uppercase letters", details={"prefix": prefix}
            )
        self.registry = registry
        self.prefix = prefix
        self._rng = rng or random.Random()

    def _random_digits(self, length: int) -> str:
        return "".join(self._rng.choices(string.digits, k=length))

    def generate(self, on_date: dt.date | None = None) -> str:
        """Generate and claim a new order number.

        Args:
            on_date: Booking date, defaults to today (local time)

        Returns:
            Order number unique within the registry

        Raises:
            OrderNumberExhaustedError: If the registry refuses
                MAX_ATTEMPTS short and MAX_ATTEMPTS extended candidates
        """
        day = (on_date or local_now().date()).strftime("%Y%m%d")
        for _ in range(self.MAX_ATTEMPTS):
            candidate = f"{self.prefix}{day}{self._random_digits(self.RANDOM_DIGITS)}"
            if self.registry.claim(candidate):
                return candidate

        logger.warning(
            "Order number space congested for %s%s, using %d-digit suffix",
            self.prefix,
            day,
            self.EXTENDED_RANDOM_DIGITS,
        )
        for _ in range(self.MAX_ATTEMPTS):
            candidate = f"{self.prefix}{day}{self._random_digits(self.EXTENDED_RANDOM_DIGITS)}"
            if self.registry.claim(candidate):
                return candidate

        logger.error("Order number registry refused every candidate for %s%s", self.prefix, day)
        raise OrderNumberExhaustedError(details={"prefix": self.prefix, "date": day})
