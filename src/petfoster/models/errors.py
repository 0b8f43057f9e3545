"""Standard error codes for the pricing engine.

Every failure raised by the engine carries one of these codes. Input
problems surface as form errors and map to 400 in the HTTP layer.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Error codes raised by pricing and refund calculations."""

    INVALID_ARGUMENT = "ERR_PRICE_001"
    INVALID_DATE = "ERR_PRICE_002"
    ORDER_NUMBER_EXHAUSTED = "ERR_PRICE_003"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_ARGUMENT: "Invalid pricing argument",
    ErrorCode.INVALID_DATE: "Date could not be parsed",
    ErrorCode.ORDER_NUMBER_EXHAUSTED: "No free order number could be issued",
}

# Recovery suggestions for callers
ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.INVALID_ARGUMENT: "Check that prices and day counts are non-negative "
    "and that the end date is not before the start date",
    ErrorCode.INVALID_DATE: "Provide dates in ISO format (YYYY-MM-DD)",
    ErrorCode.ORDER_NUMBER_EXHAUSTED: "Retry later or check the order number registry",
}


class ErrorResponse(BaseModel):
    """Serialisable error body returned to callers."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        message: Optional[str] = None,
        details: Optional[dict[str, str]] = None,
    ) -> "ErrorResponse":
        """Create an ErrorResponse from an error code.

        Args:
            code: The error code
            message: Specific message, defaults to the generic one for the code
            details: Optional additional context about the error

        Returns:
            An ErrorResponse with the message and recovery hint for the code.
        """
        return cls(
            error_code=code,
            message=message or ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class PricingError(Exception):
    """Base exception for pricing engine validation failures."""

    code: ErrorCode = ErrorCode.INVALID_ARGUMENT

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[dict[str, str]] = None,
    ):
        self.message = message or ERROR_MESSAGES[self.code]
        self.recovery = ERROR_RECOVERY[self.code]
        self.details = details
        super().__init__(self.message)

    def to_error_response(self) -> ErrorResponse:
        """Convert this exception to an ErrorResponse."""
        return ErrorResponse.from_code(self.code, self.message, self.details)


class InvalidArgumentError(PricingError):
    """Negative money or day counts, bad rates, or an inverted date range."""

    code = ErrorCode.INVALID_ARGUMENT


class InvalidDateError(PricingError):
    """A date input could not be parsed into a calendar date."""

    code = ErrorCode.INVALID_DATE


class OrderNumberExhaustedError(PricingError):
    """The registry refused every candidate order number."""

    code = ErrorCode.ORDER_NUMBER_EXHAUSTED
