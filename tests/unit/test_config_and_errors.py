"""Unit tests for settings loading and the error taxonomy."""

from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from petfoster.api.exceptions import get_http_status_for_error
from petfoster.config import Settings, get_settings
from petfoster.models import (
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    ErrorCode,
    ErrorResponse,
    InvalidArgumentError,
    InvalidDateError,
    OrderNumberExhaustedError,
    PricingError,
)


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "ENVIRONMENT",
            "PETFOSTER_TIMEZONE",
            "PETFOSTER_ORDER_PREFIX",
            "PETFOSTER_CURRENCY_SYMBOL",
            "LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = Settings.from_env()

        assert settings.environment == "dev"
        assert settings.timezone == "UTC"
        assert settings.order_prefix == "PF"
        assert settings.currency_symbol == "¥"
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PETFOSTER_TIMEZONE", "Asia/Shanghai")
        monkeypatch.setenv("PETFOSTER_ORDER_PREFIX", "PET")
        monkeypatch.setenv("LOG_LEVEL", "warning")
        get_settings.cache_clear()

        settings = get_settings()

        assert settings.tzinfo == ZoneInfo("Asia/Shanghai")
        assert settings.order_prefix == "PET"
        assert settings.log_level == "WARNING"

    def test_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_unknown_timezone_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(timezone="Mars/Olympus_Mons")

    def test_bad_prefix_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(order_prefix="pf")


class TestErrorTaxonomy:
    """Tests for PricingError and its subclasses."""

    def test_every_code_has_message_and_recovery(self) -> None:
        for code in ErrorCode:
            assert code in ERROR_MESSAGES
            assert code in ERROR_RECOVERY

    def test_subclasses_carry_their_code(self) -> None:
        assert InvalidArgumentError().code == ErrorCode.INVALID_ARGUMENT
        assert InvalidDateError().code == ErrorCode.INVALID_DATE
        assert OrderNumberExhaustedError().code == ErrorCode.ORDER_NUMBER_EXHAUSTED
        assert issubclass(InvalidDateError, PricingError)

    def test_default_message(self) -> None:
        error = InvalidDateError()
        assert error.message == ERROR_MESSAGES[ErrorCode.INVALID_DATE]
        assert str(error) == error.message

    def test_to_error_response(self) -> None:
        error = InvalidArgumentError("days must be non-negative", details={"days": "-1"})
        response = error.to_error_response()

        assert isinstance(response, ErrorResponse)
        assert response.success is False
        assert response.error_code == ErrorCode.INVALID_ARGUMENT
        assert response.message == "days must be non-negative"
        assert response.recovery == ERROR_RECOVERY[ErrorCode.INVALID_ARGUMENT]
        assert response.details == {"days": "-1"}

    def test_error_response_json(self) -> None:
        body = ErrorResponse.from_code(ErrorCode.INVALID_DATE).model_dump(mode="json")

        assert body["error_code"] == "ERR_PRICE_002"
        assert body["details"] is None


class TestHttpStatusMapping:
    """Tests for ErrorCode to HTTP status mapping."""

    def test_input_errors_are_400(self) -> None:
        assert get_http_status_for_error(ErrorCode.INVALID_ARGUMENT) == 400
        assert get_http_status_for_error(ErrorCode.INVALID_DATE) == 400

    def test_exhausted_order_numbers_are_503(self) -> None:
        assert get_http_status_for_error(ErrorCode.ORDER_NUMBER_EXHAUSTED) == 503
