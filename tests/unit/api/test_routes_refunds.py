"""Unit tests for refund API routes.

Tests for:
- POST /api/refunds/preview
- POST /api/refunds/can-cancel
- GET /api/refunds/policy
"""

import datetime as dt
from decimal import Decimal
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from starlette.status import HTTP_200_OK, HTTP_400_BAD_REQUEST

from petfoster.api.dependencies import get_refund_policy_service
from petfoster.api.main import app
from petfoster.services.refund_policy_service import RefundPolicyService

FIXED_NOW = dt.datetime(2026, 7, 10, 12, 0, 0)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client whose refund service clock is pinned to FIXED_NOW."""
    app.dependency_overrides[get_refund_policy_service] = lambda: RefundPolicyService(
        clock=lambda: FIXED_NOW
    )
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestRefundPreview:
    """Tests for POST /api/refunds/preview."""

    def test_full_refund(self, client: TestClient) -> None:
        response = client.post(
            "/api/refunds/preview",
            json={
                "total_price": 95000,
                "start_date": "2026-07-20",
                "end_date": "2026-07-29",
                "cancel_at": "2026-07-10T12:00:00",
            },
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["classification"] == "full"
        assert data["refund_amount"] == 95000
        assert data["cancellation_fee"] == 0
        assert data["estimated_settlement_days"] == 5

    def test_late_cancellation_uses_clock(self, client: TestClient) -> None:
        """Without cancel_at the injected clock (24h before start) applies."""
        response = client.post(
            "/api/refunds/preview",
            json={"total_price": 1000, "start_date": "2026-07-11T12:00:00", "end_date": "2026-07-15"},
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["classification"] == "partial"
        assert data["reason_code"] == "cancelled_late"
        assert data["refund_amount"] == 700
        assert data["cancellation_fee"] == 300
        assert Decimal(str(data["refund_rate"])) == Decimal("0.7")

    def test_prorated_after_start(self, client: TestClient) -> None:
        response = client.post(
            "/api/refunds/preview",
            json={"total_price": 1000, "start_date": "2026-07-06", "end_date": "2026-07-15"},
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["reason_code"] == "prorated_after_start"
        assert data["remaining_days"] == 5
        assert data["refund_amount"] == 350

    def test_end_before_start_returns_400(self, client: TestClient) -> None:
        response = client.post(
            "/api/refunds/preview",
            json={"total_price": 1000, "start_date": "2026-07-20", "end_date": "2026-07-13"},
        )
        assert response.status_code == HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "ERR_PRICE_001"

    def test_single_day_stay_with_check_in_time(self, client: TestClient) -> None:
        response = client.post(
            "/api/refunds/preview",
            json={
                "total_price": 1000,
                "start_date": "2026-07-15T14:00:00",
                "end_date": "2026-07-15",
                "cancel_at": "2026-07-10T12:00:00",
            },
        )
        assert response.status_code == HTTP_200_OK
        assert response.json()["classification"] == "full"

    def test_negative_total_returns_400(self, client: TestClient) -> None:
        response = client.post(
            "/api/refunds/preview",
            json={"total_price": -5, "start_date": "2026-07-20", "end_date": "2026-07-23"},
        )
        assert response.status_code == HTTP_400_BAD_REQUEST


class TestCanCancel:
    """Tests for POST /api/refunds/can-cancel."""

    def test_completed_booking(self, client: TestClient) -> None:
        response = client.post(
            "/api/refunds/can-cancel", json={"start_date": "2026-07-01", "status": "completed"}
        )
        assert response.status_code == HTTP_200_OK
        assert response.json()["allowed"] is False

    def test_in_progress_booking_is_prorated(self, client: TestClient) -> None:
        response = client.post(
            "/api/refunds/can-cancel", json={"start_date": "2026-07-08", "status": "in_progress"}
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["allowed"] is True
        assert data["prorated"] is True

    def test_unlisted_status_allowed(self, client: TestClient) -> None:
        response = client.post(
            "/api/refunds/can-cancel", json={"start_date": "2026-07-20", "status": "paid"}
        )
        assert response.status_code == HTTP_200_OK
        assert response.json()["allowed"] is True

    def test_bad_start_date_returns_400(self, client: TestClient) -> None:
        response = client.post(
            "/api/refunds/can-cancel", json={"start_date": "soon", "status": "confirmed"}
        )
        assert response.status_code == HTTP_400_BAD_REQUEST
        assert response.json()["error_code"] == "ERR_PRICE_002"


class TestRefundPolicy:
    def test_policy_rules(self, client: TestClient) -> None:
        response = client.get("/api/refunds/policy")
        assert response.status_code == HTTP_200_OK
        assert len(response.json()["rules"]) == 4
