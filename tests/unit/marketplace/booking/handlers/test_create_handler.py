import json
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from marketplace.booking.applications.create_booking import CreateBookingService
from marketplace.booking.domain.factory import BookingFactory
from marketplace.booking.handlers import create

VALID_BODY = {
    "hangarId": "hangar-123",
    "startDate": "2024-01-01T00:00:00Z",
    "endDate": "2024-01-03T00:00:00Z",
    "aircraft": {"type": "Cessna 172", "registrationNumber": "N12345", "size": "small"},
}


@pytest.fixture
def repositories(monkeypatch, create_hangar, create_customer):
    booking_repository = MagicMock()
    hangar_repository = MagicMock()
    hangar_repository.find_by_id.return_value = create_hangar()
    customer_repository = MagicMock()
    customer_repository.find_by_id.return_value = create_customer()
    monkeypatch.setattr(
        create,
        "service",
        CreateBookingService(
            booking_repository=booking_repository,
            hangar_repository=hangar_repository,
            customer_repository=customer_repository,
            factory=BookingFactory(),
        ),
    )
    return booking_repository, hangar_repository


class TestCreateHandler:
    def test_create_booking(self, repositories, api_event, lambda_context):
        booking_repository, _ = repositories
        event = api_event(body=VALID_BODY, http_method="POST")

        response = create.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 201
        body = json.loads(response["body"])
        assert body["success"] is True
        booking = body["booking"]
        assert booking["status"] == "pending"
        assert booking["paymentStatus"] == "pending"
        assert booking["customerId"] == "customer-123"
        assert booking["totalPrice"] == "200"
        assert booking["pricing"] == {
            "pricePerDay": "100",
            "durationDays": 2,
            "totalAmount": "200",
            "currency": "USD",
        }
        assert booking["hangar"]["name"] == "North Field Hangar 4"
        assert booking["customer"]["email"] == "ops@skyline.example"
        assert body["summary"]["durationDays"] == 2
        assert body["summary"]["totalPrice"] == "200"
        assert body["summary"]["dates"]["start"] == "2024-01-01T00:00:00+00:00"
        booking_repository.save.assert_called_once()

    def test_body_customer_id_is_ignored(self, repositories, api_event, lambda_context):
        event = api_event(
            body={**VALID_BODY, "customerId": "someone-else"},
            http_method="POST",
            sub="customer-123",
        )

        response = create.lambda_handler(event, lambda_context)

        assert json.loads(response["body"])["booking"]["customerId"] == "customer-123"

    def test_missing_hangar_returns_404(self, repositories, api_event, lambda_context):
        _, hangar_repository = repositories
        hangar_repository.find_by_id.return_value = None

        response = create.lambda_handler(
            api_event(body=VALID_BODY, http_method="POST"), lambda_context
        )

        assert response["statusCode"] == 404
        assert json.loads(response["body"]) == {"error": "Hangar not found"}

    def test_invalid_hangar_price_returns_400(
        self, repositories, create_hangar, api_event, lambda_context
    ):
        booking_repository, hangar_repository = repositories
        hangar_repository.find_by_id.return_value = create_hangar(
            price_per_day=Decimal("0")
        )

        response = create.lambda_handler(
            api_event(body=VALID_BODY, http_method="POST"), lambda_context
        )

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["error"] == "Invalid hangar pricing configuration"
        assert body["details"] == "Hangar price must be a positive number"
        assert body["hangarData"] == {"id": "hangar-123", "currentPrice": "0"}
        booking_repository.save.assert_not_called()

    def test_reversed_dates_return_400(self, repositories, api_event, lambda_context):
        booking_repository, _ = repositories
        body = {
            **VALID_BODY,
            "startDate": "2024-01-03T00:00:00Z",
            "endDate": "2024-01-01T00:00:00Z",
        }

        response = create.lambda_handler(
            api_event(body=body, http_method="POST"), lambda_context
        )

        assert response["statusCode"] == 400
        assert json.loads(response["body"]) == {
            "error": "End date must be after start date"
        }
        booking_repository.save.assert_not_called()

    def test_malformed_body_returns_400(self, repositories, api_event, lambda_context):
        body = {**VALID_BODY, "aircraft": {"type": "Cessna 172"}}

        response = create.lambda_handler(
            api_event(body=body, http_method="POST"), lambda_context
        )

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error"] == "Invalid booking request"

    @pytest.mark.parametrize("field", ["type", "registrationNumber"])
    def test_blank_aircraft_field_returns_400(
        self, repositories, api_event, lambda_context, field
    ):
        """空白だけの機体情報は入力不正として 400"""
        booking_repository, _ = repositories
        body = {**VALID_BODY, "aircraft": {**VALID_BODY["aircraft"], field: "   "}}

        response = create.lambda_handler(
            api_event(body=body, http_method="POST"), lambda_context
        )

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error"] == "Invalid booking request"
        booking_repository.save.assert_not_called()

    def test_unauthenticated_returns_401(self, repositories, api_event, lambda_context):
        response = create.lambda_handler(
            api_event(body=VALID_BODY, http_method="POST", sub=None), lambda_context
        )

        assert response["statusCode"] == 401

    def test_store_failure_returns_500(self, repositories, api_event, lambda_context):
        booking_repository, _ = repositories
        booking_repository.save.side_effect = RuntimeError("store unavailable")

        response = create.lambda_handler(
            api_event(body=VALID_BODY, http_method="POST"), lambda_context
        )

        assert response["statusCode"] == 500
        assert json.loads(response["body"]) == {
            "success": False,
            "message": "Error creating booking",
            "error": "store unavailable",
        }
