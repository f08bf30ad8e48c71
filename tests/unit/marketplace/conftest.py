import json
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from marketplace.booking.domain.entity import Booking
from marketplace.booking.domain.enum import AircraftSize, BookingStatus
from marketplace.booking.domain.value_object import (
    Aircraft,
    BookingId,
    BookingPeriod,
    Pricing,
)
from marketplace.customer.domain.entity import Customer
from marketplace.hangar.domain.entity import Hangar
from marketplace.hangar.domain.value_object import HangarId
from marketplace.shared.domain import Currency, CustomerId, IsoDateTime, Money


@pytest.fixture
def customer_id():
    """全テスト共通の呼び出し元 CustomerId フィクスチャ"""
    return CustomerId(value="customer-123")


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def create_hangar():
    """Hangar を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        hangar_id: str = "hangar-123",
        name: str = "North Field Hangar 4",
        location: str | None = "KBFI, Seattle",
        price_per_day: Decimal | None = Decimal("100"),
        currency: str = "USD",
    ) -> Hangar:
        return Hangar(
            id=HangarId(value=hangar_id),
            name=name,
            location=location,
            price_per_day=price_per_day,
            currency=Currency(currency),
        )

    return _factory


@pytest.fixture
def create_customer():
    """Customer を生成する Factory fixture"""

    def _factory(
        customer_id: str = "customer-123",
        name: str | None = "Skyline Aviation",
        email: str | None = "ops@skyline.example",
    ) -> Customer:
        return Customer(id=CustomerId(value=customer_id), name=name, email=email)

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture"""

    def _factory(
        status: BookingStatus = BookingStatus.PENDING,
        booking_id: str = "booking-1",
        hangar_id: str = "hangar-123",
        customer_id: str = "customer-123",
        start: str = "2024-01-01T00:00:00Z",
        end: str = "2024-01-03T00:00:00Z",
        price_per_day: Decimal = Decimal("100"),
        created_at: datetime | None = None,
    ) -> Booking:
        period = BookingPeriod(
            start=IsoDateTime.from_string(start),
            end=IsoDateTime.from_string(end),
        )
        return Booking(
            id=BookingId(value=booking_id),
            hangar_id=HangarId(value=hangar_id),
            customer_id=CustomerId(value=customer_id),
            period=period,
            aircraft=Aircraft(
                aircraft_type="Cessna 172",
                registration_number="N12345",
                size=AircraftSize.SMALL,
            ),
            pricing=Pricing.calculate(Money.usd(price_per_day), period),
            status=status,
            created_at=created_at or datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

    return _factory


@dataclass
class FakeLambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:test"
    aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"


@pytest.fixture
def lambda_context():
    return FakeLambdaContext()


@pytest.fixture
def api_event():
    """API Gateway (REST, Lambda Proxy) のイベントを生成する Factory fixture"""

    def _factory(
        body: dict | None = None,
        path_parameters: dict | None = None,
        sub: str | None = "customer-123",
        http_method: str = "GET",
        path: str = "/bookings",
    ) -> dict:
        authorizer = {"claims": {"sub": sub, "email": "ops@skyline.example"}} if sub else {}
        return {
            "resource": path,
            "path": path,
            "httpMethod": http_method,
            "headers": {"Content-Type": "application/json"},
            "multiValueHeaders": {},
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "pathParameters": path_parameters,
            "stageVariables": None,
            "requestContext": {
                "requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef",
                "stage": "api",
                "httpMethod": http_method,
                "authorizer": authorizer,
            },
            "body": json.dumps(body) if body is not None else None,
            "isBase64Encoded": False,
        }

    return _factory
