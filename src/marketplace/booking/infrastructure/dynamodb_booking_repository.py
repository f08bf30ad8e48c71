import os
from datetime import datetime
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from marketplace.booking.domain.entity import Booking
from marketplace.booking.domain.enum import AircraftSize, BookingStatus, PaymentStatus
from marketplace.booking.domain.repository import BookingRepository
from marketplace.booking.domain.value_object import (
    Aircraft,
    BookingId,
    BookingPeriod,
    Pricing,
)
from marketplace.hangar.domain.value_object import HangarId
from marketplace.shared.domain import Currency, CustomerId, IsoDateTime, Money
from marketplace.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    OptimisticLockException,
)


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    PK=BOOKING#<id> で1件取得し、GSI1 (CUSTOMER#<id> / BOOKING#<作成日時>#<id>)
    で顧客ごとの一覧を新しい順に取得する。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""
        item = {
            "PK": f"BOOKING#{booking.id}",
            "SK": "METADATA",
            "entity_type": "BOOKING",
            "booking_id": str(booking.id),
            "hangar_id": str(booking.hangar_id),
            "customer_id": str(booking.customer_id),
            "start_date": str(booking.period.start),
            "end_date": str(booking.period.end),
            "aircraft_type": booking.aircraft.aircraft_type,
            "aircraft_registration_number": booking.aircraft.registration_number,
            "aircraft_size": booking.aircraft.size.value,
            "status": booking.status.value,
            "payment_status": booking.payment_status.value,
            "price_per_day": str(booking.pricing.price_per_day.amount),
            "price_currency": str(booking.pricing.price_per_day.currency),
            "duration_days": booking.pricing.duration_days,
            "total_amount": str(booking.pricing.total_amount.amount),
            "created_at": booking.created_at.isoformat(),
            "updated_at": booking.updated_at.isoformat(),
            "GSI1PK": f"CUSTOMER#{booking.customer_id}",
            "GSI1SK": f"BOOKING#{booking.created_at.isoformat()}#{booking.id}",
        }
        if booking.special_requests is not None:
            item["special_requests"] = booking.special_requests
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(f"Booking already exists: {booking.id}")
            raise

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        response = self.table.get_item(
            Key={
                "PK": f"BOOKING#{booking_id}",
                "SK": "METADATA",
            },
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def find_by_customer_id(self, customer_id: CustomerId) -> list[Booking]:
        """顧客IDで予約を検索する（作成日時の降順、全ページ取得）"""
        kwargs: dict = {
            "IndexName": "GSI1",
            "KeyConditionExpression": Key("GSI1PK").eq(f"CUSTOMER#{customer_id}")
            & Key("GSI1SK").begins_with("BOOKING#"),
            "ScanIndexForward": False,
        }
        bookings: list[Booking] = []
        while True:
            response = self.table.query(**kwargs)
            bookings.extend(self._to_entity(item) for item in response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return bookings
            kwargs["ExclusiveStartKey"] = last_key

    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約のステータスを更新する"""
        kwargs: dict = {
            "Key": {
                "PK": f"BOOKING#{booking.id}",
                "SK": "METADATA",
            },
            "UpdateExpression": (
                "SET #status = :status, payment_status = :payment_status, "
                "updated_at = :updated_at"
            ),
            "ExpressionAttributeNames": {"#status": "status"},
            "ExpressionAttributeValues": {
                ":status": booking.status.value,
                ":payment_status": booking.payment_status.value,
                ":updated_at": booking.updated_at.isoformat(),
            },
        }

        if expected_status is not None:
            kwargs["ConditionExpression"] = Attr("status").eq(expected_status.value)

        try:
            self.table.update_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Booking status conflict: "
                    f"expected {expected_status}, "
                    f"booking_id={booking.id}"
                )
            raise

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        currency = Currency(item["price_currency"])
        return Booking(
            id=BookingId(value=item["booking_id"]),
            hangar_id=HangarId(value=item["hangar_id"]),
            customer_id=CustomerId(value=item["customer_id"]),
            period=BookingPeriod(
                start=IsoDateTime.from_string(item["start_date"]),
                end=IsoDateTime.from_string(item["end_date"]),
            ),
            aircraft=Aircraft(
                aircraft_type=item["aircraft_type"],
                registration_number=item["aircraft_registration_number"],
                size=AircraftSize(item["aircraft_size"]),
            ),
            pricing=Pricing(
                price_per_day=Money(
                    amount=Decimal(item["price_per_day"]), currency=currency
                ),
                duration_days=int(item["duration_days"]),
                total_amount=Money(
                    amount=Decimal(item["total_amount"]), currency=currency
                ),
            ),
            status=BookingStatus(item["status"]),
            payment_status=PaymentStatus(item["payment_status"]),
            special_requests=item.get("special_requests"),
            created_at=datetime.fromisoformat(item["created_at"]),
            updated_at=datetime.fromisoformat(item["updated_at"]),
        )
