from datetime import datetime
from typing import TypedDict

from marketplace.booking.domain.entity import Booking
from marketplace.booking.domain.enum import AircraftSize, BookingStatus, PaymentStatus
from marketplace.booking.domain.value_object import (
    Aircraft,
    BookingId,
    BookingPeriod,
    Pricing,
)
from marketplace.hangar.domain.entity import Hangar
from marketplace.shared.domain import CustomerId, IsoDateTime


class BookingDetails(TypedDict):
    """予約リクエストの入力データ"""

    hangar_id: str
    start_date: datetime
    end_date: datetime
    aircraft_type: str
    aircraft_registration_number: str
    aircraft_size: str
    special_requests: str | None


class BookingFactory:
    """ハンガー予約を生成するFactory"""

    def create(
        self, customer_id: CustomerId, hangar: Hangar, details: BookingDetails
    ) -> Booking:
        """新規予約のエンティティを作成する

        料金設定の検証 → 期間の検証 → 料金計算 の順に行う。
        """

        daily_rate = hangar.daily_rate()
        period = BookingPeriod(
            start=IsoDateTime(details["start_date"]),
            end=IsoDateTime(details["end_date"]),
        )
        aircraft = Aircraft(
            aircraft_type=details["aircraft_type"],
            registration_number=details["aircraft_registration_number"],
            size=AircraftSize(details["aircraft_size"]),
        )

        return Booking(
            id=BookingId.generate(),
            hangar_id=hangar.id,
            customer_id=customer_id,
            period=period,
            aircraft=aircraft,
            pricing=Pricing.calculate(daily_rate, period),
            status=BookingStatus.PENDING,
            payment_status=PaymentStatus.PENDING,
            special_requests=details.get("special_requests"),
        )
