from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from marketplace.booking.applications.booking_view import BookingView
from marketplace.booking.domain.entity import Booking
from marketplace.customer.domain.entity import Customer
from marketplace.hangar.domain.entity import Hangar


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HangarSummary(_CamelModel):
    """予約に埋め込むハンガー情報"""

    id: str
    name: str
    location: str | None
    price_per_day: str | None


class CustomerSummary(_CamelModel):
    """予約に埋め込む顧客情報"""

    id: str
    name: str | None
    email: str | None


class AircraftData(_CamelModel):
    type: str
    registration_number: str
    size: str


class PricingData(_CamelModel):
    price_per_day: str
    duration_days: int
    total_amount: str
    currency: str


class BookingData(_CamelModel):
    """予約データのレスポンスモデル"""

    id: str
    hangar_id: str
    hangar: HangarSummary | None
    customer_id: str
    customer: CustomerSummary | None
    start_date: str
    end_date: str
    aircraft: AircraftData
    status: str
    payment_status: str
    special_requests: str | None
    pricing: PricingData
    total_price: str
    created_at: str
    updated_at: str


class BookingDates(_CamelModel):
    start: str
    end: str


class BookingSummary(_CamelModel):
    """予約作成時の料金サマリー"""

    duration_days: int
    price_per_day: str
    total_price: str
    dates: BookingDates


class CreateBookingResponse(_CamelModel):
    """予約作成の成功レスポンスモデル"""

    success: bool = True
    booking: BookingData
    summary: BookingSummary


def _to_hangar_summary(hangar: Hangar | None) -> HangarSummary | None:
    if hangar is None:
        return None
    return HangarSummary(
        id=str(hangar.id),
        name=hangar.name,
        location=hangar.location,
        price_per_day=(
            str(hangar.price_per_day) if hangar.price_per_day is not None else None
        ),
    )


def _to_customer_summary(customer: Customer | None) -> CustomerSummary | None:
    if customer is None:
        return None
    return CustomerSummary(id=str(customer.id), name=customer.name, email=customer.email)


def _to_booking_data(view: BookingView) -> BookingData:
    booking = view.booking
    return BookingData(
        id=str(booking.id),
        hangar_id=str(booking.hangar_id),
        hangar=_to_hangar_summary(view.hangar),
        customer_id=str(booking.customer_id),
        customer=_to_customer_summary(view.customer),
        start_date=str(booking.period.start),
        end_date=str(booking.period.end),
        aircraft=AircraftData(
            type=booking.aircraft.aircraft_type,
            registration_number=booking.aircraft.registration_number,
            size=booking.aircraft.size.value,
        ),
        status=booking.status.value,
        payment_status=booking.payment_status.value,
        special_requests=booking.special_requests,
        pricing=PricingData(
            price_per_day=str(booking.pricing.price_per_day.amount),
            duration_days=booking.pricing.duration_days,
            total_amount=str(booking.pricing.total_amount.amount),
            currency=str(booking.pricing.price_per_day.currency),
        ),
        total_price=str(booking.pricing.total_amount.amount),
        created_at=booking.created_at.isoformat(),
        updated_at=booking.updated_at.isoformat(),
    )


def to_response(view: BookingView) -> dict:
    """BookingView をレスポンス辞書に変換する"""
    return _to_booking_data(view).model_dump(by_alias=True)


def booking_to_response(booking: Booking) -> dict:
    """参照先を解決していない Booking をレスポンス辞書に変換する"""
    return to_response(BookingView(booking=booking))


def to_create_response(view: BookingView) -> dict:
    """予約作成結果（予約 + 料金サマリー）をレスポンス辞書に変換する"""
    booking = view.booking
    return CreateBookingResponse(
        booking=_to_booking_data(view),
        summary=BookingSummary(
            duration_days=booking.pricing.duration_days,
            price_per_day=str(booking.pricing.price_per_day.amount),
            total_price=str(booking.pricing.total_amount.amount),
            dates=BookingDates(
                start=str(booking.period.start),
                end=str(booking.period.end),
            ),
        ),
    ).model_dump(by_alias=True)
