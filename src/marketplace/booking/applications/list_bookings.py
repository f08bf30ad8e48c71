from marketplace.booking.applications.booking_view import BookingView
from marketplace.booking.domain.repository import BookingRepository
from marketplace.hangar.domain.entity import Hangar
from marketplace.hangar.domain.repository import HangarRepository
from marketplace.hangar.domain.value_object import HangarId
from marketplace.shared.domain import CustomerId


class ListBookingsService:
    """呼び出し元の予約一覧を取得するユースケース"""

    def __init__(
        self,
        booking_repository: BookingRepository,
        hangar_repository: HangarRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._hangar_repository = hangar_repository

    def list_for_customer(self, customer_id: CustomerId) -> list[BookingView]:
        """作成日時の新しい順に返す。ハンガー情報は同一IDにつき1回だけ引く"""
        bookings = self._booking_repository.find_by_customer_id(customer_id)

        hangars: dict[HangarId, Hangar | None] = {}
        views: list[BookingView] = []
        for booking in bookings:
            if booking.hangar_id not in hangars:
                hangars[booking.hangar_id] = self._hangar_repository.find_by_id(
                    booking.hangar_id
                )
            views.append(BookingView(booking=booking, hangar=hangars[booking.hangar_id]))
        return views
