from marketplace.booking.applications.booking_view import BookingView
from marketplace.booking.domain.repository import BookingRepository
from marketplace.booking.domain.value_object import BookingId
from marketplace.hangar.domain.repository import HangarRepository
from marketplace.shared.domain import CustomerId, ResourceNotFoundException


class GetBookingService:
    """予約詳細を取得するユースケース"""

    def __init__(
        self,
        booking_repository: BookingRepository,
        hangar_repository: HangarRepository,
    ) -> None:
        self._booking_repository = booking_repository
        self._hangar_repository = hangar_repository

    def get(self, customer_id: CustomerId, booking_id: BookingId) -> BookingView:
        """本人の予約のみ返す

        他人の予約は存在を漏らさないよう、未存在と同じ ResourceNotFoundException にする。
        """
        booking = self._booking_repository.find_by_id(booking_id)
        if booking is None or not booking.is_owned_by(customer_id):
            raise ResourceNotFoundException("Booking not found")

        hangar = self._hangar_repository.find_by_id(booking.hangar_id)
        return BookingView(booking=booking, hangar=hangar)
