from marketplace.booking.domain.entity import Booking
from marketplace.booking.domain.repository import BookingRepository
from marketplace.booking.domain.value_object import BookingId
from marketplace.shared.domain import CustomerId, ResourceNotFoundException


class CancelBookingService:
    """予約キャンセルのユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def cancel(self, customer_id: CustomerId, booking_id: BookingId) -> Booking:
        """本人の予約をキャンセルする

        Raises:
            ResourceNotFoundException: 予約が無い、または本人の予約でない
            InvalidStateTransitionException: キャンセル済み・完了済み
            OptimisticLockException: 読み取り後にステータスが変わった
        """
        booking = self._repository.find_by_id(booking_id)
        if booking is None or not booking.is_owned_by(customer_id):
            raise ResourceNotFoundException("Booking not found")

        expected_status = booking.status
        booking.cancel()
        self._repository.update(booking, expected_status=expected_status)
        return booking
