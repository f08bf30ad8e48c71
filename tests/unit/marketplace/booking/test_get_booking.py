from unittest.mock import MagicMock

import pytest

from marketplace.booking.applications.get_booking import GetBookingService
from marketplace.booking.domain.value_object import BookingId
from marketplace.shared.domain import CustomerId, ResourceNotFoundException


@pytest.fixture
def booking_repository():
    return MagicMock()


@pytest.fixture
def service(booking_repository, create_hangar):
    hangar_repository = MagicMock()
    hangar_repository.find_by_id.return_value = create_hangar()
    return GetBookingService(
        booking_repository=booking_repository, hangar_repository=hangar_repository
    )


class TestGetBookingService:
    def test_get_own_booking(self, service, booking_repository, create_booking, customer_id):
        booking_repository.find_by_id.return_value = create_booking()

        view = service.get(customer_id, BookingId("booking-1"))

        assert str(view.booking.id) == "booking-1"
        assert view.hangar is not None

    def test_other_customers_booking_is_not_found(
        self, service, booking_repository, create_booking
    ):
        """他人の予約は未存在と同じ扱い"""
        booking_repository.find_by_id.return_value = create_booking(
            customer_id="customer-123"
        )

        with pytest.raises(ResourceNotFoundException, match="Booking not found"):
            service.get(CustomerId("intruder"), BookingId("booking-1"))

    def test_missing_booking(self, service, booking_repository, customer_id):
        booking_repository.find_by_id.return_value = None

        with pytest.raises(ResourceNotFoundException):
            service.get(customer_id, BookingId("missing"))
