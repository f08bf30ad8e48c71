from marketplace.booking.applications.booking_view import BookingView
from marketplace.booking.domain.factory import BookingDetails, BookingFactory
from marketplace.booking.domain.repository import BookingRepository
from marketplace.customer.domain.repository import CustomerRepository
from marketplace.hangar.domain.repository import HangarRepository
from marketplace.hangar.domain.value_object import HangarId
from marketplace.shared.domain import CustomerId, ResourceNotFoundException


class CreateBookingService:
    """ハンガー予約作成のユースケース

    ハンガー料金の読み取りから予約の書き込みまでは排他制御しない。
    同一ハンガー・重複期間の予約も防止しない。
    """

    def __init__(
        self,
        booking_repository: BookingRepository,
        hangar_repository: HangarRepository,
        customer_repository: CustomerRepository,
        factory: BookingFactory,
    ) -> None:
        self._booking_repository = booking_repository
        self._hangar_repository = hangar_repository
        self._customer_repository = customer_repository
        self._factory = factory

    def create(self, customer_id: CustomerId, details: BookingDetails) -> BookingView:
        """ハンガーを予約する"""

        hangar = self._hangar_repository.find_by_id(HangarId(details["hangar_id"]))
        if hangar is None:
            raise ResourceNotFoundException("Hangar not found")

        booking = self._factory.create(customer_id, hangar, details)
        self._booking_repository.save(booking)

        customer = self._customer_repository.find_by_id(customer_id)
        return BookingView(booking=booking, hangar=hangar, customer=customer)
