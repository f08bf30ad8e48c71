from dataclasses import dataclass

from marketplace.booking.domain.entity import Booking
from marketplace.customer.domain.entity import Customer
from marketplace.hangar.domain.entity import Hangar


@dataclass(frozen=True)
class BookingView:
    """参照先（ハンガー・顧客）を解決済みの予約"""

    booking: Booking
    hangar: Hangar | None = None
    customer: Customer | None = None
