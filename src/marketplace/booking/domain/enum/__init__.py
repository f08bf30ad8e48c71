from .aircraft_size import AircraftSize
from .booking_status import BookingStatus
from .payment_status import PaymentStatus

__all__ = ["AircraftSize", "BookingStatus", "PaymentStatus"]
