from .aircraft import Aircraft
from .booking_id import BookingId
from .booking_period import BookingPeriod
from .pricing import Pricing

__all__ = ["Aircraft", "BookingId", "BookingPeriod", "Pricing"]
