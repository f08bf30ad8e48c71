from .booking_exceptions import InvalidBookingPeriodException

__all__ = ["InvalidBookingPeriodException"]
