from .entity import Booking as Booking
from .enum import AircraftSize as AircraftSize
from .enum import BookingStatus as BookingStatus
from .enum import PaymentStatus as PaymentStatus
from .exception import InvalidBookingPeriodException as InvalidBookingPeriodException
from .factory import BookingDetails as BookingDetails
from .factory import BookingFactory as BookingFactory
from .repository import BookingRepository as BookingRepository
from .value_object import Aircraft as Aircraft
from .value_object import BookingId as BookingId
from .value_object import BookingPeriod as BookingPeriod
from .value_object import Pricing as Pricing
