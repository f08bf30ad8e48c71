from .api_client import ApiError, BookingApiClient
from .session import ClientSession

__all__ = ["ApiError", "BookingApiClient", "ClientSession"]
