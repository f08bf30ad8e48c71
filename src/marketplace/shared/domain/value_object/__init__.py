from .currency import Currency
from .customer_id import CustomerId
from .iso_date_time import IsoDateTime
from .money import Money

__all__ = ["CustomerId", "Currency", "Money", "IsoDateTime"]
