from .entity import Hangar
from .exception import InvalidHangarPricingException
from .repository import HangarRepository
from .value_object import HangarId

__all__ = [
    "Hangar",
    "HangarId",
    "HangarRepository",
    "InvalidHangarPricingException",
]
