from .hangar_exceptions import InvalidHangarPricingException

__all__ = ["InvalidHangarPricingException"]
