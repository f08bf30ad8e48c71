from .hangar import Hangar

__all__ = ["Hangar"]
