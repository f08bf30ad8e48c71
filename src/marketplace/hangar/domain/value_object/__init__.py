from .hangar_id import HangarId

__all__ = ["HangarId"]
