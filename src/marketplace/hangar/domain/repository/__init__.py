from .hangar_repository import HangarRepository

__all__ = ["HangarRepository"]
