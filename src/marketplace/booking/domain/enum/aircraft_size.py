from enum import Enum


class AircraftSize(str, Enum):
    """機体サイズ区分"""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
