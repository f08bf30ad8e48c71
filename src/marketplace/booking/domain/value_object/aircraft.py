from dataclasses import dataclass

from marketplace.booking.domain.enum import AircraftSize


@dataclass(frozen=True)
class Aircraft:
    """預ける機体の情報"""

    aircraft_type: str
    registration_number: str
    size: AircraftSize

    def __post_init__(self) -> None:
        if not self.aircraft_type or not self.aircraft_type.strip():
            raise ValueError("Aircraft type cannot be empty")
        if not self.registration_number or not self.registration_number.strip():
            raise ValueError("Registration number cannot be empty")
        object.__setattr__(self, "size", AircraftSize(self.size))
