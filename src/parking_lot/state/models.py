"""Data models for parking spot state."""

from enum import Enum

from pydantic import BaseModel


class SpotStatus(str, Enum):
    """Status of a parking spot."""

    FREE = "free"
    OCCUPIED = "occupied"
    RESERVED = "reserved"


class Spot(BaseModel):
    """A single numbered parking spot."""

    id: int
    status: SpotStatus = SpotStatus.FREE


class Reservation(BaseModel):
    """Reservation details held for a reserved spot."""

    spot_id: int
    details: str


class LotState(BaseModel):
    """Overall parking lot state."""

    capacity: int
    free: int
    occupied: int
    reserved: int
    spots: list[Spot]
    reservations: list[Reservation]
