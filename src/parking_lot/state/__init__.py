"""State management module."""

from .errors import (
    ErrorKind,
    InvalidOrNotReserved,
    InvalidSpotId,
    NoAvailableSpot,
    RegistryError,
    SpotNotFound,
    SpotUnavailable,
)
from .models import LotState, Reservation, Spot, SpotStatus
from .spot_registry import SpotRegistry

__all__ = [
    "ErrorKind",
    "InvalidOrNotReserved",
    "InvalidSpotId",
    "LotState",
    "NoAvailableSpot",
    "RegistryError",
    "Reservation",
    "Spot",
    "SpotNotFound",
    "SpotRegistry",
    "SpotStatus",
    "SpotUnavailable",
]
