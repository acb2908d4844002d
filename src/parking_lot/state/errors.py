"""Errors raised by the spot registry."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of registry failure kinds."""

    INVALID_SPOT_ID = "invalid_spot_id"
    SPOT_UNAVAILABLE = "spot_unavailable"
    SPOT_NOT_FOUND = "spot_not_found"
    INVALID_OR_NOT_RESERVED = "invalid_or_not_reserved"
    NO_AVAILABLE_SPOT = "no_available_spot"


class RegistryError(Exception):
    """
    Base class for recoverable registry failures.

    The registry state is unchanged whenever one of these is raised.
    """

    kind: ErrorKind
    message: str = "Registry error"

    def __init__(self, spot_id: Optional[int] = None):
        super().__init__(self.message)
        self.spot_id = spot_id

    def __str__(self) -> str:
        return self.message


class InvalidSpotId(RegistryError):
    """Referenced spot id is outside the registry."""

    kind = ErrorKind.INVALID_SPOT_ID
    message = "Invalid spot ID"


class SpotUnavailable(RegistryError):
    """Spot exists but is not free."""

    kind = ErrorKind.SPOT_UNAVAILABLE
    message = "Spot already occupied or reserved"


class SpotNotFound(RegistryError):
    """Release target is out of range or not occupied."""

    kind = ErrorKind.SPOT_NOT_FOUND
    message = "Spot not found or already empty"


class InvalidOrNotReserved(RegistryError):
    """Cancellation target is out of range or not reserved."""

    kind = ErrorKind.INVALID_OR_NOT_RESERVED
    message = "Invalid spot ID or spot not reserved"


class NoAvailableSpot(RegistryError):
    """No free spot exists for an automatic allocation."""

    kind = ErrorKind.NO_AVAILABLE_SPOT
    message = "No available spots"
