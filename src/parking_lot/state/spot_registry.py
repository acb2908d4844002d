"""Parking spot allocation and reservation."""

import logging
from typing import Optional

from ..metrics import record_operation, update_spot_counts
from .errors import (
    InvalidOrNotReserved,
    InvalidSpotId,
    NoAvailableSpot,
    RegistryError,
    SpotNotFound,
    SpotUnavailable,
)
from .models import LotState, Reservation, Spot, SpotStatus

logger = logging.getLogger(__name__)


class SpotRegistry:
    """
    Owns a fixed set of numbered parking spots and their reservations.

    Spot ids run from 0 to capacity - 1 and never change. Every mutating
    operation validates before it touches any state, so a call either
    performs the whole transition or raises a RegistryError and leaves
    the registry as it was.
    """

    def __init__(self, capacity: int):
        """
        Initialize the registry.

        Args:
            capacity: Number of spots, all created free. Zero is allowed.

        Raises:
            ValueError: If capacity is not a non-negative integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise ValueError(f"Capacity must be a non-negative integer, got {capacity!r}")

        self.spots: list[Spot] = [Spot(id=i) for i in range(capacity)]
        self.reservations: dict[int, Reservation] = {}

        logger.info(f"Initialized SpotRegistry with {capacity} spots")
        self._update_counts()

    @property
    def capacity(self) -> int:
        """Number of spots in the registry."""
        return len(self.spots)

    # Queries

    def find_first_free(self) -> Optional[int]:
        """Return the lowest free spot id, or None if the lot is full."""
        for spot in self.spots:
            if spot.status == SpotStatus.FREE:
                return spot.id
        return None

    def find_nearest_free(self, position: int) -> Optional[int]:
        """
        Find the free spot closest to a position.

        Args:
            position: Any integer; it need not be an existing spot id

        Returns:
            Id of the nearest free spot (lowest id on ties), or None
        """
        nearest: Optional[int] = None
        min_distance: Optional[int] = None

        for spot in self.spots:
            if spot.status != SpotStatus.FREE:
                continue
            distance = abs(spot.id - position)
            if min_distance is None or distance < min_distance:
                min_distance = distance
                nearest = spot.id

        return nearest

    def get_reservation(self, spot_id: int) -> Optional[Reservation]:
        """Get the reservation held on a spot, if any."""
        return self.reservations.get(spot_id)

    def snapshot(self) -> list[tuple[int, SpotStatus]]:
        """Get (id, status) pairs for every spot in ascending id order."""
        return [(spot.id, spot.status) for spot in self.spots]

    def get_state(self) -> LotState:
        """Get a summary of the whole lot."""
        return LotState(
            capacity=self.capacity,
            free=self.available_count(),
            occupied=self.occupied_count(),
            reserved=self.reserved_count(),
            spots=[spot.model_copy() for spot in self.spots],
            reservations=[
                self.reservations[spot_id].model_copy()
                for spot_id in sorted(self.reservations)
            ],
        )

    def available_count(self) -> int:
        """Get count of free spots."""
        return self._count(SpotStatus.FREE)

    def occupied_count(self) -> int:
        """Get count of occupied spots."""
        return self._count(SpotStatus.OCCUPIED)

    def reserved_count(self) -> int:
        """Get count of reserved spots."""
        return self._count(SpotStatus.RESERVED)

    # Transitions

    def allocate_first_free(self) -> int:
        """
        Park in the lowest-numbered free spot.

        Returns:
            Id of the spot now occupied

        Raises:
            NoAvailableSpot: If every spot is occupied or reserved
        """
        spot_id = self.find_first_free()
        if spot_id is None:
            raise self._rejected("allocate_first_free", NoAvailableSpot())

        self._occupy(spot_id, "allocate_first_free")
        return spot_id

    def allocate_nearest(self, position: int) -> int:
        """
        Park in the free spot nearest to a position.

        Args:
            position: Reference position, compared against spot ids

        Returns:
            Id of the spot now occupied

        Raises:
            NoAvailableSpot: If every spot is occupied or reserved
        """
        spot_id = self.find_nearest_free(position)
        if spot_id is None:
            raise self._rejected("allocate_nearest", NoAvailableSpot())

        self._occupy(spot_id, "allocate_nearest")
        return spot_id

    def allocate_specific(self, spot_id: int) -> None:
        """
        Park in a chosen spot.

        Raises:
            InvalidSpotId: If spot_id is out of range
            SpotUnavailable: If the spot is occupied or reserved
        """
        if not self._in_range(spot_id):
            raise self._rejected("allocate_specific", InvalidSpotId(spot_id))
        if self.spots[spot_id].status != SpotStatus.FREE:
            raise self._rejected("allocate_specific", SpotUnavailable(spot_id))

        self._occupy(spot_id, "allocate_specific")

    def release(self, spot_id: int) -> None:
        """
        Remove the car from an occupied spot.

        Raises:
            SpotNotFound: If spot_id is out of range or the spot is not occupied
        """
        if not self._in_range(spot_id) or self.spots[spot_id].status != SpotStatus.OCCUPIED:
            raise self._rejected("release", SpotNotFound(spot_id))

        self.spots[spot_id].status = SpotStatus.FREE
        self._applied("release", spot_id, SpotStatus.OCCUPIED, SpotStatus.FREE)

    def reserve(self, spot_id: int, details: str) -> None:
        """
        Hold a free spot for later use.

        Args:
            spot_id: Spot to reserve
            details: Free-form reservation text, stored as given

        Raises:
            InvalidSpotId: If spot_id is out of range
            SpotUnavailable: If the spot is occupied or already reserved
        """
        if not self._in_range(spot_id):
            raise self._rejected("reserve", InvalidSpotId(spot_id))
        if self.spots[spot_id].status != SpotStatus.FREE:
            raise self._rejected("reserve", SpotUnavailable(spot_id))

        self.spots[spot_id].status = SpotStatus.RESERVED
        self.reservations[spot_id] = Reservation(spot_id=spot_id, details=details)
        self._applied("reserve", spot_id, SpotStatus.FREE, SpotStatus.RESERVED)

    def cancel_reservation(self, spot_id: int) -> None:
        """
        Drop the reservation on a spot and make it free again.

        Raises:
            InvalidOrNotReserved: If spot_id is out of range or not reserved
        """
        if not self._in_range(spot_id) or self.spots[spot_id].status != SpotStatus.RESERVED:
            raise self._rejected("cancel_reservation", InvalidOrNotReserved(spot_id))

        self.spots[spot_id].status = SpotStatus.FREE
        del self.reservations[spot_id]
        self._applied("cancel_reservation", spot_id, SpotStatus.RESERVED, SpotStatus.FREE)

    # Internals

    def _in_range(self, spot_id: int) -> bool:
        return 0 <= spot_id < len(self.spots)

    def _count(self, status: SpotStatus) -> int:
        return sum(1 for s in self.spots if s.status == status)

    def _occupy(self, spot_id: int, operation: str) -> None:
        self.spots[spot_id].status = SpotStatus.OCCUPIED
        self._applied(operation, spot_id, SpotStatus.FREE, SpotStatus.OCCUPIED)

    def _applied(
        self,
        operation: str,
        spot_id: int,
        old_status: SpotStatus,
        new_status: SpotStatus,
    ) -> None:
        logger.info(f"Spot {spot_id} changed: {old_status.value} -> {new_status.value}")
        record_operation(operation)
        self._update_counts()

    def _rejected(self, operation: str, error: RegistryError) -> RegistryError:
        logger.debug(f"{operation} rejected for spot {error.spot_id}: {error}")
        record_operation(operation, outcome=error.kind.value)
        return error

    def _update_counts(self) -> None:
        update_spot_counts(
            total=self.capacity,
            free=self.available_count(),
            occupied=self.occupied_count(),
            reserved=self.reserved_count(),
        )
