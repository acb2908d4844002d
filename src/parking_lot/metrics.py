"""Prometheus metrics for parking lot activity."""

from prometheus_client import Counter, Gauge, CollectorRegistry, generate_latest

# Create a custom registry to avoid conflicts with default metrics
REGISTRY = CollectorRegistry()

# Registry operations by outcome ("ok" or an error kind)
OPERATIONS = Counter(
    "parking_lot_operations_total",
    "Total number of spot registry operations",
    ["operation", "outcome"],
    registry=REGISTRY,
)

# Total spots gauges
TOTAL_SPOTS = Gauge(
    "parking_lot_spots_total",
    "Total number of parking spots",
    registry=REGISTRY,
)

FREE_SPOTS = Gauge(
    "parking_lot_spots_free",
    "Number of free parking spots",
    registry=REGISTRY,
)

OCCUPIED_SPOTS = Gauge(
    "parking_lot_spots_occupied",
    "Number of occupied parking spots",
    registry=REGISTRY,
)

RESERVED_SPOTS = Gauge(
    "parking_lot_spots_reserved",
    "Number of reserved parking spots",
    registry=REGISTRY,
)


def record_operation(operation: str, outcome: str = "ok") -> None:
    """Record a registry operation and its outcome."""
    OPERATIONS.labels(operation=operation, outcome=outcome).inc()


def update_spot_counts(total: int, free: int, occupied: int, reserved: int) -> None:
    """Update overall spot count gauges."""
    TOTAL_SPOTS.set(total)
    FREE_SPOTS.set(free)
    OCCUPIED_SPOTS.set(occupied)
    RESERVED_SPOTS.set(reserved)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest(REGISTRY)
