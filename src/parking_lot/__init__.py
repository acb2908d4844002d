"""Fixed-capacity parking lot with spot allocation and reservations."""

__version__ = "1.0.0"
