"""Interactive menu module."""

from .menu import MenuSession

__all__ = ["MenuSession"]
