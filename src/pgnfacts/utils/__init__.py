"""Utility exports for the pgnfacts package."""

from .logger import get_logger, set_level
from .to_int import to_int

__all__ = [
    "get_logger",
    "set_level",
    "to_int",
]
