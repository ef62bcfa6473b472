"""PGNFACTS package entrypoints."""

from pgnfacts.config import Settings, get_settings
from pgnfacts.encode_position import encode_position
from pgnfacts.EncodingLayout import BYTE_ALIGNED_LAYOUT, COMPACT_LAYOUT, EncodingLayout
from pgnfacts.import_games__pipeline import import_games, import_into_sink

__all__ = [
    "BYTE_ALIGNED_LAYOUT",
    "COMPACT_LAYOUT",
    "EncodingLayout",
    "Settings",
    "encode_position",
    "get_settings",
    "import_games",
    "import_into_sink",
]
