"""Port interfaces for the pgnfacts application."""

from pgnfacts.ports.position_sink import PositionSink  # noqa: F401
