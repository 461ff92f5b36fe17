from __future__ import annotations


class BlackoutError(Exception):
    """Base class for errors raised by the puzzle engine."""

    pass


class InvalidArgument(BlackoutError, ValueError):
    """Raised for bad dimensions, click ranges, snapshots or random sources."""

    pass


class OutOfRange(BlackoutError, IndexError):
    """Raised when a coordinate falls outside the grid."""

    pass


class InvalidState(BlackoutError, RuntimeError):
    """Raised when an operation is not valid for the board's current state."""

    pass
