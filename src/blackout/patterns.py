from __future__ import annotations

from enum import Enum
from typing import Tuple

from .errors import InvalidArgument

Offset = Tuple[int, int]


class Pattern(Enum):
    CROSS = "cross"
    DIAGONAL = "diagonal"
    XSHAPE = "xshape"
    PLUS3 = "plus3"


# (0, 0) always comes first; the rest go clockwise from "up".
_OFFSETS: dict[Pattern, tuple[Offset, ...]] = {
    Pattern.CROSS: ((0, 0), (-1, 0), (0, 1), (1, 0), (0, -1)),
    Pattern.DIAGONAL: ((0, 0), (-1, -1), (-1, 1), (1, 1), (1, -1)),
    Pattern.XSHAPE: (
        (0, 0),
        (-1, -1),
        (-1, 0),
        (-1, 1),
        (0, 1),
        (1, 1),
        (1, 0),
        (1, -1),
        (0, -1),
    ),
    Pattern.PLUS3: (
        (0, 0),
        (-1, 0),
        (-2, 0),
        (0, 1),
        (0, 2),
        (1, 0),
        (2, 0),
        (0, -1),
        (0, -2),
    ),
}

_DISPLAY_NAMES = {
    Pattern.CROSS: "Cross (+)",
    Pattern.DIAGONAL: "Diagonal (X)",
    Pattern.XSHAPE: "All 8 (*)",
    Pattern.PLUS3: "Plus-3 (++)",
}


def as_pattern(pattern: Pattern | str) -> Pattern:
    """Accept a Pattern or its (case-insensitive) string value."""
    if isinstance(pattern, Pattern):
        return pattern
    try:
        return Pattern(str(pattern).lower())
    except ValueError:
        raise InvalidArgument(f"Unknown toggle pattern: {pattern!r}") from None


def offsets(pattern: Pattern | str) -> tuple[Offset, ...]:
    """Return the (dr, dc) offsets toggled by a click, self offset first."""
    return _OFFSETS[as_pattern(pattern)]


def display_name(pattern: Pattern | str) -> str:
    return _DISPLAY_NAMES[as_pattern(pattern)]
