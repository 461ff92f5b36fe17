from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from .errors import InvalidArgument, InvalidState, OutOfRange
from .patterns import Offset, Pattern, as_pattern, offsets

Cell = Tuple[int, int]

DEFAULT_MIN_CLICKS = 5
DEFAULT_MAX_CLICKS = 15


class Board:
    """Rectangular Lights Out grid with a toggle pattern, move count and undo.

    A click flips every in-bounds cell of the pattern footprint around it;
    footprint cells that fall off the grid are skipped. Clicks are XORs, so
    clicking the same cell twice is a no-op and click order never matters.
    """

    def __init__(
        self,
        rows: int,
        cols: Optional[int] = None,
        pattern: Pattern | str = Pattern.CROSS,
    ):
        if cols is None:
            cols = rows
        for name, value in (("rows", rows), ("cols", cols)):
            if isinstance(value, bool) or not isinstance(
                value, (int, np.integer)
            ):
                raise InvalidArgument(
                    f"{name} must be an integer, got {value!r}"
                )
        if rows <= 0:
            raise InvalidArgument(f"rows must be positive, got {rows}")
        if cols <= 0:
            raise InvalidArgument(f"cols must be positive, got {cols}")

        self._rows = int(rows)
        self._cols = int(cols)
        self._pattern = as_pattern(pattern)
        self._offsets: tuple[Offset, ...] = offsets(self._pattern)
        self.state = np.zeros((self._rows, self._cols), dtype=bool)
        self._history: List[Cell] = []

    # -- accessors --------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def size(self) -> int:
        """Side length of a square grid."""
        if self._rows != self._cols:
            raise InvalidState(
                f"Grid is {self._rows}x{self._cols}, not square; "
                "use rows and cols instead."
            )
        return self._rows

    @property
    def pattern(self) -> Pattern:
        return self._pattern

    @property
    def offsets(self) -> tuple[Offset, ...]:
        return self._offsets

    @property
    def move_count(self) -> int:
        return len(self._history)

    @property
    def can_undo(self) -> bool:
        return len(self._history) > 0

    def is_light_on(self, row: int, col: int) -> bool:
        self._check_bounds(row, col)
        return bool(self.state[row, col])

    def has_won(self) -> bool:
        return not self.state.any()

    def count_on(self) -> int:
        return int(self.state.sum())

    def to_flat(self) -> np.ndarray:
        """Row-major copy of the grid."""
        return self.state.reshape(-1).copy()

    def get_board_snapshot(self) -> np.ndarray:
        return self.state.copy()

    def copy(self) -> "Board":
        """Independent board with the same grid; tracking starts from zero."""
        other = Board(self._rows, self._cols, self._pattern)
        other.state = self.state.copy()
        return other

    # -- gameplay ---------------------------------------------------------

    def toggle(self, row: int, col: int) -> None:
        self._check_bounds(row, col)
        self._press_in_place(row, col)
        self._history.append((row, col))

    def undo(self) -> Cell:
        """Revert the most recent click and return its coordinates."""
        if not self._history:
            raise InvalidState("No moves to undo.")
        row, col = self._history.pop()
        self._press_in_place(row, col)
        return row, col

    # -- authoring --------------------------------------------------------

    def set_all(self, on: bool) -> None:
        self.state[:, :] = bool(on)
        self._reset_tracking()

    def set_light(self, row: int, col: int, on: bool) -> None:
        """Write a single cell without touching neighbors or move tracking."""
        self._check_bounds(row, col)
        self.state[row, col] = bool(on)

    def randomize(
        self,
        rng: np.random.Generator,
        min_clicks: int = DEFAULT_MIN_CLICKS,
        max_clicks: int = DEFAULT_MAX_CLICKS,
    ) -> None:
        """Scramble the board by random clicks from the solved state.

        Every board produced this way is solvable for the board's pattern,
        since each click can be undone by clicking it again.
        """
        if rng is None:
            raise InvalidArgument("A random generator is required.")
        if min_clicks < 0:
            raise InvalidArgument(
                f"min_clicks must be non-negative, got {min_clicks}"
            )
        if min_clicks > max_clicks:
            raise InvalidArgument(
                f"max_clicks ({max_clicks}) must be >= min_clicks ({min_clicks})"
            )

        self.state[:, :] = False
        clicks = int(rng.integers(min_clicks, max_clicks + 1))
        for _ in range(clicks):
            self._press_random(rng)
        if self.has_won():
            self._press_random(rng)
        self._reset_tracking()

    def load_board(self, snapshot) -> None:
        if snapshot is None:
            raise InvalidArgument("Snapshot is required.")
        try:
            grid = np.asarray(snapshot, dtype=bool)
        except ValueError:
            # ragged rows
            raise InvalidArgument(
                f"Snapshot is not a {self._rows}x{self._cols} grid"
            ) from None
        if grid.shape != (self._rows, self._cols):
            raise InvalidArgument(
                f"Snapshot shape {grid.shape} does not match board "
                f"{(self._rows, self._cols)}"
            )
        self.state = grid.copy()
        self._reset_tracking()

    # -- internals --------------------------------------------------------

    def _press_in_place(self, row: int, col: int) -> None:
        for dr, dc in self._offsets:
            r, c = row + dr, col + dc
            if 0 <= r < self._rows and 0 <= c < self._cols:
                self.state[r, c] ^= True

    def _press_random(self, rng: np.random.Generator) -> None:
        row = int(rng.integers(self._rows))
        col = int(rng.integers(self._cols))
        self._press_in_place(row, col)

    def _reset_tracking(self) -> None:
        self._history.clear()

    def _check_bounds(self, row: int, col: int) -> None:
        if not 0 <= row < self._rows:
            raise OutOfRange(
                f"row must be between 0 and {self._rows - 1}, got {row}"
            )
        if not 0 <= col < self._cols:
            raise OutOfRange(
                f"col must be between 0 and {self._cols - 1}, got {col}"
            )

    def __repr__(self):
        return (
            f"Board(rows={self._rows}, cols={self._cols}, "
            f"pattern={self._pattern.value}, on={self.count_on()})"
        )

    def __str__(self) -> str:
        return "\n".join(
            "".join("1" if cell else "0" for cell in row) for row in self.state
        )
