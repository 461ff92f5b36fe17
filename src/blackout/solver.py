"""Solve Lights Out boards with Gaussian elimination over GF(2).

Clicking cell j adds column j of the effect matrix A to the board (mod 2), so
a click set x clears board b exactly when A x = b. The default solve fixes
every free variable at 0; it is *a* solution, not necessarily the shortest.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Optional, Tuple, Union

import numpy as np

from .algebra import (
    build_A,
    gf2_min_weight_solution,
    gf2_solve,
    gf2_solve_with_nullspace,
)
from .board import Board, Cell
from .errors import InvalidArgument

DEFAULT_MAX_FREE_VARIABLES = 16


class Unsolvable:
    """No click set reaches all-off. Use the UNSOLVABLE singleton."""

    _instance: Optional["Unsolvable"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "UNSOLVABLE"


UNSOLVABLE = Unsolvable()


@dataclass(frozen=True)
class Solution:
    """Cells to click, in ascending row-major order.

    free_variables is the nullspace dimension of the board's system: when it
    is non-zero, 2**free_variables distinct click sets solve the board.
    """

    clicks: Tuple[Cell, ...]
    free_variables: int = 0

    def __len__(self) -> int:
        return len(self.clicks)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.clicks)

    def __getitem__(self, i):
        return self.clicks[i]


class Step(NamedTuple):
    cell: Cell
    lights_on: int


SolveResult = Union[Solution, Unsolvable]


def _system(board: Board) -> Tuple[np.ndarray, np.ndarray]:
    A = build_A(board.rows, board.cols, board.offsets)
    b = board.to_flat().astype(np.uint8)
    return A, b


def _to_clicks(x: np.ndarray, cols: int) -> Tuple[Cell, ...]:
    return tuple(divmod(int(i), cols) for i in np.flatnonzero(x))


def solve(board: Board) -> SolveResult:
    """Return a click set that turns every light off, or UNSOLVABLE."""
    A, b = _system(board)
    x, k = gf2_solve(A, b)
    if x is None:
        return UNSOLVABLE
    return Solution(_to_clicks(x, board.cols), free_variables=k)


def solve_minimum(
    board: Board, max_free_variables: int = DEFAULT_MAX_FREE_VARIABLES
) -> SolveResult:
    """Return a fewest-clicks solution by searching the nullspace.

    The search visits 2**k candidates for k free variables; boards with more
    than max_free_variables are rejected rather than searched.
    """
    A, b = _system(board)
    x0, basis, ok = gf2_solve_with_nullspace(A, b)
    if not ok or x0 is None:
        return UNSOLVABLE
    k = len(basis)
    if k > max_free_variables:
        raise InvalidArgument(
            f"{k} free variables exceeds the search limit of {max_free_variables}"
        )

    best = gf2_min_weight_solution(x0, basis)
    return Solution(_to_clicks(best, board.cols), free_variables=k)


def is_solvable(board: Board) -> bool:
    return solve(board) is not UNSOLVABLE


def hint(board: Board) -> Optional[Cell]:
    """First click of the solution, or None if won or unsolvable."""
    if board.has_won():
        return None
    result = solve(board)
    if result is UNSOLVABLE or len(result) == 0:
        return None
    return result[0]


def step_by_step(board: Board) -> Union[List[Step], Unsolvable]:
    """Reveal the solution one click at a time.

    Each step records the lights still on after its click. An already-won
    board gives an empty list; an unsolvable one gives UNSOLVABLE, the same
    marker solve() returns.
    """
    result = solve(board)
    if result is UNSOLVABLE:
        return UNSOLVABLE

    scratch = board.copy()
    steps: List[Step] = []
    for row, col in result:
        scratch.toggle(row, col)
        steps.append(Step((row, col), scratch.count_on()))
    return steps
