"""Puzzle generation targeted at a solution length."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

import numpy as np

from .board import Board
from .errors import InvalidArgument
from .patterns import Pattern
from .solver import UNSOLVABLE, Solution, solve

MAX_ATTEMPTS = 200


class Difficulty(Enum):
    """Difficulty presets, as a target solution length per cell."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"

    @property
    def density(self) -> float:
        densities = {
            Difficulty.EASY: 0.2,
            Difficulty.MEDIUM: 0.35,
            Difficulty.HARD: 0.5,
            Difficulty.EXPERT: 0.65,
        }
        return densities[self]

    def target_moves(self, rows: int, cols: int) -> int:
        return max(1, round(self.density * rows * cols))


def generate_with_difficulty(
    board: Board,
    rng: np.random.Generator,
    target_moves: int,
    max_attempts: int = MAX_ATTEMPTS,
) -> Optional[Solution]:
    """Randomize board until its solution length is close to target_moves.

    Keeps the first candidate with the smallest |len(solution) - target| and
    stops early on an exact hit. Returns the committed board's solution, or
    None when no attempt was solvable; the board, move count and undo
    history are then left untouched.
    """
    if rng is None:
        raise InvalidArgument("A random generator is required.")
    if target_moves <= 0:
        raise InvalidArgument(f"target_moves must be positive, got {target_moves}")
    if max_attempts <= 0:
        raise InvalidArgument(f"max_attempts must be positive, got {max_attempts}")

    # candidates are drawn on a scratch copy; board is only written on success
    scratch = board.copy()
    lo, hi = max(1, target_moves - 3), target_moves + 5

    best_diff: Optional[int] = None
    best_board: Optional[np.ndarray] = None
    best_solution: Optional[Solution] = None
    for _ in range(max_attempts):
        scratch.randomize(rng, lo, hi)
        result = solve(scratch)
        if result is UNSOLVABLE:
            continue
        diff = abs(len(result) - target_moves)
        if best_diff is None or diff < best_diff:
            best_diff = diff
            best_board = scratch.get_board_snapshot()
            best_solution = result
            if diff == 0:
                break

    if best_board is not None:
        board.load_board(best_board)
    return best_solution


def generate(
    rows: int,
    cols: int,
    pattern: Pattern | str = Pattern.CROSS,
    difficulty: Difficulty = Difficulty.MEDIUM,
    rng: np.random.Generator | None = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> Board:
    """Build a fresh board and fill it with a puzzle of the given difficulty."""
    board = Board(rows, cols, pattern)
    generate_with_difficulty(
        board, rng, difficulty.target_moves(rows, cols), max_attempts
    )
    return board


def generate_batch(
    count: int,
    rows: int,
    cols: int,
    pattern: Pattern | str = Pattern.CROSS,
    difficulty: Difficulty = Difficulty.MEDIUM,
    rng: np.random.Generator | None = None,
    max_attempts: int = MAX_ATTEMPTS,
) -> List[Board]:
    return [
        generate(rows, cols, pattern, difficulty, rng, max_attempts)
        for _ in range(count)
    ]
