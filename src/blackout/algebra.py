from __future__ import annotations

import itertools
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .patterns import Offset


def _footprint(rows: int, cols: int, r: int, c: int, offsets: Sequence[Offset]):
    """Cells toggled by pressing (r, c), clipped to the grid."""
    cells = []
    for dr, dc in offsets:
        rr, cc = r + dr, c + dc
        if 0 <= rr < rows and 0 <= cc < cols:
            cells.append((rr, cc))
    return cells


def build_A(rows: int, cols: int, offsets: Sequence[Offset]) -> np.ndarray:
    """Return the N x N effect matrix A over GF(2), N = rows * cols.
    Column j encodes the cells toggled when pressing cell j (row-major).
    """
    N = rows * cols
    A = np.zeros((N, N), dtype=np.uint8)

    def idx(r, c):
        return r * cols + c

    for r in range(rows):
        for c in range(cols):
            j = idx(r, c)
            for rr, cc in _footprint(rows, cols, r, c, offsets):
                A[idx(rr, cc), j] = 1
    return A


def gf2_rref_augmented(
    A: np.ndarray, b: np.ndarray
) -> Tuple[np.ndarray, list[int]]:
    """Return RREF of augmented matrix [A|b] over GF(2) and list of pivot columns.

    Row i of the result (i < len(pivcols)) holds the pivot for column
    pivcols[i]; rows past the last pivot are zero on the A side.
    """
    A = (A % 2).astype(np.uint8)
    b = (b % 2).astype(np.uint8).reshape(-1, 1)
    m, n = A.shape
    M = np.concatenate([A, b], axis=1)  # shape (m, n+1)

    row = 0
    pivcols: list[int] = []
    for col in range(n):
        if row == m:
            break
        # first row at or below the pivot row with a 1 in this column
        hits = np.flatnonzero(M[row:, col])
        if hits.size == 0:
            continue
        pivot = row + int(hits[0])
        if pivot != row:
            M[[row, pivot]] = M[[pivot, row]]
        # eliminate ALL other rows (Gauss-Jordan)
        others = np.flatnonzero(M[:, col])
        others = others[others != row]
        M[others, :] ^= M[row, :]
        pivcols.append(col)
        row += 1
    return M, pivcols


def is_consistent(R: np.ndarray, rank: int) -> bool:
    """True unless some row past the pivots reads 0 = 1."""
    return not R[rank:, -1].any()


def gf2_solve(A: np.ndarray, b: np.ndarray) -> Tuple[Optional[np.ndarray], int]:
    """Solve A x = b over GF(2) with every free variable set to 0.

    Returns:
        x: solution (length n, uint8) or None if inconsistent
        k: number of free variables (nullspace dimension)
    """
    n = A.shape[1]
    R, pivcols = gf2_rref_augmented(A, b)
    k = n - len(pivcols)
    if not is_consistent(R, len(pivcols)):
        return None, k

    x = np.zeros((n,), dtype=np.uint8)
    for ri, pc in enumerate(pivcols):
        x[pc] = R[ri, n]
    return x, k


def gf2_solve_with_nullspace(
    A: np.ndarray, b: np.ndarray
) -> Tuple[Optional[np.ndarray], List[np.ndarray], bool]:
    """Solve A x = b over GF(2), and return a nullspace basis of A.

    Returns:
        x0: one particular solution (length n, uint8) or None if inconsistent
        basis: list of nullspace basis vectors v (length n, uint8) with A v = 0
        solvable: bool
    """
    n = A.shape[1]
    R, pivcols = gf2_rref_augmented(A, b)
    if not is_consistent(R, len(pivcols)):
        return None, [], False

    x0 = np.zeros((n,), dtype=np.uint8)
    for ri, pc in enumerate(pivcols):
        x0[pc] = R[ri, n]

    # In RREF, pivot x_pc = sum of free columns in its row; one vector per free column.
    pivset = set(pivcols)
    basis: list[np.ndarray] = []
    for f in (j for j in range(n) if j not in pivset):
        v = np.zeros((n,), dtype=np.uint8)
        v[f] = 1
        for ri, pc in enumerate(pivcols):
            v[pc] = R[ri, f]
        basis.append(v)

    return x0, basis, True


def gf2_min_weight_solution(
    x0: np.ndarray, basis: Sequence[np.ndarray]
) -> np.ndarray:
    """Return the minimum-Hamming-weight vector in x0 + span(basis).

    Tries every combination of basis vectors, fewest vectors first; ties keep
    the earlier candidate, so x0 wins unless something is strictly lighter.
    """
    best = x0.copy()
    best_w = int(best.sum())
    k = len(basis)
    for r in range(1, k + 1):
        for combo in itertools.combinations(range(k), r):
            cand = x0.copy()
            for idx in combo:
                cand ^= basis[idx]
            w = int(cand.sum())
            if w < best_w:
                best, best_w = cand, w
    return best
