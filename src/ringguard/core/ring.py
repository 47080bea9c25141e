"""
Ring Distance and Gap Derivation

Positions live on a ring of size n: index n-1 is adjacent to index 0.
Gaps between infected cells are measured with explicit modular arithmetic
so the segment that wraps past the end is handled exactly like any other.
"""

import numpy as np
from typing import List, Sequence, Union
import logging

logger = logging.getLogger(__name__)

IndexLike = Union[int, np.integer, np.ndarray]


def _check_positions(positions: np.ndarray, n: int, name: str) -> None:
    if positions.size and ((positions < 0).any() or (positions >= n).any()):
        raise ValueError(f"Position {name} out of range for ring of size {n}")


def ring_gap(a: IndexLike, b: IndexLike, n: int) -> IndexLike:
    """Count ring positions strictly between a and b, walking forward from a.

    Computed as (b - a - 1 + n) % n. When a == b the walk goes all the
    way around, giving n - 1. Works elementwise on integer arrays.

    Args:
        a: Start position(s), 0 <= a < n
        b: End position(s), 0 <= b < n
        n: Ring size

    Returns:
        Number of positions between a and b (int, or array for array input)

    Raises:
        ValueError: If n < 1 or a position is outside [0, n)
    """
    if n < 1:
        raise ValueError(f"Ring size must be positive, got {n}")

    a_arr = np.asarray(a, dtype=np.int64)
    b_arr = np.asarray(b, dtype=np.int64)
    _check_positions(a_arr, n, "a")
    _check_positions(b_arr, n, "b")

    # +n keeps the dividend non-negative before reduction
    gap = (b_arr - a_arr - 1 + n) % n

    if gap.ndim == 0:
        return int(gap)
    return gap


def circular_gaps(infected: Sequence[int], n: int) -> List[int]:
    """Derive safe-zone gaps between circularly consecutive infected cells.

    Args:
        infected: Ascending positions of infected cells on the ring
        n: Ring size

    Returns:
        Non-zero gap lengths, sorted largest first
    """
    positions = np.asarray(infected, dtype=np.int64)
    if positions.size == 0:
        return []

    following = np.roll(positions, -1)
    gaps = ring_gap(positions, following, n)
    gaps = np.sort(gaps[gaps > 0])[::-1]

    logger.debug(f"Ring of {n} cells with {positions.size} infected: gaps={gaps.tolist()}")
    return [int(g) for g in gaps]
