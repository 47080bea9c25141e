"""Cell encoding and boundary validation for the ring.

A ring is a 1-D sequence of binary cells: 0 for an infected (broken) cell,
1 for a safe (working) one. Everything past this module works on the
normalized numpy form returned by `as_cell_array`.
"""

import re
import numpy as np
from typing import List, Optional, Sequence, Union
import logging

logger = logging.getLogger(__name__)

INFECTED: int = 0  # Broken cell, spreads to its neighbors each day
SAFE: int = 1      # Working cell, candidate for survival

_VALID_STATES = (INFECTED, SAFE)
_TOKEN_SPLIT = re.compile(r"[,\s]+")

CellInput = Union[Sequence[int], np.ndarray]


def _first_invalid(values: list) -> Optional[int]:
    """Return position of the first value that is not a 0/1 integer, or None."""
    for position, value in enumerate(values):
        if not isinstance(value, (bool, int, np.integer)):
            return position
        if value not in _VALID_STATES:
            return position
    return None


def as_cell_array(cells: CellInput) -> np.ndarray:
    """Validate a cell sequence and normalize it to a 1-D integer array.

    Args:
        cells: Sequence or array of cell states (0=infected, 1=safe)

    Returns:
        1-D int64 numpy array (a copy, the input is never modified)

    Raises:
        ValueError: If the input is not one-dimensional or holds a value
            outside {0, 1}
    """
    if isinstance(cells, (str, bytes)):
        raise ValueError("Cell sequence must not be text; use parse_cells() for string input")

    try:
        arr = np.asarray(cells)
    except ValueError as e:
        raise ValueError(f"Cell sequence must be one-dimensional: {e}") from e

    if arr.ndim != 1:
        raise ValueError(f"Cell sequence must be one-dimensional, got shape {arr.shape}")

    if arr.size == 0:
        return np.zeros(0, dtype=np.int64)

    if arr.dtype == bool:
        return arr.astype(np.int64)

    if arr.dtype.kind in 'iu':
        invalid = (arr != INFECTED) & (arr != SAFE)
        if invalid.any():
            position = int(np.argmax(invalid))
            raise ValueError(f"Invalid cell state {int(arr[position])} at position {position}; expected 0 or 1")
        return arr.astype(np.int64)

    # Floats, strings and mixed objects: report the first offending entry
    values = arr.tolist() if isinstance(cells, np.ndarray) else list(cells)
    position = _first_invalid(values)
    if position is not None:
        raise ValueError(f"Invalid cell state {values[position]!r} at position {position}; expected 0 or 1")
    return np.array([int(v) for v in values], dtype=np.int64)


def infected_indices(cells: CellInput) -> np.ndarray:
    """Get positions of infected cells in ascending (circular) order.

    Args:
        cells: Cell sequence (validated via `as_cell_array`)

    Returns:
        1-D integer array of infected positions
    """
    arr = as_cell_array(cells)
    return np.flatnonzero(arr == INFECTED)


def parse_cells(text: str) -> List[int]:
    """Parse a textual cell sequence.

    Accepts a compact string ("1101110111") or tokens separated by commas
    and/or whitespace ("1,1,0,1" or "1 1 0 1").

    Raises:
        ValueError: If any token is not "0" or "1"
    """
    text = text.strip()
    if not text:
        return []

    if _TOKEN_SPLIT.search(text):
        tokens = [t for t in _TOKEN_SPLIT.split(text) if t]
    else:
        tokens = list(text)

    cells = []
    for position, token in enumerate(tokens):
        if token not in ("0", "1"):
            raise ValueError(f"Invalid cell token {token!r} at position {position}; expected '0' or '1'")
        cells.append(int(token))

    logger.debug(f"Parsed {len(cells)} cells from text input")
    return cells
