# src/potionmaze/mapgen/placement.py
import logging
from typing import List, Optional, Tuple

from ..errors import InsufficientSpaceError
from ..grid import Matrix
from ..rng import PMRandom
from ..tiles import ITEM, PASSAGE

log = logging.getLogger(__name__)

XY = Tuple[int, int]

def open_entry(matrix: Matrix) -> Optional[XY]:
    """
    Open the left border on the first row (top-down) whose column 1 is a passage.
    Deterministic given the carved maze; returns the opening or None.
    """
    for y, row in enumerate(matrix):
        if row[1] == PASSAGE:
            row[0] = PASSAGE
            return (0, y)
    return None

def open_exit(matrix: Matrix) -> Optional[XY]:
    """Mirror of open_entry: scan bottom-up, open the right border."""
    last = len(matrix[0]) - 1
    for y in range(len(matrix) - 1, -1, -1):
        row = matrix[y]
        if row[last - 1] == PASSAGE:
            row[last] = PASSAGE
            return (last, y)
    return None

def free_interior_cells(matrix: Matrix) -> int:
    h = len(matrix)
    w = len(matrix[0])
    return sum(
        1
        for y in range(1, h - 1)
        for x in range(1, w - 1)
        if matrix[y][x] == PASSAGE
    )

def place_random_item(matrix: Matrix, rng: PMRandom, tile: str = ITEM) -> XY:
    """
    Rejection-sample an interior cell (row first, then column) until it is a
    plain passage, then write tile there. The border is never sampled, so the
    entry and exit openings stay clear.
    Callers must make sure a free passage exists.
    """
    h = len(matrix)
    w = len(matrix[0])
    attempts = 0
    while True:
        attempts += 1
        y = rng.below(h - 2) + 1
        x = rng.below(w - 2) + 1
        if matrix[y][x] != PASSAGE:
            continue
        matrix[y][x] = tile
        log.debug("placed %r at (%d, %d) after %d attempts", tile, x, y, attempts)
        return (x, y)

def place_items(matrix: Matrix, rng: PMRandom, count: int) -> List[XY]:
    available = free_interior_cells(matrix)
    if available < count:
        raise InsufficientSpaceError(count, available)
    return [place_random_item(matrix, rng) for _ in range(count)]
