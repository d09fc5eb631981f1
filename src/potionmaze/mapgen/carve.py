# src/potionmaze/mapgen/carve.py
# Randomized iterative backtracker: depth-first spanning tree over the cells.
# Cells are tracked by their physical centre (x, y); only centres carry VISITED.

from typing import List, Tuple

from ..grid import CellGeometry, Matrix
from ..rng import PMRandom
from ..tiles import PASSAGE, VISITED
from .stack import CellStack

XY = Tuple[int, int]

def available_neighbours(
    matrix: Matrix,
    geom: CellGeometry,
    cols: int,
    rows: int,
    cell: XY,
) -> List[XY]:
    """Unvisited neighbours of a cell centre, in up/left/right/down order."""
    x, y = cell
    first = geom.cell_to_matrix(0)
    last_x = geom.cell_to_matrix(cols - 1)
    last_y = geom.cell_to_matrix(rows - 1)
    out: List[XY] = []

    # Up
    if y > first:
        py = geom.previous_cell_index(y)
        if matrix[py][x] != VISITED:
            out.append((x, py))
    # Left
    if x > first:
        px = geom.previous_cell_index(x)
        if matrix[y][px] != VISITED:
            out.append((px, y))
    # Right
    if x < last_x:
        nx = geom.next_cell_index(x)
        if matrix[y][nx] != VISITED:
            out.append((nx, y))
    # Down
    if y < last_y:
        ny = geom.next_cell_index(y)
        if matrix[ny][x] != VISITED:
            out.append((x, ny))
    return out

def carve_passages(
    matrix: Matrix,
    geom: CellGeometry,
    cols: int,
    rows: int,
    rng: PMRandom,
) -> XY:
    """
    Carve a perfect maze into an all-wall matrix. Cell centres are left as
    VISITED and wall seams become PASSAGE; call sweep_visited() afterwards.
    Returns the start cell centre (always on the left column).
    """
    start = (geom.cell_to_matrix(0), geom.cell_to_matrix(rng.below(rows)))
    matrix[start[1]][start[0]] = VISITED

    stack = CellStack(cols * rows)
    stack.push(start)

    while stack:
        cell = stack.pop()
        neighbours = available_neighbours(matrix, geom, cols, rows, cell)
        if not neighbours:
            # Dead end: cell is finished, fall back to the one below it.
            continue
        stack.push(cell)
        nxt = rng.choice(neighbours)
        matrix[nxt[1]][nxt[0]] = VISITED
        geom.open_wall_between(matrix, cell, nxt, PASSAGE)
        stack.push(nxt)

    return start

def sweep_visited(matrix: Matrix, geom: CellGeometry) -> int:
    """Flood every VISITED centre's block with PASSAGE. Returns cells swept."""
    swept = 0
    for y, row in enumerate(matrix):
        for x, tile in enumerate(row):
            if tile == VISITED:
                geom.fill_block(matrix, (x, y), PASSAGE)
                swept += 1
    return swept
