# src/potionmaze/grid.py
# Mapping between logical cells and the physical character matrix.
# A cell is an s×s block; the walls between cells are one character thick.

from dataclasses import dataclass
from typing import List, Tuple

from .errors import GeometryError, InvalidConfigurationError
from .tiles import WALL

XY = Tuple[int, int]
Matrix = List[List[str]]

@dataclass(frozen=True)
class CellGeometry:
    cell_size: int = 1

    def __post_init__(self) -> None:
        if self.cell_size < 1:
            raise InvalidConfigurationError(f"cell_size must be >= 1, got {self.cell_size}")

    @property
    def unit(self) -> int:
        # One cell plus its trailing wall.
        return self.cell_size + 1

    @property
    def half(self) -> int:
        # Even sizes put the centre on the lower of the two middle indices.
        return self.cell_size // 2

    def cell_to_matrix(self, cell: int) -> int:
        return self.unit * cell + self.half + 1

    def logical_extent_to_matrix(self, dimension: int) -> int:
        return self.unit * dimension + 1

    def previous_cell_index(self, idx: int) -> int:
        return idx - self.unit

    def next_cell_index(self, idx: int) -> int:
        return idx + self.unit

    def cell_of_matrix(self, idx: int) -> int:
        """Inverse of cell_to_matrix for cell centres."""
        return (idx - self.half - 1) // self.unit

    def block_range(self, center: int) -> range:
        start = center - self.half
        return range(start, start + self.cell_size)

    def fill_block(self, matrix: Matrix, center: XY, value: str) -> None:
        """Write value over the whole s×s block of the cell centred at (x, y)."""
        cx, cy = center
        for y in self.block_range(cy):
            row = matrix[y]
            for x in self.block_range(cx):
                row[x] = value

    def seam_between(self, a: XY, b: XY) -> List[XY]:
        """
        Physical coordinates of the wall strip separating two adjacent cell centres.
        The strip is s characters long and lies on the shared edge.
        """
        ax, ay = a
        bx, by = b
        if ay == by and abs(ax - bx) == self.unit:
            x = max(ax, bx) - self.half - 1
            return [(x, y) for y in self.block_range(ay)]
        if ax == bx and abs(ay - by) == self.unit:
            y = max(ay, by) - self.half - 1
            return [(x, y) for x in self.block_range(ax)]
        raise GeometryError(f"cells {a} and {b} are not adjacent")

    def open_wall_between(self, matrix: Matrix, a: XY, b: XY, value: str) -> None:
        for x, y in self.seam_between(a, b):
            matrix[y][x] = value

def empty_wall_matrix(geom: CellGeometry, cols: int, rows: int) -> Matrix:
    """Return a fresh all-wall matrix sized for cols×rows logical cells."""
    w = geom.logical_extent_to_matrix(cols)
    h = geom.logical_extent_to_matrix(rows)
    return [[WALL for _ in range(w)] for _ in range(h)]
