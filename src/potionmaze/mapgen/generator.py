# src/potionmaze/mapgen/generator.py
# Maze entry point: validate → allocate → carve → sweep → openings → items.

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import MazeConfig
from ..grid import CellGeometry, Matrix, empty_wall_matrix
from ..rng import PMRandom
from ..tiles import ITEM, NEEDED_ITEMS, WALL
from .carve import carve_passages, sweep_visited
from .placement import open_entry, open_exit, place_items

log = logging.getLogger(__name__)

XY = Tuple[int, int]

@dataclass
class Maze:
    matrix: Matrix
    width: int       # physical columns
    height: int      # physical rows
    cell_size: int
    cols: int        # logical cells across
    rows: int        # logical cells down

    @property
    def geometry(self) -> CellGeometry:
        return CellGeometry(self.cell_size)

    def tile(self, x: int, y: int) -> str:
        return self.matrix[y][x]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def rows_as_text(self) -> List[str]:
        return ["".join(row) for row in self.matrix]

    def _border_opening(self, x: int) -> Optional[XY]:
        for y in range(self.height):
            if self.matrix[y][x] != WALL:
                return (x, y)
        return None

    def entry(self) -> Optional[XY]:
        return self._border_opening(0)

    def exit(self) -> Optional[XY]:
        return self._border_opening(self.width - 1)

    def item_positions(self) -> List[XY]:
        return [
            (x, y)
            for y, row in enumerate(self.matrix)
            for x, t in enumerate(row)
            if t == ITEM
        ]

def build_maze(config: MazeConfig) -> Maze:
    config.validate()
    geom = CellGeometry(config.cell_size)
    rng = PMRandom.from_seed(config.seed)

    matrix = empty_wall_matrix(geom, config.width, config.height)
    start = carve_passages(matrix, geom, config.width, config.height, rng)
    sweep_visited(matrix, geom)
    entry = open_entry(matrix)
    exit_ = open_exit(matrix)

    maze = Maze(
        matrix=matrix,
        width=geom.logical_extent_to_matrix(config.width),
        height=geom.logical_extent_to_matrix(config.height),
        cell_size=config.cell_size,
        cols=config.width,
        rows=config.height,
    )
    log.debug(
        "maze %dx%d cells (s=%d) -> %dx%d chars, seed=%d, start row=%d, entry=%s, exit=%s",
        config.width, config.height, config.cell_size,
        maze.width, maze.height, config.seed,
        geom.cell_of_matrix(start[1]), entry, exit_,
    )

    if config.items:
        place_items(matrix, rng, config.items)
    return maze

def generate_maze(
    width: int,
    height: int,
    cell_size: int = 1,
    seed: int = 0,
    items: int = NEEDED_ITEMS,
) -> Maze:
    """
    Generate a perfect maze of width×height cells, each rendered as a
    cell_size×cell_size block. Identical arguments give identical matrices.

    Walls are 'w', passages ' ', items '#'. The border is wall except one
    opening on the left column (entry) and one on the right column (exit).
    """
    return build_maze(MazeConfig(width, height, cell_size, seed, items))
