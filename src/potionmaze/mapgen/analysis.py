# src/potionmaze/mapgen/analysis.py
# Structural checks on a finished maze: passage graph, border, items.

from collections import deque
from typing import Dict, List, Set, Tuple

from ..tiles import ITEM, NEEDED_ITEMS, VISITED, WALL, is_open
from .generator import Maze

Cell = Tuple[int, int]   # logical (col, row)
Edge = Tuple[Cell, Cell]

def _seam_open(maze: Maze, a: Cell, b: Cell) -> bool:
    geom = maze.geometry
    ca = (geom.cell_to_matrix(a[0]), geom.cell_to_matrix(a[1]))
    cb = (geom.cell_to_matrix(b[0]), geom.cell_to_matrix(b[1]))
    return all(is_open(maze.tile(x, y)) for x, y in geom.seam_between(ca, cb))

def logical_edges(maze: Maze) -> List[Edge]:
    """Pairs of adjacent cells whose separating wall has been carved."""
    edges: List[Edge] = []
    for row in range(maze.rows):
        for col in range(maze.cols):
            if col + 1 < maze.cols and _seam_open(maze, (col, row), (col + 1, row)):
                edges.append(((col, row), (col + 1, row)))
            if row + 1 < maze.rows and _seam_open(maze, (col, row), (col, row + 1)):
                edges.append(((col, row), (col, row + 1)))
    return edges

def reachable_cells(maze: Maze, start: Cell = (0, 0)) -> Set[Cell]:
    adj: Dict[Cell, List[Cell]] = {}
    for a, b in logical_edges(maze):
        adj.setdefault(a, []).append(b)
        adj.setdefault(b, []).append(a)
    seen = {start}
    queue = deque([start])
    while queue:
        cur = queue.popleft()
        for nxt in adj.get(cur, ()):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen

def border_openings(maze: Maze) -> Dict[str, List[Tuple[int, int]]]:
    """Non-wall border characters keyed by edge name, as physical (x, y)."""
    w, h = maze.width, maze.height
    sides = {
        "top": [(x, 0) for x in range(w)],
        "bottom": [(x, h - 1) for x in range(w)],
        "left": [(0, y) for y in range(h)],
        "right": [(w - 1, y) for y in range(h)],
    }
    return {
        name: [(x, y) for x, y in cells if maze.tile(x, y) != WALL]
        for name, cells in sides.items()
    }

def check_maze(maze: Maze, expected_items: int = NEEDED_ITEMS) -> List[str]:
    """Return a list of invariant violations; empty when the maze is well formed."""
    problems: List[str] = []
    geom = maze.geometry

    if len(maze.matrix) != maze.height or any(len(r) != maze.width for r in maze.matrix):
        problems.append(f"matrix is not {maze.width}x{maze.height}")
        return problems
    if maze.width != geom.logical_extent_to_matrix(maze.cols) or \
            maze.height != geom.logical_extent_to_matrix(maze.rows):
        problems.append("physical size does not match logical size")

    if any(t == VISITED for row in maze.matrix for t in row):
        problems.append("visited marker left in matrix")

    openings = border_openings(maze)
    for side in ("top", "bottom"):
        if openings[side]:
            problems.append(f"{side} border has openings at {openings[side]}")
    for side in ("left", "right"):
        if len(openings[side]) != 1:
            problems.append(f"{side} border has {len(openings[side])} openings, expected 1")

    n_cells = maze.cols * maze.rows
    n_edges = len(logical_edges(maze))
    if n_edges != n_cells - 1:
        problems.append(f"{n_edges} carved passages, expected {n_cells - 1}")
    reached = len(reachable_cells(maze))
    if reached != n_cells:
        problems.append(f"only {reached} of {n_cells} cells reachable")

    items = maze.item_positions()
    if len(items) != expected_items:
        problems.append(f"{len(items)} items, expected {expected_items}")
    unit = geom.unit
    for x, y in items:
        # Wall posts sit where a wall row meets a wall column.
        if x % unit == 0 and y % unit == 0:
            problems.append(f"item at ({x}, {y}) sits on a wall post")
        if x in (0, maze.width - 1) or y in (0, maze.height - 1):
            problems.append(f"item at ({x}, {y}) sits on the border")
    return problems

def count_tiles(maze: Maze, tile: str = ITEM) -> int:
    return sum(row.count(tile) for row in maze.matrix)
