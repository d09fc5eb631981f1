# src/potionmaze/engine/player.py
# Player position and move interpretation. Reads the maze, never writes it.

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..mapgen.generator import Maze
from ..tiles import WALL

XY = Tuple[int, int]

_DIRS: Dict[str, XY] = {
    "w": (0, -1),   # up
    "a": (-1, 0),   # left
    "s": (0, 1),    # down
    "d": (1, 0),    # right
}

def direction_for(command: str) -> Optional[XY]:
    return _DIRS.get(command.strip().lower())

@dataclass
class PlayerState:
    x: int
    y: int
    items: int = 0
    moves: int = 0

    @property
    def pos(self) -> XY:
        return (self.x, self.y)

def can_enter(maze: Maze, x: int, y: int) -> bool:
    return maze.in_bounds(x, y) and maze.tile(x, y) != WALL

def target_of(player: PlayerState, direction: XY) -> XY:
    dx, dy = direction
    return (player.x + dx, player.y + dy)

def step(maze: Maze, player: PlayerState, direction: XY) -> bool:
    """Move one cell if the target is inside the matrix and not a wall."""
    nx, ny = target_of(player, direction)
    if not can_enter(maze, nx, ny):
        return False
    player.x, player.y = nx, ny
    player.moves += 1
    return True
