# src/potionmaze/ui/view.py
# Text composition for the play loop. The player marker and collected items
# are overlaid at render time; the maze matrix is only read.

from typing import List, Tuple

from ..engine.state import GameState
from ..tiles import PASSAGE

Box = Tuple[int, int, int, int]  # x0, y0, x1, y1 inclusive

def viewport(state: GameState) -> Box:
    """Whole matrix when fog is 0, else a (2*fog+1) square around the player clamped to the matrix."""
    maze = state.maze
    fog = state.options.fog
    if fog == 0:
        return (0, 0, maze.width - 1, maze.height - 1)
    x, y = state.player.pos
    return (
        max(0, x - fog),
        max(0, y - fog),
        min(maze.width - 1, x + fog),
        min(maze.height - 1, y + fog),
    )

def compose_rows(state: GameState) -> List[str]:
    x0, y0, x1, y1 = viewport(state)
    px, py = state.player.pos
    out = []
    for y in range(y0, y1 + 1):
        chars = []
        for x in range(x0, x1 + 1):
            if (x, y) == (px, py):
                chars.append(state.options.marker)
            elif (x, y) in state.collected:
                chars.append(PASSAGE)
            else:
                chars.append(state.maze.tile(x, y))
        out.append("".join(chars))
    return out

def status_lines(state: GameState) -> List[str]:
    x, y = state.player.pos
    return [
        f"X:{x} Y:{y}",
        f"Items:{state.player.items}/{state.total_items}",
    ]
