# Canonical tile characters for the maze matrix.

WALL = "w"
PASSAGE = " "
ITEM = "#"
VISITED = "v"  # carve-time marker only; never present in a finished maze
PLAYER = "@"

NEEDED_ITEMS = 3

def is_open(tile: str) -> bool:
    # Walkable: plain passage or a passage holding an item.
    return tile == PASSAGE or tile == ITEM
