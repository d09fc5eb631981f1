# src/potionmaze/mapgen/stack.py
# Bounded LIFO of cell centres used by the carver.

from typing import List, Optional, Tuple

from ..errors import InvalidConfigurationError, StackOverflowError

XY = Tuple[int, int]

class CellStack:
    """
    Fixed-capacity stack. The carver pushes each cell at most once more than
    it pops it, so width*height slots always suffice; overflowing is a bug.
    pop() on an empty stack returns None.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise InvalidConfigurationError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._items: List[XY] = []

    def push(self, cell: XY) -> None:
        if len(self._items) >= self.capacity:
            raise StackOverflowError(f"carve stack full at capacity {self.capacity}")
        self._items.append(cell)

    def pop(self) -> Optional[XY]:
        if not self._items:
            return None
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
