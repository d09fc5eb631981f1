# src/potionmaze/engine/state.py
# GameState: one maze, one player, the collected-item set and the win rule.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Set, Tuple

from ..config import PlayOptions
from ..errors import MazeError
from ..mapgen.generator import Maze
from ..tiles import ITEM
from .player import PlayerState, direction_for, step, target_of

XY = Tuple[int, int]

QUIT = "q"

@dataclass
class GameState:
    maze: Maze
    player: PlayerState
    options: PlayOptions = field(default_factory=PlayOptions)
    exit_xy: Optional[XY] = None
    collected: Set[XY] = field(default_factory=set)
    total_items: int = 0
    won: bool = False
    quit: bool = False

    @classmethod
    def new(cls, maze: Maze, options: Optional[PlayOptions] = None) -> "GameState":
        options = (options or PlayOptions()).validate()
        entry = maze.entry()
        exit_xy = maze.exit()
        if entry is None or exit_xy is None:
            raise MazeError("maze has no entry or no exit opening")
        player = PlayerState(x=entry[0], y=entry[1])
        # The matrix is never written during play, so the count is fixed.
        return cls(
            maze=maze, player=player, options=options, exit_xy=exit_xy,
            total_items=len(maze.item_positions()),
        )

    @property
    def finished(self) -> bool:
        return self.won or self.quit

    def items_remaining(self) -> int:
        return self.total_items - len(self.collected)

    def apply(self, command: str) -> Dict[str, bool]:
        """
        Interpret one command. Returns event flags:
          moved, blocked, item_collected, need_items, won, quit, unknown
        """
        ev = {
            "moved": False, "blocked": False, "item_collected": False,
            "need_items": False, "won": False, "quit": False, "unknown": False,
        }
        if self.finished:
            return ev

        cmd = command.strip().lower()
        if cmd == QUIT:
            self.quit = True
            ev["quit"] = True
            return ev

        direction = direction_for(cmd)
        if direction is None:
            ev["unknown"] = True
            return ev

        if target_of(self.player, direction) == self.exit_xy and self.items_remaining() > 0:
            ev["need_items"] = True
            return ev

        if not step(self.maze, self.player, direction):
            ev["blocked"] = True
            return ev
        ev["moved"] = True

        pos = self.player.pos
        if self.maze.tile(*pos) == ITEM and pos not in self.collected:
            self.collected.add(pos)
            self.player.items += 1
            ev["item_collected"] = True

        if pos == self.exit_xy:
            self.won = True
            ev["won"] = True
        return ev
