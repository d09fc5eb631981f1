#!/usr/bin/env python3
# Turn-based text game over a generated maze.
# Missing size/seed options are prompted for on stdin.

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

from rich.console import Console

from potionmaze.config import PlayOptions
from potionmaze.engine.state import GameState
from potionmaze.errors import MazeError
from potionmaze.mapgen.generator import generate_maze
from potionmaze.tiles import NEEDED_ITEMS
from potionmaze.ui.console import make_console, run_game

PROMPTS = [
    ("width", "Enter width:"),
    ("height", "Enter height:"),
    ("cell_size", "Enter cell size:"),
    ("seed", "Enter seed:"),
    ("fog", "Enter fog:"),
]

def prompt_missing(args: argparse.Namespace, read: Callable[[str], str], console: Console) -> None:
    # EOFError from read() propagates; main() treats it as quitting.
    for name, prompt in PROMPTS:
        while getattr(args, name) is None:
            raw = read(prompt).strip()
            try:
                setattr(args, name, int(raw))
            except ValueError:
                console.print(f"Not a number: {raw!r}", markup=False)
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Escape a generated maze after collecting every item")
    p.add_argument("--width", type=int, default=None, help="cells across")
    p.add_argument("--height", type=int, default=None, help="cells down")
    p.add_argument("--cell-size", type=int, default=None, dest="cell_size", help="characters per cell side")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--fog", type=int, default=None, help="view radius around the player; 0 shows everything")
    p.add_argument("--items", type=int, default=NEEDED_ITEMS)
    p.add_argument("--no-color", action="store_true")
    p.add_argument("--verbose", action="store_true", help="debug logging")
    return p

def main(argv: Optional[List[str]] = None, read: Callable[[str], str] = input) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    console = make_console(no_color=args.no_color)
    try:
        prompt_missing(args, read, console)
    except EOFError:
        print("play_maze: input closed before the maze was set up", file=sys.stderr)
        return 1

    try:
        maze = generate_maze(args.width, args.height, args.cell_size, args.seed, items=args.items)
        state = GameState.new(maze, PlayOptions(fog=args.fog))
    except MazeError as e:
        print(f"play_maze: {e}", file=sys.stderr)
        return 2

    run_game(state, read, console)
    return 0 if state.won else 1

if __name__ == "__main__":
    sys.exit(main())
