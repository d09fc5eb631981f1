#!/usr/bin/env python3
import argparse, logging, sys
from potionmaze.errors import MazeError
from potionmaze.mapgen.analysis import check_maze
from potionmaze.mapgen.generator import generate_maze
from potionmaze.tiles import NEEDED_ITEMS
from potionmaze.ui.console import make_console, print_maze

def cmd_show(args, console):
    maze = generate_maze(args.width, args.height, args.cell_size, args.seed, items=args.items)
    print_maze(console, maze)
    console.print(f"{maze.width}x{maze.height} chars, entry={maze.entry()}, exit={maze.exit()}", markup=False)
    return 0

def cmd_check(args, console):
    bad = 0
    for seed in range(args.seed, args.seed + args.count):
        maze = generate_maze(args.width, args.height, args.cell_size, seed, items=args.items)
        problems = check_maze(maze, expected_items=args.items)
        if problems:
            bad += 1
            console.print(f"seed {seed}: " + "; ".join(problems), markup=False, soft_wrap=True)
    console.print(f"Checked {args.count} mazes, {bad} with problems", markup=False)
    return 1 if bad else 0

def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument('--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    for name, func in (('show', cmd_show), ('check', cmd_check)):
        sp = sub.add_parser(name)
        sp.add_argument('--width', type=int, required=True)
        sp.add_argument('--height', type=int, required=True)
        sp.add_argument('--cell-size', type=int, default=1, dest='cell_size')
        sp.add_argument('--seed', type=int, default=0)
        sp.add_argument('--items', type=int, default=NEEDED_ITEMS)
        sp.add_argument('--no-color', action='store_true')
        sp.set_defaults(func=func)
    sub.choices['check'].add_argument('--count', type=int, default=100)
    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        return args.func(args, make_console(no_color=args.no_color))
    except MazeError as e:
        print(f"mazetool: {e}", file=sys.stderr)
        return 2

if __name__ == '__main__':
    sys.exit(main())
