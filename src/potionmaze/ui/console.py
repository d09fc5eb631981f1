# src/potionmaze/ui/console.py
# rich-based terminal output for mazes and game frames.

from typing import Dict, Iterable, Optional

from rich.console import Console
from rich.text import Text

from ..engine.state import GameState
from ..mapgen.generator import Maze
from ..tiles import ITEM, PASSAGE, PLAYER, WALL
from .view import compose_rows, status_lines

TILE_STYLES: Dict[str, str] = {
    WALL: "grey50 on grey23",
    PASSAGE: "",
    ITEM: "bold magenta",
    PLAYER: "bold yellow",
}

def styled_row(row: str, marker: str = PLAYER) -> Text:
    text = Text(no_wrap=True, overflow="crop")
    for ch in row:
        style = TILE_STYLES[PLAYER] if ch == marker else TILE_STYLES.get(ch, "")
        text.append(ch, style=style)
    return text

def print_rows(console: Console, rows: Iterable[str], marker: str = PLAYER) -> None:
    for row in rows:
        console.print(styled_row(row, marker), soft_wrap=True)

def print_maze(console: Console, maze: Maze) -> None:
    print_rows(console, maze.rows_as_text())

def print_frame(console: Console, state: GameState) -> None:
    print_rows(console, compose_rows(state), state.options.marker)
    for line in status_lines(state):
        console.print(line, highlight=False)

def make_console(no_color: bool = False, file=None) -> Console:
    kwargs = {"highlight": False}
    if file is not None:
        kwargs["file"] = file
    if no_color:
        kwargs["no_color"] = True
    return Console(**kwargs)

MESSAGES: Dict[str, str] = {
    "blocked": "[dim]Blocked.[/dim]",
    "item_collected": "[magenta]Picked up an item![/magenta]",
    "need_items": "[bold red]COLLECT ALL ITEMS FIRST[/bold red]",
    "unknown": "[dim]Use w, a, s, d to move or q to quit.[/dim]",
}

def print_events(console: Console, events: Dict[str, bool]) -> Optional[str]:
    for key, message in MESSAGES.items():
        if events.get(key):
            console.print(message)
            return key
    return None

def run_game(state: GameState, read_command, console: Console) -> GameState:
    """
    Turn loop: draw, read one command, apply it, repeat until won or quit.
    read_command(prompt) returns the next command; EOFError ends the game.
    """
    while not state.finished:
        print_frame(console, state)
        try:
            command = read_command("Move(w,a,s,d):")
        except EOFError:
            state.quit = True
            break
        print_events(console, state.apply(command))

    if state.won:
        console.print("[bold green]Congratulations, you have escaped the maze![/bold green]")
    return state
