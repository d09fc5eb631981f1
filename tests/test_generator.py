# tests/test_generator.py
import pytest

from potionmaze.errors import InsufficientSpaceError, InvalidConfigurationError
from potionmaze.mapgen.analysis import (
    border_openings, check_maze, count_tiles, logical_edges, reachable_cells,
)
from potionmaze.mapgen.generator import generate_maze
from potionmaze.tiles import ITEM, NEEDED_ITEMS, VISITED

CASES = [
    (3, 3, 1, 42),
    (2, 2, 1, 0),
    (2, 1, 1, 9),
    (1, 5, 1, 3),
    (10, 10, 1, 1234),
    (8, 5, 2, -7),
    (6, 6, 3, 99),
    (4, 7, 4, 2**35),
    (25, 15, 1, 5),
]

def test_example_three_by_three():
    m = generate_maze(3, 3, 1, 42)
    assert (m.width, m.height) == (7, 7)
    assert len(m.matrix) == 7 and all(len(r) == 7 for r in m.matrix)
    assert len(reachable_cells(m)) == 9
    assert len(logical_edges(m)) == 8
    openings = border_openings(m)
    assert len(openings["left"]) == 1 and len(openings["right"]) == 1
    assert count_tiles(m, ITEM) == NEEDED_ITEMS
    assert check_maze(m) == []

def test_invariants_across_sizes_and_seeds():
    for w, h, s, seed in CASES:
        m = generate_maze(w, h, s, seed)
        problems = check_maze(m)
        assert problems == [], f"{w}x{h} s={s} seed={seed}: {problems}"

def test_many_seeds_small_maze():
    for seed in range(200):
        m = generate_maze(4, 3, 1, seed)
        assert check_maze(m) == [], f"seed={seed}"

def test_deterministic():
    for w, h, s, seed in CASES:
        a = generate_maze(w, h, s, seed)
        b = generate_maze(w, h, s, seed)
        assert a.rows_as_text() == b.rows_as_text(), f"{w}x{h} s={s} seed={seed}"

def test_seed_changes_layout():
    layouts = {tuple(generate_maze(8, 8, 1, seed).rows_as_text()) for seed in range(10)}
    assert len(layouts) > 1

def test_no_visited_marker_leaks():
    for w, h, s, seed in CASES:
        m = generate_maze(w, h, s, seed)
        assert count_tiles(m, VISITED) == 0

def test_entry_and_exit_helpers_match_border():
    m = generate_maze(6, 4, 2, 17)
    ex, ey = m.entry()
    assert ex == 0 and m.tile(1, ey) != "w"
    xx, xy = m.exit()
    assert xx == m.width - 1 and m.tile(m.width - 2, xy) != "w"
    assert len(m.item_positions()) == NEEDED_ITEMS

def test_even_cell_size_blocks_are_open():
    m = generate_maze(3, 2, 2, 4, items=0)
    g = m.geometry
    for r in range(m.rows):
        for c in range(m.cols):
            cx, cy = g.cell_to_matrix(c), g.cell_to_matrix(r)
            for y in g.block_range(cy):
                for x in g.block_range(cx):
                    assert m.tile(x, y) == " ", f"cell ({c},{r}) at ({x},{y})"

def test_single_cell_needs_room_for_items():
    with pytest.raises(InsufficientSpaceError):
        generate_maze(1, 1, 1, 0)
    m = generate_maze(1, 1, 1, 0, items=0)
    assert m.rows_as_text() == ["www", "   ", "www"]
    assert check_maze(m, expected_items=0) == []
    # a larger cell has room for the items on its own
    big = generate_maze(1, 1, 2, 0)
    assert check_maze(big) == []

@pytest.mark.parametrize("args", [
    (0, 3, 1, 0),
    (3, 0, 1, 0),
    (3, 3, 0, 0),
    (-1, 3, 1, 0),
    (3, 3, 1, 1.5),
    (2.0, 3, 1, 0),
])
def test_invalid_configuration_rejected(args):
    with pytest.raises(InvalidConfigurationError):
        generate_maze(*args)

def test_invalid_configuration_is_value_error():
    with pytest.raises(ValueError):
        generate_maze(3, 3, 1, 0, items=-1)
