from potionmaze.mapgen.analysis import check_maze, logical_edges, reachable_cells
from potionmaze.mapgen.generator import Maze

def maze_from(rows, cols, nrows, s=1):
    matrix = [list(r) for r in rows]
    return Maze(matrix=matrix, width=len(matrix[0]), height=len(matrix),
                cell_size=s, cols=cols, rows=nrows)

def test_hand_built_perfect_maze_passes():
    m = maze_from([
        "wwwww",
        "    w",
        "w#w w",
        "w w  ",
        "wwwww",
    ], 2, 2)
    assert sorted(logical_edges(m)) == [((0, 0), (0, 1)), ((0, 0), (1, 0)), ((1, 0), (1, 1))]
    assert check_maze(m, expected_items=1) == []

def test_cycle_is_reported():
    m = maze_from([
        "wwwww",
        "    w",
        "w w w",
        "w    ",
        "wwwww",
    ], 2, 2)
    problems = check_maze(m, expected_items=0)
    assert any("4 carved passages" in p for p in problems)

def test_disconnected_and_bad_border_reported():
    m = maze_from([
        "wwwww",
        "  w w",
        "wwwww",
        "w w  ",
        "ww www"[:5],
    ], 2, 2)
    assert len(reachable_cells(m)) == 1
    problems = check_maze(m, expected_items=0)
    assert any("reachable" in p for p in problems)
    assert any("bottom border" in p for p in problems)

def test_visited_marker_reported():
    m = maze_from(["www", " v ", "www"], 1, 1)
    assert "visited marker left in matrix" in check_maze(m, expected_items=0)
