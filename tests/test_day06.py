import pytest

from adventsolve.day06 import creates_loop, parse, part_a, part_b

SAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


def test_parse_finds_guard():
    grid, start = parse(SAMPLE)
    assert start == (4, 6)
    assert len(grid) == 10
    assert grid[start[1]][start[0]] == "^"


def test_parse_without_guard_raises():
    with pytest.raises(ValueError):
        parse("...\n.#.\n")


def test_part_a_sample():
    grid, start = parse(SAMPLE)
    assert part_a(grid, start) == 41


def test_part_b_sample():
    grid, start = parse(SAMPLE)
    assert part_b(grid, start) == 6


def test_part_a_open_column_walks_straight_out():
    grid, start = parse(".....\n.....\n.....\n..^..\n.....\n")
    assert part_a(grid, start) == start[1] + 1


def test_part_b_open_grid_has_no_loops():
    grid, start = parse(".....\n.....\n..^..\n.....\n")
    assert part_b(grid, start) == 0


def test_creates_loop_next_to_start():
    grid, _ = parse(SAMPLE)
    assert creates_loop(grid, 3, 6, 3) is True


def test_creates_loop_open_grid_is_false():
    grid = ["...", "...", "..."]
    assert creates_loop(grid, 1, 0, 0) is False


def test_loops_never_exceed_visited_cells():
    grid, start = parse(SAMPLE)
    assert part_b(grid, start) <= part_a(grid, start)