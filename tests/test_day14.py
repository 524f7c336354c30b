import pytest

from adventsolve.day14 import (
    Coord,
    Robot,
    determine_quadrant,
    move_robot,
    parse_robots,
    part_a,
    part_b,
    render,
    wrap,
)

SAMPLE = [
    "p=0,4 v=3,-3",
    "p=6,3 v=-1,-3",
    "p=10,3 v=-1,2",
    "p=2,0 v=2,-1",
    "p=0,0 v=1,3",
    "p=3,0 v=-2,-2",
    "p=7,6 v=-1,-3",
    "p=3,0 v=-1,-2",
    "p=9,3 v=2,3",
    "p=7,3 v=-1,2",
    "p=2,4 v=2,-3",
    "p=9,5 v=-3,-3",
]


def test_parse_robots_single_line():
    assert parse_robots(["p=69,74 v=68,-98"]) == [Robot(Coord(69, 74), Coord(68, -98))]


def test_parse_robots_rejects_invalid_entry():
    with pytest.raises(ValueError):
        parse_robots(["p=1,2 v=3"])


def test_move_robot_sample():
    robot = Robot(Coord(2, 4), Coord(2, -3))
    assert move_robot(robot, 5, 7, 11) == Robot(Coord(1, 3), Coord(2, -3))


@pytest.mark.parametrize(
    "value, size, expected",
    [(5, 3, 2), (-1, 3, 2), (-11, 7, 3), (-3, 2, 1)],
)
def test_wrap(value, size, expected):
    assert wrap(value, size) == expected


def test_determine_quadrant_valid():
    assert determine_quadrant(Coord(0, 2), 8, 11) == 0


@pytest.mark.parametrize(
    "coord, expected",
    [(Coord(10, 0), 1), (Coord(0, 6), 2), (Coord(10, 6), 3)],
)
def test_determine_quadrant_others(coord, expected):
    assert determine_quadrant(coord, 7, 11) == expected


@pytest.mark.parametrize("coord", [Coord(5, 0), Coord(0, 3)])
def test_determine_quadrant_middle_raises(coord):
    with pytest.raises(ValueError):
        determine_quadrant(coord, 7, 11)


def test_render():
    robots = [Robot(Coord(0, 0), Coord(0, 0)), Robot(Coord(2, 1), Coord(0, 0))]
    assert render(robots, 2, 3) == "#..\n..#\n"


def test_part_a_sample():
    assert part_a(parse_robots(SAMPLE), 100, 7, 11) == 12


def test_part_b_finds_line_up_step():
    robots = [
        Robot(Coord(i, 2 if i % 2 else 0), Coord(0, -1 if i % 2 else 0))
        for i in range(13)
    ]
    step, picture = part_b(robots, 5, 20)
    assert step == 2
    assert picture.splitlines()[0] == "#" * 13 + "." * 7


def test_part_b_never_lines_up():
    with pytest.raises(ValueError):
        part_b([Robot(Coord(0, 0), Coord(1, 1))], 3, 4)