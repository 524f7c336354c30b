"""Day 14: robots patrolling a wrapping grid, and the picture they form."""

from __future__ import annotations

import argparse
import math
import re
import sys
from dataclasses import dataclass
from pathlib import Path

INPUT_FILE = "input.txt"
HEIGHT = 103
WIDTH = 101
STEPS = 100
TREE_MARKER = "#" * 13

_NUMBER = re.compile(r"-?\d+")


@dataclass(frozen=True)
class Coord:
    """A position or a velocity on the grid."""

    x: int
    y: int


@dataclass(frozen=True)
class Robot:
    """A robot's position and its velocity per step."""

    pos: Coord
    move: Coord


def parse_robots(lines: list[str]) -> list[Robot]:
    """Read lines like 'p=0,4 v=3,-3' into robots."""
    robots = []
    for line in lines:
        values = [int(match) for match in _NUMBER.findall(line)]
        if len(values) != 4:
            raise ValueError(f"Invalid entry {line!r}")
        px, py, vx, vy = values
        robots.append(Robot(Coord(px, py), Coord(vx, vy)))
    return robots


def wrap(value: int, size: int) -> int:
    """Wrap a coordinate into the range [0, size)."""
    return value % size


def move_robot(robot: Robot, steps: int, height: int, width: int) -> Robot:
    """The robot after the given number of steps on a wrapping grid."""
    pos = Coord(
        wrap(robot.pos.x + steps * robot.move.x, width),
        wrap(robot.pos.y + steps * robot.move.y, height),
    )
    return Robot(pos, robot.move)


def determine_quadrant(coord: Coord, height: int, width: int) -> int:
    """Quadrant 0-3 (top-left, top-right, bottom-left, bottom-right).

    Raises ValueError for positions on the middle row or column.
    """
    if coord.x < width // 2:
        horizontal = 0
    elif coord.x >= width - width // 2:
        horizontal = 1
    else:
        raise ValueError(f"{coord} lies on the middle column")

    if coord.y < height // 2:
        vertical = 0
    elif coord.y >= height - height // 2:
        vertical = 1
    else:
        raise ValueError(f"{coord} lies on the middle row")

    return vertical * 2 + horizontal


def render(robots: list[Robot], height: int, width: int) -> str:
    """The grid with '#' where any robot stands and '.' elsewhere."""
    rows = [["."] * width for _ in range(height)]
    for robot in robots:
        rows[robot.pos.y][robot.pos.x] = "#"
    return "".join("".join(row) + "\n" for row in rows)


def part_a(robots: list[Robot], steps: int, height: int, width: int) -> int:
    """Safety factor: product of robot counts per quadrant after the steps."""
    quadrants = [0, 0, 0, 0]
    for robot in robots:
        moved = move_robot(robot, steps, height, width)
        try:
            quadrants[determine_quadrant(moved.pos, height, width)] += 1
        except ValueError:
            continue
    return math.prod(quadrants)


def part_b(robots: list[Robot], height: int, width: int) -> tuple[int, str]:
    """First step at which a long horizontal run of robots appears, with the picture.

    Raises ValueError if the robots cycle back without ever forming one.
    """
    for step in range(1, height * width + 1):
        robots = [move_robot(robot, 1, height, width) for robot in robots]
        picture = render(robots, height, width)
        if TREE_MARKER in picture:
            return step, picture
    raise ValueError("the robots never line up")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate patrolling robots.")
    parser.add_argument("-next", "--next", dest="next_part", action="store_true",
                        help="solve the second part")
    args = parser.parse_args(argv)

    try:
        lines = Path(INPUT_FILE).read_text().splitlines()
    except OSError as exc:
        print(f"Error opening file {INPUT_FILE}: {exc}", file=sys.stderr)
        return 1

    robots = parse_robots(lines)
    if args.next_part:
        step, picture = part_b(robots, HEIGHT, WIDTH)
        print(step)
        print(picture)
    else:
        print(part_a(robots, STEPS, HEIGHT, WIDTH))
    return 0