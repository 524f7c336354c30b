"""Day 6: tracing a patrolling guard and finding loop-making obstructions."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

GUARD = "^"
OBSTACLE = "#"
# Offsets (dx, dy) for up, right, down, left; turning right is +1.
DIRECTIONS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def parse(text: str) -> tuple[list[str], tuple[int, int]]:
    """Return the map rows and the guard's (x, y) starting position."""
    grid = text.splitlines()
    for y, line in enumerate(grid):
        x = line.rfind(GUARD)
        if x != -1:
            return grid, (x, y)
    raise ValueError("no guard found in the map")


def _in_bounds(grid: list[str], x: int, y: int) -> bool:
    return 0 <= y < len(grid) and 0 <= x < len(grid[0])


def _turn(x: int, y: int, direction: int) -> tuple[int, int, int]:
    """Step back off a blocked cell and face right."""
    dx, dy = DIRECTIONS[direction]
    return x - dx, y - dy, (direction + 1) % 4


def _step(x: int, y: int, direction: int) -> tuple[int, int]:
    dx, dy = DIRECTIONS[direction]
    return x + dx, y + dy


def part_a(grid: list[str], start: tuple[int, int]) -> int:
    """Number of distinct cells the guard visits before leaving the map."""
    x, y = start
    direction = 0
    visited: set[tuple[int, int]] = set()
    while _in_bounds(grid, x, y):
        if grid[y][x] == OBSTACLE:
            x, y, direction = _turn(x, y, direction)
        else:
            visited.add((x, y))
            x, y = _step(x, y, direction)
    return len(visited)


def creates_loop(grid: list[str], x: int, y: int, direction: int) -> bool:
    """True if an obstruction at (x, y), met while heading in direction, traps the guard."""
    obstruction = (x, y)
    x, y, direction = _turn(x, y, direction)
    seen: set[tuple[int, int, int]] = set()
    while _in_bounds(grid, x, y):
        state = (x, y, direction)
        if state in seen:
            return True
        seen.add(state)
        if grid[y][x] == OBSTACLE or (x, y) == obstruction:
            x, y, direction = _turn(x, y, direction)
        else:
            x, y = _step(x, y, direction)
    return False


def part_b(grid: list[str], start: tuple[int, int]) -> int:
    """Number of cells on the guard's path where one obstruction makes a loop."""
    x, y = start
    direction = 0
    visited: set[tuple[int, int]] = set()
    loops = 0
    while _in_bounds(grid, x, y):
        if grid[y][x] == OBSTACLE:
            x, y, direction = _turn(x, y, direction)
            continue
        if (x, y) not in visited and creates_loop(grid, x, y, direction):
            loops += 1
        visited.add((x, y))
        x, y = _step(x, y, direction)
    return loops


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Trace the patrolling guard.")
    parser.add_argument("-next", "--next", dest="next_part", action="store_true",
                        help="solve the second part")
    parser.add_argument("-sample", "--sample", action="store_true",
                        help="read sample.txt instead of input.txt")
    args = parser.parse_args(argv)

    path = Path("sample.txt" if args.sample else "input.txt")
    try:
        text = path.read_text()
    except OSError as exc:
        print(f"Couldn't open file {path}: {exc}", file=sys.stderr)
        return 1

    grid, start = parse(text)
    print(part_b(grid, start) if args.next_part else part_a(grid, start))
    return 0