"""Day 10: scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

import argparse
import sys
import time
from collections import deque
from collections.abc import Iterator
from pathlib import Path

TRAILHEAD = 0
PEAK = 9

Grid = list[list[int]]


def parse(text: str) -> Grid:
    """Read each line as a row of single-digit heights; other characters become 0."""
    return [
        [int(char) if "0" <= char <= "9" else 0 for char in line]
        for line in text.splitlines()
    ]


def _neighbours(grid: Grid, y: int, x: int) -> Iterator[tuple[int, int]]:
    height, width = len(grid), len(grid[0])
    if y - 1 >= 0:
        yield y - 1, x
    if y + 1 < height:
        yield y + 1, x
    if x - 1 >= 0:
        yield y, x - 1
    if x + 1 < width:
        yield y, x + 1


def _uphill(grid: Grid, y: int, x: int) -> Iterator[tuple[int, int]]:
    """Neighbours exactly one step higher than (y, x)."""
    here = grid[y][x]
    for ny, nx in _neighbours(grid, y, x):
        if grid[ny][nx] - here == 1:
            yield ny, nx


def count_reachable(grid: Grid, y: int, x: int) -> int:
    """Number of distinct peaks reachable from (y, x) by gradual uphill steps."""
    queue = deque([(y, x)])
    visited: set[tuple[int, int]] = set()
    peaks = 0
    while queue:
        position = queue.popleft()
        if position in visited:
            continue
        visited.add(position)
        cy, cx = position
        if grid[cy][cx] == PEAK:
            peaks += 1
            continue
        queue.extend(n for n in _uphill(grid, cy, cx) if n not in visited)
    return peaks


def count_trails(grid: Grid, y: int, x: int) -> int:
    """Number of distinct uphill trails from (y, x) that end on a peak."""
    if grid[y][x] == PEAK:
        return 1
    return sum(count_trails(grid, ny, nx) for ny, nx in _uphill(grid, y, x))


def _trailheads(grid: Grid) -> Iterator[tuple[int, int]]:
    for y, row in enumerate(grid):
        for x, height in enumerate(row):
            if height == TRAILHEAD:
                yield y, x


def part_a(grid: Grid) -> int:
    """Sum of the scores of all trailheads."""
    return sum(count_reachable(grid, y, x) for y, x in _trailheads(grid))


def part_b(grid: Grid) -> int:
    """Sum of the ratings of all trailheads."""
    return sum(count_trails(grid, y, x) for y, x in _trailheads(grid))


def main(argv: list[str] | None = None) -> int:
    started = time.perf_counter()
    parser = argparse.ArgumentParser(description="Score hiking trails.")
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

    grid = parse(text)
    print(part_b(grid) if args.next_part else part_a(grid))
    print(f"{time.perf_counter() - started:.6f}s")
    return 0