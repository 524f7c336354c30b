"""Day 12: fencing prices for garden regions by perimeter and by sides."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict, deque
from itertools import pairwise
from pathlib import Path

INPUT_FILE = "input.txt"

Position = tuple[int, int]
# Offsets (dy, dx) for up, down, left, right.
_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _in_bounds(lines: list[str], y: int, x: int) -> bool:
    return 0 <= y < len(lines) and 0 <= x < len(lines[0])


def _regions(lines: list[str]) -> list[list[Position]]:
    """Every connected region of equal plants, in row-major discovery order."""
    visited: set[Position] = set()
    regions = []
    for y in range(len(lines)):
        for x in range(len(lines[0])):
            if (y, x) in visited:
                continue
            plant = lines[y][x]
            visited.add((y, x))
            queue = deque([(y, x)])
            cells = []
            while queue:
                cy, cx = queue.popleft()
                cells.append((cy, cx))
                for dy, dx in _OFFSETS:
                    ny, nx = cy + dy, cx + dx
                    if (
                        _in_bounds(lines, ny, nx)
                        and (ny, nx) not in visited
                        and lines[ny][nx] == plant
                    ):
                        visited.add((ny, nx))
                        queue.append((ny, nx))
            regions.append(cells)
    return regions


def _fences(lines: list[str], cells: list[Position]):
    """Yield (direction index, outside y, outside x) for each fence segment."""
    for y, x in cells:
        plant = lines[y][x]
        for direction, (dy, dx) in enumerate(_OFFSETS):
            ny, nx = y + dy, x + dx
            if not _in_bounds(lines, ny, nx) or lines[ny][nx] != plant:
                yield direction, ny, nx


def _count_sides(lines: list[str], cells: list[Position]) -> int:
    rows: defaultdict[tuple[int, int], list[int]] = defaultdict(list)
    for direction, ny, nx in _fences(lines, cells):
        if direction < 2:
            rows[(direction, ny)].append(nx)
        else:
            rows[(direction, nx)].append(ny)
    sides = 0
    for positions in rows.values():
        positions.sort()
        sides += 1 + sum(b - a != 1 for a, b in pairwise(positions))
    return sides


def part_a(lines: list[str]) -> int:
    """Total price using area times perimeter for every region."""
    return sum(
        len(cells) * sum(1 for _ in _fences(lines, cells))
        for cells in _regions(lines)
    )


def part_b(lines: list[str]) -> int:
    """Total price using area times number of sides for every region."""
    return sum(len(cells) * _count_sides(lines, cells) for cells in _regions(lines))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Price garden fencing.")
    parser.add_argument("-next", "--next", dest="next_part", action="store_true",
                        help="solve the second part")
    args = parser.parse_args(argv)

    try:
        lines = Path(INPUT_FILE).read_text().splitlines()
    except OSError as exc:
        print(f"Error opening file {INPUT_FILE}: {exc}", file=sys.stderr)
        return 1

    print(part_b(lines) if args.next_part else part_a(lines))
    return 0