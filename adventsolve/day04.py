"""Day 4: word search for XMAS and for crossed MAS shapes."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

WORD = "XMAS"
DIRECTIONS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)
_DIAGONALS = frozenset({"MS", "SM"})


def parse(text: str) -> list[str]:
    """Return the grid as a list of rows."""
    return text.splitlines()


def _letter_at(grid: list[str], row: int, col: int, letter: str) -> bool:
    if not (0 <= row < len(grid) and 0 <= col < len(grid[0])):
        return False
    return grid[row][col] == letter


def count_xmas(grid: list[str], row: int, col: int) -> int:
    """Number of directions in which XMAS is spelled from this cell."""
    if grid[row][col] != WORD[0]:
        return 0
    return sum(
        all(
            _letter_at(grid, row + step * dr, col + step * dc, letter)
            for step, letter in enumerate(WORD[1:], start=1)
        )
        for dr, dc in DIRECTIONS
    )


def is_x_mas(grid: list[str], row: int, col: int) -> bool:
    """True when this cell is the centre A of two crossing MAS words."""
    if grid[row][col] != "A":
        return False
    falling = grid[row - 1][col - 1] + grid[row + 1][col + 1]
    rising = grid[row + 1][col - 1] + grid[row - 1][col + 1]
    return falling in _DIAGONALS and rising in _DIAGONALS


def part_a(grid: list[str]) -> int:
    """Total occurrences of XMAS in all eight directions."""
    return sum(
        count_xmas(grid, row, col)
        for row, line in enumerate(grid)
        for col in range(len(line))
    )


def part_b(grid: list[str]) -> int:
    """Number of X-shaped MAS crossings."""
    if not grid:
        return 0
    return sum(
        is_x_mas(grid, row, col)
        for row in range(1, len(grid) - 1)
        for col in range(1, len(grid[0]) - 1)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Search a letter grid for XMAS.")
    parser.add_argument("-next", "--next", dest="next_part", action="store_true",
                        help="solve the second part")
    parser.add_argument("-sample", "--sample", action="store_true",
                        help="read sample.txt instead of input.txt")
    args = parser.parse_args(argv)

    path = Path("sample.txt" if args.sample else "input.txt")
    try:
        grid = parse(path.read_text())
    except OSError as exc:
        print(f"Error parsing input {path}: {exc}", file=sys.stderr)
        return 1

    print(part_b(grid) if args.next_part else part_a(grid))
    return 0