"""Day 1: total distance and similarity score of two location-id lists."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from pathlib import Path

SEPARATOR = "   "
INPUT_FILE = "input.txt"


def parse(text: str) -> tuple[list[int], list[int]]:
    """Split lines of two numbers separated by three spaces into two lists."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        fields = line.split(SEPARATOR)
        if len(fields) < 2:
            raise ValueError(f"Malformed line: {line!r}")
        try:
            left.append(int(fields[0]))
            right.append(int(fields[1]))
        except ValueError as exc:
            raise ValueError(f"Couldn't convert {line!r} to int") from exc
    return left, right


def part_a(left: list[int], right: list[int]) -> int:
    """Sum of distances between the sorted lists, paired element by element."""
    if len(right) < len(left):
        raise ValueError("the right list is shorter than the left list")
    return sum(abs(r - l) for l, r in zip(sorted(left), sorted(right)))


def part_b(left: list[int], right: list[int]) -> int:
    """Sum of each left value times how often it appears in the right list."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare two location-id lists.")
    parser.add_argument("-next", "--next", dest="next_part", action="store_true",
                        help="solve the second part")
    args = parser.parse_args(argv)

    try:
        text = Path(INPUT_FILE).read_text()
    except OSError as exc:
        print(f"Error opening file {INPUT_FILE}: {exc}", file=sys.stderr)
        return 1

    left, right = parse(text)
    print(part_b(left, right) if args.next_part else part_a(left, right))
    return 0