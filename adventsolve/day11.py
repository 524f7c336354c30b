"""Day 11: counting stones that split and change each time you blink."""

from __future__ import annotations

import argparse
import sys
import time
from functools import lru_cache
from pathlib import Path

MULTIPLIER = 2024
BLINKS_A = 25
BLINKS_B = 75


def parse(text: str) -> list[int]:
    """Read the space-separated stone numbers from every line."""
    return [int(value) for line in text.splitlines() for value in line.split(" ")]


def _transform(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * MULTIPLIER,)


def blink(stones: list[int]) -> list[int]:
    """The row of stones after one blink."""
    return [new for stone in stones for new in _transform(stone)]


@lru_cache(maxsize=None)
def count_stones(stone: int, count: int) -> int:
    """How many stones one stone becomes after the given number of blinks."""
    if count == 0:
        return 1
    return sum(count_stones(new, count - 1) for new in _transform(stone))


def part_a(stones: list[int]) -> int:
    """Number of stones after 25 blinks, simulated stone by stone."""
    for _ in range(BLINKS_A):
        stones = blink(stones)
    return len(stones)


def part_b(stones: list[int]) -> int:
    """Number of stones after 75 blinks."""
    return sum(count_stones(stone, BLINKS_B) for stone in stones)


def main(argv: list[str] | None = None) -> int:
    started = time.perf_counter()
    parser = argparse.ArgumentParser(description="Count stones after blinking.")
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

    stones = parse(text)
    print(part_b(stones) if args.next_part else part_a(stones))
    print(f"{time.perf_counter() - started:.6f}s")
    return 0