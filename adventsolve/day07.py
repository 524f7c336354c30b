"""Day 7: which calibration equations can be made true with +, * and ||."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence


@dataclass(frozen=True)
class Equation:
    """A test value and the numbers that must combine to reach it."""

    target: int
    values: tuple[int, ...]


def parse(text: str) -> list[Equation]:
    """Read lines of the form 'target: v1 v2 ...'."""
    equations = []
    for line in text.splitlines():
        head, _, tail = line.partition(":")
        values = tuple(int(value) for value in tail.strip().split(" "))
        equations.append(Equation(int(head), values))
    return equations


def concat_int(a: int, b: int) -> int:
    """Join the decimal digits of a and b into one number."""
    return int(f"{a}{b}")


def is_valid(values: Sequence[int], current: int, target: int,
             allow_concat: bool = False) -> bool:
    """True if the remaining values can be folded into current to reach target."""
    if not values:
        return current == target
    if current > target:
        return False
    first, rest = values[0], values[1:]
    return (
        is_valid(rest, current * first, target, allow_concat)
        or is_valid(rest, current + first, target, allow_concat)
        or (allow_concat and is_valid(rest, concat_int(current, first), target, True))
    )


def _calibration(equations: list[Equation], allow_concat: bool) -> int:
    return sum(
        eq.target
        for eq in equations
        if is_valid(eq.values[1:], eq.values[0], eq.target, allow_concat)
    )


def part_a(equations: list[Equation]) -> int:
    """Sum of targets reachable with addition and multiplication."""
    return _calibration(equations, False)


def part_b(equations: list[Equation]) -> int:
    """Sum of targets reachable when concatenation is also allowed."""
    return _calibration(equations, True)


def main(argv: list[str] | None = None) -> int:
    started = time.perf_counter()
    parser = argparse.ArgumentParser(description="Check calibration equations.")
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

    equations = parse(text)
    print(part_b(equations) if args.next_part else part_a(equations))
    print(f"{time.perf_counter() - started:.6f}s")
    return 0