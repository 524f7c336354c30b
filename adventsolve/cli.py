"""Command-line entry point that runs one day's solver."""

from __future__ import annotations

import argparse
from collections.abc import Callable

from adventsolve import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
)

SOLVERS: dict[int, Callable[[list[str] | None], int]] = {
    1: day01.main,
    2: day02.main,
    3: day03.main,
    4: day04.main,
    5: day05.main,
    6: day06.main,
    7: day07.main,
    8: day08.main,
    9: day09.main,
    10: day10.main,
    11: day11.main,
    12: day12.main,
    13: day13.main,
    14: day14.main,
    15: day15.main,
}


def main(argv: list[str] | None = None) -> int:
    """Run the chosen day, passing any further options on to it."""
    parser = argparse.ArgumentParser(
        prog="adventsolve",
        description="Solve one day's puzzle from input.txt in the current directory.",
    )
    parser.add_argument("day", type=int, choices=sorted(SOLVERS),
                        help="the day to solve")
    args, rest = parser.parse_known_args(argv)
    return SOLVERS[args.day](rest)