"""Day 3: summing mul(x,y) instructions in corrupted memory."""

from __future__ import annotations

import argparse
import sys
from enum import Enum, auto
from pathlib import Path

MUL_OPEN = "mul("
DO = "do()"
DONT = "don't()"


class _Stage(Enum):
    SEEK = auto()
    LEFT = auto()
    RIGHT = auto()
    DISABLED = auto()


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _scan(line: str, stage: _Stage, conditional: bool) -> tuple[int, _Stage]:
    """Scan one line, returning its product sum and the stage it ends in."""
    total = 0
    left = right = ""
    length = len(line)
    i = 0
    while i < length:
        char = line[i]
        if conditional and i < length - len(DONT) and line.startswith(DONT, i):
            stage = _Stage.DISABLED
            i += len(DONT) - 1

        if stage is _Stage.SEEK:
            if i < length - 5 and line.startswith(MUL_OPEN, i):
                stage = _Stage.LEFT
                left = right = ""
                i += len(MUL_OPEN) - 1
        elif stage is _Stage.LEFT:
            if char == ",":
                stage = _Stage.RIGHT
            else:
                if not _is_digit(char):
                    stage = _Stage.SEEK
                left += char
        elif stage is _Stage.RIGHT:
            if char == ")":
                stage = _Stage.SEEK
                if left and right:
                    total += int(left) * int(right)
            else:
                if not _is_digit(char):
                    stage = _Stage.SEEK
                right += char
        elif i < length - len(DO) and line.startswith(DO, i):
            stage = _Stage.SEEK
            i += len(DO) - 1
        i += 1
    return total, stage


def part_a(lines: list[str]) -> int:
    """Sum of every well-formed multiplication."""
    return sum(_scan(line, _Stage.SEEK, False)[0] for line in lines)


def part_b(lines: list[str]) -> int:
    """Sum of multiplications, honouring don't() and do() across lines."""
    total = 0
    stage = _Stage.SEEK
    for line in lines:
        line_total, stage = _scan(line, stage, True)
        total += line_total
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum multiplications in memory.")
    parser.add_argument("-next", "--next", dest="next_part", action="store_true",
                        help="solve the second part")
    parser.add_argument("-sample", "--sample", action="store_true",
                        help="read sample.txt instead of input.txt")
    args = parser.parse_args(argv)

    path = Path("sample.txt" if args.sample else "input.txt")
    try:
        lines = path.read_text().splitlines()
    except OSError as exc:
        print(f"Error opening file {path}: {exc}", file=sys.stderr)
        return 1

    print(part_b(lines) if args.next_part else part_a(lines))
    return 0