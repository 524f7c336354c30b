"""Day 9: compacting a disk map block by block and file by file."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from itertools import takewhile
from pathlib import Path


@dataclass
class Segment:
    """A run of blocks holding one file, or free space when file_id is None."""

    file_id: int | None
    length: int


def parse_disk_map(line: str) -> list[int | None]:
    """Expand the dense map into blocks: a file id or None for free space."""
    blocks: list[int | None] = []
    for index, char in enumerate(line):
        file_id = index // 2 if index % 2 == 0 else None
        blocks.extend([file_id] * int(char))
    return blocks


def parse_segments(line: str) -> list[Segment]:
    """Read the dense map as segments, dropping empty ones.

    Empty files are dropped without using up an id.
    """
    segments: list[Segment] = []
    next_id = 0
    for index, char in enumerate(line):
        length = int(char)
        if length == 0:
            continue
        if index % 2 == 0:
            segments.append(Segment(next_id, length))
            next_id += 1
        else:
            segments.append(Segment(None, length))
    return segments


def part_a(line: str) -> int:
    """Checksum after moving single blocks from the end into the leftmost gaps."""
    blocks = parse_disk_map(line)
    left, right = 0, len(blocks) - 1
    while left < right:
        if blocks[left] is not None:
            left += 1
        elif blocks[right] is None:
            right -= 1
        else:
            blocks[left], blocks[right] = blocks[right], None
            left += 1
            right -= 1
    return sum(
        position * file_id
        for position, file_id in enumerate(takewhile(lambda b: b is not None, blocks))
    )


def part_b(line: str) -> int:
    """Checksum after moving whole files into the leftmost gap that fits."""
    segments = parse_segments(line)
    r = len(segments) - 1
    while r >= 0:
        moving = segments[r]
        if moving.file_id is not None:
            for l in range(r):
                target = segments[l]
                if target.file_id is not None:
                    continue
                spare = target.length - moving.length
                if spare < 0:
                    continue
                if spare == 0:
                    target.file_id = moving.file_id
                else:
                    segments.insert(l, Segment(moving.file_id, moving.length))
                    target.length = spare
                moving.file_id = None
                r = len(segments) - 1
                break
        r -= 1

    total = 0
    position = 0
    for segment in segments:
        if segment.file_id is not None:
            total += segment.file_id * sum(range(position, position + segment.length))
        position += segment.length
    return total


def main(argv: list[str] | None = None) -> int:
    started = time.perf_counter()
    parser = argparse.ArgumentParser(description="Compact a disk map.")
    parser.add_argument("-next", "--next", dest="next_part", action="store_true",
                        help="solve the second part")
    parser.add_argument("-sample", "--sample", action="store_true",
                        help="read sample.txt instead of input.txt")
    args = parser.parse_args(argv)

    path = Path("sample.txt" if args.sample else "input.txt")
    try:
        lines = path.read_text().splitlines()
    except OSError as exc:
        print(f"Couldn't open file {path}: {exc}", file=sys.stderr)
        return 1

    line = lines[-1] if lines else ""
    print(part_b(line) if args.next_part else part_a(line))
    print(f"{time.perf_counter() - started:.6f}s")
    return 0