"""Day 8: antinodes created by pairs of same-frequency antennas."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass, field
from itertools import combinations, count
from pathlib import Path

EMPTY = "."
MARK = "#"

Position = tuple[int, int]


@dataclass
class AntennaMap:
    """The map rows, antenna positions (y, x) by frequency, and map size."""

    lines: list[str]
    antennas: dict[str, list[Position]] = field(default_factory=dict)
    height: int = 0
    width: int = 0

    def contains(self, position: Position) -> bool:
        y, x = position
        return 0 <= y < self.height and 0 <= x < self.width


def parse(text: str) -> AntennaMap:
    """Collect every non-empty cell as an antenna of that character's frequency."""
    lines = text.splitlines()
    antennas: dict[str, list[Position]] = {}
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char != EMPTY:
                antennas.setdefault(char, []).append((y, x))
    width = len(lines[-1]) if lines else 0
    return AntennaMap(lines, antennas, len(lines), width)


def antinodes_a(antenna_map: AntennaMap) -> set[Position]:
    """Points at twice the distance from one antenna of a pair as from the other."""
    nodes: set[Position] = set()
    for positions in antenna_map.antennas.values():
        for (fy, fx), (sy, sx) in combinations(positions, 2):
            dy, dx = fy - sy, fx - sx
            for candidate in ((fy + dy, fx + dx), (sy - dy, sx - dx)):
                if antenna_map.contains(candidate):
                    nodes.add(candidate)
    return nodes


def antinodes_b(antenna_map: AntennaMap) -> set[Position]:
    """Every in-bounds point on the line through each pair, antennas included."""
    nodes: set[Position] = set()
    for positions in antenna_map.antennas.values():
        nodes.update(positions)
        for (fy, fx), (sy, sx) in combinations(positions, 2):
            dy, dx = fy - sy, fx - sx
            for i in count(1):
                ahead = (fy + i * dy, fx + i * dx)
                behind = (sy - i * dy, sx - i * dx)
                inside = [p for p in (ahead, behind) if antenna_map.contains(p)]
                if not inside:
                    break
                nodes.update(inside)
    return nodes


def render(lines: list[str], positions: set[Position]) -> str:
    """The map with every given (y, x) position marked."""
    rows = [list(line) for line in lines]
    for y, x in positions:
        rows[y][x] = MARK
    return "\n".join("".join(row) for row in rows)


def part_a(antenna_map: AntennaMap) -> int:
    """Number of distinct antinode positions."""
    return len(antinodes_a(antenna_map))


def part_b(antenna_map: AntennaMap) -> int:
    """Number of distinct positions counting resonant harmonics."""
    return len(antinodes_b(antenna_map))


def main(argv: list[str] | None = None) -> int:
    started = time.perf_counter()
    parser = argparse.ArgumentParser(description="Locate antenna antinodes.")
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

    antenna_map = parse(text)
    nodes = antinodes_b(antenna_map) if args.next_part else antinodes_a(antenna_map)
    print(render(antenna_map.lines, nodes))
    print(len(nodes))
    print(f"{time.perf_counter() - started:.6f}s")
    return 0