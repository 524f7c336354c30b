"""Day 2: safety of reactor level reports, with and without a dampener."""

from __future__ import annotations

import argparse
import sys
from itertools import pairwise
from pathlib import Path

INPUT_FILE = "input.txt"
MAX_STEP = 3


def parse(text: str) -> list[list[int]]:
    """Turn each line of space-separated numbers into a report."""
    reports = []
    for line in text.splitlines():
        try:
            reports.append([int(value) for value in line.split(" ")])
        except ValueError as exc:
            raise ValueError(f"Couldn't convert to int: {line!r}") from exc
    return reports


def _require_pair(report: list[int]) -> None:
    if len(report) < 2:
        raise ValueError("a report needs at least two levels")


def _bad_step(first: int, second: int, descending: bool) -> bool:
    return (
        first == second
        or (first > second) != descending
        or abs(first - second) > MAX_STEP
    )


def is_safe(report: list[int]) -> bool:
    """True when levels move strictly one way in steps of at most three."""
    _require_pair(report)
    ascending = report[1] > report[0]
    return not any(_bad_step(cur, prev, ascending) for prev, cur in pairwise(report))


def validate_report(report: list[int], retry: bool = True) -> bool:
    """Check a report, allowing one level near the first fault to be dropped."""
    _require_pair(report)
    descending = report[0] > report[1]
    for index, (cur, nxt) in enumerate(pairwise(report)):
        if _bad_step(cur, nxt, descending):
            if not retry:
                return False
            candidates = ([index - 1] if index else []) + [index, index + 1]
            return any(
                validate_report(report[:drop] + report[drop + 1:], False)
                for drop in candidates
            )
    return True


def part_a(reports: list[list[int]]) -> int:
    """Number of safe reports."""
    return sum(is_safe(report) for report in reports)


def part_b(reports: list[list[int]]) -> int:
    """Number of reports that are safe once the dampener is applied."""
    return sum(validate_report(report, True) for report in reports)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count safe reactor reports.")
    parser.add_argument("-next", "--next", dest="next_part", action="store_true",
                        help="solve the second part")
    args = parser.parse_args(argv)

    try:
        text = Path(INPUT_FILE).read_text()
    except OSError as exc:
        print(f"Couldn't read file {INPUT_FILE}: {exc}", file=sys.stderr)
        return 1

    reports = parse(text)
    print(part_b(reports) if args.next_part else part_a(reports))
    return 0