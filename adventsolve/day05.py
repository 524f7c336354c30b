"""Day 5: checking and repairing page orderings for print updates."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path


def parse(lines: list[str]) -> tuple[dict[str, list[str]], list[list[str]]]:
    """Split the input into ordering rules and updates.

    Rules map a page to the pages that must come after it.
    """
    rules: dict[str, list[str]] = {}
    updates: list[list[str]] = []
    in_rules = True
    for line in lines:
        if line == "":
            in_rules = False
            continue
        if in_rules:
            fields = line.split("|")
            if len(fields) < 2:
                raise ValueError(f"Malformed rule: {line!r}")
            rules.setdefault(fields[0], []).append(fields[1])
        else:
            updates.append(line.split(","))
    return rules, updates


def _middle(update: list[str]) -> int:
    try:
        return int(update[len(update) // 2])
    except ValueError:
        return 0


def _in_order(update: list[str], rules: dict[str, list[str]]) -> bool:
    seen: set[str] = set()
    for page in update:
        if any(after in seen for after in rules.get(page, ())):
            return False
        seen.add(page)
    return True


def _reorder(update: list[str], rules: dict[str, list[str]]) -> tuple[list[str], bool]:
    """Swap offending pages until no rule is broken; report whether any moved."""
    pages = list(update)
    changed = False
    i = 1
    while i < len(pages):
        after = rules.get(pages[i], ())
        for j in range(i):
            if pages[j] in after:
                pages[i], pages[j] = pages[j], pages[i]
                changed = True
                i = 1
                break
        i += 1
    return pages, changed


def part_a(rules: dict[str, list[str]], updates: list[list[str]]) -> int:
    """Sum of middle pages of updates that already follow the rules."""
    return sum(_middle(update) for update in updates if _in_order(update, rules))


def part_b(rules: dict[str, list[str]], updates: list[list[str]]) -> int:
    """Sum of middle pages of the updates that had to be reordered."""
    total = 0
    for update in updates:
        pages, changed = _reorder(update, rules)
        if changed:
            total += _middle(pages)
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check print update orderings.")
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

    rules, updates = parse(lines)
    print(part_b(rules, updates) if args.next_part else part_a(rules, updates))
    return 0