"""Day 13: fewest tokens to win prizes on claw machines."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from pathlib import Path

INPUT_FILE = "input.txt"
COST_A = 3
COST_B = 1
PRIZE_OFFSET = 10_000_000_000_000

_NUMBER = re.compile(r"\d+")


@dataclass(frozen=True)
class Game:
    """The X/Y movement of buttons A and B and the prize location."""

    a: tuple[int, ...]
    b: tuple[int, ...]
    prize: tuple[int, ...]


def parse_games(text: str) -> list[Game]:
    """Read blank-line separated blocks of three lines each into games."""
    games = []
    for block in text.split("\n\n"):
        lines = block.split("\n")
        if len(lines) < 3:
            raise ValueError(f"Malformed game block: {block!r}")
        a, b, prize = (
            tuple(int(match) for match in _NUMBER.findall(line)) for line in lines[:3]
        )
        games.append(Game(a, b, prize))
    return games


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def count_game_a(game: Game) -> int:
    """Tokens for the first A-press count, from most to fewest, that lines up on Y."""
    ax, ay = game.a
    bx, by = game.b
    px, py = game.prize
    for presses_a in range(px // ax, 0, -1):
        x_left = px - ax * presses_a
        y_left = py - ay * presses_a
        presses_b = x_left // bx
        if by * presses_b == y_left:
            return presses_a * COST_A + presses_b * COST_B
    return 0


def count_game_b(game: Game) -> int:
    """Tokens needed once the prize is moved far away, solved with Cramer's rule."""
    ax, ay = game.a
    bx, by = game.b
    px, py = (coord + PRIZE_OFFSET for coord in game.prize[:2])

    det = ax * by - bx * ay
    presses_a = _trunc_div(px * by - py * bx, det)
    presses_b = _trunc_div(ax * py - px * ay, det)

    if ax * presses_a + bx * presses_b == px and ay * presses_a + by * presses_b == py:
        return presses_a * COST_A + presses_b * COST_B
    return 0


def part_a(games: list[Game]) -> int:
    """Total tokens to win every winnable prize."""
    return sum(count_game_a(game) for game in games)


def part_b(games: list[Game]) -> int:
    """Total tokens with the corrected, distant prize positions."""
    return sum(count_game_b(game) for game in games)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Win prizes on claw machines.")
    parser.add_argument("-next", "--next", dest="next_part", action="store_true",
                        help="solve the second part")
    args = parser.parse_args(argv)

    try:
        text = Path(INPUT_FILE).read_text()
    except OSError as exc:
        print(f"Error opening file {INPUT_FILE}: {exc}", file=sys.stderr)
        return 1

    games = parse_games(text)
    print(part_b(games) if args.next_part else part_a(games))
    return 0