"""Day 15: a robot pushing boxes around a warehouse."""

from __future__ import annotations

import argparse
import sys
import time
from collections import deque
from collections.abc import Callable, Iterator
from itertools import pairwise
from pathlib import Path

INPUT_FILE = "input.txt"
WALL = "#"
BOX = "O"
EMPTY = "."
BOX_LEFT = "["
BOX_RIGHT = "]"
COLOR = "\x1b[48;2;255;0;0m"
RESET = "\x1b[0m"
CLEAR_SCREEN = "\x1b[2J"
FRAME_DELAY = 0.005

Board = list[list[str]]
Position = tuple[int, int]  # (x, y)

_WIDE = {WALL: "##", BOX: "[]", EMPTY: ".."}
_OFFSETS = {"<": (-1, 0), ">": (1, 0), "^": (0, -1)}


def _next_pos(position: Position, move: str, count: int = 1) -> Position:
    """Position count steps along a move; any unknown move goes down."""
    dx, dy = _OFFSETS.get(move, (0, 1))
    return position[0] + dx * count, position[1] + dy * count


def _in_bounds(board: Board, position: Position) -> bool:
    x, y = position
    return 0 <= y < len(board) and 0 <= x < len(board[0])


def parse_warehouse(text: str) -> tuple[Board, str, Position]:
    """Read the map without its outer walls, the moves and the robot's (x, y)."""
    board: Board = []
    moves: list[str] = []
    position: Position = (0, 0)
    parsing_moves = False
    for y, line in enumerate(text.splitlines()[1:], start=1):
        x = line.find("@")
        if x > 0:
            position = (x - 1, y - 1)
            line = line[:x] + EMPTY + line[x + 1:]
        if line == "":
            parsing_moves = True
            if not board:
                raise ValueError("the warehouse map is empty")
            board.pop()
            continue
        if parsing_moves:
            moves.append(line)
        else:
            board.append(list(line[1:-1]))
    return board, "".join(moves), position


def parse_wide_warehouse(text: str) -> tuple[Board, str, Position]:
    """Read the map at double width, the moves and the robot's (x, y)."""
    board: Board = []
    moves: list[str] = []
    position: Position = (0, 0)
    parsing_moves = False
    y = 0
    for line in text.splitlines():
        if line == "":
            parsing_moves = True
            continue
        if parsing_moves:
            moves.append(line)
        else:
            row: list[str] = []
            for char in line:
                if char == "@":
                    position = (len(row), y)
                    row.extend(EMPTY * 2)
                elif char in _WIDE:
                    row.extend(_WIDE[char])
            board.append(row)
        y += 1
    return board, "".join(moves), position


def gps_a(board: Board) -> int:
    """Sum of box GPS coordinates on a map stored without its outer walls."""
    return sum(
        100 * (y + 1) + x + 1
        for y, row in enumerate(board)
        for x, cell in enumerate(row)
        if cell == BOX
    )


def gps_b(board: Board) -> int:
    """Sum of GPS coordinates of the left edges of wide boxes."""
    return sum(
        y * 100 + min(x, len(row) - 2)
        for y, row in enumerate(board)
        for x, cell in enumerate(row)
        if cell == BOX_LEFT
    )


def render_board(board: Board, position: Position, marker: str) -> str:
    """The board as text, with marker drawn over the robot's cell."""
    x, robot_y = position
    lines = []
    for y, row in enumerate(board):
        line = "".join(row)
        if y == robot_y:
            line = line[:x] + marker + line[x + 1:]
        lines.append(line + "\n")
    return "".join(lines)


def _move_a(board: Board, move: str, position: Position) -> Position:
    first = _next_pos(position, move)
    if board[first[1]][first[0]] == EMPTY:
        return first
    current = first
    while True:
        current = _next_pos(current, move)
        if not _in_bounds(board, current):
            return position
        item = board[current[1]][current[0]]
        if item == WALL:
            return position
        if item != BOX:
            board[current[1]][current[0]] = BOX
            board[first[1]][first[0]] = EMPTY
            return first


def _push_horizontal(board: Board, move: str, position: Position) -> Position:
    path = [_next_pos(position, move)]
    while True:
        tail = path[-1]
        if not _in_bounds(board, tail):
            return position
        item = board[tail[1]][tail[0]]
        if item == EMPTY:
            for (sx, sy), (dx, dy) in reversed(list(pairwise(path))):
                board[dy][dx] = board[sy][sx]
            board[path[0][1]][path[0][0]] = EMPTY
            return path[0]
        if item == WALL:
            return position
        path += [_next_pos(tail, move), _next_pos(tail, move, 2)]


def _box_at(board: Board, x: int, y: int) -> tuple[int, int, int]:
    """The wide box covering (x, y) as (y, left x, right x)."""
    if board[y][x] == BOX_LEFT:
        return y, x, x + 1
    return y, x - 1, x


def _push_vertical(board: Board, move: str, position: Position) -> Position:
    nx, ny = _next_pos(position, move)
    queue: deque[tuple[int, int, int]] = deque()
    if board[ny][nx] in (BOX_LEFT, BOX_RIGHT):
        queue.append(_box_at(board, nx, ny))

    moved: list[tuple[int, int, int]] = []
    while queue:
        box = queue.popleft()
        y, x1, x2 = box
        left = _next_pos((x1, y), move)
        right = _next_pos((x2, y), move)
        if not (_in_bounds(board, left) and _in_bounds(board, right)):
            return position
        left_item = board[left[1]][left[0]]
        right_item = board[right[1]][right[0]]
        if WALL in (left_item, right_item):
            return position
        if left_item in (BOX_LEFT, BOX_RIGHT):
            queue.append(_box_at(board, *left))
        if right_item == BOX_LEFT:
            queue.append(_box_at(board, *right))
        moved.append(box)

    dy = -1 if move == "^" else 1
    for y, x1, x2 in reversed(moved):
        board[y + dy][x1] = BOX_LEFT
        board[y + dy][x2] = BOX_RIGHT
        board[y][x1] = EMPTY
        board[y][x2] = EMPTY
    if moved:
        y, x1, x2 = moved[0]
        board[y][x1] = EMPTY
        board[y][x2] = EMPTY
    return position[0], position[1] + dy


def _move_b(board: Board, move: str, position: Position) -> Position:
    if move in "<>":
        return _push_horizontal(board, move, position)
    return _push_vertical(board, move, position)


def _steps(board: Board, moves: str, position: Position,
           mover: Callable[[Board, str, Position], Position]) -> Iterator[Position]:
    """Apply each move to the board in place, yielding the robot's position."""
    for move in moves:
        target = _next_pos(position, move)
        if _in_bounds(board, target) and board[target[1]][target[0]] != WALL:
            position = mover(board, move, position)
        yield position


def _run(board: Board, moves: str, position: Position,
         mover: Callable[[Board, str, Position], Position]) -> Board:
    board = [row[:] for row in board]
    for _ in _steps(board, moves, position, mover):
        pass
    return board


def part_a(board: Board, moves: str, position: Position) -> int:
    """GPS sum after the robot makes every move on the narrow map."""
    return gps_a(_run(board, moves, position, _move_a))


def part_b(board: Board, moves: str, position: Position) -> int:
    """GPS sum after the robot makes every move on the wide map."""
    return gps_b(_run(board, moves, position, _move_b))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Push boxes around a warehouse.")
    parser.add_argument("-next", "--next", dest="next_part", action="store_true",
                        help="solve the second part")
    parser.add_argument("-animate", "--animate", action="store_true",
                        help="draw the warehouse after every move")
    args = parser.parse_args(argv)

    try:
        text = Path(INPUT_FILE).read_text()
    except OSError as exc:
        print(f"Error opening file {INPUT_FILE}: {exc}", file=sys.stderr)
        return 1

    if args.next_part:
        board, moves, position = parse_wide_warehouse(text)
        mover, score, marker = _move_b, gps_b, " "
    else:
        board, moves, position = parse_warehouse(text)
        mover, score, marker = _move_a, gps_a, "@"

    for position in _steps(board, moves, position, mover):
        if args.animate:
            print(CLEAR_SCREEN)
            print(render_board(board, position, f"{COLOR}{marker}{RESET}"))
            print(f"{COLOR}GPS: {score(board)}{RESET}")
            time.sleep(FRAME_DELAY)

    if args.next_part:
        print(render_board(board, position, f"{COLOR}{marker}{RESET}"))
    print(score(board))
    return 0