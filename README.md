# adventsolve

Solvers for fifteen days of daily programming puzzles. Each day has its own
module, `adventsolve.day01` through `adventsolve.day15`. Every module has a
first part, `part_a`, and a second part, `part_b`, which take parsed input and
return the answer. The modules can be used as a library or through the
`adventsolve` command.

The package has no dependencies beyond the standard library.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

`adventsolve` takes the number of a day, from 1 to 15, and prints the answer
for the puzzle input in `input.txt` in the current directory:

```
adventsolve 12
adventsolve 12 --next
```

`--next` (or `-next`) solves the second part instead of the first. Any options
after the day are passed on to that day's solver, so

```
adventsolve 4 --help
```

lists what a given day accepts. Beyond `--next`:

- days 3 to 11 accept `--sample` (or `-sample`), which reads `sample.txt`
  instead of `input.txt`;
- day 15 accepts `--animate` (or `-animate`), which clears the screen and
  draws the warehouse and its current score after every move.

Some days print more than the answer: days 7 to 11 also print how long the
run took, day 8 prints the map with its antinodes marked before the count,
day 14's second part prints the step number followed by the picture the
robots form, and day 15's second part prints the final warehouse before the
score.

If the input file cannot be read, the command prints the error to standard
error and exits with status 1.

## Library use

```python
from adventsolve import day11, day12, day13

# Number of stones a single stone becomes after three blinks.
day11.count_stones(125, 3)          # 2

# Fence price for garden regions.
garden = ["AAAA", "BBCD", "BBCC", "EEEC"]
day12.part_a(garden)                # 140
day12.part_b(garden)                # 80

# Claw-machine games parsed from their text description.
games = day13.parse_games(
    "Button A: X+94, Y+34\n"
    "Button B: X+22, Y+67\n"
    "Prize: X=8400, Y=5400"
)
day13.count_game_a(games[0])        # 280
```

Most modules have a parsing function that turns the puzzle text into what
the parts take, for example `day01.parse`, `day07.parse` (giving `Equation`
objects), `day08.parse` (giving an `AntennaMap`), `day14.parse_robots` and
`day15.parse_warehouse` / `day15.parse_wide_warehouse`. Days 3 and 12 take the
input lines directly, and day 9 takes the single disk-map line.

`day14.part_b` returns a pair: the first step at which a long horizontal run
of robots appears, and the rendered grid at that step. It raises `ValueError`
if the robots return to their starting layout without forming one.

Malformed input generally raises `ValueError`.

## What each day covers

| Module  | Puzzle                                             |
|---------|----------------------------------------------------|
| day01   | distances and similarity between two number lists  |
| day02   | safe reports, with and without one level removed   |
| day03   | `mul(a,b)` instructions, with `do()`/`don't()`     |
| day04   | XMAS word search and X-MAS crosses                 |
| day05   | page ordering rules and corrected updates          |
| day06   | guard patrol and loop-making obstructions          |
| day07   | equations with `+`, `*` and concatenation          |
| day08   | antenna antinodes                                  |
| day09   | disk compaction by block and by whole file         |
| day10   | hiking trail scores and ratings                    |
| day11   | splitting stones                                   |
| day12   | garden region fences by perimeter and by side      |
| day13   | claw machines                                      |
| day14   | robots on a wrapping grid                          |
| day15   | warehouse robot pushing boxes, narrow and wide     |

## What it does not do

The package only reads puzzle input from local files; it does not fetch
inputs or submit answers. Only days 1 to 15 are covered.