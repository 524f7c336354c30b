from adventsolve.day08 import (
    antinodes_a,
    antinodes_b,
    parse,
    part_a,
    part_b,
    render,
)

SAMPLE = """\
............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""

PAIR = """\
..........
..........
..........
....a.....
..........
.....a....
..........
..........
..........
..........
"""


def test_parse_collects_antennas_and_size():
    antenna_map = parse(SAMPLE)
    assert antenna_map.height == len(SAMPLE.splitlines())
    assert antenna_map.width == len(SAMPLE.splitlines()[0])
    assert set(antenna_map.antennas) == {"0", "A"}
    for freq, positions in antenna_map.antennas.items():
        for y, x in positions:
            assert antenna_map.lines[y][x] == freq


def test_single_pair_antinodes():
    assert antinodes_a(parse(PAIR)) == {(1, 3), (7, 6)}


def test_part_a_sample():
    assert part_a(parse(SAMPLE)) == 14


def test_part_b_sample():
    assert part_b(parse(SAMPLE)) == 34


def test_antinodes_are_in_bounds():
    antenna_map = parse(SAMPLE)
    for position in antinodes_a(antenna_map) | antinodes_b(antenna_map):
        assert antenna_map.contains(position)


def test_harmonics_include_antennas_and_simple_antinodes():
    antenna_map = parse(SAMPLE)
    harmonic = antinodes_b(antenna_map)
    assert antinodes_a(antenna_map) <= harmonic
    for positions in antenna_map.antennas.values():
        assert set(positions) <= harmonic


def test_render_marks_positions():
    assert render(["...", "..."], {(0, 1)}) == ".#.\n..."


def test_render_marks_count_matches():
    antenna_map = parse(PAIR)
    nodes = antinodes_a(antenna_map)
    assert render(antenna_map.lines, nodes).count("#") == len(nodes)