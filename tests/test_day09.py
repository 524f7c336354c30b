import pytest

from adventsolve.day09 import Segment, parse_disk_map, parse_segments, part_a, part_b

SAMPLE = "2333133121414131402"


def _show(blocks):
    return "".join("." if block is None else str(block) for block in blocks)


def test_parse_disk_map_layout():
    assert _show(parse_disk_map("12345")) == "0..111....22222"


def test_parse_disk_map_length_is_digit_sum():
    assert len(parse_disk_map(SAMPLE)) == sum(int(c) for c in SAMPLE)


def test_parse_disk_map_rejects_non_digits():
    with pytest.raises(ValueError):
        parse_disk_map("1x2")


def test_parse_segments():
    assert parse_segments("12345") == [
        Segment(0, 1),
        Segment(None, 2),
        Segment(1, 3),
        Segment(None, 4),
        Segment(2, 5),
    ]


def test_parse_segments_skips_empty_runs_without_using_ids():
    assert parse_segments("10011") == [Segment(0, 1), Segment(None, 1), Segment(1, 1)]
    assert parse_disk_map("10011") == [0, None, 2]


def test_part_a_sample():
    assert part_a(SAMPLE) == 1928


def test_part_b_sample():
    assert part_b(SAMPLE) == 2858


@pytest.mark.parametrize("line", ["131", "12131", "1313111", "909"])
def test_single_block_files_compact_the_same_both_ways(line):
    assert part_a(line) == part_b(line)


def test_empty_map():
    assert part_a("") == part_b("") == 0


def test_part_b_does_not_change_a_full_disk():
    blocks = parse_disk_map("30204")
    expected = sum(pos * fid for pos, fid in enumerate(blocks))
    assert part_b("30204") == expected
    assert part_a("30204") == expected