import pytest

from adventsolve.day04 import count_xmas, is_x_mas, main, parse, part_a, part_b

EXAMPLE = [
    "MMMSXXMASM",
    "MSAMXMSMSA",
    "AMXSXMAXAA",
    "MSAMASMSMX",
    "XMASAMXAMM",
    "XXAMMXXAMA",
    "SMSMSASXSS",
    "SAXAMASAAA",
    "MAMMMXMMMM",
    "MXMXAXMASX",
]


def _transpose(grid):
    return ["".join(column) for column in zip(*grid)]


def test_parse_returns_rows():
    assert parse("\n".join(EXAMPLE) + "\n") == EXAMPLE


def test_single_word():
    assert count_xmas(["XMAS"], 0, 0) == 1
    assert part_a(["SAMX"]) == part_a(["XMAS"])


def test_non_x_cell_counts_nothing():
    assert count_xmas(["MAS"], 0, 0) == part_a([])


@pytest.mark.parametrize(
    "transform",
    [
        lambda g: list(reversed(g)),
        lambda g: [row[::-1] for row in g],
        _transpose,
    ],
)
def test_part_a_symmetry(transform):
    assert part_a(transform(EXAMPLE)) == part_a(EXAMPLE)


@pytest.mark.parametrize(
    "transform",
    [
        lambda g: list(reversed(g)),
        lambda g: [row[::-1] for row in g],
        _transpose,
    ],
)
def test_part_b_symmetry(transform):
    assert part_b(transform(EXAMPLE)) == part_b(EXAMPLE)


def test_is_x_mas_shapes():
    assert is_x_mas(["M.S", ".A.", "M.S"], 1, 1) is True
    assert is_x_mas(["M.M", ".A.", "M.M"], 1, 1) is False
    assert is_x_mas(["M.S", ".X.", "M.S"], 1, 1) is False


def test_part_b_small_grid_has_no_interior():
    assert part_b(["MS", "AM"]) == part_b([])


def test_main_reads_sample(tmp_path, monkeypatch, capsys):
    (tmp_path / "sample.txt").write_text("\n".join(EXAMPLE) + "\n")
    monkeypatch.chdir(tmp_path)
    main(["--sample"])
    assert capsys.readouterr().out.strip() == str(part_a(EXAMPLE))


def test_main_missing_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    code = main(["--next"])
    assert code != 0
    assert "input.txt" in capsys.readouterr().err