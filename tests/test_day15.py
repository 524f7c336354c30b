import pytest

from adventsolve import day15

SMALL_A = """########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<
"""

FINAL_A = """########
#....OO#
##.....#
#.....O#
#.#O@..#
#...O..#
#...O..#
########

"""

SMALL_B = """#######
#...#.#
#.....#
#..OO@#
#..O..#
#.....#
#######

<vv<<^^<<^^
"""

FINAL_B = """##############
##...[].##..##
##...@.[]...##
##....[]....##
##..........##
##..........##
##############
"""

WIDEN = str.maketrans({"#": "##", "O": "[]", ".": "..", "@": "@."})


def test_parse_warehouse_strips_walls():
    board, moves, position = day15.parse_warehouse(SMALL_A)
    lines = SMALL_A.splitlines()
    expected = "".join(line[1:-1] + "\n" for line in lines[1:7])
    assert day15.render_board(board, position, "@") == expected
    assert moves == lines[9]


def test_parse_warehouse_needs_map():
    with pytest.raises(ValueError):
        day15.parse_warehouse("########\n\n<")


def test_parse_wide_warehouse_doubles_width():
    board, moves, position = day15.parse_wide_warehouse(SMALL_B)
    lines = SMALL_B.splitlines()
    expected = "".join(line.translate(WIDEN) + "\n" for line in lines[:7])
    assert day15.render_board(board, position, "@") == expected
    assert moves == lines[8]


def test_gps_a_pinned():
    assert day15.gps_a([list("...O..")]) == 104


def test_gps_b_pinned():
    board = [list("##########"), list("##...[]...")]
    assert day15.gps_b(board) == 105


def test_part_a_example():
    result = day15.part_a(*day15.parse_warehouse(SMALL_A))
    assert result == 2028
    assert result == day15.gps_a(day15.parse_warehouse(FINAL_A)[0])


def test_part_a_leaves_input_untouched():
    board, moves, position = day15.parse_warehouse(SMALL_A)
    snapshot = [row[:] for row in board]
    day15.part_a(board, moves, position)
    assert board == snapshot


def test_part_a_without_moves_is_plain_gps():
    board, _, position = day15.parse_warehouse(SMALL_A)
    assert day15.part_a(board, "", position) == day15.gps_a(board)


def test_part_a_box_against_wall_stays():
    board, moves, position = day15.parse_warehouse("#####\n#.@O#\n#####\n\n>\n")
    assert day15.part_a(board, moves, position) == day15.gps_a(board)


def test_part_a_push_right_shifts_gps():
    board, moves, position = day15.parse_warehouse("######\n#@O..#\n######\n\n>>\n")
    assert day15.part_a(board, moves, position) == day15.gps_a(board) + 2


def test_part_a_push_up_until_wall():
    text = "#####\n#...#\n#.O.#\n#.@.#\n#####\n\n^^\n"
    board, moves, position = day15.parse_warehouse(text)
    assert day15.part_a(board, moves, position) == day15.gps_a(board) - 100


def test_part_b_example():
    board, moves, position = day15.parse_wide_warehouse(SMALL_B)
    final = [list(line.replace("@", ".")) for line in FINAL_B.splitlines()]
    assert day15.part_b(board, moves, position) == day15.gps_b(final)


def test_part_b_push_right_shifts_gps():
    board, moves, position = day15.parse_wide_warehouse("######\n#@O..#\n######\n\n>>\n")
    assert day15.part_b(board, moves, position) == day15.gps_b(board) + 1


def test_part_b_stacked_boxes_move_up():
    text = "####\n#..#\n#O.#\n#O.#\n#@.#\n####\n\n^\n"
    board, moves, position = day15.parse_wide_warehouse(text)
    assert day15.part_b(board, moves, position) == day15.gps_b(board) - 200


def test_part_b_stacked_boxes_blocked_by_wall():
    text = "####\n#O.#\n#O.#\n#@.#\n####\n\n^\n"
    board, moves, position = day15.parse_wide_warehouse(text)
    snapshot = [row[:] for row in board]
    assert day15.part_b(board, moves, position) == day15.gps_b(board)
    assert board == snapshot


def test_main_part_a(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "input.txt").write_text(SMALL_A)
    assert day15.main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[-1] == str(day15.part_a(*day15.parse_warehouse(SMALL_A)))


def test_main_part_b(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "input.txt").write_text(SMALL_B)
    assert day15.main(["-next"]) == 0
    out = capsys.readouterr().out
    expected = day15.part_b(*day15.parse_wide_warehouse(SMALL_B))
    assert out.splitlines()[-1] == str(expected)


def test_main_missing_input(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert day15.main([]) == 1