import pytest

from advent.filelib import (
    load,
    load_as_ints,
    load_no_blanks,
    parse_csv_int_lines,
    parse_line_to_linecoords,
    parse_path_to_coords,
    remove_blanks,
    split_lines_by_blanks,
    strings_to_ints,
)

BINGO = (
    "7,4,9,5,11,17,23,2,0,14,21,24,10,16,13,6,15,25,12,22,18,20,8,19,3,26,1\n\n"
    "22 13 17 11  0\n 8  2 23  4 24\n21  9 14 16  7\n 6 10  3 18  5\n 1 12 20 15 19\n\n"
    " 3 15  0  2 22\n 9 18 13 17  5\n19  8  7 25 23\n20 11 10 24  4\n14 21 16 12  6\n\n\n"
    "14 21 17 24  4\n10 16 15  9 19\n18  8 23 26 20\n22 11 13  6  5\n 2  0 12  3  7\n\n"
)


def test_remove_blanks():
    text = "\n199\n200\n208\n210\n\n200\n207\n240\n269\n260\n263\n"
    expected = ["199", "200", "208", "210", "200", "207", "240", "269", "260", "263"]
    assert remove_blanks(text) == expected


def test_remove_blanks_drops_whitespace_lines_and_carriage_returns():
    assert remove_blanks("a\r\n   \r\nb\n\t\n") == ["a", "b"]


def test_strings_to_ints():
    strings = ["199", "200", "208", "210", "200", "207", "240", "269", "260", "263"]
    expected = [199, 200, 208, 210, 200, 207, 240, 269, 260, 263]
    assert strings_to_ints(strings) == expected


def test_strings_to_ints_rejects_garbage():
    with pytest.raises(ValueError):
        strings_to_ints(["12", "abc"])


def test_parse_line_to_coords():
    assert parse_line_to_linecoords("6,4 -> 2,0") == (6, 4, 2, 0)
    assert parse_line_to_linecoords("1,2 -> 3,-4") == (1, 2, 3, -4)


def test_parse_line_to_coords_too_short():
    with pytest.raises(IndexError):
        parse_line_to_linecoords("1,2")


def test_split_lines_by_blanks():
    expected = [
        ["7,4,9,5,11,17,23,2,0,14,21,24,10,16,13,6,15,25,12,22,18,20,8,19,3,26,1"],
        ["22 13 17 11  0", " 8  2 23  4 24", "21  9 14 16  7", " 6 10  3 18  5", " 1 12 20 15 19"],
        [" 3 15  0  2 22", " 9 18 13 17  5", "19  8  7 25 23", "20 11 10 24  4", "14 21 16 12  6"],
        ["14 21 17 24  4", "10 16 15  9 19", "18  8 23 26 20", "22 11 13  6  5", " 2  0 12  3  7"],
    ]
    assert split_lines_by_blanks(BINGO) == expected


def test_split_lines_by_blanks_empty():
    assert split_lines_by_blanks("\n\n  \n") == []


def test_parse_csv_int_lines():
    lines = [["7,4,9,5,11,17,23,2,0,14,21,24,10,16,13,6,15,25,12,22,18,20,8,19,3,26,1"]]
    expected = [7, 4, 9, 5, 11, 17, 23, 2, 0, 14, 21, 24, 10, 16, 13, 6, 15, 25, 12, 22, 18, 20, 8, 19, 3, 26, 1]
    assert parse_csv_int_lines(lines) == expected


def test_parse_csv_int_lines_flattens_and_skips_empty_fields():
    assert parse_csv_int_lines([["1, 2,", "3"], [" 4 ,,5"]]) == [1, 2, 3, 4, 5]


def test_parse_path_to_coords():
    assert parse_path_to_coords("1,2 -> 3,-4 -> 5,6 -> 1,2") == [(1, 2), (3, -4), (5, 6), (1, 2)]


def test_parse_path_to_coords_missing_comma():
    with pytest.raises(ValueError):
        parse_path_to_coords("1,2 -> 34")


def test_load_functions(tmp_path):
    path = tmp_path / "input"
    path.write_text("10\n\n-20\n  \n30\n")
    assert load(path) == "10\n\n-20\n  \n30\n"
    assert load_no_blanks(path) == ["10", "-20", "30"]
    assert load_as_ints(str(path)) == [10, -20, 30]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load(tmp_path / "missing")