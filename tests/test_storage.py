import pytest

from meyvekes.storage import (
    load_coordinates,
    parse_coordinates,
    read_high_score,
    write_high_score,
)


def test_parse_valid_lines():
    assert parse_coordinates(["10 20", "300 40\n"]) == [(10, 20), (300, 40)]


def test_parse_wrong_part_count_gives_none():
    assert parse_coordinates(["1 2 3", "5", "7  8"]) == [None, None, None]


def test_parse_non_numeric_parts_become_zero():
    assert parse_coordinates(["a 12", "-4 b"]) == [(0, 12), (-4, 0)]


def test_parse_out_of_range_becomes_zero():
    assert parse_coordinates(["99999999999 3"]) == [(0, 3)]


def test_load_coordinates(tmp_path):
    path = tmp_path / "konumlar.txt"
    path.write_text("100 200\nbad\n50 60\n", encoding="utf-8")
    assert load_coordinates(path) == [(100, 200), None, (50, 60)]


def test_load_coordinates_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_coordinates(tmp_path / "missing.txt")


def test_high_score_round_trip(tmp_path):
    path = tmp_path / "skorlar.txt"
    write_high_score(path, 42)
    assert read_high_score(path) == 42


def test_high_score_written_without_newline(tmp_path):
    path = tmp_path / "skorlar.txt"
    write_high_score(path, 17)
    assert path.read_text(encoding="utf-8") == "17"


def test_read_high_score_uses_last_line(tmp_path):
    path = tmp_path / "skorlar.txt"
    path.write_text("5\n9\n", encoding="utf-8")
    assert read_high_score(path) == 9


def test_read_high_score_empty_file(tmp_path):
    path = tmp_path / "skorlar.txt"
    path.write_text("", encoding="utf-8")
    assert read_high_score(path) == 0


def test_read_high_score_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_high_score(tmp_path / "missing.txt")