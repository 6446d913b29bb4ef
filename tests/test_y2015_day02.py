import io

import pytest

from aocsolutions import y2015_day02
from aocsolutions.y2015_day02 import Dimensions, parse_input, part_1, part_2

INPUT = "2x3x4\n1x1x10"


def test_part_1():
    assert part_1(parse_input(INPUT)) == 58 + 43


def test_part_2():
    assert part_2(parse_input(INPUT)) == 34 + 14


def test_from_str():
    assert Dimensions.from_str("2x3x4") == Dimensions(2, 3, 4)


@pytest.mark.parametrize(
    ("line", "area", "ribbon"), [("2x3x4", 58, 34), ("1x1x10", 43, 14)]
)
def test_single_present(line, area, ribbon):
    present = Dimensions.from_str(line)
    assert present.surface_area() == area
    assert present.ribbon_length() == ribbon


@pytest.mark.parametrize("line", ["2x3", "2x3x4x5", "axbxc", "2x3x4 ", ""])
def test_invalid_line_raises(line):
    with pytest.raises(ValueError, match="Couldn't parse input"):
        Dimensions.from_str(line)


def test_parse_input_rejects_bad_line():
    with pytest.raises(ValueError):
        parse_input("2x3x4\nbad")


def test_parse_input_ignores_trailing_newline():
    assert parse_input("2x3x4\n") == [Dimensions(2, 3, 4)]


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(INPUT + "\n"))
    assert y2015_day02.main([]) == 0
    assert capsys.readouterr().out == "Part 1 : 101\nPart 2 : 48\n"