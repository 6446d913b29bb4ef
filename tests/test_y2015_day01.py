import io

import pytest

from aocsolutions import y2015_day01
from aocsolutions.y2015_day01 import part_1, part_2


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("(())", 0),
        ("()()", 0),
        ("(((", 3),
        ("(()(()(", 3),
        ("))(((((", 3),
        ("())", -1),
        ("))(", -1),
        (")))", -3),
        (")())())", -3),
    ],
)
def test_part_1(text, expected):
    assert part_1(text) == expected


@pytest.mark.parametrize(("text", "expected"), [(")", 1), ("()())", 5)])
def test_part_2(text, expected):
    assert part_2(text) == expected


def test_part_2_invalid_character():
    with pytest.raises(ValueError, match="Invalid character found: x"):
        part_2("(x")


def test_part_2_never_reaches_basement():
    with pytest.raises(ValueError, match="No position found"):
        part_2("(()")


def test_main_prints_both_parts(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("()())"))
    assert y2015_day01.main([]) == 0
    assert capsys.readouterr().out == "Part 1 : -1\nPart 2 : 5\n"