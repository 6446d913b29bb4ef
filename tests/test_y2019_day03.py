import io
import sys

import pytest

from aocsolutions.y2019_day03 import main, parse_input, part_1, part_2

EXAMPLE = "R8,U5,L5,D3\nU7,R6,D4,L4"
SWAPPED = "U7,R6,D4,L4\nR8,U5,L5,D3"


def test_part_1_example():
    assert part_1(EXAMPLE) == 6


def test_part_2_example():
    assert part_2(EXAMPLE) == 30


def test_results_do_not_depend_on_wire_order():
    assert part_1(SWAPPED) == part_1(EXAMPLE)
    assert part_2(SWAPPED) == part_2(EXAMPLE)


def test_single_wire_visits():
    visits = parse_input("R3")
    assert len(visits) == 3
    assert visits[(3, 0)] == ((0,), 3)
    assert (0, 0) not in visits


def test_revisit_keeps_first_step():
    visits = parse_input("R2,L1")
    assert visits[(1, 0)] == ((0,), 1)


def test_crossing_sums_steps_of_both_wires():
    visits = parse_input("R2\nU1,R2,D1")
    wires, steps = visits[(2, 0)]
    assert wires == (0, 1)
    assert steps == visits[(2, 1)][1] + 1 + 2


def test_invalid_path():
    with pytest.raises(ValueError, match="Invalid input path"):
        parse_input("R8,X5")


def test_no_crossing():
    with pytest.raises(ValueError):
        part_1("R3\nL3")


def test_main_prints_both_parts(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(EXAMPLE + "\n"))
    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [f"Part 1 : {part_1(EXAMPLE)}", f"Part 2 : {part_2(EXAMPLE)}"]