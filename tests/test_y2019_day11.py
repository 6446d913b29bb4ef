import pytest

from aocsolutions.imaging import PNG_SIGNATURE
from aocsolutions.intcode_vm import IntcodeError
from aocsolutions.y2019_day11 import (
    Direction,
    painted_positions,
    part_1,
    part_2,
    render,
)

# Paint white, turn right, paint black, turn right, halt.
TWO_PANELS = "104,1,104,1,104,0,104,1,99"
# Paint the color read from the camera, turn left, halt.
ECHO = "3,50,4,50,104,0,99"


@pytest.mark.parametrize(
    ("start", "turn", "expected"),
    [
        (Direction.UP, 0, Direction.LEFT),
        (Direction.LEFT, 0, Direction.DOWN),
        (Direction.DOWN, 0, Direction.RIGHT),
        (Direction.RIGHT, 0, Direction.UP),
        (Direction.UP, 1, Direction.RIGHT),
        (Direction.LEFT, 1, Direction.UP),
        (Direction.DOWN, 1, Direction.LEFT),
        (Direction.RIGHT, 1, Direction.DOWN),
    ],
)
def test_turn(start, turn, expected):
    assert start.turn(turn) is expected


@pytest.mark.parametrize("start", list(Direction))
@pytest.mark.parametrize("c", [0, 1])
def test_four_turns_come_back(start, c):
    result = start
    for _ in range(4):
        result = Direction.turn(result, c)
    assert result is start


def test_invalid_turn():
    with pytest.raises(ValueError):
        Direction.UP.turn(2)


def test_painted_positions_two_panels():
    assert painted_positions(TWO_PANELS, 0) == {(0, 0): 1, (1, 0): 0}


def test_painted_positions_accepts_list():
    program = [int(v) for v in TWO_PANELS.split(",")]
    assert painted_positions(program, 0) == painted_positions(TWO_PANELS, 0)


@pytest.mark.parametrize("color", [0, 1])
def test_camera_input_reaches_program(color):
    assert painted_positions(ECHO, color) == {(0, 0): color}


def test_invalid_paint_color():
    with pytest.raises(ValueError):
        painted_positions("104,2,104,0,99", 0)


def test_invalid_turn_output():
    with pytest.raises(ValueError):
        painted_positions("104,1,104,5,104,0,99", 0)


def test_program_asking_twice_for_input():
    with pytest.raises(IntcodeError):
        painted_positions("3,50,3,51,99", 0)


def test_part_1_counts_panels():
    assert part_1(TWO_PANELS) == 2


def test_render_two_panels():
    pixels, width, height = render({(0, 0): 1, (1, 0): 0})
    assert (width, height) == (1, 2)
    assert pixels == bytes([255, 0])


def test_render_negative_coordinates_fit():
    painted = {(-2, 3): 1, (1, -1): 1, (0, 0): 0}
    pixels, width, height = render(painted)
    assert len(pixels) == width * height
    assert pixels.count(255) == 2


def test_render_invalid_color():
    with pytest.raises(ValueError):
        render({(0, 0): 7})


def test_part_2_writes_png(tmp_path):
    target = tmp_path / "hull.png"
    result = part_2(TWO_PANELS, target)
    assert result == target
    assert target.read_bytes().startswith(PNG_SIGNATURE)