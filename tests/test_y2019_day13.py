import pytest

from aocsolutions.intcode_vm import IntcodeError
from aocsolutions.y2019_day13 import Block, parse_block, part_1, part_2

# Draws a block at (1, 2), a wall at (5, 5), a block at (3, 4), then halts.
DRAWING = "104,1,104,2,104,2,104,5,104,5,104,1,104,3,104,4,104,2,99"


def _game(ball_x, paddle_x):
    # The first instruction becomes a multiplication once address 0 is set to 2.
    # Draws ball and paddle, reads the joystick and reports it as the score.
    return (
        f"1,0,0,50,104,{ball_x},104,1,104,4,104,{paddle_x},104,1,104,3,"
        "3,60,104,-1,104,0,4,60,99"
    )


def test_parse_block_tiles():
    assert parse_block([3, 4, 2]) == Block(Block.Kind.BLOCK, 3, 4)
    assert parse_block([7, 8, 0]).kind is Block.Kind.EMPTY
    assert parse_block([7, 8, 1]).kind is Block.Kind.WALL
    assert parse_block([7, 8, 3]).kind is Block.Kind.PADDLE
    assert parse_block([7, 8, 4]).kind is Block.Kind.BALL


def test_parse_block_score():
    block = parse_block([-1, 0, 12345])
    assert block.kind is Block.Kind.SCORE
    assert block.value == 12345


def test_parse_block_unknown_tile():
    with pytest.raises(ValueError, match="Unknown block type"):
        parse_block([1, 1, 7])


def test_parse_block_wrong_length():
    with pytest.raises(ValueError):
        parse_block([1, 2])


def test_part_1_counts_blocks():
    assert part_1(DRAWING) == 2


def test_part_1_rejects_input_request():
    with pytest.raises(IntcodeError):
        part_1("3,0,99")


def test_part_2_reports_last_score():
    assert part_2("1,0,0,50,104,-1,104,0,104,42,99") == 42


def test_part_2_moves_joystick_towards_ball():
    assert part_2(_game(5, 3)) == 1
    assert part_2(_game(2, 6)) == -1
    assert part_2(_game(4, 4)) == 0