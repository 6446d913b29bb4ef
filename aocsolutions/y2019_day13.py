"""2019 day 13: the Intcode arcade cabinet and its breakout game."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .intcode_vm import IntcodeError, IntcodeVm, VmState


@dataclass(frozen=True)
class Block:
    """One drawing instruction from the game: a tile at (x, y), or a score."""

    class Kind(Enum):
        EMPTY = 0
        WALL = 1
        BLOCK = 2
        PADDLE = 3
        BALL = 4
        SCORE = -1

    kind: Block.Kind
    x: int = 0
    y: int = 0
    value: int = 0


_TILES = {kind.value: kind for kind in Block.Kind if kind is not Block.Kind.SCORE}


def parse_block(values: Sequence[int]) -> Block:
    """Interpret an output triple ``x, y, tile`` (or ``-1, 0, score``)."""
    if len(values) != 3:
        raise ValueError("Block description should have a length of 3!")
    x, y, tile = values
    if x == -1 and y == 0:
        return Block(Block.Kind.SCORE, value=tile)
    try:
        return Block(_TILES[tile], x, y)
    except KeyError:
        raise ValueError(f"Unknown block type : {tile}") from None


def part_1(text: str) -> int:
    """Number of block tiles on screen when the game program ends."""
    vm = IntcodeVm(text)
    pending: list[int] = []
    count = 0
    while True:
        output = vm.run(None)
        if output is not None:
            pending.append(output)
            if len(pending) == 3:
                if parse_block(pending).kind is Block.Kind.BLOCK:
                    count += 1
                pending.clear()
        elif vm.state is VmState.ENDED:
            return count
        else:
            raise IntcodeError("The game asked for input while only drawing!")


def part_2(text: str) -> int:
    """Final score after playing for free, keeping the paddle under the ball."""
    vm = IntcodeVm(text)
    vm.ram[0] = 2
    joystick: int | None = None
    pending: list[int] = []
    ball_x = paddle_x = score = 0

    while True:
        output = vm.run(joystick)
        joystick = None
        if output is not None:
            pending.append(output)
            if len(pending) == 3:
                block = parse_block(pending)
                pending.clear()
                if block.kind is Block.Kind.BALL:
                    ball_x = block.x
                elif block.kind is Block.Kind.PADDLE:
                    paddle_x = block.x
                elif block.kind is Block.Kind.SCORE:
                    score = block.value
        elif vm.state is VmState.WAITING_INPUT:
            joystick = (ball_x > paddle_x) - (ball_x < paddle_x)
        else:
            return score


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2019 day 13 from standard input.")
    parser.parse_args(argv)
    text = sys.stdin.read()
    print(f"Part 1 : {part_1(text)}")
    print(f"Part 2 : {part_2(text)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())