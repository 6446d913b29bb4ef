"""2019 day 11: the hull painting robot driven by an Intcode brain."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from enum import Enum
from pathlib import Path

from .imaging import write_grayscale_png
from .intcode_vm import IntcodeError, IntcodeVm, VmState

Position = tuple[int, int]

_HALT = 99
_SHADES = {0: 0, 1: 255}


class Direction(Enum):
    """Where the robot faces, with the step it takes on the (x, y) grid."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def turn(self, c: int) -> Direction:
        """Turn left for 0 and right for 1."""
        if c == 0:
            return _LEFT_OF[self]
        if c == 1:
            return _RIGHT_OF[self]
        raise ValueError(f"Not a valid turn direction : {c}")


_LEFT_OF = {
    Direction.UP: Direction.LEFT,
    Direction.LEFT: Direction.DOWN,
    Direction.DOWN: Direction.RIGHT,
    Direction.RIGHT: Direction.UP,
}
_RIGHT_OF = {
    Direction.UP: Direction.RIGHT,
    Direction.LEFT: Direction.UP,
    Direction.DOWN: Direction.LEFT,
    Direction.RIGHT: Direction.DOWN,
}


def _next_output(vm: IntcodeVm, color: int) -> int | None:
    """Run the brain to its next output; None once it halts or is about to."""
    output = vm.run(color)
    if output is None:
        if vm.state is VmState.ENDED:
            return None
        raise IntcodeError("The robot asked for more input than it was given!")
    if vm.position < len(vm.ram) and vm.ram[vm.position] == _HALT:
        return None
    return output


def painted_positions(
    program: str | Sequence[int], initial_color: int
) -> dict[Position, int]:
    """Run the robot from a panel of `initial_color` and return every painted panel's color."""
    text = program if isinstance(program, str) else ",".join(map(str, program))
    vm = IntcodeVm(text)
    painted: dict[Position, int] = {}
    position: Position = (0, 0)
    direction = Direction.UP
    color = initial_color

    while True:
        paint = _next_output(vm, color)
        if paint is None:
            break
        if paint not in (0, 1):
            raise ValueError(f"Invalid color to paint : {paint}!")
        painted[position] = paint

        turn = _next_output(vm, color)
        if turn is None:
            break
        direction = direction.turn(turn)
        dx, dy = direction.value
        position = (position[0] + dx, position[1] + dy)
        color = painted.get(position, 0)

    return painted


def render(painted: dict[Position, int]) -> tuple[bytes, int, int]:
    """Lay the painted panels out as gray pixels; returns (pixels, width, height).

    Rows follow the first coordinate and columns the second, both shifted so
    that the smallest value (never above zero) lands on index zero.
    """
    firsts = [p[0] for p in painted] + [0]
    seconds = [p[1] for p in painted] + [0]
    min_row, max_row = min(firsts), max(firsts)
    min_col, max_col = min(seconds), max(seconds)
    width = max_col - min_col + 1
    height = max_row - min_row + 1

    pixels = bytearray(width * height)
    for (row, col), color in painted.items():
        try:
            shade = _SHADES[color]
        except KeyError:
            raise ValueError(f"Invalid painted color : {color}") from None
        pixels[(row - min_row) * width + (col - min_col)] = shade
    return bytes(pixels), width, height


def part_1(text: str) -> int:
    """Number of panels painted at least once, starting on a black panel."""
    return len(painted_positions(text, 0))


def part_2(text: str, path: str | os.PathLike[str]) -> Path:
    """Paint starting on a white panel and write the hull as a PNG file at `path`."""
    pixels, width, height = render(painted_positions(text, 1))
    return write_grayscale_png(path, pixels, width, height)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2019 day 11 from standard input.")
    parser.add_argument(
        "--output", default="part_2.png", help="where to write the painted hull"
    )
    args = parser.parse_args(argv)
    text = sys.stdin.read()
    print(f"Part 1 : {part_1(text)}")
    image_path = part_2(text, args.output)
    print(f'Part 2 : To get result, open following image : "{image_path}"')
    return 0


if __name__ == "__main__":
    raise SystemExit(main())