"""2019 day 2: the first Intcode computer, with only addition and multiplication."""

from __future__ import annotations

import argparse
import itertools
import sys

from .intcode_vm import IntcodeError

TARGET = 19_690_720


def parse_program(text: str) -> list[int]:
    """Parse a comma separated list of non-negative integers."""
    program = []
    for token in text.strip().split(","):
        if not token.isascii() or not token.isdigit():
            raise ValueError(f"Invalid program value: {token!r}")
        program.append(int(token))
    return program


def _parameters(memory: list[int], position: int) -> tuple[int, int, int]:
    if len(memory) <= position + 3:
        raise IntcodeError(
            "Current step + expected parameters outside boundaries of input steps!"
        )
    first, second, destination = memory[position + 1 : position + 4]
    if len(memory) <= first:
        raise IntcodeError("First parameter position outside boundaries of input steps!")
    if len(memory) <= second:
        raise IntcodeError("Second parameter position outside boundaries of input steps!")
    if len(memory) <= destination:
        raise IntcodeError(
            "Destination parameter position outside boundaries of input steps!"
        )
    return first, second, destination


def execute_intcode(program: list[int]) -> int:
    """Run a copy of the program until opcode 99 and return the value at address 0."""
    memory = list(program)
    position = 0
    while True:
        if position >= len(memory):
            raise IntcodeError("Current step outside boundaries of input steps!")
        opcode = memory[position]
        if opcode == 99:
            return memory[0]
        if opcode not in (1, 2):
            raise IntcodeError(f"Unknown opcode : {opcode}")
        first, second, destination = _parameters(memory, position)
        if opcode == 1:
            memory[destination] = memory[first] + memory[second]
        else:
            memory[destination] = memory[first] * memory[second]
        position += 4


def _with_inputs(program: list[int], noun: int, verb: int) -> list[int]:
    if len(program) < 3:
        raise IntcodeError("Program is too short to hold a noun and a verb!")
    memory = list(program)
    memory[1] = noun
    memory[2] = verb
    return memory


def part_1(text: str) -> int:
    """Run the program with noun 12 and verb 2."""
    return execute_intcode(_with_inputs(parse_program(text), 12, 2))


def part_2(text: str) -> int:
    """Find the noun and verb producing the target output; return 100 * noun + verb."""
    program = parse_program(text)
    for noun, verb in itertools.product(range(100), repeat=2):
        try:
            result = execute_intcode(_with_inputs(program, noun, verb))
        except IntcodeError:
            continue
        if result == TARGET:
            return 100 * noun + verb
    raise IntcodeError("IntCode could not find expected value!")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2019 day 2 from standard input.")
    parser.parse_args(argv)
    text = sys.stdin.read()
    print(f"Part 1 : {part_1(text)}")
    print(f"Part 2 : {part_2(text)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())