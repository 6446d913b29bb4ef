"""2019 day 5: the Intcode computer with parameter modes, input, output and jumps."""

from __future__ import annotations

import argparse
import sys

from .intcode_vm import IntcodeError


def parse_program(text: str) -> list[int]:
    """Parse a comma separated list of integers."""
    try:
        return [int(token) for token in text.strip().split(",")]
    except ValueError as exc:
        raise ValueError(f"Invalid Intcode program: {exc}") from exc


def _is_immediate(char: str) -> bool:
    if char == "0":
        return False
    if char == "1":
        return True
    raise IntcodeError(f"Not a valid bool : {char}")


def _decode(code: int) -> tuple[int, bool, bool, bool]:
    digits = f"{code:05d}"
    opcode = int(digits[3:5])
    return (
        opcode,
        _is_immediate(digits[2]),
        _is_immediate(digits[1]),
        _is_immediate(digits[0]),
    )


def _parameter(memory: list[int], position: int, offset: int, immediate: bool) -> int:
    if len(memory) <= position + offset:
        raise IntcodeError("Parameter position outside boundaries of input steps!")
    raw = memory[position + offset]
    if immediate:
        return raw
    if not 0 <= raw < len(memory):
        raise IntcodeError("Parameter position outside boundaries of input steps!")
    return memory[raw]


def _destination(memory: list[int], position: int, offset: int) -> int:
    address = _parameter(memory, position, offset, True)
    if not 0 <= address < len(memory):
        raise IntcodeError("Destination position outside boundaries of input steps!")
    return address


def execute_intcode(program: list[int], system_id: int) -> int:
    """Run a copy of the program, feeding `system_id` to every input.

    Returns the last value the program output before halting, or 0.
    """
    memory = list(program)
    position = 0
    last_diagnostic = 0

    while True:
        if not 0 <= position < len(memory):
            raise IntcodeError("Current step outside boundaries of input steps!")
        opcode, mode_1, mode_2, _ = _decode(memory[position])

        if opcode in (1, 2, 7, 8):
            first = _parameter(memory, position, 1, mode_1)
            second = _parameter(memory, position, 2, mode_2)
            destination = _destination(memory, position, 3)
            if opcode == 1:
                memory[destination] = first + second
            elif opcode == 2:
                memory[destination] = first * second
            elif opcode == 7:
                memory[destination] = int(first < second)
            else:
                memory[destination] = int(first == second)
            position += 4
        elif opcode == 3:
            memory[_destination(memory, position, 1)] = system_id
            position += 2
        elif opcode == 4:
            last_diagnostic = _parameter(memory, position, 1, mode_1)
            position += 2
        elif opcode in (5, 6):
            condition = _parameter(memory, position, 1, mode_1)
            target = _parameter(memory, position, 2, mode_2)
            if (condition != 0) == (opcode == 5):
                position = target
            else:
                position += 3
        elif opcode == 99:
            return last_diagnostic
        else:
            raise IntcodeError(f"Unknown opcode : {memory[position]}")


def part_1(text: str) -> int:
    """Diagnostic code for the air conditioner unit, system 1."""
    return execute_intcode(parse_program(text), 1)


def part_2(text: str) -> int:
    """Diagnostic code for the thermal radiator controller, system 5."""
    return execute_intcode(parse_program(text), 5)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2019 day 5 from standard input.")
    parser.parse_args(argv)
    text = sys.stdin.read()
    print(f"Part 1 : {part_1(text)}")
    print(f"Part 2 : {part_2(text)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())