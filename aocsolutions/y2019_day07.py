"""2019 day 7: chaining Intcode amplifiers, with and without a feedback loop."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Sequence

from .intcode_vm import IntcodeError

AMPLIFIER_COUNT = 5


def _is_immediate(char: str) -> bool:
    if char == "0":
        return False
    if char == "1":
        return True
    raise IntcodeError(f"Not a valid bool : {char}")


def _decode(code: int) -> tuple[int, bool, bool, bool]:
    digits = f"{code:05d}"
    try:
        opcode = int(digits[3:5])
    except ValueError:
        raise IntcodeError(f"Unknown opcode : {code}") from None
    return (
        opcode,
        _is_immediate(digits[2]),
        _is_immediate(digits[1]),
        _is_immediate(digits[0]),
    )


def _read(memory: list[int], position: int, offset: int, immediate: bool) -> int:
    if len(memory) <= position + offset:
        raise IntcodeError("Parameter position outside boundaries of input steps!")
    raw = memory[position + offset]
    if immediate:
        return raw
    if not 0 <= raw < len(memory):
        raise IntcodeError("Parameter position outside boundaries of input steps!")
    return memory[raw]


def _target(memory: list[int], position: int, offset: int) -> int:
    address = _read(memory, position, offset, True)
    if not 0 <= address < len(memory):
        raise IntcodeError("Destination position outside boundaries of input steps!")
    return address


def parse_program(text: str) -> list[int]:
    """Parse a comma separated list of integers."""
    try:
        return [int(token) for token in text.strip().split(",")]
    except ValueError as exc:
        raise ValueError(f"Invalid Intcode program: {exc}") from exc


def generate_permutations(codes: Iterable[int]) -> list[list[int]]:
    """All orderings of `codes`, in the order Heap's algorithm produces them."""
    items = list(codes)
    permutations: list[list[int]] = []

    def heap(n: int) -> None:
        if n <= 1:
            permutations.append(list(items))
            return
        for i in range(n - 1):
            heap(n - 1)
            j = i if n % 2 == 0 else 0
            items[n - 1], items[j] = items[j], items[n - 1]
        heap(n - 1)

    heap(len(items))
    return permutations


def run_intcode(
    program: list[int],
    inputs: Iterable[int],
    feedback_loop: bool = False,
    start: int = 0,
) -> tuple[int | None, int]:
    """Run `program` in place from `start`, reading from `inputs`.

    Without a feedback loop the program runs until it halts; with one it
    stops right after its first output. Returns the last output of this run
    (None if there was none) and the position to resume from.
    """
    pending = iter(inputs)
    position = start
    output: int | None = None

    while True:
        if not 0 <= position < len(program):
            raise IntcodeError("Current step outside boundaries of input steps!")
        opcode, mode_1, mode_2, _ = _decode(program[position])

        if opcode in (1, 2, 7, 8):
            first = _read(program, position, 1, mode_1)
            second = _read(program, position, 2, mode_2)
            destination = _target(program, position, 3)
            if opcode == 1:
                program[destination] = first + second
            elif opcode == 2:
                program[destination] = first * second
            elif opcode == 7:
                program[destination] = int(first < second)
            else:
                program[destination] = int(first == second)
            position += 4
        elif opcode == 3:
            destination = _target(program, position, 1)
            try:
                program[destination] = next(pending)
            except StopIteration:
                raise IntcodeError("Not enough inputs for the program!") from None
            position += 2
        elif opcode == 4:
            output = _read(program, position, 1, mode_1)
            position += 2
            if feedback_loop:
                return output, position
        elif opcode in (5, 6):
            condition = _read(program, position, 1, mode_1)
            target = _read(program, position, 2, mode_2)
            if (condition != 0) == (opcode == 5):
                position = target
            else:
                position += 3
        elif opcode == 99:
            return output, position
        else:
            raise IntcodeError(f"Unknown opcode : {program[position]}")


def _chain_signal(program: Sequence[int], phases: Sequence[int]) -> int:
    signal = 0
    for phase in phases:
        output, _ = run_intcode(list(program), [phase, signal])
        signal = 0 if output is None else output
    return signal


def _feedback_signal(program: Sequence[int], phases: Sequence[int]) -> int:
    memories = [list(program) for _ in phases]
    positions = [0] * len(phases)
    signal = 0
    while True:
        for amplifier, phase in enumerate(phases):
            inputs = [signal] if positions[amplifier] > 0 else [phase, signal]
            output, positions[amplifier] = run_intcode(
                memories[amplifier], inputs, True, positions[amplifier]
            )
            if output is not None:
                signal = output
        if memories[-1][positions[-1]] == 99:
            return signal


def _best(
    program: Sequence[int],
    phases: Iterable[int],
    evaluate: Callable[[Sequence[int], Sequence[int]], int],
) -> tuple[int, list[int]]:
    best_signal: int | None = None
    best_phases: list[int] = []
    for permutation in generate_permutations(phases):
        signal = evaluate(program, permutation)
        if best_signal is None or signal > best_signal:
            best_signal, best_phases = signal, permutation
    if best_signal is None:
        raise ValueError("No phase setting to try!")
    return best_signal, best_phases


def best_sequence(program: Sequence[int]) -> tuple[int, list[int]]:
    """Highest thruster signal over amplifiers in series, with its phase settings 0-4."""
    return _best(program, range(AMPLIFIER_COUNT), _chain_signal)


def best_feedback_sequence(program: Sequence[int]) -> tuple[int, list[int]]:
    """Highest thruster signal with a feedback loop, with its phase settings 5-9."""
    return _best(
        program, range(AMPLIFIER_COUNT, 2 * AMPLIFIER_COUNT), _feedback_signal
    )


def part_1(text: str) -> int:
    """Highest signal the amplifiers in series can send to the thrusters."""
    return best_sequence(parse_program(text))[0]


def part_2(text: str) -> int:
    """Highest signal the amplifiers in a feedback loop can send to the thrusters."""
    return best_feedback_sequence(parse_program(text))[0]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2019 day 7 from standard input.")
    parser.parse_args(argv)
    text = sys.stdin.read()
    print(f"Part 1 : {part_1(text)}")
    print(f"Part 2 : {part_2(text)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())