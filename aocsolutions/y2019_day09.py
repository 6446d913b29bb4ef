"""2019 day 9: running the BOOST program on the full Intcode machine."""

from __future__ import annotations

import argparse
import sys

from .intcode_vm import IntcodeError, IntcodeVm, VmState


def _last_output(text: str, value: int) -> int:
    vm = IntcodeVm(text)
    result = 0
    pending: int | None = value
    while True:
        output = vm.run(pending)
        pending = None
        if output is not None:
            result = output
        elif vm.state is VmState.ENDED:
            return result
        else:
            raise IntcodeError("Program asked for more input than it was given!")


def part_1(text: str) -> int:
    """The BOOST keycode produced in test mode (input 1)."""
    return _last_output(text, 1)


def part_2(text: str) -> int:
    """The distress signal coordinates produced in sensor boost mode (input 2)."""
    return _last_output(text, 2)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2019 day 9 from standard input.")
    parser.parse_args(argv)
    text = sys.stdin.read()
    print(f"Part 1 : {part_1(text)}")
    print(f"Part 2 : {part_2(text)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())