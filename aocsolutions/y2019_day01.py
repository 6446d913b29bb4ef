"""2019 day 1: fuel needed to launch modules of a given mass."""

from __future__ import annotations

import argparse
import sys


def _fuel(mass: int) -> int:
    quotient = abs(mass) // 3
    return (quotient if mass >= 0 else -quotient) - 2


def _masses(text: str) -> list[int]:
    return [int(line) for line in text.splitlines()]


def part_1(text: str) -> int:
    """Fuel for the modules alone: mass divided by three, rounded down, minus two."""
    return sum(_fuel(mass) for mass in _masses(text))


def part_2(text: str) -> int:
    """Fuel for the modules, counting the fuel needed to carry the fuel itself."""
    total = 0
    for mass in _masses(text):
        fuel = _fuel(mass)
        while fuel > 0:
            total += fuel
            fuel = _fuel(fuel)
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2019 day 1 from standard input.")
    parser.parse_args(argv)
    text = sys.stdin.read()
    print(f"Part 1 : {part_1(text)}")
    print(f"Part 2 : {part_2(text)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())