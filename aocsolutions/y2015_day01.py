"""2015 day 1: following parentheses up and down floors."""

from __future__ import annotations

import argparse
import sys


def part_1(text: str) -> int:
    """Return the final floor: each '(' goes up one, each ')' down one."""
    return text.count("(") - text.count(")")


def part_2(text: str) -> int:
    """Return the 1-based position of the first character that reaches the basement."""
    floor = 0
    for position, char in enumerate(text, start=1):
        if char == "(":
            floor += 1
        elif char == ")":
            floor -= 1
        else:
            raise ValueError(f"Invalid character found: {char}")
        if floor < 0:
            return position
    raise ValueError("Part 2 : No position found where going to the basement!")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2015 day 1 from standard input.")
    parser.parse_args(argv)
    text = sys.stdin.read()
    print(f"Part 1 : {part_1(text)}")
    print(f"Part 2 : {part_2(text)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())