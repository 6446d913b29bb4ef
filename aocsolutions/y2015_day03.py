"""2015 day 3: houses visited while delivering presents on a grid."""

from __future__ import annotations

import argparse
import sys

_MOVES = {">": (1, 0), "<": (-1, 0), "^": (0, 1), "v": (0, -1)}


def _move(char: str) -> tuple[int, int]:
    try:
        return _MOVES[char]
    except KeyError:
        raise ValueError(f"Invalid character found: {char}") from None


def part_1(text: str) -> int:
    """Count houses visited by Santa alone."""
    x = y = 0
    visited = {(x, y)}
    for char in text:
        dx, dy = _move(char)
        x, y = x + dx, y + dy
        visited.add((x, y))
    return len(visited)


def part_2(text: str) -> int:
    """Count houses visited by Santa and Robo-Santa taking turns."""
    positions = [(0, 0), (0, 0)]
    visited = {(0, 0)}
    for i, char in enumerate(text):
        dx, dy = _move(char)
        x, y = positions[i % 2]
        positions[i % 2] = (x + dx, y + dy)
        visited.add(positions[i % 2])
    return len(visited)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2015 day 3 from standard input.")
    parser.parse_args(argv)
    text = sys.stdin.read()
    print(f"Part 1 : {part_1(text)}")
    print(f"Part 2 : {part_2(text)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())