"""2019 day 3: where two wires on a grid cross."""

from __future__ import annotations

import argparse
import re
import sys

_PATH = re.compile(r"([RLUD])([0-9]+)")
_DIRECTIONS = {"R": (1, 0), "L": (-1, 0), "U": (0, 1), "D": (0, -1)}

Visits = dict[tuple[int, int], tuple[tuple[int, ...], int]]


def parse_input(text: str) -> Visits:
    """Map every visited point to the wires crossing it and their summed first-visit steps."""
    visits: dict[tuple[int, int], dict[int, int]] = {}
    for wire, line in enumerate(text.splitlines()):
        x = y = step = 0
        for path in line.split(","):
            match = _PATH.fullmatch(path)
            if match is None:
                raise ValueError(f"Invalid input path found : {path}")
            dx, dy = _DIRECTIONS[match[1]]
            for _ in range(int(match[2])):
                x += dx
                y += dy
                step += 1
                visits.setdefault((x, y), {}).setdefault(wire, step)
    return {
        point: (tuple(steps), sum(steps.values())) for point, steps in visits.items()
    }


def _crossings(text: str) -> Visits:
    crossings = {
        point: visit for point, visit in parse_input(text).items() if len(visit[0]) > 1
    }
    if not crossings:
        raise ValueError("No crossing found between wires!")
    return crossings


def part_1(text: str) -> int:
    """Manhattan distance from the origin to the closest crossing."""
    return min(abs(x) + abs(y) for x, y in _crossings(text))


def part_2(text: str) -> int:
    """Fewest combined steps the wires take to reach a crossing."""
    return min(steps for _, steps in _crossings(text).values())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2019 day 3 from standard input.")
    parser.parse_args(argv)
    text = sys.stdin.read()
    print(f"Part 1 : {part_1(text)}")
    print(f"Part 2 : {part_2(text)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())