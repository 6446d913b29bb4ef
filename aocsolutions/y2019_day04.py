"""2019 day 4: counting six-digit passwords within a range."""

from __future__ import annotations

import argparse
import itertools
import sys
from collections.abc import Callable

_CODE_LENGTH = 6


def parse_range(text: str) -> tuple[int, int]:
    """Parse ``low-high`` where both bounds have six digits."""
    codes = []
    for part in text.strip().split("-"):
        if len(part) != _CODE_LENGTH:
            raise ValueError("Codes should have a length of 6!")
        if not part.isascii() or not part.isdigit():
            raise ValueError(f"Invalid code: {part}")
        codes.append(int(part))
    if len(codes) < 2:
        raise ValueError("Maximum code not found!")
    return codes[0], codes[1]


def _never_decreases(code: str) -> bool:
    return all(a <= b for a, b in itertools.pairwise(code))


def _run_lengths(code: str) -> list[int]:
    return [len(list(group)) for _, group in itertools.groupby(code)]


def _count(text: str, has_pair: Callable[[list[int]], bool]) -> int:
    low, high = parse_range(text)
    return sum(
        1
        for code in map(str, range(low, high + 1))
        if _never_decreases(code) and has_pair(_run_lengths(code))
    )


def part_1(text: str) -> int:
    """Codes with non-decreasing digits and at least two equal adjacent digits."""
    return _count(text, lambda runs: any(run >= 2 for run in runs))


def part_2(text: str) -> int:
    """Codes with non-decreasing digits and a pair not part of a larger group."""
    return _count(text, lambda runs: 2 in runs)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2019 day 4 from standard input.")
    parser.parse_args(argv)
    text = sys.stdin.read()
    print(f"Part 1 : {part_1(text)}")
    print(f"Part 2 : {part_2(text)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())