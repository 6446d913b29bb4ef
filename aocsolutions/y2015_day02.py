"""2015 day 2: wrapping paper and ribbon for presents."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass

_DIMENSIONS = re.compile(r"([0-9]+)x([0-9]+)x([0-9]+)")


@dataclass(frozen=True)
class Dimensions:
    """The length, width and height of a present."""

    length: int
    width: int
    height: int

    @classmethod
    def from_str(cls, value: str) -> Dimensions:
        """Parse a line such as ``2x3x4``."""
        match = _DIMENSIONS.fullmatch(value)
        if match is None:
            raise ValueError(f"Couldn't parse input: {value}")
        return cls(*(int(group) for group in match.groups()))

    def surface_area(self) -> int:
        """Paper needed: the box surface plus the area of its smallest side."""
        sides = (
            self.length * self.width,
            self.width * self.height,
            self.height * self.length,
        )
        return 2 * sum(sides) + min(sides)

    def ribbon_length(self) -> int:
        """Ribbon needed: the smallest perimeter plus the volume for the bow."""
        edges = (self.length, self.width, self.height)
        return 2 * (sum(edges) - max(edges)) + self.length * self.width * self.height


def parse_input(text: str) -> list[Dimensions]:
    """Parse one set of dimensions per line."""
    return [Dimensions.from_str(line) for line in text.splitlines()]


def part_1(dimensions: list[Dimensions]) -> int:
    """Total square feet of wrapping paper."""
    return sum(d.surface_area() for d in dimensions)


def part_2(dimensions: list[Dimensions]) -> int:
    """Total feet of ribbon."""
    return sum(d.ribbon_length() for d in dimensions)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2015 day 2 from standard input.")
    parser.parse_args(argv)
    dimensions = parse_input(sys.stdin.read())
    print(f"Part 1 : {part_1(dimensions)}")
    print(f"Part 2 : {part_2(dimensions)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())