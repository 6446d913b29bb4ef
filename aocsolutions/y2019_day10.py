"""2019 day 10: asteroid monitoring station placement and laser vaporisation order."""

from __future__ import annotations

import argparse
import itertools
import math
import sys

Position = tuple[int, int]
AsteroidsByAngle = dict[float, list[Position]]

DESTROY_COUNT = 200


def parse_input(text: str) -> list[Position]:
    """Positions (x, y) of every '#' in the map, row by row."""
    asteroids = []
    for y, line in enumerate(text.splitlines()):
        for x, char in enumerate(line):
            if char == "#":
                asteroids.append((x, y))
            elif char != ".":
                raise ValueError(f"Invalid character `{char}` found in position {x},{y}!")
    return asteroids


def _angle(origin: Position, other: Position) -> float:
    delta_x = float(other[0] - origin[0])
    delta_y = float(other[1] - origin[1])
    return math.atan2(delta_y, delta_x) * 180.0 / math.pi


def best_position(asteroids: list[Position]) -> tuple[Position, AsteroidsByAngle]:
    """The asteroid seeing the most others, with the others grouped by angle.

    On a tie the earliest asteroid wins.
    """
    best: Position = (0, 0)
    best_angles: AsteroidsByAngle = {}
    for i, current in enumerate(asteroids):
        angles: AsteroidsByAngle = {}
        for j, other in enumerate(asteroids):
            if i != j:
                angles.setdefault(_angle(current, other), []).append(other)
        if len(angles) > len(best_angles):
            best, best_angles = current, angles
    return best, best_angles


def sorted_angles(asteroids_by_angle: AsteroidsByAngle) -> list[float]:
    """The angles in increasing order."""
    return sorted(asteroids_by_angle)


def nth_nearest_asteroid(position: Position, n: int, asteroids: list[Position]) -> Position:
    """The n-th (1-based) asteroid closest to `position`."""
    x, y = position
    ordered = sorted(asteroids, key=lambda a: (a[0] - x) ** 2 + (a[1] - y) ** 2)
    return ordered[n - 1]


def destroyed_asteroid_at(
    number: int, position: Position, asteroids_by_angle: AsteroidsByAngle
) -> Position:
    """The asteroid destroyed `number`-th by a laser starting up and turning clockwise."""
    total = sum(len(group) for group in asteroids_by_angle.values())
    if not 1 <= number <= total:
        raise ValueError(f"Cannot destroy asteroid number {number} out of {total}!")

    angles = sorted_angles(asteroids_by_angle)
    start = next((i for i, angle in enumerate(angles) if angle >= -90.0), 0)
    destroyed = dict.fromkeys(angles, 0)
    count = 0
    for angle in itertools.cycle(angles[start:] + angles[:start]):
        if destroyed[angle] < len(asteroids_by_angle[angle]):
            destroyed[angle] += 1
            count += 1
            if count == number:
                return nth_nearest_asteroid(
                    position, destroyed[angle], asteroids_by_angle[angle]
                )
    raise AssertionError("unreachable")


def part_1(text: str) -> int:
    """How many asteroids the best station can see."""
    _, by_angle = best_position(parse_input(text))
    return len(by_angle)


def part_2(text: str) -> int:
    """100 * x + y of the 200th asteroid vaporised from the best station."""
    asteroids = parse_input(text)
    if len(asteroids) < DESTROY_COUNT + 1:
        raise ValueError(
            f"Need at least {DESTROY_COUNT + 1} asteroids to execute day 10 part 2!"
        )
    station, by_angle = best_position(asteroids)
    x, y = destroyed_asteroid_at(DESTROY_COUNT, station, by_angle)
    return x * 100 + y


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2019 day 10 from standard input.")
    parser.parse_args(argv)
    text = sys.stdin.read()
    print(f"Part 1 : {part_1(text)}")
    print(f"Part 2 : {part_2(text)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())