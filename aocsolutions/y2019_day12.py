"""2019 day 12: simulating the motion of Jupiter's moons."""

from __future__ import annotations

import argparse
import itertools
import math
import re
import sys
from collections.abc import Sequence

Vector = tuple[int, int, int]

SIMULATED_STEPS = 1000

_MOON = re.compile(r"<x=(-?[0-9]+), y=(-?[0-9]+), z=(-?[0-9]+)>")


def parse_input(text: str) -> list[Vector]:
    """Parse one ``<x=.., y=.., z=..>`` position per line."""
    coordinates = []
    for line in text.splitlines():
        match = _MOON.fullmatch(line)
        if match is None:
            raise ValueError(f"Invalid input coordinate found : {line}")
        x, y, z = (int(group) for group in match.groups())
        coordinates.append((x, y, z))
    return coordinates


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _step(
    coordinates: list[Vector], velocities: list[Vector]
) -> tuple[list[Vector], list[Vector]]:
    changes = [[0, 0, 0] for _ in coordinates]
    for i, j in itertools.combinations(range(len(coordinates)), 2):
        for axis in range(3):
            pull = _sign(coordinates[j][axis] - coordinates[i][axis])
            changes[i][axis] += pull
            changes[j][axis] -= pull
    new_velocities = [
        (v[0] + c[0], v[1] + c[1], v[2] + c[2]) for v, c in zip(velocities, changes)
    ]
    new_coordinates = [
        (p[0] + v[0], p[1] + v[1], p[2] + v[2])
        for p, v in zip(coordinates, new_velocities)
    ]
    return new_coordinates, new_velocities


def simulate_moon_motions(
    coordinates: Sequence[Vector], velocities: Sequence[Vector], steps: int
) -> tuple[list[Vector], list[Vector]]:
    """Apply gravity then velocity `steps` times; returns the new positions and velocities."""
    if len(coordinates) != len(velocities):
        raise ValueError("Every moon needs both a position and a velocity!")
    current_coordinates = list(coordinates)
    current_velocities = list(velocities)
    for _ in range(steps):
        current_coordinates, current_velocities = _step(
            current_coordinates, current_velocities
        )
    return current_coordinates, current_velocities


def total_energy(coordinates: Sequence[Vector], velocities: Sequence[Vector]) -> int:
    """Sum over moons of potential energy times kinetic energy."""
    return sum(
        sum(map(abs, position)) * sum(map(abs, velocity))
        for position, velocity in zip(coordinates, velocities)
    )


def first_repeated_state_step(
    coordinates: Sequence[Vector], velocities: Sequence[Vector]
) -> int:
    """Number of steps until the moons first return to an earlier state.

    Each axis moves independently; the first step at which all velocities on
    an axis are zero is half that axis's period.
    """
    if not coordinates:
        raise ValueError("At least one moon is needed to find a repeated state!")
    current_coordinates = list(coordinates)
    current_velocities = list(velocities)
    half_periods: list[int | None] = [None, None, None]
    step = 0
    while any(period is None for period in half_periods):
        current_coordinates, current_velocities = _step(
            current_coordinates, current_velocities
        )
        step += 1
        for axis in range(3):
            if half_periods[axis] is None and all(
                velocity[axis] == 0 for velocity in current_velocities
            ):
                half_periods[axis] = step
    return 2 * math.lcm(*(period for period in half_periods if period is not None))


def _at_rest(coordinates: Sequence[Vector]) -> list[Vector]:
    return [(0, 0, 0) for _ in coordinates]


def part_1(text: str) -> int:
    """Total energy of the system after 1000 steps."""
    coordinates = parse_input(text)
    coordinates, velocities = simulate_moon_motions(
        coordinates, _at_rest(coordinates), SIMULATED_STEPS
    )
    return total_energy(coordinates, velocities)


def part_2(text: str) -> int:
    """Steps until the moons first repeat a previous state."""
    coordinates = parse_input(text)
    return first_repeated_state_step(coordinates, _at_rest(coordinates))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2019 day 12 from standard input.")
    parser.parse_args(argv)
    text = sys.stdin.read()
    print(f"Part 1 : {part_1(text)}")
    print(f"Part 2: {part_2(text)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())