import pytest

from aocsolutions.y2019_day12 import (
    first_repeated_state_step,
    parse_input,
    part_2,
    simulate_moon_motions,
    total_energy,
)

FIRST_EXAMPLE = """<x=-1, y=0, z=2>
<x=2, y=-10, z=-7>
<x=4, y=-8, z=8>
<x=3, y=5, z=-1>
"""

SECOND_EXAMPLE = """<x=-8, y=-10, z=0>
<x=5, y=5, z=10>
<x=2, y=-7, z=3>
<x=9, y=-8, z=-3>
"""

REST = [(0, 0, 0)] * 4


def test_parse_input():
    assert parse_input(FIRST_EXAMPLE) == [(-1, 0, 2), (2, -10, -7), (4, -8, 8), (3, 5, -1)]


def test_parse_input_rejects_bad_line():
    with pytest.raises(ValueError, match="Invalid input coordinate"):
        parse_input("<x=1, y=2>")


def test_simulation_steps():
    coordinates = parse_input(FIRST_EXAMPLE)

    coordinates, velocities = simulate_moon_motions(coordinates, REST, 0)
    assert (coordinates, velocities) == (
        [(-1, 0, 2), (2, -10, -7), (4, -8, 8), (3, 5, -1)],
        [(0, 0, 0), (0, 0, 0), (0, 0, 0), (0, 0, 0)],
    )

    coordinates, velocities = simulate_moon_motions(coordinates, velocities, 1)
    assert (coordinates, velocities) == (
        [(2, -1, 1), (3, -7, -4), (1, -7, 5), (2, 2, 0)],
        [(3, -1, -1), (1, 3, 3), (-3, 1, -3), (-1, -3, 1)],
    )

    coordinates, velocities = simulate_moon_motions(coordinates, velocities, 1)
    assert (coordinates, velocities) == (
        [(5, -3, -1), (1, -2, 2), (1, -4, -1), (1, -4, 2)],
        [(3, -2, -2), (-2, 5, 6), (0, 3, -6), (-1, -6, 2)],
    )

    coordinates, velocities = simulate_moon_motions(coordinates, velocities, 8)
    assert total_energy(coordinates, velocities) == 179


def test_simulation_does_not_change_inputs():
    coordinates = parse_input(FIRST_EXAMPLE)
    velocities = list(REST)
    simulate_moon_motions(coordinates, velocities, 5)
    assert coordinates == [(-1, 0, 2), (2, -10, -7), (4, -8, 8), (3, 5, -1)]
    assert velocities == REST


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        simulate_moon_motions([(0, 0, 0)], [], 1)


def test_total_energy_at_rest_is_zero():
    assert total_energy(parse_input(FIRST_EXAMPLE), REST) == 0


def test_first_repeated_state_first_example():
    assert first_repeated_state_step(parse_input(FIRST_EXAMPLE), REST) == 2772


def test_first_repeated_state_second_example():
    assert first_repeated_state_step(parse_input(SECOND_EXAMPLE), REST) == 4686774924


def test_part_2_matches_example():
    assert part_2(FIRST_EXAMPLE) == 2772


def test_first_repeated_state_without_moons():
    with pytest.raises(ValueError):
        first_repeated_state_step([], [])