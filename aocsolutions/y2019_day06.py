"""2019 day 6: counting orbits and orbital transfers in a map of bodies."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict, deque
from collections.abc import Iterator


def _pairs(text: str) -> Iterator[tuple[str, str]]:
    for line in text.splitlines():
        parts = line.split(")")
        if len(parts) < 2:
            raise ValueError(f"Orbiter code not found in line: {line!r}")
        yield parts[0], parts[1]


def part_1(text: str) -> int:
    """Total number of direct and indirect orbits around COM."""
    children: defaultdict[str, list[str]] = defaultdict(list)
    for orbitee, orbiter in _pairs(text):
        children[orbitee].append(orbiter)

    total = 0
    depth = 0
    level = ["COM"]
    while level:
        depth += 1
        level = [child for body in level for child in children.get(body, ())]
        total += depth * len(level)
    return total


def part_2(text: str) -> int:
    """Fewest orbital transfers to move from the body YOU orbits to the one SAN orbits."""
    neighbours: defaultdict[str, list[str]] = defaultdict(list)
    for orbitee, orbiter in _pairs(text):
        neighbours[orbitee].append(orbiter)
        neighbours[orbiter].append(orbitee)
    if "YOU" not in neighbours:
        raise ValueError("YOU is not in the orbit map!")

    distances = {"YOU": 0}
    queue = deque(["YOU"])
    while queue:
        body = queue.popleft()
        for neighbour in neighbours.get(body, ()):
            if neighbour in distances:
                continue
            distances[neighbour] = distances[body] + 1
            if neighbour == "SAN":
                return distances[neighbour] - 2
            queue.append(neighbour)
    raise ValueError("No path found!")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2019 day 6 from standard input.")
    parser.parse_args(argv)
    text = sys.stdin.read()
    print(f"Part 1 : {part_1(text)}")
    print(f"Part 2 : {part_2(text)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())