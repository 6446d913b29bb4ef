"""2019 day 8: decoding a layered image in the Space Image Format."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .imaging import write_grayscale_png

WIDTH = 25
HEIGHT = 6
_LAYER_SIZE = WIDTH * HEIGHT
_COLOURS = {"0": 0, "1": 255}
_TRANSPARENT = 127


def _layers(text: str) -> list[str]:
    pixels = text.strip()
    if len(pixels) % _LAYER_SIZE:
        raise ValueError("Input length doesn't match assume width * height")
    return [pixels[start : start + _LAYER_SIZE] for start in range(0, len(pixels), _LAYER_SIZE)]


def part_1(text: str) -> int:
    """On the layer with fewest zeros, the number of ones times the number of twos."""
    layers = _layers(text)
    if not layers:
        return 0
    layer = min(layers, key=lambda candidate: candidate.count("0"))
    return layer.count("1") * layer.count("2")


def decode_image(text: str) -> bytes:
    """Stack the layers: the first black or white pixel wins, otherwise gray."""
    layers = _layers(text)
    if not layers:
        return bytes([_TRANSPARENT]) * _LAYER_SIZE
    return bytes(
        next((_COLOURS[pixel] for pixel in stack if pixel in _COLOURS), _TRANSPARENT)
        for stack in zip(*layers)
    )


def part_2(text: str, path: str | os.PathLike[str]) -> Path:
    """Decode the image and write it as a PNG file at `path`."""
    return write_grayscale_png(path, decode_image(text), WIDTH, HEIGHT)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve 2019 day 8 from standard input.")
    parser.add_argument(
        "--output", default="part_2.png", help="where to write the decoded image"
    )
    args = parser.parse_args(argv)
    text = sys.stdin.read()
    print(f"Part 1 : {part_1(text)}")
    image_path = part_2(text, args.output)
    print(f'Part 2 : To get result, open following image : "{image_path}"')
    return 0


if __name__ == "__main__":
    raise SystemExit(main())