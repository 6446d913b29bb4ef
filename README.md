# aocsolutions

Solutions to Advent of Code puzzles: days 1–3 of 2015 and days 1–13 of 2019.
The later 2019 Intcode puzzles (days 9, 11 and 13) share a small resumable
virtual machine, `aocsolutions.intcode_vm.IntcodeVm`; days 2, 5 and 7 carry
their own simpler interpreters, as those puzzles define them.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Each puzzle has a command that reads the puzzle input from standard input and
prints the answers to both parts:

```
aoc-2015-day01 < input.txt
aoc-2019-day05 < input.txt
```

The available commands are:

| Command          | Puzzle                                  |
|------------------|-----------------------------------------|
| `aoc-2015-day01` | 2015 day 1 – floors from parentheses    |
| `aoc-2015-day02` | 2015 day 2 – wrapping paper and ribbon  |
| `aoc-2015-day03` | 2015 day 3 – houses visited             |
| `aoc-2019-day01` | 2019 day 1 – fuel requirements          |
| `aoc-2019-day02` | 2019 day 2 – first Intcode program      |
| `aoc-2019-day03` | 2019 day 3 – crossed wires              |
| `aoc-2019-day04` | 2019 day 4 – password ranges            |
| `aoc-2019-day05` | 2019 day 5 – diagnostics                |
| `aoc-2019-day06` | 2019 day 6 – orbit map                  |
| `aoc-2019-day07` | 2019 day 7 – amplifier chains           |
| `aoc-2019-day08` | 2019 day 8 – layered image              |
| `aoc-2019-day09` | 2019 day 9 – relative-mode Intcode      |
| `aoc-2019-day10` | 2019 day 10 – asteroid monitoring       |
| `aoc-2019-day11` | 2019 day 11 – hull-painting robot       |
| `aoc-2019-day12` | 2019 day 12 – moon motion               |
| `aoc-2019-day13` | 2019 day 13 – arcade cabinet            |

For 2019 days 8 and 11 the second answer is a picture: it is written as an
8-bit grayscale PNG file and the command prints its path. The file is
`part_2.png` in the current directory unless `--output PATH` is given:

```
aoc-2019-day08 --output message.png < input.txt
```

Malformed input is reported as an error rather than silently ignored.

## Library use

Every puzzle module exposes `part_1` and `part_2`. Most take the puzzle text
and return the answer:

```python
from aocsolutions import y2015_day01

y2015_day01.part_1("(()(()(")      # 3
y2015_day01.part_2("()())")        # 5
```

A few differ:

- `y2015_day02.part_1` and `part_2` take the list returned by
  `y2015_day02.parse_input(text)`.
- `y2019_day08.part_2(text, path)` and `y2019_day11.part_2(text, path)` write
  the PNG image to `path` and return it as a `pathlib.Path`.
  `y2019_day08.decode_image(text)` returns the decoded pixels as bytes, and
  `aocsolutions.imaging.write_grayscale_png(path, pixels, width, height)`
  writes any 8-bit grayscale image.

The Intcode machine runs until it produces an output, needs an input, or halts:

```python
from aocsolutions.intcode_vm import IntcodeVm, VmState

vm = IntcodeVm("104,1125899906842624,99")
outputs = []
while (value := vm.run(None)) is not None:
    outputs.append(value)
assert vm.state is VmState.ENDED
```

When `run` returns `None`, `vm.state` is `VmState.WAITING_INPUT` if the program
wants a value (pass it to the next `run` call) or `VmState.ENDED` if it halted.
Errors raised by the machine, such as an unknown opcode or a negative address,
are `aocsolutions.intcode_vm.IntcodeError`.

## What it does not do

The pictures for 2019 days 8 and 11 are only written to files; the package
does not display them or read the letters in them. The day 13 arcade game is
played automatically to get the final score; nothing is drawn on screen.