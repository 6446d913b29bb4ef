[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocsolutions"
version = "0.1.0"
description = "Solutions to Advent of Code puzzles from 2015 and 2019, including an Intcode virtual machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "intcode", "solutions"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc-2015-day01 = "aocsolutions.y2015_day01:main"
aoc-2015-day02 = "aocsolutions.y2015_day02:main"
aoc-2015-day03 = "aocsolutions.y2015_day03:main"
aoc-2019-day01 = "aocsolutions.y2019_day01:main"
aoc-2019-day02 = "aocsolutions.y2019_day02:main"
aoc-2019-day03 = "aocsolutions.y2019_day03:main"
aoc-2019-day04 = "aocsolutions.y2019_day04:main"
aoc-2019-day05 = "aocsolutions.y2019_day05:main"
aoc-2019-day06 = "aocsolutions.y2019_day06:main"
aoc-2019-day07 = "aocsolutions.y2019_day07:main"
aoc-2019-day08 = "aocsolutions.y2019_day08:main"
aoc-2019-day09 = "aocsolutions.y2019_day09:main"
aoc-2019-day10 = "aocsolutions.y2019_day10:main"
aoc-2019-day11 = "aocsolutions.y2019_day11:main"
aoc-2019-day12 = "aocsolutions.y2019_day12:main"
aoc-2019-day13 = "aocsolutions.y2019_day13:main"

[tool.hatch.build.targets.wheel]
packages = ["aocsolutions"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
