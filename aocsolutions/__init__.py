"""Advent of Code puzzle solutions for 2015 and 2019, with an Intcode virtual machine."""

__version__ = "0.1.0"