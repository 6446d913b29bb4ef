"""An Intcode virtual machine with relative addressing and growable memory."""

from __future__ import annotations

from enum import Enum


class IntcodeError(Exception):
    """Raised when an Intcode program cannot be loaded or executed."""


class VmState(Enum):
    """What the machine was doing when `IntcodeVm.run` last returned."""

    INITIAL = "initial"
    WAITING_INPUT = "waiting_input"
    OUTPUT = "output"
    ENDED = "ended"


class _Mode(Enum):
    POSITION = "0"
    IMMEDIATE = "1"
    RELATIVE = "2"

    @classmethod
    def from_char(cls, char: str) -> _Mode:
        try:
            return cls(char)
        except ValueError:
            raise IntcodeError(f"Not a valid access mode character : {char}") from None


class _Op(Enum):
    ADD = 1
    MULTIPLY = 2
    INPUT = 3
    OUTPUT = 4
    JUMP_IF_TRUE = 5
    JUMP_IF_FALSE = 6
    LESS_THAN = 7
    EQUALS = 8
    ADJUST_RELATIVE_BASE = 9
    END = 99

    @classmethod
    def from_int(cls, number: int) -> _Op:
        try:
            return cls(number)
        except ValueError:
            raise IntcodeError(f"Not a valid opcode : {number}") from None


class IntcodeVm:
    """A resumable Intcode machine.

    Each call to `run` executes until the program outputs a value, needs an
    input it was not given, or ends.
    """

    def __init__(self, text: str) -> None:
        try:
            self.ram: list[int] = [int(step) for step in text.strip().split(",")]
        except ValueError as exc:
            raise IntcodeError(f"Invalid Intcode program: {exc}") from exc
        self.state = VmState.INITIAL
        self.position = 0
        self.relative_base = 0

    def run(self, value: int | None = None) -> int | None:
        """Run until output, input starvation or the end of the program.

        Returns the output value, or None when the machine waits for input
        or has ended; `state` tells which.
        """
        self.state = VmState.INITIAL
        pending = value

        while True:
            if not 0 <= self.position < len(self.ram):
                raise IntcodeError("Current step outside boundaries of input steps!")
            op, mode_1, mode_2, mode_3 = self._decode()

            if op is _Op.ADD:
                self._store(3, mode_3, self._load(1, mode_1) + self._load(2, mode_2))
                self.position += 4
            elif op is _Op.MULTIPLY:
                self._store(3, mode_3, self._load(1, mode_1) * self._load(2, mode_2))
                self.position += 4
            elif op is _Op.INPUT:
                if pending is None:
                    self.state = VmState.WAITING_INPUT
                    return None
                self._store(1, mode_1, pending)
                pending = None
                self.position += 2
            elif op is _Op.OUTPUT:
                result = self._load(1, mode_1)
                self.position += 2
                self.state = VmState.OUTPUT
                return result
            elif op is _Op.JUMP_IF_TRUE or op is _Op.JUMP_IF_FALSE:
                condition = self._load(1, mode_1)
                target = self._load(2, mode_2)
                if (condition != 0) == (op is _Op.JUMP_IF_TRUE):
                    self.position = target
                else:
                    self.position += 3
            elif op is _Op.LESS_THAN:
                self._store(3, mode_3, int(self._load(1, mode_1) < self._load(2, mode_2)))
                self.position += 4
            elif op is _Op.EQUALS:
                self._store(3, mode_3, int(self._load(1, mode_1) == self._load(2, mode_2)))
                self.position += 4
            elif op is _Op.ADJUST_RELATIVE_BASE:
                self.relative_base += self._load(1, mode_1)
                self.position += 2
            else:
                self.state = VmState.ENDED
                return None

    def _decode(self) -> tuple[_Op, _Mode, _Mode, _Mode]:
        code = self.ram[self.position]
        digits = f"{code:05d}"
        remainder = code % 100 if code >= 0 else -((-code) % 100)
        op = _Op.from_int(remainder)
        return (
            op,
            _Mode.from_char(digits[2]),
            _Mode.from_char(digits[1]),
            _Mode.from_char(digits[0]),
        )

    def _ensure_memory(self, address: int) -> None:
        if address < 0:
            raise IntcodeError("Positional parameter should not be less than zero!")
        if address >= len(self.ram):
            self.ram.extend([0] * (address - len(self.ram) + 1))

    def _address(self, offset: int, mode: _Mode) -> int:
        raw_address = self.position + offset
        self._ensure_memory(raw_address)
        raw = self.ram[raw_address]
        if mode is _Mode.RELATIVE:
            raw += self.relative_base
        self._ensure_memory(raw)
        return raw

    def _load(self, offset: int, mode: _Mode) -> int:
        if mode is _Mode.IMMEDIATE:
            raw_address = self.position + offset
            self._ensure_memory(raw_address)
            return self.ram[raw_address]
        return self.ram[self._address(offset, mode)]

    def _store(self, offset: int, mode: _Mode, value: int) -> None:
        if mode is _Mode.IMMEDIATE:
            self._ensure_memory(self.position + offset)
            raise IntcodeError("Setting parameter in immediate mode is not allowed!")
        self.ram[self._address(offset, mode)] = value