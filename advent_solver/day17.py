"""Day 17: a three-bit computer and the program that prints itself."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

_REGISTER_PREFIXES = ("Register A: ", "Register B: ", "Register C: ")
_PROGRAM_PREFIX = "Program: "


@dataclass
class _Registers:
    a: int
    b: int = 0
    c: int = 0

    def combo(self, operand: int) -> int:
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError(f"invalid combo operand: {operand}")

    def apply(self, opcode: int, operand: int) -> None:
        """Run an instruction that neither jumps nor prints."""
        if opcode == 0:
            self.a >>= self.combo(operand)
        elif opcode == 1:
            self.b ^= operand
        elif opcode == 2:
            self.b = self.combo(operand) % 8
        elif opcode == 4:
            self.b ^= self.c
        elif opcode == 6:
            self.b = self.a >> self.combo(operand)
        elif opcode == 7:
            self.c = self.a >> self.combo(operand)
        else:
            raise ValueError(f"invalid opcode: {opcode}")


def _after_prefix(line: str, prefix: str) -> str:
    if not line.startswith(prefix):
        raise ValueError(f"expected {prefix!r} in {line!r}")
    return line[len(prefix):]


def _program(line: str) -> List[int]:
    return [int(value) for value in _after_prefix(line, _PROGRAM_PREFIX).split(",")]


def _parse(contents: str) -> Tuple[_Registers, List[int]]:
    lines = contents.splitlines()
    if len(lines) < 5:
        raise ValueError("expected three registers, a blank line and a program")
    a, b, c = (
        int(_after_prefix(line, prefix))
        for line, prefix in zip(lines, _REGISTER_PREFIXES)
    )
    return _Registers(a, b, c), _program(lines[4])


def part_a(contents: str) -> str:
    """Comma-separated output of running the program."""
    registers, program = _parse(contents)
    outputs: List[int] = []
    pointer = 0
    while pointer < len(program):
        if pointer + 1 >= len(program):
            raise ValueError(f"instruction at {pointer} has no operand")
        opcode, operand = program[pointer], program[pointer + 1]
        if opcode == 3:
            if registers.a != 0:
                pointer = operand
                continue
        elif opcode == 5:
            outputs.append(registers.combo(operand) % 8)
        else:
            registers.apply(opcode, operand)
        pointer += 2
    return ",".join(str(value) for value in outputs)


def _search(program: List[int], total: int, index: int, shift: int) -> Optional[int]:
    """Find a register A value printing program[index:], building it from the end."""
    desired = program[index]
    pairs = list(zip(program[::2], program[1::2]))
    for attempt in range(2**shift + 1):
        initial = (total << shift) + attempt
        registers = _Registers(initial)
        for opcode, operand in pairs:
            if opcode == 3:
                if registers.a == 0 and index > 0:
                    return None
            elif opcode == 5:
                if registers.combo(operand) % 8 == desired:
                    if index == 0:
                        return initial
                    found = _search(program, initial, index - 1, shift)
                    if found is not None:
                        return found
                break
            else:
                registers.apply(opcode, operand)
    return None


def part_b(contents: str) -> int:
    """Lowest register A value that makes the program print itself, or 0."""
    lines = contents.splitlines()
    if len(lines) < 5:
        raise ValueError("input has no program line")
    program = _program(lines[4])
    shift = next(
        (operand for opcode, operand in zip(program[::2], program[1::2]) if opcode == 0),
        0,
    )
    found = _search(program, 0, len(program) - 1, shift)
    return found if found is not None else 0