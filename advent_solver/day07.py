"""Day 7: finding operators that make calibration equations true."""

import enum
from typing import Iterator, List, Tuple


class _Op(enum.Enum):
    ADD = "+"
    MULT = "*"
    MERGE = "||"

    def apply(self, total: int, number: int) -> int:
        if self is _Op.ADD:
            return total + number
        if self is _Op.MULT:
            return total * number
        return int(f"{total}{number}")


def _compare(a: int, b: int) -> int:
    return (a > b) - (a < b)


class _Search:
    """Pruned search over operator choices, most growing operator first.

    Results are -1, 0 or 1: the best value found falls short of, equals or
    overshoots the target.
    """

    def __init__(self, answer: int, numbers: Tuple[int, ...], first_op: _Op) -> None:
        self.answer = answer
        self.numbers = numbers
        self.first_op = first_op

    def evaluate(self, index: int, total: int, op: _Op) -> int:
        value = op.apply(total, self.numbers[index])
        if index + 1 == len(self.numbers):
            return _compare(value, self.answer)
        if value > self.answer:
            return 1
        return self.next_step(index + 1, value, self.first_op)

    def next_step(self, index: int, total: int, op: _Op) -> int:
        result = self.evaluate(index, total, op)
        if result < 0 and op is _Op.MULT:
            if 1 in self.numbers[index:] or total == 1:
                return self.next_step(index, total, _Op.ADD)
            return result
        if result > 0 and op is _Op.MERGE:
            fallback = self.next_step(index, total, _Op.MULT)
            return 1 if fallback < 0 else fallback
        if result > 0 and op is _Op.MULT:
            fallback = self.next_step(index, total, _Op.ADD)
            return 1 if fallback < 0 else fallback
        return result

    def solvable(self) -> bool:
        return self.evaluate(0, 0, _Op.ADD) == 0


def _equations(contents: str) -> Iterator[Tuple[int, Tuple[int, ...]]]:
    for line in contents.splitlines():
        parts: List[str] = line.split()
        if not parts:
            raise ValueError("empty equation line")
        answer = int(parts[0][:-1])
        numbers = tuple(int(part) for part in parts[1:])
        if not numbers:
            raise ValueError(f"equation has no numbers: {line!r}")
        yield answer, numbers


def _total(contents: str, first_op: _Op) -> int:
    return sum(
        answer
        for answer, numbers in _equations(contents)
        if _Search(answer, numbers, first_op).solvable()
    )


def part_a(contents: str) -> int:
    """Sum of the targets reachable with + and *."""
    return _total(contents, _Op.MULT)


def part_b(contents: str) -> int:
    """Sum of the targets reachable with +, * and concatenation."""
    return _total(contents, _Op.MERGE)