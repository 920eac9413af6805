"""Day 13: the cheapest way to win prizes from claw machines."""

from typing import Iterator, List, Tuple

_OFFSET = 10_000_000_000_000


def _pair(line: str, prefix: str, separator: str) -> Tuple[int, int]:
    if not line.startswith(prefix):
        raise ValueError(f"expected {prefix!r} in {line!r}")
    first, found, second = line[len(prefix):].partition(separator)
    if not found:
        raise ValueError(f"expected {separator!r} in {line!r}")
    return int(first), int(second)


def _machines(contents: str) -> Iterator[List[str]]:
    """Complete groups of four lines; a trailing incomplete group is ignored."""
    lines = iter(contents.splitlines())
    for group in zip(lines, lines, lines, lines):
        yield list(group)


def _cost(machine: List[str], offset: int) -> int:
    a_x, a_y = _pair(machine[0], "Button A: X+", ", Y+")
    b_x, b_y = _pair(machine[1], "Button B: X+", ", Y+")
    p_x, p_y = _pair(machine[2], "Prize: X=", ", Y=")
    p_x += offset
    p_y += offset

    # Cramer's rule on the two button equations.
    a_num = p_x * b_y - p_y * b_x
    b_num = a_x * p_y - a_y * p_x
    det = a_x * b_y - a_y * b_x
    if det == 0:
        raise ZeroDivisionError("buttons move the claw along the same line")
    if a_num % det or b_num % det:
        return 0
    return a_num * 3 // det + b_num // det


def _total(contents: str, offset: int) -> int:
    return sum(_cost(machine, offset) for machine in _machines(contents))


def part_a(contents: str) -> int:
    """Fewest tokens to win every winnable prize."""
    return _total(contents, 0)


def part_b(contents: str) -> int:
    """Fewest tokens once every prize lies 10000000000000 further away."""
    return _total(contents, _OFFSET)