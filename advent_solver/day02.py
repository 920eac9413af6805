"""Day 2: checking reactor reports for safety."""

from typing import List, Optional

from .inputs import parse_int


def _levels(line: str) -> List[int]:
    return [parse_int(token, 0) for token in line.split()]


def _step_ok(level: int, last: Optional[int], ascending: Optional[bool]) -> bool:
    if last is None:
        return True
    if ascending is not None and ascending != (level > last):
        return False
    return 1 <= abs(level - last) <= 3


def _first_failure(levels: List[int], skipping: Optional[int] = None) -> Optional[int]:
    """Return the index of the first unsafe level, or None if all are safe."""
    last: Optional[int] = None
    ascending: Optional[bool] = None
    for i, level in enumerate(levels):
        if i == skipping:
            continue
        if not _step_ok(level, last, ascending):
            return i
        if ascending is None and last is not None:
            ascending = level > last
        last = level
    return None


def _is_safe_dampened(levels: List[int]) -> bool:
    failure = _first_failure(levels)
    if failure is None:
        return True
    return any(
        _first_failure(levels, skipped) is None
        for skipped in range(max(failure, 2) - 2, failure + 1)
    )


def part_a(contents: str) -> int:
    """Number of strictly safe reports."""
    return sum(
        1 for line in contents.splitlines() if _first_failure(_levels(line)) is None
    )


def part_b(contents: str) -> int:
    """Number of reports that are safe once at most one level is removed."""
    return sum(1 for line in contents.splitlines() if _is_safe_dampened(_levels(line)))