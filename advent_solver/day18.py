"""Day 18: escaping a memory grid as bytes fall into it."""

from collections import deque
from typing import Iterator, List, Optional, Set, Tuple

_Pos = Tuple[int, int]

_EXAMPLE_LINES = 25
_EXAMPLE_SIZE = 7
_FULL_SIZE = 71


def _load(contents: str) -> Tuple[List[str], int]:
    """The input's lines and the grid size they imply."""
    lines = contents.splitlines()
    size = _EXAMPLE_SIZE if len(lines) == _EXAMPLE_LINES else _FULL_SIZE
    return lines, size


def _coordinates(lines: List[str], size: int) -> Iterator[Tuple[str, _Pos]]:
    """Yield each line's text and the (x, y) cell it names."""
    for line in lines:
        x_text, comma, y_text = line.partition(",")
        if not comma:
            raise ValueError(f"malformed coordinate: {line!r}")
        x, y = int(x_text), int(y_text)
        if not (0 <= x < size and 0 <= y < size):
            raise ValueError(f"coordinate outside the grid: {line!r}")
        yield f"{x_text},{y_text}", (x, y)


def _shortest(blocked: Set[_Pos], size: int) -> Optional[int]:
    """Steps from the top-left to the bottom-right corner, or None if walled off."""
    goal = (size - 1, size - 1)
    queue = deque([((0, 0), 0)])
    seen = {(0, 0)}
    while queue:
        (x, y), steps = queue.popleft()
        if (x, y) == goal:
            return steps
        for nx, ny in ((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)):
            cell = (nx, ny)
            if 0 <= nx < size and 0 <= ny < size and cell not in seen and cell not in blocked:
                seen.add(cell)
                queue.append((cell, steps + 1))
    return None


def part_a(contents: str) -> int:
    """Fewest steps to the exit once the first bytes have fallen, or 0."""
    lines, size = _load(contents)
    count = 12 if size == _EXAMPLE_SIZE else 1024
    if len(lines) < count:
        raise ValueError(f"expected at least {count} coordinates")
    blocked = {cell for _, cell in _coordinates(lines[:count], size)}
    steps = _shortest(blocked, size)
    return steps if steps is not None else 0


def part_b(contents: str) -> str:
    """The first byte that cuts off the exit, as "x,y", or "???" if none does."""
    lines, size = _load(contents)
    blocked: Set[_Pos] = set()
    for text, cell in _coordinates(lines, size):
        blocked.add(cell)
        if _shortest(blocked, size) is None:
            return text
    return "???"