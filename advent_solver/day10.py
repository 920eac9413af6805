"""Day 10: scoring hiking trails on a topographic map."""

from functools import lru_cache
from typing import Dict, Iterator, Set, Tuple

_Pos = Tuple[int, int]


def _parse(contents: str) -> Dict[_Pos, int]:
    grid: Dict[_Pos, int] = {}
    for i, line in enumerate(contents.splitlines()):
        for j, c in enumerate(line):
            if not c.isdigit():
                raise ValueError(f"not a height: {c!r}")
            grid[(i, j)] = int(c)
    return grid


def _uphill(grid: Dict[_Pos, int], pos: _Pos) -> Iterator[_Pos]:
    i, j = pos
    wanted = grid[pos] + 1
    for neighbour in ((i - 1, j), (i + 1, j), (i, j - 1), (i, j + 1)):
        if grid.get(neighbour) == wanted:
            yield neighbour


def _trailheads(grid: Dict[_Pos, int]) -> Iterator[_Pos]:
    return (pos for pos, height in grid.items() if height == 0)


def _reachable_peaks(grid: Dict[_Pos, int], start: _Pos) -> int:
    seen: Set[_Pos] = {start}
    stack = [start]
    peaks = 0
    while stack:
        pos = stack.pop()
        if grid[pos] == 9:
            peaks += 1
            continue
        for step in _uphill(grid, pos):
            if step not in seen:
                seen.add(step)
                stack.append(step)
    return peaks


def part_a(contents: str) -> int:
    """Sum over trailheads of the number of distinct peaks each reaches."""
    grid = _parse(contents)
    return sum(_reachable_peaks(grid, head) for head in _trailheads(grid))


def part_b(contents: str) -> int:
    """Sum over trailheads of the number of distinct trails each starts."""
    grid = _parse(contents)

    @lru_cache(maxsize=None)
    def trails(pos: _Pos) -> int:
        if grid[pos] == 9:
            return 1
        return sum(trails(step) for step in _uphill(grid, pos))

    return sum(trails(head) for head in _trailheads(grid))