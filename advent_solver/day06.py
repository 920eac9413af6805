"""Day 6: following a patrolling guard around a lab."""

import enum
from bisect import bisect_left, bisect_right, insort
from collections import defaultdict
from typing import Dict, List, Optional, Set, Tuple

_Pos = Tuple[int, int]
_Lines = Dict[int, List[int]]


class _Heading(enum.Enum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def turn_right(self) -> "_Heading":
        return _Heading((self.value + 1) % 4)


def _next_stop(heading: _Heading, pos: _Pos, rows: _Lines, cols: _Lines) -> Optional[_Pos]:
    """Where the guard stops before the next obstacle, or None if there is none."""
    x, y = pos
    if heading is _Heading.NORTH:
        col = cols.get(x, [])
        k = bisect_left(col, y)
        return (x, col[k - 1] + 1) if k else None
    if heading is _Heading.SOUTH:
        col = cols.get(x, [])
        k = bisect_right(col, y)
        return (x, col[k] - 1) if k < len(col) else None
    if heading is _Heading.WEST:
        row = rows.get(y, [])
        k = bisect_left(row, x)
        return (row[k - 1] + 1, y) if k else None
    row = rows.get(y, [])
    k = bisect_right(row, x)
    return (row[k] - 1, y) if k < len(row) else None


def _exit(heading: _Heading, pos: _Pos, limit: _Pos) -> _Pos:
    x, y = pos
    max_x, max_y = limit
    return {
        _Heading.NORTH: (x, 0),
        _Heading.SOUTH: (x, max_y),
        _Heading.WEST: (0, y),
        _Heading.EAST: (max_x, y),
    }[heading]


def _segment(start: _Pos, end: _Pos) -> Set[_Pos]:
    (x1, y1), (x2, y2) = start, end
    if x1 == x2:
        return {(x1, y) for y in range(min(y1, y2), max(y1, y2) + 1)}
    return {(x, y1) for x in range(min(x1, x2), max(x1, x2) + 1)}


def _parse(contents: str) -> Tuple[List[str], _Lines, _Lines, _Pos]:
    lines = contents.splitlines()
    if not lines:
        raise ValueError("empty map")
    rows: _Lines = {
        y: [x for x, c in enumerate(line) if c == "#"] for y, line in enumerate(lines)
    }
    cols: _Lines = defaultdict(list)
    for y, row in rows.items():
        for x in row:
            cols[x].append(y)
    for col in cols.values():
        col.sort()

    starts = [(line.index("^"), y) for y, line in enumerate(lines) if "^" in line]
    if not starts:
        raise ValueError("map has no guard")
    return lines, rows, dict(cols), starts[-1]


def _patrol(rows: _Lines, cols: _Lines, start: _Pos, limit: _Pos) -> Set[_Pos]:
    """Every cell the guard covers before leaving the map."""
    pos = start
    heading = _Heading.NORTH
    path = {pos}
    while True:
        stop = _next_stop(heading, pos, rows, cols)
        escaped = stop is None
        if stop is None:
            stop = _exit(heading, pos, limit)
        path |= _segment(pos, stop)
        if escaped:
            return path
        pos = stop
        heading = heading.turn_right()


def _loops_with(rows: _Lines, cols: _Lines, start: _Pos, limit: _Pos, extra: _Pos) -> bool:
    """Whether an obstacle added at `extra` traps the guard in a loop."""
    new_rows = {y: list(row) for y, row in rows.items()}
    new_cols = {x: list(col) for x, col in cols.items()}
    insort(new_rows.setdefault(extra[1], []), extra[0])
    insort(new_cols.setdefault(extra[0], []), extra[1])

    pos = start
    heading = _Heading.NORTH
    stops = {pos}
    while True:
        stop = _next_stop(heading, pos, new_rows, new_cols)
        escaped = stop is None
        if stop is None:
            stop = _exit(heading, pos, limit)
        if pos != stop:
            if stop in stops:
                return True
            stops.add(stop)
        if escaped:
            return False
        pos = stop
        heading = heading.turn_right()


def part_a(contents: str) -> int:
    """Number of distinct cells the guard visits."""
    lines, rows, cols, start = _parse(contents)
    limit = (len(lines[0]) - 1, len(lines) - 1)
    return len(_patrol(rows, cols, start, limit))


def part_b(contents: str) -> int:
    """Number of cells on the guard's path where one obstacle causes a loop."""
    lines, rows, cols, start = _parse(contents)
    path = _patrol(rows, cols, start, (len(lines[0]) - 1, len(lines) - 1))
    limit = (len(cols) - 1, len(rows) - 1)
    return sum(_loops_with(rows, cols, start, limit, point) for point in path)