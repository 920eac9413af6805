"""Day 16: the cheapest route through a reindeer maze."""

import enum
import heapq
from typing import Dict, Iterator, List, Set, Tuple

_Pos = Tuple[int, int]
_State = Tuple[int, _Pos, "_Facing"]

_TILES = frozenset("#.ES")


class _Facing(enum.IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def left(self) -> "_Facing":
        return _Facing((self - 1) % 4)

    def right(self) -> "_Facing":
        return _Facing((self + 1) % 4)

    def ahead(self, pos: _Pos) -> _Pos:
        di, dj = _DELTAS[self]
        return pos[0] + di, pos[1] + dj


_DELTAS: Dict[_Facing, _Pos] = {
    _Facing.NORTH: (-1, 0),
    _Facing.EAST: (0, 1),
    _Facing.SOUTH: (1, 0),
    _Facing.WEST: (0, -1),
}


class _Maze:
    def __init__(self, contents: str) -> None:
        self.grid: List[str] = contents.splitlines()
        if not self.grid:
            raise ValueError("empty maze")
        for line in self.grid:
            unknown = set(line) - _TILES
            if unknown:
                raise ValueError(f"unexpected maze characters: {sorted(unknown)}")
        starts = [
            (i, line.index("S")) for i, line in enumerate(self.grid) if "S" in line
        ]
        if not starts:
            raise ValueError("maze has no start")
        self.start: _Pos = starts[0]

    def is_open(self, pos: _Pos) -> bool:
        i, j = pos
        return 0 <= i < len(self.grid) and 0 <= j < len(self.grid[i]) and self.grid[i][j] != "#"

    def is_end(self, pos: _Pos) -> bool:
        return self.grid[pos[0]][pos[1]] == "E"

    def successors(
        self, cost: int, pos: _Pos, facing: _Facing, seen: Set[Tuple[_Pos, _Facing]]
    ) -> Iterator[_State]:
        """Step forward for 1, or turn towards an open cell for 1000."""
        forward = facing.ahead(pos)
        if (forward, facing) not in seen and self.is_open(forward):
            yield cost + 1, forward, facing
        for turned in (facing.left(), facing.right()):
            if (pos, turned) not in seen and self.is_open(turned.ahead(pos)):
                yield cost + 1000, pos, turned


def part_a(contents: str) -> int:
    """Lowest score from the start to the end, or 0 when it cannot be reached."""
    maze = _Maze(contents)
    heap: List[_State] = [(0, maze.start, _Facing.EAST)]
    seen: Set[Tuple[_Pos, _Facing]] = set()
    while heap:
        cost, pos, facing = heapq.heappop(heap)
        if (pos, facing) in seen:
            continue
        seen.add((pos, facing))
        if maze.is_end(pos):
            return cost
        for state in maze.successors(cost, pos, facing, seen):
            heapq.heappush(heap, state)
    return 0


def part_b(contents: str) -> int:
    """Number of tiles on the best paths reaching the end, or 0 when unreachable."""
    maze = _Maze(contents)
    heap: List[_State] = []
    paths: Dict[_State, Set[_Pos]] = {}

    def push(state: _State, path: Set[_Pos]) -> None:
        if state in paths:
            paths[state] |= path
        else:
            paths[state] = set(path)
            heapq.heappush(heap, state)

    push((0, maze.start, _Facing.EAST), set())
    seen: Set[Tuple[_Pos, _Facing]] = set()
    while heap:
        state = heapq.heappop(heap)
        cost, pos, facing = state
        path = paths.pop(state) | {pos}
        if (pos, facing) in seen:
            continue
        seen.add((pos, facing))
        if maze.is_end(pos):
            return len(path)
        for successor in maze.successors(cost, pos, facing, seen):
            push(successor, path)
    return 0