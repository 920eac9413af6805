"""Day 8: antinodes of resonant antennas."""

from itertools import permutations
from typing import Dict, Iterator, List, Set, Tuple

_Pos = Tuple[int, int]


class _Roof:
    def __init__(self, contents: str) -> None:
        lines = contents.splitlines()
        if not lines:
            raise ValueError("empty map")
        self.height = len(lines)
        self.width = len(lines[0])
        self.antennas: Dict[str, List[_Pos]] = {}
        for i, line in enumerate(lines):
            for j, c in enumerate(line):
                if c != ".":
                    self.antennas.setdefault(c, []).append((i, j))

    def contains(self, pos: _Pos) -> bool:
        i, j = pos
        return 0 <= i < self.height and 0 <= j < self.width

    def ray(self, start: _Pos, step: _Pos) -> Iterator[_Pos]:
        pos = start
        while self.contains(pos):
            yield pos
            pos = (pos[0] + step[0], pos[1] + step[1])

    def pairs(self) -> Iterator[Tuple[_Pos, _Pos]]:
        for positions in self.antennas.values():
            yield from permutations(positions, 2)


def part_a(contents: str) -> int:
    """Number of cells holding an antinode at twice an antenna pair's distance."""
    roof = _Roof(contents)
    signals: Set[_Pos] = set()
    for (ai, aj), (bi, bj) in roof.pairs():
        di, dj = bi - ai, bj - aj
        for candidate in ((ai - di, aj - dj), (bi + di, bj + dj)):
            if roof.contains(candidate):
                signals.add(candidate)
    return len(signals)


def part_b(contents: str) -> int:
    """Number of cells in line with any antenna pair, harmonics included."""
    roof = _Roof(contents)
    signals: Set[_Pos] = set()
    for a, b in roof.pairs():
        di, dj = b[0] - a[0], b[1] - a[1]
        signals.update(roof.ray(a, (-di, -dj)))
        signals.update(roof.ray(b, (di, dj)))
    return len(signals)