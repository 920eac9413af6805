"""Day 4: word search for XMAS."""

from typing import Iterator, List, Tuple

_TAIL = "MAS"


def _directions(grid: List[str], i: int, j: int) -> Iterator[Tuple[int, int]]:
    up = i > 2
    down = i < len(grid) - 3
    left = j > 2
    right = j < len(grid[i]) - 3
    allowed = {
        (-1, -1): up and left,
        (-1, 0): up,
        (-1, 1): up and right,
        (0, -1): left,
        (0, 1): right,
        (1, -1): down and left,
        (1, 0): down,
        (1, 1): down and right,
    }
    return (direction for direction, ok in allowed.items() if ok)


def _matches(grid: List[str], i: int, j: int, di: int, dj: int) -> bool:
    return all(
        grid[i + step * di][j + step * dj] == letter
        for step, letter in enumerate(_TAIL, start=1)
    )


def part_a(contents: str) -> int:
    """Count XMAS in every direction, overlaps included."""
    grid = contents.splitlines()
    return sum(
        _matches(grid, i, j, di, dj)
        for i, row in enumerate(grid)
        for j, c in enumerate(row)
        if c == "X"
        for di, dj in _directions(grid, i, j)
    )


def _is_cross(grid: List[str], i: int, j: int) -> bool:
    diagonal_pairs = (
        (grid[i - 1][j - 1], grid[i + 1][j + 1]),
        (grid[i - 1][j + 1], grid[i + 1][j - 1]),
    )
    return all(pair in (("M", "S"), ("S", "M")) for pair in diagonal_pairs)


def part_b(contents: str) -> int:
    """Count two MAS words crossing in an X shape."""
    grid = contents.splitlines()
    return sum(
        _is_cross(grid, i, j)
        for i in range(1, len(grid) - 1)
        for j in range(1, len(grid[i]) - 1)
        if grid[i][j] == "A"
    )