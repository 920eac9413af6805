"""Day 12: pricing fences around garden regions."""

from typing import Callable, Iterator, List, Set, Tuple

_Pos = Tuple[int, int]


def _grid(contents: str) -> List[str]:
    grid = contents.splitlines()
    if not grid:
        raise ValueError("empty garden")
    return grid


def _same_neighbours(grid: List[str], i: int, j: int) -> Iterator[_Pos]:
    plant = grid[i][j]
    if i > 0 and grid[i - 1][j] == plant:
        yield i - 1, j
    if i < len(grid) - 1 and grid[i + 1][j] == plant:
        yield i + 1, j
    if j > 0 and grid[i][j - 1] == plant:
        yield i, j - 1
    if j < len(grid[i]) - 1 and grid[i][j + 1] == plant:
        yield i, j + 1


def _regions(grid: List[str]) -> Iterator[List[_Pos]]:
    seen: Set[_Pos] = set()
    for i, row in enumerate(grid):
        for j in range(len(row)):
            if (i, j) in seen:
                continue
            seen.add((i, j))
            region = []
            stack = [(i, j)]
            while stack:
                cell = stack.pop()
                region.append(cell)
                for neighbour in _same_neighbours(grid, *cell):
                    if neighbour not in seen:
                        seen.add(neighbour)
                        stack.append(neighbour)
            yield region


def _fences(grid: List[str], i: int, j: int) -> int:
    return 4 - sum(1 for _ in _same_neighbours(grid, i, j))


def _corners(grid: List[str], i: int, j: int) -> int:
    plant = grid[i][j]
    up = i == 0 or grid[i - 1][j] != plant
    down = i == len(grid) - 1 or grid[i + 1][j] != plant
    left = j == 0 or grid[i][j - 1] != plant
    right = j == len(grid[i]) - 1 or grid[i][j + 1] != plant
    outer = (up and left) + (left and down) + (down and right) + (right and up)
    inner = (
        (not up and not left and grid[i - 1][j - 1] != plant)
        + (not left and not down and grid[i + 1][j - 1] != plant)
        + (not down and not right and grid[i + 1][j + 1] != plant)
        + (not right and not up and grid[i - 1][j + 1] != plant)
    )
    return outer + inner


def _price(contents: str, edge_measure: Callable[[List[str], int, int], int]) -> int:
    grid = _grid(contents)
    return sum(
        len(region) * sum(edge_measure(grid, i, j) for i, j in region)
        for region in _regions(grid)
    )


def part_a(contents: str) -> int:
    """Total price: area times perimeter for every region."""
    return _price(contents, _fences)


def part_b(contents: str) -> int:
    """Total discounted price: area times number of sides for every region."""
    return _price(contents, _corners)