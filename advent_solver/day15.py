"""Day 15: a robot pushing boxes around a warehouse."""

from typing import Dict, List, Set, Tuple

_Pos = Tuple[int, int]
_Grid = List[List[str]]

_MOVES: Dict[str, _Pos] = {"<": (0, -1), ">": (0, 1), "^": (-1, 0), "v": (1, 0)}
_WIDENED: Dict[str, str] = {"#": "##", ".": "..", "O": "[]", "@": "@."}


def _step(pos: _Pos, direction: _Pos) -> _Pos:
    return pos[0] + direction[0], pos[1] + direction[1]


def _parse(contents: str, widen: bool) -> Tuple[_Grid, _Pos, List[_Pos]]:
    """Return the warehouse grid, the robot's position and the list of moves."""
    grid: _Grid = []
    moves: List[_Pos] = []
    robot = None
    in_map = True
    for line in contents.splitlines():
        if not line:
            in_map = False
        elif in_map:
            unknown = set(line) - set(_WIDENED)
            if unknown:
                raise ValueError(f"unexpected map characters: {sorted(unknown)}")
            if "@" in line:
                robot = (len(grid), line.index("@") * (2 if widen else 1))
            row = "".join(_WIDENED[c] for c in line) if widen else line
            grid.append(list(row))
        else:
            for c in line:
                if c not in _MOVES:
                    raise ValueError(f"unexpected move: {c!r}")
                moves.append(_MOVES[c])
    if robot is None:
        raise ValueError("map has no robot")
    return grid, robot, moves


def _push_line(grid: _Grid, robot: _Pos, direction: _Pos) -> _Pos:
    """Push everything in a straight line ahead of the robot into the next gap."""
    chain: List[_Pos] = []
    pos = robot
    while (tile := grid[pos[0]][pos[1]]) != ".":
        if tile == "#":
            return robot
        chain.append(pos)
        pos = _step(pos, direction)
    for r, c in reversed(chain):
        nr, nc = _step((r, c), direction)
        grid[nr][nc] = grid[r][c]
    grid[robot[0]][robot[1]] = "."
    return _step(robot, direction)


def _push_wide_vertical(grid: _Grid, robot: _Pos, direction: _Pos) -> _Pos:
    """Push a tree of wide boxes up or down, moving nothing if any of it is blocked."""
    fronts: List[Set[_Pos]] = [{robot}]
    while fronts[-1]:
        front: Set[_Pos] = set()
        for pos in fronts[-1]:
            r, c = _step(pos, direction)
            tile = grid[r][c]
            if tile == "#":
                return robot
            if tile == "[":
                front |= {(r, c), (r, c + 1)}
            elif tile == "]":
                front |= {(r, c), (r, c - 1)}
            elif tile == "@":
                front.add((r, c))
        fronts.append(front)

    for front in reversed(fronts):
        for r, c in front:
            nr, nc = _step((r, c), direction)
            grid[nr][nc] = grid[r][c]
            grid[r][c] = "."
    grid[robot[0]][robot[1]] = "."
    return _step(robot, direction)


def _gps_sum(grid: _Grid, box: str) -> int:
    return sum(
        100 * i + j for i, row in enumerate(grid) for j, tile in enumerate(row) if tile == box
    )


def part_a(contents: str) -> int:
    """Sum of the GPS coordinates of every box after the robot has moved."""
    grid, robot, moves = _parse(contents, widen=False)
    for direction in moves:
        robot = _push_line(grid, robot, direction)
    return _gps_sum(grid, "O")


def part_b(contents: str) -> int:
    """Sum of the GPS coordinates of every wide box in the doubled warehouse."""
    grid, robot, moves = _parse(contents, widen=True)
    for direction in moves:
        if direction[0] == 0:
            robot = _push_line(grid, robot, direction)
        else:
            robot = _push_wide_vertical(grid, robot, direction)
    return _gps_sum(grid, "[")