"""Day 14: robots patrolling a wrapping bathroom floor."""

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .maths import lcm

_EXAMPLE_MARK = "p=0,4"
_EXAMPLE_FLOOR = (11, 7)
_FULL_FLOOR = (101, 103)


@dataclass(frozen=True)
class _Robot:
    x: int
    y: int
    vel_x: int
    vel_y: int

    @classmethod
    def parse(cls, line: str) -> "_Robot":
        if not line.startswith("p="):
            raise ValueError(f"malformed robot: {line!r}")
        pos, found, vel = line[2:].partition(" v=")
        if not found:
            raise ValueError(f"malformed robot: {line!r}")
        x, _, y = pos.partition(",")
        vel_x, _, vel_y = vel.partition(",")
        return cls(int(x), int(y), int(vel_x), int(vel_y))

    def after(self, seconds: int, width: int, height: int) -> "_Robot":
        return _Robot(
            (self.x + self.vel_x * seconds) % width,
            (self.y + self.vel_y * seconds) % height,
            self.vel_x,
            self.vel_y,
        )


def _setup(contents: str) -> Tuple[int, int, List[_Robot]]:
    """Floor width and height (example or full size) and the parsed robots."""
    width, height = _EXAMPLE_FLOOR if contents.startswith(_EXAMPLE_MARK) else _FULL_FLOOR
    robots = [_Robot.parse(line) for line in contents.splitlines()]
    return width, height, robots


def _quadrant(robot: _Robot, width: int, height: int) -> Optional[int]:
    mid_x = width // 2
    mid_y = height // 2
    if robot.x == mid_x or robot.y == mid_y:
        return None
    return (robot.x > mid_x) + 2 * (robot.y > mid_y)


def part_a(contents: str) -> int:
    """Safety factor: product of robot counts per quadrant after 100 seconds."""
    width, height, robots = _setup(contents)
    counts = [0, 0, 0, 0]
    for robot in robots:
        quadrant = _quadrant(robot.after(100, width, height), width, height)
        if quadrant is not None:
            counts[quadrant] += 1
    return math.prod(counts)


def _std_deviation(values: List[int]) -> float:
    mean = sum(values) / len(values)
    return math.sqrt(sum((mean - v) ** 2 for v in values) / len(values))


def _clustered(robots: List[_Robot]) -> bool:
    return (
        _std_deviation([r.x for r in robots]) < 25.0
        and _std_deviation([r.y for r in robots]) < 25.0
    )


def part_b(contents: str) -> int:
    """Seconds that pass while the robots stay tightly clustered.

    Raises ValueError when the robots never spread out, since their motion
    repeats with a period of lcm(width, height).
    """
    width, height, robots = _setup(contents)
    if not robots:
        raise ValueError("no robots")
    period = lcm(width, height)
    elapsed = 0
    while _clustered(robots):
        elapsed += 1
        if elapsed > period:
            raise ValueError("robots stay clustered forever")
        robots = [robot.after(1, width, height) for robot in robots]
    return elapsed