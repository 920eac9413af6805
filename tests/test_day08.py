import pytest

from advent_solver.day08 import part_a, part_b

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""

TWO_ANTENNAS = """..........
..........
..........
....a.....
..........
.....a....
..........
..........
..........
..........
"""

T_ANTENNAS = """T.........
...T......
.T........
..........
..........
..........
..........
..........
..........
..........
"""


def test_part_a_example():
    assert part_a(EXAMPLE) == 14


def test_part_b_example():
    assert part_b(EXAMPLE) == 34


def test_part_a_two_antennas():
    assert part_a(TWO_ANTENNAS) == 2


def test_part_b_harmonics():
    assert part_b(T_ANTENNAS) == 9


def test_lone_antenna_makes_no_antinodes():
    grid = "....\n.x..\n....\n"
    assert part_a(grid) == 0
    assert part_b(grid) == 0


def test_empty_map_is_rejected():
    with pytest.raises(ValueError):
        part_a("")