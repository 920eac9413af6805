import pytest

from advent_solver.day06 import part_a, part_b

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


def test_part_a_example():
    assert part_a(EXAMPLE) == 41


def test_part_b_example():
    assert part_b(EXAMPLE) == 6


def test_part_a_walks_straight_out():
    assert part_a("...\n.^.\n...\n") == 2


def test_part_a_turns_at_obstacle():
    # Guard goes up to (1,1), turns east and walks to (2,1).
    assert part_a(".#.\n...\n.^.\n") == 3


def test_part_b_is_bounded_by_path_length():
    assert part_b(EXAMPLE) <= part_a(EXAMPLE)


def test_missing_guard_raises():
    with pytest.raises(ValueError):
        part_a("....\n.#..\n")


def test_empty_map_raises():
    with pytest.raises(ValueError):
        part_b("")