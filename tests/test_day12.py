import pytest

from advent_solver.day12 import part_a, part_b

LARGE = """RRRRIICCFF
RRRRIICCCF
VVRRRCCFFF
VVRCCCJFFF
VVVVCJJCFE
VVIVCCJJEE
VVIIICJJEE
MIIIIIJJEE
MIIISIJEEE
MMMISSJEEE
"""

SMALL = "AAAA\nBBCD\nBBCC\nEEEC\n"

NESTED = "OOOOO\nOXOXO\nOOOOO\nOXOXO\nOOOOO\n"

E_SHAPE = "EEEEE\nEXXXX\nEEEEE\nEXXXX\nEEEEE\n"

AB = "AAAAAA\nAAABBA\nAAABBA\nABBAAA\nABBAAA\nAAAAAA\n"


def test_part_a_example():
    assert part_a(LARGE) == 1930


def test_part_b_example():
    assert part_b(LARGE) == 1206


@pytest.mark.parametrize("garden, expected", [(SMALL, 140), (NESTED, 772)])
def test_part_a_small_gardens(garden, expected):
    assert part_a(garden) == expected


@pytest.mark.parametrize(
    "garden, expected",
    [(SMALL, 80), (NESTED, 436), (E_SHAPE, 236), (AB, 368)],
)
def test_part_b_small_gardens(garden, expected):
    assert part_b(garden) == expected


def test_single_plot():
    assert part_a("A\n") == 4
    assert part_b("A\n") == 4


def test_empty_garden_raises():
    with pytest.raises(ValueError):
        part_a("")