import pytest

from advent_solver.day18 import part_a, part_b

EXAMPLE = """5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


def test_part_a_example():
    assert part_a(EXAMPLE) == 22


def test_part_b_example():
    assert part_b(EXAMPLE) == "6,1"


def test_part_a_walled_off_returns_zero():
    wall = [f"1,{y}" for y in range(7)] + ["1,0"] * 5
    filler = ["0,6"] * (25 - len(wall))
    assert part_a("\n".join(wall + filler)) == 0


def test_part_b_reports_the_byte_closing_a_column():
    lines = [f"1,{y}" for y in range(71)]
    assert part_b("\n".join(lines)) == "1,70"


def test_part_b_never_blocked():
    assert part_b("5,5\n") == "???"


def test_part_a_needs_enough_bytes():
    with pytest.raises(ValueError):
        part_a("1,1\n2,2\n3,3\n")


def test_part_b_rejects_malformed_line():
    with pytest.raises(ValueError):
        part_b("12\n")


def test_part_b_rejects_coordinate_outside_grid():
    with pytest.raises(ValueError):
        part_b("71,0\n")