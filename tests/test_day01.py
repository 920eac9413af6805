from advent_solver.day01 import part_a, part_b

EXAMPLE = """3   4
4   3
2   5
1   3
3   9
3   3
"""


def test_part_a_example():
    assert part_a(EXAMPLE) == 11


def test_part_b_example():
    assert part_b(EXAMPLE) == 31


def test_part_a_identical_lists_have_no_distance():
    assert part_a("5 1\n1 5\n") == 0


def test_part_a_empty_input():
    assert part_a("") == 0


def test_part_b_no_common_numbers():
    assert part_b("1 2\n3 4\n") == 0