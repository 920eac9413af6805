import pytest

from advent_solver.day15 import part_a, part_b

SMALL_EXAMPLE = """########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<
"""

WIDE_EXAMPLE = """#######
#...#.#
#.....#
#..OO@#
#..O..#
#.....#
#######

<vv<<^^<<^^
"""


def test_part_a_small_example():
    assert part_a(SMALL_EXAMPLE) == 2028


def test_part_a_moves_split_over_lines():
    split = SMALL_EXAMPLE.replace("<^^>>>vv<v>>v<<", "<^^>>>v\nv<v>>v<<")
    assert part_a(split) == 2028


def test_part_a_without_moves():
    assert part_a("#####\n#@O.#\n#####\n\n") == 102


def test_part_a_push_and_block():
    assert part_a("#####\n#@O.#\n#####\n\n>") == 103
    assert part_a("#####\n#@O.#\n#####\n\n>>") == 103


def test_part_b_wide_example():
    assert part_b(WIDE_EXAMPLE) == 618


def test_part_b_without_moves():
    assert part_b("#####\n#@O.#\n#####\n\n") == 104


def test_part_b_horizontal_push_stops_at_wall():
    assert part_b("#####\n#@O.#\n#####\n\n>>>>") == 106


def test_invalid_map_character():
    with pytest.raises(ValueError):
        part_a("#####\n#@X.#\n#####\n\n>")


def test_invalid_move_character():
    with pytest.raises(ValueError):
        part_b("#####\n#@O.#\n#####\n\n>x")


def test_missing_robot():
    with pytest.raises(ValueError):
        part_a("#####\n#.O.#\n#####\n\n>")