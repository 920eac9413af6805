from advent_solver.day03 import part_a, part_b

EXAMPLE_A = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE_B = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_part_a_example():
    assert part_a(EXAMPLE_A) == 161


def test_part_b_example():
    assert part_b(EXAMPLE_B) == 48


def test_part_a_single_instruction():
    assert part_a("mul(3,4)") == 12


def test_part_a_rejects_spaces():
    assert part_a("mul(3, 4)") == 0


def test_part_b_ignores_everything_after_dont():
    assert part_b("don't()mul(3,4)") == 0


def test_part_b_reenabled_by_do():
    assert part_b("don't()mul(3,4)do()mul(2,5)") == 10