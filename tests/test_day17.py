import pytest

from advent_solver.day17 import part_a, part_b


def machine(a, program, b=0, c=0):
    return f"Register A: {a}\nRegister B: {b}\nRegister C: {c}\n\nProgram: {program}\n"


EXAMPLE_A = machine(729, "0,1,5,4,3,0")
EXAMPLE_B = machine(2024, "0,3,5,4,3,0")


def test_part_a_example():
    assert part_a(EXAMPLE_A) == "4,6,3,5,6,3,5,2,1,0"


def test_part_b_example():
    assert part_b(EXAMPLE_B) == 117440


def test_part_b_answer_makes_program_print_itself():
    program = "0,3,5,4,3,0"
    a = part_b(EXAMPLE_B)
    assert part_a(machine(a, program)) == program


def test_part_a_outputs_combo_values():
    assert part_a(machine(10, "5,0,5,1,5,4")) == "0,1,2"


def test_part_a_loops_until_a_is_zero():
    assert part_a(machine(2024, "0,1,5,4,3,0")) == "4,2,5,6,7,7,7,7,3,1,0"


def test_part_a_rejects_combo_operand_seven():
    with pytest.raises(ValueError):
        part_a(machine(1, "5,7"))


def test_part_a_rejects_missing_operand():
    with pytest.raises(ValueError):
        part_a(machine(1, "5,0,5"))


def test_part_a_rejects_bad_register_line():
    with pytest.raises(ValueError):
        part_a("Register X: 1\nRegister B: 0\nRegister C: 0\n\nProgram: 5,0\n")


def test_part_b_requires_program_line():
    with pytest.raises(ValueError):
        part_b("Register A: 1\nRegister B: 0\n")