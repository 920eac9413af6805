from pathlib import Path

import pytest

from advent_solver.inputs import (
    AnswerMismatch,
    Part,
    input_path,
    lower_char_bit,
    parse_int,
    read_input,
    run_method,
    write_line,
)


def test_part_lower_names():
    assert Part.A.lower_name() == "a"
    assert Part.B.lower_name() == "b"


def test_input_path_without_part():
    assert input_path(1, None, "base") == Path("base") / "inputs" / "day_01.txt"


def test_input_path_with_part():
    assert input_path(5, Part.B, "base") == Path("base") / "inputs" / "day_05_b.txt"


def test_input_path_keeps_two_digit_day():
    assert input_path(19, Part.A, "base").name == "day_19_a.txt"


def test_parse_int_reads_digits():
    assert parse_int("42", 0) == 42


@pytest.mark.parametrize("text", [None, "", "x1", " 5", "1.5", "1_000"])
def test_parse_int_falls_back_to_default(text):
    assert parse_int(text, 7) == 7


def test_parse_int_accepts_sign():
    assert parse_int("-12", 0) == -12
    assert parse_int("+12", 0) == 12


def test_lower_char_bits_are_distinct_powers_of_two():
    bits = [lower_char_bit(c) for c in "abcdefghijklmnopqrstuvwxyz"]
    assert len(set(bits)) == 26
    assert all(bit > 0 and bit & (bit - 1) == 0 for bit in bits)


def test_lower_char_bits_are_consecutive():
    assert lower_char_bit("b") == 2 * lower_char_bit("a")
    assert lower_char_bit("z") == 2 * lower_char_bit("y")


def test_lower_char_bit_rejects_upper_case():
    with pytest.raises(ValueError):
        lower_char_bit("A")


def test_write_line_and_read_input_round_trip(tmp_path):
    target = tmp_path / "out.txt"
    write_line(target, "hello")
    assert read_input(target) == "hello\n"


def test_write_line_truncates(tmp_path):
    target = tmp_path / "out.txt"
    write_line(target, "first")
    write_line(target, "second")
    assert read_input(target) == "second\n"


def test_read_input_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_input(tmp_path / "missing.txt")


@pytest.fixture
def puzzle_root(tmp_path):
    (tmp_path / "inputs").mkdir()
    (tmp_path / "inputs" / "day_03_a.txt").write_text("abc\n")
    (tmp_path / "inputs" / "day_03.txt").write_text("xyz\n")
    return tmp_path


def _shout(text):
    return text.strip().upper()


def test_run_method_returns_real_answer(puzzle_root):
    result = run_method(_shout, 3, Part.A, ("ABC", "XYZ"), puzzle_root)
    assert result == "XYZ"


def test_run_method_without_known_answers(puzzle_root):
    assert run_method(_shout, 3, Part.A, (None, None), puzzle_root) == "XYZ"


def test_run_method_example_mismatch(puzzle_root):
    with pytest.raises(AnswerMismatch):
        run_method(_shout, 3, Part.A, ("WRONG", None), puzzle_root)


def test_run_method_answer_mismatch(puzzle_root):
    with pytest.raises(AnswerMismatch):
        run_method(_shout, 3, Part.A, (None, "WRONG"), puzzle_root)


def test_run_method_skips_example_when_unknown(puzzle_root):
    (puzzle_root / "inputs" / "day_03_a.txt").unlink()
    assert run_method(_shout, 3, Part.A, (None, "XYZ"), puzzle_root) == "XYZ"