"""Locating, reading and checking puzzle inputs."""

from __future__ import annotations

import enum
import re
from pathlib import Path
from typing import Callable, Optional, Tuple, TypeVar, Union

T = TypeVar("T")

_INTEGER = re.compile(r"[+-]?[0-9]+")


class Part(enum.Enum):
    """The half of a day's puzzle."""

    A = "a"
    B = "b"

    def lower_name(self) -> str:
        """Return the lower-case letter naming this part."""
        return self.value


class AnswerMismatch(Exception):
    """Raised when a solver's answer differs from the expected one."""


def input_path(
    day: int, part: Optional[Part] = None, root: Union[str, Path] = "."
) -> Path:
    """Return the path of a day's input, or of a part's example when given."""
    suffix = f"_{part.lower_name()}" if part is not None else ""
    return Path(root) / "inputs" / f"day_{day:02d}{suffix}.txt"


def read_input(path: Union[str, Path]) -> str:
    """Return the whole text of a file."""
    return Path(path).read_text()


def write_line(path: Union[str, Path], text: str) -> None:
    """Create (or truncate) a file and write one line of text to it."""
    with open(path, "w") as handle:
        handle.write(f"{text}\n")


def parse_int(text: Optional[str], default: int) -> int:
    """Parse a plain decimal integer, falling back to a default."""
    if text is None or not _INTEGER.fullmatch(text):
        return default
    return int(text)


def lower_char_bit(c: str) -> int:
    """Return a bit flag for a lower-case letter: 'a' sets bit 1, 'b' bit 2, ..."""
    shift = ord(c) - 96
    if not 0 <= shift <= 31:
        raise ValueError(f"character {c!r} has no bit representation")
    return 1 << shift


def run_method(
    method: Callable[[str], T],
    day: int,
    part: Part,
    answers: Tuple[Optional[T], Optional[T]],
    root: Union[str, Path] = ".",
) -> T:
    """Run a solver on the example and the real input, checking known answers.

    Returns the answer for the real input; raises AnswerMismatch when either
    known answer is not matched.
    """
    example_answer, answer = answers

    if example_answer is not None:
        example_response = method(read_input(input_path(day, part, root)))
        if example_response != example_answer:
            raise AnswerMismatch(
                "Test response was incorrect. "
                f"Expected: {example_answer}. Actual: {example_response}"
            )
        print("Test response was correct")

    response = method(read_input(input_path(day, None, root)))
    if answer is not None and answer != response:
        raise AnswerMismatch(
            f"Response was incorrect. Expected: {answer}. Actual: {response}"
        )
    return response