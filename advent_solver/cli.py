"""Command line entry point: solve one part of one day's puzzle."""

import argparse
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

from . import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
)
from .inputs import Part, input_path, read_input

_Solver = Callable[[str], object]

_SOLVERS: Dict[int, Tuple[_Solver, _Solver]] = {
    1: (day01.part_a, day01.part_b),
    2: (day02.part_a, day02.part_b),
    3: (day03.part_a, day03.part_b),
    4: (day04.part_a, day04.part_b),
    5: (day05.part_a, day05.part_b),
    6: (day06.part_a, day06.part_b),
    7: (day07.part_a, day07.part_b),
    8: (day08.part_a, day08.part_b),
    9: (day09.part_a, day09.part_b),
    10: (day10.part_a, day10.part_b),
    11: (day11.part_a, day11.part_b),
    12: (day12.part_a, day12.part_b),
    13: (day13.part_a, day13.part_b),
    14: (day14.part_a, day14.part_b),
    15: (day15.part_a, day15.part_b),
    16: (day16.part_a, day16.part_b),
    17: (day17.part_a, day17.part_b),
    18: (day18.part_a, day18.part_b),
    19: (day19.part_a, day19.part_b),
}


def solve(day: int, part: Union[Part, str], contents: str) -> object:
    """Run the solver for a day and part on the given puzzle text."""
    if day not in _SOLVERS:
        raise ValueError(f"no solver for day {day}")
    first, second = _SOLVERS[day]
    return first(contents) if Part(part) is Part.A else second(contents)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve one part of a day's puzzle.")
    parser.add_argument("day", type=int, choices=sorted(_SOLVERS))
    parser.add_argument("part", choices=[p.value for p in Part])
    parser.add_argument("--input", type=Path, help="puzzle input file")
    parser.add_argument(
        "--example",
        action="store_true",
        help="use the part's example file instead of the full input",
    )
    parser.add_argument(
        "--root", type=Path, default=Path("."), help="directory holding inputs/"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Solve the requested puzzle and print its answer."""
    args = _parser().parse_args(argv)
    part = Part(args.part)
    if args.input is not None:
        path = args.input
    else:
        path = input_path(args.day, part if args.example else None, args.root)
    try:
        contents = read_input(path)
    except OSError as error:
        print(f"cannot read {path}: {error}", file=sys.stderr)
        return 1
    print(solve(args.day, part, contents))
    return 0


if __name__ == "__main__":
    sys.exit(main())