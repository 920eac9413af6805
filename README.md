# advent_solver

Solvers for days 1 to 19 of a month-long series of daily programming
puzzles. Each day has two parts. Each part takes the whole puzzle input as one
string and returns the answer.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Command line

The `advent-solver` command solves one part of one day and prints the answer:

    advent-solver DAY PART [--input FILE] [--example] [--root DIR]

- `DAY` is a number from 1 to 19, and `PART` is `a` or `b`.
- `--input FILE` reads the puzzle from `FILE`.
- If you do not give `--input`, the command reads `inputs/day_DD.txt` under
  `--root`, which defaults to the current directory. With `--example` it reads
  the part's example file, `inputs/day_DD_a.txt` or `inputs/day_DD_b.txt`,
  instead.

If the file cannot be read, the command prints a message to standard error and
exits with status 1.

## Library use

Each day has its own module, from `advent_solver.day01` to
`advent_solver.day19`. Each module has `part_a(contents)` and
`part_b(contents)`, and both take the full puzzle text:

```python
from advent_solver import day01

example = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"
print(day01.part_a(example))  # 11
print(day01.part_b(example))  # 31
```

Most answers are integers. `day17.part_a` and `day18.part_b` return strings.

A few modules have extra entry points:

- `advent_solver.day05.solve_both(contents)` returns both parts' answers as a
  tuple from one pass over the input.
- `advent_solver.day11.count_stones(contents, blinks)` counts the stones after
  any number of blinks.

`advent_solver.cli.solve(day, part, contents)` passes the input to the solver
for that day and part. `part` can be a `Part` or the letter `"a"` or `"b"`.

Some solvers pick the puzzle size from the input itself:

- Day 14 uses the small 11×7 floor when the input starts with `p=0,4`.
- Day 18 uses the 7×7 grid when the input has exactly 25 lines.

Malformed input raises `ValueError`.

### Input helpers

`advent_solver.inputs` holds the shared helpers:

- `Part`: which part of a puzzle. `Part.lower_name()` gives `"a"` or `"b"`.
- `input_path(day, part=None, root=".")`: the path of a day's input, such as
  `inputs/day_01.txt`. If you give a part, it is the path of that part's
  example, such as `inputs/day_01_a.txt`.
- `read_input(path)` returns a file's text.
- `write_line(path, text)` creates or truncates a file and writes one line to
  it.
- `parse_int(text, default)`: parses a plain decimal integer. It returns
  `default` when `text` is `None` or not an integer.
- `lower_char_bit(c)`: the bit flag for a character. `'a'` gives `1 << 1`,
  `'b'` gives `1 << 2`, and so on. Characters outside the range raise
  `ValueError`.
- `run_method(method, day, part, answers, root=".")`: takes a pair of
  `(example_answer, answer)`, either of which may be `None`. It runs `method`
  on the part's example file when an example answer is given, then on the
  day's input, and returns the answer for the input. It raises `AnswerMismatch`
  when a known answer does not match.

`advent_solver.maths` has `gcd(a, b)` and `lcm(a, b)`.

## What it does not do

- There are solvers for days 1 to 19 only.
- There is no command that runs every day at once.
- There is no timing or benchmarking.
- Puzzle inputs are not included. You supply them as files.