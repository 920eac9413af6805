"""Day 11: counting stones that change each time you blink."""

from collections import Counter
from typing import Tuple


def _blink(stone: int) -> Tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * 2024,)


def count_stones(contents: str, blinks: int) -> int:
    """Number of stones after blinking the given number of times."""
    counts = Counter(int(token) for token in contents.split())
    for _ in range(blinks):
        following: Counter = Counter()
        for stone, count in counts.items():
            for produced in _blink(stone):
                following[produced] += count
        counts = following
    return sum(counts.values())


def part_a(contents: str) -> int:
    """Number of stones after 25 blinks."""
    return count_stones(contents, 25)


def part_b(contents: str) -> int:
    """Number of stones after 75 blinks."""
    return count_stones(contents, 75)