"""Day 1: comparing two lists of location ids."""

from collections import Counter
from typing import List, Tuple

from .inputs import parse_int


def _pair(line: str) -> Tuple[int, int]:
    parts = line.split()
    left = parse_int(parts[0] if parts else None, 0)
    right = parse_int(parts[1] if len(parts) > 1 else None, 0)
    return left, right


def _columns(contents: str) -> Tuple[List[int], List[int]]:
    pairs = [_pair(line) for line in contents.splitlines()]
    return [left for left, _ in pairs], [right for _, right in pairs]


def part_a(contents: str) -> int:
    """Total distance between the two lists once both are sorted."""
    left, right = _columns(contents)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part_b(contents: str) -> int:
    """Similarity score: each number times its count in both lists."""
    left, right = _columns(contents)
    left_counts = Counter(left)
    right_counts = Counter(right)
    return sum(n * count * right_counts[n] for n, count in left_counts.items())