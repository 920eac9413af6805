"""Day 19: arranging towels from striped patterns."""

from functools import lru_cache
from typing import Callable, Dict, List, Tuple


def _parse(contents: str) -> Tuple[Dict[str, List[str]], List[str]]:
    lines = contents.splitlines()
    if not lines:
        raise ValueError("empty input")
    threads: Dict[str, List[str]] = {}
    for thread in lines[0].split(", "):
        if not thread:
            raise ValueError("empty pattern in the pattern list")
        threads.setdefault(thread[0], []).append(thread)
    return threads, lines[2:]


def _counter(threads: Dict[str, List[str]]) -> Callable[[str], int]:
    @lru_cache(maxsize=None)
    def ways(design: str) -> int:
        if not design:
            raise ValueError("empty design")
        return sum(
            1 if thread == design else ways(design[len(thread):])
            for thread in threads.get(design[0], ())
            if design.startswith(thread)
        )

    return ways


def part_a(contents: str) -> int:
    """Number of designs that can be made from the available patterns."""
    threads, designs = _parse(contents)
    ways = _counter(threads)
    return sum(1 for design in designs if ways(design) > 0)


def part_b(contents: str) -> int:
    """Total number of ways every design can be made."""
    threads, designs = _parse(contents)
    ways = _counter(threads)
    return sum(ways(design) for design in designs)