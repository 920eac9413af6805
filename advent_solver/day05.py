"""Day 5: ordering safety-manual print updates."""

from functools import cmp_to_key
from typing import Dict, List, Set, Tuple

_Page = Tuple[int, int]


class _Rules:
    """Ordering rules keyed by page number."""

    def __init__(self) -> None:
        self.requirements: Dict[int, Set[int]] = {}
        self.futures: Dict[int, Set[int]] = {}

    def add(self, before: int, after: int) -> None:
        self.futures.setdefault(before, set()).add(after)
        self.requirements.setdefault(before, set())
        self.requirements.setdefault(after, set()).add(before)
        self.futures.setdefault(after, set())

    def compare(self, a: _Page, b: _Page) -> int:
        """Compare two (original index, page) pairs."""
        index_a, page_a = a
        index_b, page_b = b
        if page_a not in self.requirements:
            return 0
        if page_b in self.requirements[page_a]:
            return 1
        if page_b in self.futures[page_a]:
            return -1
        return (index_a > index_b) - (index_a < index_b)

    def is_ordered(self, pages: List[_Page]) -> bool:
        return all(self.compare(a, b) < 0 for a, b in zip(pages, pages[1:]))


def _parse(contents: str) -> Tuple[_Rules, List[List[_Page]]]:
    rules_text, separator, updates_text = contents.partition("\n\n")
    if not separator:
        raise ValueError("input has no blank line between rules and updates")

    rules = _Rules()
    for line in rules_text.splitlines():
        before, bar, after = line.partition("|")
        if not bar:
            raise ValueError(f"malformed rule: {line!r}")
        rules.add(int(before), int(after))

    updates = [
        list(enumerate(int(page) for page in line.split(",")))
        for line in updates_text.splitlines()
    ]
    return rules, updates


def _middle(pages: List[_Page]) -> int:
    return pages[len(pages) // 2][1]


def solve_both(contents: str) -> Tuple[int, int]:
    """Return the middle-page sums of the ordered and of the reordered updates."""
    rules, updates = _parse(contents)
    ordered = 0
    reordered = 0
    for pages in updates:
        if rules.is_ordered(pages):
            ordered += _middle(pages)
        else:
            reordered += _middle(sorted(pages, key=cmp_to_key(rules.compare)))
    return ordered, reordered


def part_a(contents: str) -> int:
    """Sum of the middle pages of updates already in the right order."""
    return solve_both(contents)[0]


def part_b(contents: str) -> int:
    """Sum of the middle pages of wrongly ordered updates after reordering."""
    return solve_both(contents)[1]