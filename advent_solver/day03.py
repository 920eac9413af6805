"""Day 3: scanning corrupted memory for mul instructions."""

from typing import Optional

_DIGITS = "0123456789"


def part_a(contents: str) -> int:
    """Sum of the products of every well-formed mul(x,y)."""
    total = 0
    context: Optional[str] = None
    first = ""
    second = ""
    for c in contents:
        if (
            (context is None and c == "m")
            or (context == "m" and c == "u")
            or (context == "u" and c == "l")
            or (context == "l" and c == "(")
            or (context == "(" and c == ",")
        ):
            context = c
        elif context == "(" and c in _DIGITS:
            first += c
        elif context == "," and c in _DIGITS:
            second += c
        elif context == "," and c == ")" and first and second:
            total += int(first) * int(second)
            context, first, second = None, "", ""
        else:
            context, first, second = None, "", ""
    return total


def part_b(contents: str) -> int:
    """Like part_a, but don't() disables and do() re-enables instructions."""
    total = 0
    enabled = True
    disabling = False
    context: Optional[str] = None
    first = ""
    second = ""
    for c in contents:
        if not enabled:
            if (
                c == "d"
                or (context == "d" and c == "o")
                or (context == "o" and c == "(")
            ):
                context = c
            elif context == "(" and c == ")":
                enabled = True
                context = None
            else:
                disabling, context, first, second = False, None, "", ""
            continue

        if (
            c == "m"
            or (context == "m" and c == "u")
            or (context == "u" and c == "l")
            or (context == "l" and c == "(")
        ):
            disabling = False
            context = c
        elif context == "(" and c == "," and not disabling:
            context = c
        elif context == "(" and c == ")" and disabling:
            enabled = False
            context = None
        elif context == "(" and c in _DIGITS and not disabling:
            first += c
        elif context == "," and c in _DIGITS:
            second += c
        elif context == "," and c == ")" and first and second:
            total += int(first) * int(second)
            context, first, second = None, "", ""
        elif (
            c == "d"
            or (context == "d" and c == "o")
            or (context == "o" and c == "n")
            or (context == "n" and c == "'")
            or (context == "'" and c == "t")
            or (context == "t" and c == "(")
        ):
            disabling = True
            context, first, second = c, "", ""
        else:
            disabling, context, first, second = False, None, "", ""
    return total