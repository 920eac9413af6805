"""Day 9: compacting an amphipod's disk map."""

from typing import List, Optional, Tuple


def _digits(contents: str) -> List[int]:
    text = contents.strip()
    if not text.isdigit():
        raise ValueError("disk map must consist of decimal digits")
    return [int(c) for c in text]


def _span_checksum(file_id: int, start: int, length: int) -> int:
    return file_id * (start * length + length * (length - 1) // 2)


def part_a(contents: str) -> int:
    """Checksum after moving single blocks from the end into the leftmost gaps."""
    blocks: List[Optional[int]] = []
    for index, size in enumerate(_digits(contents)):
        blocks.extend([index // 2 if index % 2 == 0 else None] * size)

    left, right = 0, len(blocks) - 1
    while left < right:
        if blocks[left] is not None:
            left += 1
        elif blocks[right] is None:
            right -= 1
        else:
            blocks[left], blocks[right] = blocks[right], None
            left += 1
            right -= 1

    return sum(pos * file_id for pos, file_id in enumerate(blocks) if file_id is not None)


def part_b(contents: str) -> int:
    """Checksum after filling each gap, left to right, with whole files from the end."""
    layout: List[Tuple[Optional[int], int]] = [
        (index // 2 if index % 2 == 0 else None, size)
        for index, size in enumerate(_digits(contents))
    ]

    total = 0
    position = 0
    for idx, (file_id, size) in enumerate(layout):
        if file_id is not None:
            total += _span_checksum(file_id, position, size)
            position += size
            continue
        remaining = size
        for back in range(len(layout) - 1, idx, -1):
            moved_id, length = layout[back]
            if moved_id is None or length > remaining:
                continue
            total += _span_checksum(moved_id, position, length)
            position += length
            remaining -= length
            layout[back] = (None, length)
            if remaining == 0:
                break
        position += remaining
    return total