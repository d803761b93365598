"""Utilities to remove emoji characters from markdown text.

The matched set is a table of inclusive ``(low, high)`` code-point ranges.
Lookups go through a sorted, merged copy of the table.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import Iterable, List, Sequence, Tuple

CodePointRange = Tuple[int, int]


EMOJI_RANGES: Tuple[CodePointRange, ...] = (
    (0x1F600, 0x1F64F),  # Emoticons
    (0x1F300, 0x1F5FF),  # Misc symbols and pictographs
    (0x1F680, 0x1F6FF),  # Transport and map
    (0x1F1E0, 0x1F1FF),  # Regional indicators (flags)
    (0x2600, 0x26FF),  # Misc symbols
    (0x2700, 0x27BF),  # Dingbats
    (0x1F900, 0x1F9FF),  # Supplemental symbols and pictographs
    (0x1FA00, 0x1FA6F),  # Chess symbols
    (0x1FA70, 0x1FAFF),  # Symbols and pictographs extended-A
    (0x231A, 0x231B),
    (0x23E9, 0x23EC),
    (0x23F0, 0x23F0),
    (0x23F3, 0x23F3),
    (0x25FD, 0x25FE),
    (0x2614, 0x2615),
    (0x2648, 0x2653),
    (0x267F, 0x267F),
    (0x2693, 0x2693),
    (0x26A1, 0x26A1),
    (0x26AA, 0x26AB),
    (0x26BD, 0x26BE),
    (0x26C4, 0x26C5),
    (0x26CE, 0x26CE),
    (0x26D4, 0x26D4),
    (0x26EA, 0x26EA),
    (0x26F2, 0x26F3),
    (0x26F5, 0x26F5),
    (0x26FA, 0x26FA),
    (0x26FD, 0x26FD),
    (0x2705, 0x2705),
    (0x270A, 0x270B),
    (0x2728, 0x2728),
    (0x274C, 0x274C),
    (0x274E, 0x274E),
    (0x2753, 0x2755),
    (0x2757, 0x2757),
    (0x2795, 0x2797),
    (0x27B0, 0x27B0),
    (0x27BF, 0x27BF),
    (0x2B1B, 0x2B1C),
    (0x2B50, 0x2B50),
    (0x2B55, 0x2B55),
)


def merge_ranges(ranges: Iterable[CodePointRange]) -> List[CodePointRange]:
    """Return ranges sorted by start with overlapping or adjacent ones combined."""

    merged: List[CodePointRange] = []
    for low, high in sorted(ranges):
        if low > high:
            raise ValueError(f"Invalid code point range: {low:#x}-{high:#x}")
        if merged and low <= merged[-1][1] + 1:
            prev_low, prev_high = merged[-1]
            merged[-1] = (prev_low, max(prev_high, high))
            continue
        merged.append((low, high))
    return merged


_MERGED = merge_ranges(EMOJI_RANGES)
_STARTS = [low for low, _ in _MERGED]


def _in_ranges(code_point: int, merged: Sequence[CodePointRange], starts: Sequence[int]) -> bool:
    idx = bisect_right(starts, code_point) - 1
    return idx >= 0 and code_point <= merged[idx][1]


def is_emoji(char: str) -> bool:
    return _in_ranges(ord(char), _MERGED, _STARTS)


def strip_emoji(text: str) -> str:
    """Remove every character in ``EMOJI_RANGES``; everything else is kept verbatim."""

    if not text:
        return text
    return "".join(char for char in text if not is_emoji(char))


def count_emoji(text: str) -> int:
    return sum(1 for char in text if is_emoji(char))
