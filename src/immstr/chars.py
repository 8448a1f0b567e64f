"""
Character helpers for immstr.

Case conversion and case-insensitive comparison only touch the ASCII
letters ``A-Z`` and ``a-z``; every other code point passes through
unchanged. Folding therefore never changes the length of a string, so
indices found in a folded copy are valid in the original.
"""

from __future__ import annotations

import string
from typing import Optional

# Characters stripped by the trim family when no mask is given.
DEFAULT_TRIM_MASK = " \t\n\r\0\x0B"

LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
UPPER_TABLE = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_lower(s: str) -> str:
    """Lowercase ASCII letters only."""
    return s.translate(LOWER_TABLE)


def to_upper(s: str) -> str:
    """Uppercase ASCII letters only."""
    return s.translate(UPPER_TABLE)


def fold(s: str) -> str:
    """Fold to the canonical case used by every ``ignore_case`` operation."""
    return s.translate(LOWER_TABLE)


def compare(a: str, b: str, length: Optional[int] = None, ignore_case: bool = False) -> int:
    """
    Three-way lexicographic comparison of code-point sequences.

    Args:
        a: Left operand
        b: Right operand
        length: Compare at most this many code points of each operand
        ignore_case: Fold both operands before comparing

    Returns:
        -1, 0 or 1 as ``a`` sorts before, equal to or after ``b``.
    """
    if length is not None:
        a = a[:length]
        b = b[:length]
    if ignore_case:
        a = fold(a)
        b = fold(b)
    return (a > b) - (a < b)


def find_ignore_case(haystack: str, needle: str, start: int = 0) -> int:
    return fold(haystack).find(fold(needle), start)


def rfind_ignore_case(haystack: str, needle: str, start: int = 0) -> int:
    return fold(haystack).rfind(fold(needle), start)


def replace_ignore_case(subject: str, old: str, new: str) -> tuple[str, int]:
    """
    Replace every occurrence of ``old`` regardless of ASCII case.

    ``new`` is inserted verbatim. An empty ``old`` matches nothing.

    Returns:
        The resulting text and the number of replacements made.
    """
    if not old:
        return subject, 0

    folded = fold(subject)
    needle = fold(old)
    parts: list[str] = []
    count = 0
    pos = 0

    while True:
        hit = folded.find(needle, pos)
        if hit < 0:
            break
        parts.append(subject[pos:hit])
        parts.append(new)
        pos = hit + len(old)
        count += 1

    parts.append(subject[pos:])
    return "".join(parts), count


def expand_mask(mask: str) -> str:
    """
    Expand a trim character mask into the set of characters it names.

    ``"a..e"`` names the inclusive range ``a`` through ``e``. A range whose
    end sorts before its start, or dots with nothing on one side, are taken
    literally.
    """
    chars: set[str] = set()
    i = 0
    n = len(mask)

    while i < n:
        c = mask[i]
        if i + 3 < n and mask[i + 1 : i + 3] == ".." and mask[i + 3] >= c:
            chars.update(chr(code) for code in range(ord(c), ord(mask[i + 3]) + 1))
            i += 4
            continue
        chars.add(c)
        i += 1

    return "".join(sorted(chars))
