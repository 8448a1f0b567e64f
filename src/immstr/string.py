"""
immstr - Immutable String Type.

``ImmutableString`` wraps a text value and exposes character access,
comparison, searching, regex matching, slicing, padding, case conversion,
trimming, splitting and joining. Every operation that would change the text
returns a new instance; the receiver is never modified.

Bounds failures raise ``IndexOutOfBoundsError``; searches that find nothing
return ``-1``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, ClassVar, Optional, Union

from immstr import chars
from immstr.chars import DEFAULT_TRIM_MASK
from immstr.regex import PatternLike, PcreRegexEngine, RegexEngine
from immstr.utils.errors import IndexOutOfBoundsError, UnsupportedMutationError

StrLike = Union[str, "ImmutableString"]


@dataclass(frozen=True, slots=True)
class ReplaceResult:
    """
    Outcome of a counting replace operation.

    Attributes:
        value: The string after replacement
        count: Number of replacements performed
    """

    value: ImmutableString
    count: int


@total_ordering
class ImmutableString:
    """
    An immutable string value.

    Attributes:
        regex_engine: Engine used by every pattern-based operation. Assign a
            different ``RegexEngine`` on a subclass to change the dialect.
    """

    __slots__ = ("_value", "_length")

    regex_engine: ClassVar[RegexEngine] = PcreRegexEngine()

    def __init__(
        self,
        source: Any = "",
        offset: Optional[int] = None,
        length: Optional[int] = None,
    ) -> None:
        """
        Create a string from ``source``, optionally a window of it.

        Args:
            source: Any object; it is converted with ``str()``
            offset: Start of the window (used only together with ``length``)
            length: Size of the window (used only together with ``offset``)

        Raises:
            IndexOutOfBoundsError: If the window does not fit inside ``source``
        """
        value = str(source)

        if offset is not None and length is not None:
            if offset < 0:
                raise IndexOutOfBoundsError(offset)
            if length < 0:
                raise IndexOutOfBoundsError(length)
            if offset > len(value) - length:
                raise IndexOutOfBoundsError(offset + length)
            value = value[offset : offset + length]

        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_length", len(value))

    def _new(self, value: str) -> ImmutableString:
        return type(self)(value)

    # -------------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------------

    @classmethod
    def format(cls, format_string: StrLike, *args: Any) -> ImmutableString:
        """
        Build a string with printf-style ``%`` substitution.

        With no ``args`` the format string is used verbatim, so a lone ``%``
        is not an error.
        """
        if not args:
            return cls(format_string)
        return cls(str(format_string) % args)

    @classmethod
    def from_char_code(cls, *codes: Any) -> ImmutableString:
        """
        Build a string from code points.

        Accepts either variadic ints, ``from_char_code(72, 105)``, or a single
        iterable, ``from_char_code([72, 105])``.
        """
        if len(codes) == 1 and isinstance(codes[0], Iterable):
            codes = tuple(codes[0])
        return cls("".join(chr(code) for code in codes))

    @classmethod
    def join(cls, delimiter: StrLike, elements: Iterable[Any]) -> ImmutableString:
        """Join ``elements`` (each converted with ``str()``) with ``delimiter``."""
        return cls(str(delimiter).join(str(element) for element in elements))

    # -------------------------------------------------------------------------
    # Value access
    # -------------------------------------------------------------------------

    @property
    def value(self) -> str:
        return self._value

    @property
    def length(self) -> int:
        return self._length

    def value_of(self) -> str:
        """Return the raw text."""
        return self._value

    def is_empty(self) -> bool:
        return self._length == 0

    def char_at(self, index: int) -> str:
        """
        Return the character at ``index``.

        Raises:
            IndexOutOfBoundsError: If ``index`` is negative or not less than
                the length
        """
        if index < 0 or index >= self._length:
            raise IndexOutOfBoundsError(index)
        return self._value[index]

    def char_code_at(self, index: int) -> int:
        """Return the code point of the character at ``index``."""
        return ord(self.char_at(index))

    def has_index(self, index: int) -> bool:
        """Return True if a character exists at ``index``."""
        return 0 <= index < self._length

    def to_char_array(self) -> list[str]:
        return list(self._value)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare_to(self, other: StrLike, ignore_case: bool = False) -> int:
        """
        Compare lexicographically with ``other``.

        Returns:
            -1, 0 or 1 as this string sorts before, equal to or after
            ``other``.
        """
        return chars.compare(self._value, str(other), ignore_case=ignore_case)

    def compare_to_ignore_case(self, other: StrLike) -> int:
        return self.compare_to(other, True)

    def equals(self, other: StrLike, ignore_case: bool = False) -> bool:
        return self.compare_to(other, ignore_case) == 0

    def equals_ignore_case(self, other: StrLike) -> bool:
        return self.equals(other, True)

    def region_compare(
        self,
        this_offset: int,
        other: StrLike,
        other_offset: int,
        length: int,
        ignore_case: bool = False,
    ) -> int:
        """
        Compare a region of this string with a region of ``other``.

        Each region starts at its offset and is cut to at most ``length``
        characters; a region that runs out early is compared as it is.

        Args:
            this_offset: Start of the region in this string
            other: The string to compare against
            other_offset: Start of the region in ``other``
            length: Maximum number of characters to compare
            ignore_case: Fold ASCII case before comparing

        Raises:
            IndexOutOfBoundsError: If either offset lies outside its string,
                or ``length`` is negative
        """
        if length < 0:
            raise IndexOutOfBoundsError(length)
        mine = self.substring(this_offset)
        theirs = self._new(other).substring(other_offset)
        return chars.compare(mine.value, theirs.value, length, ignore_case)

    def region_compare_ignore_case(
        self, this_offset: int, other: StrLike, other_offset: int, length: int
    ) -> int:
        return self.region_compare(this_offset, other, other_offset, length, True)

    def region_matches(
        self, this_offset: int, other: StrLike, other_offset: int, length: int
    ) -> bool:
        return self.region_compare(this_offset, other, other_offset, length) == 0

    def region_matches_ignore_case(
        self, this_offset: int, other: StrLike, other_offset: int, length: int
    ) -> bool:
        return self.region_compare_ignore_case(this_offset, other, other_offset, length) == 0

    # -------------------------------------------------------------------------
    # Searching
    # -------------------------------------------------------------------------

    def index_of(self, needle: StrLike, from_index: int = 0, ignore_case: bool = False) -> int:
        """
        Return the index of the first occurrence of ``needle``.

        The search starts at ``from_index`` (negative values count as 0).

        Returns:
            The index, or -1 if ``needle`` does not occur or ``from_index``
            is past the last character.
        """
        if from_index < 0:
            from_index = 0
        elif from_index >= self._length:
            return -1

        if ignore_case:
            return chars.find_ignore_case(self._value, str(needle), from_index)
        return self._value.find(str(needle), from_index)

    def index_of_ignore_case(self, needle: StrLike, from_index: int = 0) -> int:
        return self.index_of(needle, from_index, True)

    def last_index_of(
        self, needle: StrLike, from_index: int = 0, ignore_case: bool = False
    ) -> int:
        """
        Return the index of the last occurrence of ``needle``.

        Only occurrences starting at or after ``from_index`` are considered;
        the search does not run backward from ``from_index``.

        Returns:
            The index, or -1 if there is no such occurrence.
        """
        if from_index < 0:
            from_index = 0
        elif from_index >= self._length:
            return -1

        if ignore_case:
            return chars.rfind_ignore_case(self._value, str(needle), from_index)
        return self._value.rfind(str(needle), from_index)

    def last_index_of_ignore_case(self, needle: StrLike, from_index: int = 0) -> int:
        return self.last_index_of(needle, from_index, True)

    def contains(self, needle: StrLike) -> bool:
        return self.index_of(needle) >= 0

    # -------------------------------------------------------------------------
    # Slicing
    # -------------------------------------------------------------------------

    def substring(self, begin: int, end: Optional[int] = None) -> ImmutableString:
        """
        Return the characters from ``begin`` up to but excluding ``end``.

        ``end`` defaults to the length. Asking for the whole string returns
        this instance.

        Raises:
            IndexOutOfBoundsError: If ``begin`` is negative, ``end`` is past
                the length, or ``end`` comes before ``begin``
        """
        if begin < 0:
            raise IndexOutOfBoundsError(begin)
        if begin == self._length:
            return self._new("")

        if end is None:
            span = self._length - begin
            if span < 0:
                raise IndexOutOfBoundsError(span)
            if begin == 0:
                return self
            return type(self)(self._value, begin, span)

        if end > self._length:
            raise IndexOutOfBoundsError(end)
        span = end - begin
        if span < 0:
            raise IndexOutOfBoundsError(span)
        if begin == 0 and end == self._length:
            return self
        return type(self)(self._value, begin, span)

    # -------------------------------------------------------------------------
    # Pattern matching
    # -------------------------------------------------------------------------

    def matches(self, pattern: PatternLike) -> bool:
        """Return True if ``pattern`` matches anywhere in this string."""
        return self.regex_engine.search(pattern, self._value) is not None

    def match_groups(self, pattern: PatternLike) -> list[ImmutableString]:
        """
        Return the first match of ``pattern`` and its capture groups.

        Group 0 is the whole match. Groups that did not participate become
        empty strings, except trailing ones, which are dropped.

        Returns:
            The groups in order, or an empty list when nothing matches.
        """
        match = self.regex_engine.search(pattern, self._value)
        if match is None:
            return []

        groups = [match.group(0), *match.groups()]
        while groups[-1] is None:
            groups.pop()
        return [self._new("" if group is None else group) for group in groups]

    def starts_with(
        self, prefix: StrLike, from_index: int = 0, ignore_case: bool = False
    ) -> bool:
        """
        Test whether the string starts with ``prefix`` at ``from_index``.

        ``prefix`` is literal text, not a pattern.

        Raises:
            IndexOutOfBoundsError: If ``from_index`` lies outside the string
        """
        pattern = "^" + self.regex_engine.escape(str(prefix))
        regex = self.regex_engine.compile(pattern, _case_flags(ignore_case))
        return self.substring(from_index).matches(regex)

    def ends_with(self, suffix: StrLike, ignore_case: bool = False) -> bool:
        """
        Test whether the string ends with ``suffix``.

        As with a ``$`` anchor, a single trailing newline after the suffix
        still counts as a match.
        """
        pattern = self.regex_engine.escape(str(suffix)) + "$"
        regex = self.regex_engine.compile(pattern, _case_flags(ignore_case))
        return self.matches(regex)

    # -------------------------------------------------------------------------
    # Replacement
    # -------------------------------------------------------------------------

    def replace(self, old: StrLike, new: StrLike) -> ImmutableString:
        """Replace every literal occurrence of ``old`` with ``new``."""
        return self.replace_with_count(old, new).value

    def replace_with_count(self, old: StrLike, new: StrLike) -> ReplaceResult:
        old = str(old)
        if not old:
            return ReplaceResult(self, 0)
        count = self._value.count(old)
        return ReplaceResult(self._new(self._value.replace(old, str(new))), count)

    def replace_ignore_case(self, old: StrLike, new: StrLike) -> ImmutableString:
        """Replace every occurrence of ``old`` regardless of ASCII case."""
        return self.replace_ignore_case_with_count(old, new).value

    def replace_ignore_case_with_count(self, old: StrLike, new: StrLike) -> ReplaceResult:
        value, count = chars.replace_ignore_case(self._value, str(old), str(new))
        return ReplaceResult(self._new(value), count)

    def replace_all(
        self,
        pattern: PatternLike,
        replacement: StrLike,
        limit: Optional[int] = None,
    ) -> ImmutableString:
        """
        Replace matches of ``pattern`` with ``replacement``.

        ``replacement`` may refer to groups as ``\\1``, ``\\g<name>``, ``$1``
        or ``${1}``. At most ``limit`` matches are replaced; None or a negative
        limit means all and zero replaces nothing.
        """
        return self.replace_all_with_count(pattern, replacement, limit).value

    def replace_all_with_count(
        self,
        pattern: PatternLike,
        replacement: StrLike,
        limit: Optional[int] = None,
    ) -> ReplaceResult:
        value, count = self.regex_engine.sub(pattern, str(replacement), self._value, limit)
        return ReplaceResult(self._new(value), count)

    def replace_first(self, pattern: PatternLike, replacement: StrLike) -> ImmutableString:
        return self.replace_all(pattern, replacement, 1)

    def split(self, pattern: PatternLike, limit: Optional[int] = -1) -> list[ImmutableString]:
        """
        Split around matches of ``pattern``.

        With a positive ``limit`` at most that many fragments are returned
        and the last one holds the rest of the string unsplit.
        """
        return [self._new(part) for part in self.regex_engine.split(pattern, self._value, limit)]

    # -------------------------------------------------------------------------
    # Transformation
    # -------------------------------------------------------------------------

    def to_lower_case(self) -> ImmutableString:
        return self._new(chars.to_lower(self._value))

    def to_upper_case(self) -> ImmutableString:
        return self._new(chars.to_upper(self._value))

    def trim(self, mask: str = DEFAULT_TRIM_MASK) -> ImmutableString:
        """
        Strip leading and trailing characters found in ``mask``.

        ``mask`` is a set of characters; ``"a..z"`` names a range.
        """
        return self._new(self._value.strip(chars.expand_mask(mask)))

    def trim_left(self, mask: str = DEFAULT_TRIM_MASK) -> ImmutableString:
        return self._new(self._value.lstrip(chars.expand_mask(mask)))

    def trim_right(self, mask: str = DEFAULT_TRIM_MASK) -> ImmutableString:
        return self._new(self._value.rstrip(chars.expand_mask(mask)))

    def concat(self, *parts: Any) -> ImmutableString:
        """Append each of ``parts`` (converted with ``str()``) in order."""
        return self._new(self._value + "".join(str(part) for part in parts))

    def reverse(self) -> ImmutableString:
        return self._new(self._value[::-1])

    def pad_left(self, target_length: int, pad: StrLike = " ") -> ImmutableString:
        """
        Pad on the left with ``pad`` until the length is ``target_length``.

        ``pad`` is repeated and cut as needed. Strings already that long are
        returned unchanged.

        Raises:
            ValueError: If ``pad`` is empty
        """
        return self._pad(target_length, str(pad), left=True)

    def pad_right(self, target_length: int, pad: StrLike = " ") -> ImmutableString:
        """Pad on the right; see ``pad_left``."""
        return self._pad(target_length, str(pad), left=False)

    def _pad(self, target_length: int, pad: str, left: bool) -> ImmutableString:
        if not pad:
            raise ValueError("Padding must be a non-empty string")

        missing = target_length - self._length
        if missing <= 0:
            return self

        filler = (pad * (missing // len(pad) + 1))[:missing]
        if left:
            return self._new(filler + self._value)
        return self._new(self._value + filler)

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __format__(self, format_spec: str) -> str:
        return format(self._value, format_spec)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[str]:
        return iter(self._value)

    def __contains__(self, needle: object) -> bool:
        if not isinstance(needle, (str, ImmutableString)):
            return False
        return self.contains(needle)

    def __getitem__(self, index: int) -> str:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(
                f"{type(self).__name__} indices must be integers, not {type(index).__name__}"
            )
        return self.char_at(index)

    def __setitem__(self, index: int, value: Any) -> None:
        raise UnsupportedMutationError()

    def __delitem__(self, index: int) -> None:
        raise UnsupportedMutationError()

    def __setattr__(self, name: str, value: Any) -> None:
        raise UnsupportedMutationError()

    def __delattr__(self, name: str) -> None:
        raise UnsupportedMutationError()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (str, ImmutableString)):
            return self._value == str(other)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (str, ImmutableString)):
            return self.compare_to(other) < 0
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __add__(self, other: object) -> ImmutableString:
        if isinstance(other, (str, ImmutableString)):
            return self.concat(other)
        return NotImplemented

    def __radd__(self, other: object) -> ImmutableString:
        if isinstance(other, str):
            return self._new(other + self._value)
        return NotImplemented

    def __reduce__(self) -> tuple[type, tuple[str]]:
        return (type(self), (self._value,))


def _case_flags(ignore_case: bool) -> int:
    return re.IGNORECASE | re.ASCII if ignore_case else 0
