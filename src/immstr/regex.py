"""
Regular expression support for immstr.

Pattern matching, splitting and replacement go through a ``RegexEngine``.
The default ``PcreRegexEngine`` sits on top of the standard ``re`` module
and understands PCRE-style delimited patterns such as ``"/,/"`` or
``"#^foo#i"`` in addition to plain Python patterns and compiled
``re.Pattern`` objects.

Dialect notes:
    - The pattern body is compiled by ``re``, so constructs ``re`` does not
      support (possessive quantifiers on older interpreters, recursion,
      ``\\h``) are rejected with ``PatternError``.
    - ``$`` matches at the very end or before a final newline, as in PCRE.
    - Replacement strings use ``re`` template syntax (``\\1``, ``\\g<name>``);
      PCRE-style ``$1`` and ``${1}`` references are translated.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Optional, Protocol, Union

from immstr.utils.errors import PatternError

logger = logging.getLogger(__name__)

PatternLike = Union[str, "re.Pattern[str]"]

# Delimiters recognised for PCRE-style patterns. Bracket pairs are left out
# so raw patterns such as "(a)(b)" or "[abc]" are never misread.
DELIMITERS = frozenset("/#~%@!|;,`")

MODIFIER_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": 0,  # str patterns are already Unicode-aware
}

_DOLLAR_REFERENCE = re.compile(r"\$(\d{1,2})|\$\{(\d{1,2})\}")


class RegexEngine(Protocol):
    """Capability used by ``ImmutableString`` for every regex operation."""

    def compile(self, pattern: PatternLike, flags: int = 0) -> re.Pattern[str]: ...

    def search(self, pattern: PatternLike, subject: str) -> Optional[re.Match[str]]: ...

    def sub(
        self,
        pattern: PatternLike,
        replacement: str,
        subject: str,
        limit: Optional[int] = None,
    ) -> tuple[str, int]: ...

    def split(self, pattern: PatternLike, subject: str, limit: Optional[int] = -1) -> list[str]: ...

    def escape(self, text: str) -> str: ...


def split_delimited(pattern: str) -> Optional[tuple[str, str]]:
    """
    Split a delimited pattern into its body and modifier letters.

    Returns None when ``pattern`` is not written in delimited form.
    """
    if len(pattern) < 2 or pattern[0] not in DELIMITERS:
        return None

    end = pattern.rfind(pattern[0])
    if end == 0:
        return None

    modifiers = pattern[end + 1 :]
    if modifiers and not modifiers.isalpha():
        return None

    return pattern[1:end], modifiers


def translate_replacement(replacement: str) -> str:
    """Rewrite ``$1`` and ``${1}`` group references as ``\\g<1>``."""
    return _DOLLAR_REFERENCE.sub(
        lambda m: "\\g<" + (m.group(1) or m.group(2)) + ">",
        replacement,
    )


class PcreRegexEngine:
    """
    ``RegexEngine`` backed by ``re`` with PCRE-style delimited patterns.

    Compiled patterns are kept in an LRU cache keyed by pattern text and
    flags.
    """

    def __init__(self, cache_size: int = 256) -> None:
        self.cache_size = cache_size
        self._compile_cached = lru_cache(maxsize=cache_size)(self._compile)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(cache_size={self.cache_size})"

    def compile(self, pattern: PatternLike, flags: int = 0) -> re.Pattern[str]:
        """
        Compile ``pattern`` into an ``re.Pattern``.

        Args:
            pattern: Delimited pattern, raw Python pattern, or compiled pattern
            flags: Extra ``re`` flags combined with any pattern modifiers

        Raises:
            PatternError: If the pattern is malformed
        """
        if isinstance(pattern, re.Pattern):
            if not flags:
                return pattern
            base = pattern.flags
            if flags & re.ASCII:
                base &= ~re.UNICODE
            return self._compile_cached(pattern.pattern, base | flags, False)
        return self._compile_cached(str(pattern), flags, True)

    def _compile(self, pattern: str, flags: int, delimited: bool) -> re.Pattern[str]:
        body = pattern
        parsed = split_delimited(pattern) if delimited else None

        if parsed is not None:
            body, modifiers = parsed
            for letter in modifiers:
                if letter not in MODIFIER_FLAGS:
                    raise PatternError(f"Unknown modifier '{letter}'", pattern=pattern)
                flags |= MODIFIER_FLAGS[letter]

        logger.debug("Compiling pattern %r with flags %d", body, flags)

        try:
            return re.compile(body, flags)
        except re.error as e:
            raise PatternError(
                f"Invalid regular expression: {e.msg}",
                pattern=pattern,
                position=e.pos,
            ) from e
        except ValueError as e:
            raise PatternError(str(e), pattern=pattern) from e

    def search(self, pattern: PatternLike, subject: str) -> Optional[re.Match[str]]:
        return self.compile(pattern).search(subject)

    def sub(
        self,
        pattern: PatternLike,
        replacement: str,
        subject: str,
        limit: Optional[int] = None,
    ) -> tuple[str, int]:
        """
        Replace up to ``limit`` matches of ``pattern`` in ``subject``.

        A ``limit`` of None or below zero means no limit; zero replaces
        nothing.

        Returns:
            The resulting text and the number of replacements made.
        """
        regex = self.compile(pattern)
        if limit == 0:
            return subject, 0
        count = limit if limit is not None and limit > 0 else 0

        try:
            return regex.subn(translate_replacement(replacement), subject, count=count)
        except re.error as e:
            raise PatternError(
                f"Invalid replacement: {e.msg}",
                pattern=replacement,
            ) from e

    def split(self, pattern: PatternLike, subject: str, limit: Optional[int] = -1) -> list[str]:
        """
        Split ``subject`` around matches of ``pattern``.

        Capture groups are not included in the result. A positive ``limit``
        caps the number of fragments, the last one holding the unsplit
        remainder; None, zero or a negative limit means no limit.
        """
        regex = self.compile(pattern)
        bounded = limit is not None and limit > 0
        fragments: list[str] = []
        start = 0

        for match in regex.finditer(subject):
            if bounded and len(fragments) == limit - 1:
                break
            fragments.append(subject[start : match.start()])
            start = match.end()

        fragments.append(subject[start:])
        return fragments

    def escape(self, text: str) -> str:
        return re.escape(text)

    def cache_clear(self) -> None:
        """Drop every cached compiled pattern."""
        self._compile_cached.cache_clear()
