"""
immstr - An immutable string type with a uniform, exception-safe API.

``ImmutableString`` wraps a text value and provides character access,
comparison, searching, regex matching, slicing, padding, case conversion,
trimming, splitting and joining. Operations never modify the receiver;
out-of-range indices raise ``IndexOutOfBoundsError`` and failed searches
return ``-1``.
"""

from immstr.chars import DEFAULT_TRIM_MASK
from immstr.regex import PcreRegexEngine, RegexEngine
from immstr.string import ImmutableString, ReplaceResult
from immstr.utils.errors import (
    ImmutableStringError,
    IndexOutOfBoundsError,
    PatternError,
    UnsupportedMutationError,
)

__version__ = "0.1.0"
__all__ = [
    "ImmutableString",
    "ReplaceResult",
    "RegexEngine",
    "PcreRegexEngine",
    "DEFAULT_TRIM_MASK",
    "ImmutableStringError",
    "IndexOutOfBoundsError",
    "PatternError",
    "UnsupportedMutationError",
]
