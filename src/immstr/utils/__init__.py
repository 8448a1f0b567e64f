"""
immstr Utilities Package.

Error types shared by the string wrapper, the regex engine and the CLI.
"""

from immstr.utils.errors import (
    ImmutableStringError,
    IndexOutOfBoundsError,
    PatternError,
    UnsupportedMutationError,
)

__all__ = [
    "ImmutableStringError",
    "IndexOutOfBoundsError",
    "PatternError",
    "UnsupportedMutationError",
]
