"""
Error types for immstr.
"""

from typing import Any, Optional


class ImmutableStringError(Exception):
    """Base exception for all immstr errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        return self.message


class IndexOutOfBoundsError(ImmutableStringError, IndexError):
    """
    Raised when an index, offset or computed span falls outside a string.

    Attributes:
        index: The illegal index. For span checks this is the computed
            span length or end position, which may be negative.
    """

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"String index out of range: {index}")


class UnsupportedMutationError(ImmutableStringError, TypeError):
    """Raised on any attempt to write to or delete from an immutable string."""

    def __init__(self, message: str = "Strings are immutable") -> None:
        super().__init__(message)


class PatternError(ImmutableStringError, ValueError):
    """
    Raised when a regular expression cannot be compiled.

    This error is raised when:
    - A delimited pattern carries an unknown modifier
    - The pattern body is rejected by the regex engine
    - The requested flags cannot be combined
    """

    def __init__(
        self,
        message: str,
        pattern: Any = None,
        position: Optional[int] = None,
    ) -> None:
        self.pattern = pattern
        self.position = position
        super().__init__(message)

    def _format_message(self) -> str:
        parts = [self.message]

        if self.pattern is not None:
            parts.append(f"\n  Pattern: {self.pattern!r}")

        if self.position is not None:
            parts.append(f"\n  At position: {self.position}")

        return "".join(parts)
