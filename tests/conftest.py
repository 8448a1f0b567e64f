"""
Pytest configuration and shared fixtures for immstr tests.
"""

import pytest

from immstr.regex import PcreRegexEngine
from immstr.string import ImmutableString


@pytest.fixture
def make():
    """Factory fixture for creating immutable strings."""

    def _make(source="", offset=None, length=None) -> ImmutableString:
        return ImmutableString(source, offset, length)

    return _make


@pytest.fixture
def hello() -> ImmutableString:
    """The string 'hello'."""
    return ImmutableString("hello")


@pytest.fixture
def sentence() -> ImmutableString:
    """A mixed-case sentence with repeated words."""
    return ImmutableString("The quick brown fox jumps over the lazy dog")


@pytest.fixture
def engine() -> PcreRegexEngine:
    """A regex engine with its own small cache."""
    return PcreRegexEngine(cache_size=8)
