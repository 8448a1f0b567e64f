"""
Unit tests for comparison, searching and slicing.
"""

import pytest

from immstr import ImmutableString, IndexOutOfBoundsError


class TestCompareTo:
    """Tests for compare_to and friends."""

    def test_equal(self, hello):
        """Equal values compare as 0."""
        assert hello.compare_to("hello") == 0

    def test_ordering(self, hello):
        """The sign follows lexicographic order."""
        assert hello.compare_to("help") < 0
        assert hello.compare_to("hell") > 0
        assert hello.compare_to("") > 0

    def test_uppercase_sorts_first(self, hello):
        """Case-sensitive comparison uses code points."""
        assert hello.compare_to("Hello") > 0

    def test_ignore_case(self, hello):
        """Case-insensitive comparison folds ASCII case."""
        assert hello.compare_to("HELLO", ignore_case=True) == 0
        assert hello.compare_to_ignore_case("HeLLo") == 0
        assert hello.compare_to_ignore_case("HELP") < 0

    def test_accepts_instance(self, hello):
        """The other operand may be an ImmutableString."""
        assert hello.compare_to(ImmutableString("hello")) == 0

    def test_non_ascii_not_folded(self):
        """Only ASCII letters are folded."""
        assert ImmutableString("é").compare_to_ignore_case("É") != 0


class TestEquals:
    """Tests for equals and equals_ignore_case."""

    def test_equals(self):
        """equals is case-sensitive by default."""
        assert ImmutableString("Hello").equals("Hello")
        assert not ImmutableString("Hello").equals("hello")

    def test_equals_ignore_case(self):
        """equals_ignore_case folds ASCII case."""
        assert ImmutableString("Hello").equals_ignore_case("hello")
        assert ImmutableString("Hello").equals("hELLO", ignore_case=True)
        assert not ImmutableString("Hello").equals_ignore_case("help")


class TestRegionCompare:
    """Tests for region_compare and region_matches."""

    def test_matching_regions(self):
        """Equal windows compare as 0."""
        s = ImmutableString("Hello World")
        assert s.region_compare(6, "Big World", 4, 5) == 0
        assert s.region_matches(6, "Big World", 4, 5)

    def test_differing_regions(self):
        """Different windows give the sign of the first difference."""
        s = ImmutableString("abcdef")
        assert s.region_compare(0, "abzdef", 0, 3) < 0
        assert not s.region_matches(0, "abzdef", 0, 3)

    def test_only_length_characters_compared(self):
        """Characters beyond length are ignored."""
        assert ImmutableString("abcX").region_matches(0, "abcY", 0, 3)

    def test_short_tail_compared_as_is(self):
        """A window shorter than length is compared with what is there."""
        s = ImmutableString("abc")
        assert s.region_compare(1, "bc", 0, 10) == 0
        assert s.region_compare(1, "bcd", 0, 10) < 0

    def test_ignore_case(self):
        """Case-insensitive variants fold ASCII case."""
        s = ImmutableString("Hello World")
        assert s.region_compare_ignore_case(6, "WORLD", 0, 5) == 0
        assert s.region_matches_ignore_case(0, "xxHELLO", 2, 5)
        assert not s.region_matches(0, "xxHELLO", 2, 5)

    def test_offset_at_end(self):
        """An offset equal to the length gives an empty window."""
        assert ImmutableString("abc").region_matches(3, "xyz", 3, 2)

    def test_offset_out_of_range(self):
        """Offsets outside either string fail."""
        s = ImmutableString("abc")
        with pytest.raises(IndexOutOfBoundsError):
            s.region_compare(-1, "abc", 0, 1)
        with pytest.raises(IndexOutOfBoundsError):
            s.region_compare(0, "abc", 4, 1)
        with pytest.raises(IndexOutOfBoundsError):
            s.region_compare(5, "abc", 0, 1)

    def test_negative_length(self):
        """A negative length fails."""
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            ImmutableString("abc").region_compare(0, "abc", 0, -1)
        assert exc_info.value.index == -1


class TestIndexOf:
    """Tests for index_of and index_of_ignore_case."""

    def test_first_occurrence(self):
        """The first match is reported."""
        assert ImmutableString("banana").index_of("an") == 1

    def test_from_index(self):
        """The search starts at from_index."""
        assert ImmutableString("banana").index_of("an", 2) == 3

    def test_not_found(self, hello):
        """Missing needles give -1."""
        assert hello.index_of("z") == -1

    def test_negative_from_index_clamped(self):
        """Negative starts search from 0."""
        assert ImmutableString("banana").index_of("b", -5) == 0

    def test_from_index_past_end(self, hello):
        """Starting at or past the length gives -1, even for an empty needle."""
        assert hello.index_of("o", 5) == -1
        assert hello.index_of("", 5) == -1

    def test_empty_needle(self, hello):
        """An empty needle is found at the start position."""
        assert hello.index_of("") == 0
        assert hello.index_of("", 2) == 2

    def test_ignore_case(self, sentence):
        """Case-insensitive search folds ASCII case."""
        assert sentence.index_of("the") == 31
        assert sentence.index_of_ignore_case("the") == 0
        assert sentence.index_of("QUICK", ignore_case=True) == 4
        assert sentence.index_of_ignore_case("THE", 1) == 31

    def test_empty_string(self):
        """Nothing is found in the empty string."""
        assert ImmutableString("").index_of("") == -1


class TestLastIndexOf:
    """Tests for last_index_of and last_index_of_ignore_case."""

    def test_last_occurrence(self):
        """The rightmost match is reported."""
        assert ImmutableString("banana").last_index_of("an") == 3

    def test_searches_forward_from_index(self):
        """Only matches starting at or after from_index count."""
        s = ImmutableString("abcabc")
        assert s.last_index_of("abc", 1) == 3
        assert s.last_index_of("abc", 3) == 3
        assert s.last_index_of("abc", 4) == -1

    def test_does_not_search_backward(self):
        """A match before from_index is not found."""
        assert ImmutableString("ab----").last_index_of("ab", 2) == -1

    def test_not_found(self, hello):
        """Missing needles give -1."""
        assert hello.last_index_of("z") == -1

    def test_from_index_bounds(self):
        """Negative starts clamp to 0; starts past the end give -1."""
        s = ImmutableString("aXa")
        assert s.last_index_of("a", -3) == 2
        assert s.last_index_of("a", 3) == -1

    def test_ignore_case(self):
        """Case-insensitive search folds ASCII case."""
        s = ImmutableString("Abc aBC abc")
        assert s.last_index_of("ABC") == -1
        assert s.last_index_of_ignore_case("ABC") == 8
        assert s.last_index_of("abc", 0, ignore_case=True) == 8


class TestContainsAndIsEmpty:
    """Tests for contains and is_empty."""

    def test_contains(self, sentence):
        """contains is a literal substring test."""
        assert sentence.contains("fox")
        assert sentence.contains(ImmutableString("lazy"))
        assert not sentence.contains("cat")
        assert not sentence.contains("f.x")

    def test_is_empty(self, hello):
        """Only the zero-length string is empty."""
        assert ImmutableString("").is_empty()
        assert not hello.is_empty()
        assert not ImmutableString(" ").is_empty()


class TestSubstring:
    """Tests for substring."""

    def test_begin_only(self, hello):
        """The end defaults to the length."""
        assert hello.substring(2) == "llo"

    def test_begin_and_end(self, hello):
        """The end is exclusive."""
        assert hello.substring(1, 3) == "el"
        assert hello.substring(2, 2) == ""

    def test_whole_string_is_same_instance(self, hello):
        """Requesting the whole string returns the receiver."""
        assert hello.substring(0) is hello
        assert hello.substring(0, 5) is hello

    def test_begin_at_length(self, hello):
        """Beginning at the length gives the empty string."""
        assert hello.substring(5) == ""
        assert hello.substring(5, 5) == ""

    def test_negative_begin(self, hello):
        """A negative begin fails with that index."""
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            hello.substring(-1)
        assert exc_info.value.index == -1

    def test_end_past_length(self, hello):
        """An end past the length fails with that index."""
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            hello.substring(0, 6)
        assert exc_info.value.index == 6

    def test_end_before_begin(self, hello):
        """A negative span fails with the span."""
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            hello.substring(3, 1)
        assert exc_info.value.index == -2

    def test_begin_past_length(self, hello):
        """A begin past the length fails with the negative span."""
        with pytest.raises(IndexOutOfBoundsError) as exc_info:
            hello.substring(7)
        assert exc_info.value.index == -2
