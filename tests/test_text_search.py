"""Tests for search functions."""

import re

import pytest


class TestPatternFrequency:
    """Test pattern_frequency."""

    def test_literal(self):
        from exfunctions.text import pattern_frequency

        assert pattern_frequency("banana", "an") == 2
        assert pattern_frequency("aaaa", "aa") == 2
        assert pattern_frequency("banana", "x") == 0

    def test_literal_ignores_regex_syntax(self):
        from exfunctions.text import pattern_frequency

        assert pattern_frequency("a.b.c", ".") == 2

    def test_regex(self):
        from exfunctions.text import pattern_frequency

        assert pattern_frequency("a1b22c333", r"\d+", is_regex=True) == 3
        assert pattern_frequency("Banana", "b", is_regex=True) == 0
        assert pattern_frequency("Banana", "b", is_regex=True, flags=re.IGNORECASE) == 1

    def test_empty(self):
        from exfunctions.text import pattern_frequency

        assert pattern_frequency("", "a") == 0
        assert pattern_frequency("abc", "") == 0
        assert pattern_frequency(None, "a") == 0

    def test_malformed_pattern_raises(self):
        from exfunctions.text import pattern_frequency

        with pytest.raises(re.error):
            pattern_frequency("abc", "(", is_regex=True)


class TestNthIndexOf:
    """Test nth_index_of."""

    def test_nth_match(self):
        from exfunctions.text import nth_index_of

        assert nth_index_of("a.b.c.d", r"\.", 1) == 1
        assert nth_index_of("a.b.c.d", r"\.", 3) == 5

    def test_negative_n_uses_absolute_value(self):
        from exfunctions.text import nth_index_of

        assert nth_index_of("a.b.c.d", r"\.", -2) == 3
        assert nth_index_of("abc", "a", -1) == 0
        assert nth_index_of("a.b.c.d", r"\.", -99) == 5

    def test_past_last_match_gives_last(self):
        from exfunctions.text import nth_index_of

        assert nth_index_of("a.b.c.d", r"\.", 99) == 5

    def test_not_found(self):
        from exfunctions.text.search import nth_index_of, NOT_FOUND

        assert NOT_FOUND == -1
        assert nth_index_of("abc", "x", 1) == NOT_FOUND
        assert nth_index_of("abc", "a", 0) == NOT_FOUND
        assert nth_index_of("", "a", 1) == NOT_FOUND
        assert nth_index_of("abc", "", 1) == NOT_FOUND

    def test_malformed_pattern_raises(self):
        from exfunctions.text import nth_index_of

        with pytest.raises(re.error):
            nth_index_of("abc", "[", 1)


class TestPalindrome:
    """Test is_palindrome."""

    @pytest.mark.parametrize("text", ["Racecar", "level", "A", "Noon"])
    def test_palindromes(self, text):
        from exfunctions.text import is_palindrome

        assert is_palindrome(text) is True

    @pytest.mark.parametrize("text", ["Race car", "ab", "", None])
    def test_not_palindromes(self, text):
        from exfunctions.text import is_palindrome

        assert is_palindrome(text) is False

    def test_matches_reverse_definition(self):
        from exfunctions.text import is_palindrome, reverse

        for text in ["Abba", "abc", "xYx"]:
            assert is_palindrome(text) == (reverse(text).lower() == text.lower())


class TestSplitRegex:
    """Test split_regex."""

    def test_split(self):
        from exfunctions.text import split_regex

        assert split_regex("one1two22three", r"\d+") == ["one", "two", "three"]
        assert split_regex("a, b;c", r"[,;]\s*") == ["a", "b", "c"]

    def test_keeps_empty_pieces(self):
        from exfunctions.text import split_regex

        assert split_regex("-a-", "-") == ["", "a", ""]

    def test_matched_values_split_everywhere(self):
        from exfunctions.text import split_regex

        # "x" matched once at the start, so every "x" becomes a delimiter
        assert split_regex("x1 ax", r"^x") == ["", "1 a", ""]

    def test_no_match(self):
        from exfunctions.text import split_regex

        assert split_regex("abc", r"\d") is None
        assert split_regex("", r"\d") is None
        assert split_regex("abc", "") is None

    def test_zero_width_matches_do_not_split(self):
        from exfunctions.text import split_regex

        assert split_regex("abc", "x*") == ["abc"]
        assert split_regex("a1b", r"\d*") == ["a", "b"]
