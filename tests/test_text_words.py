"""Tests for word and sentence functions."""

import pytest


class TestWords:
    """Test words and word_count."""

    def test_words_split_on_any_whitespace(self):
        from exfunctions.text import words

        assert words("one  two\tthree\nfour") == ["one", "two", "three", "four"]

    def test_unique_words_keep_first_occurrence(self):
        from exfunctions.text import words

        assert words("b a b c a", unique=True) == ["b", "a", "c"]

    def test_words_empty(self):
        from exfunctions.text import words

        assert words("") is None
        assert words(None) is None
        assert words(" \t\n ") is None

    def test_word_count(self):
        from exfunctions.text import word_count

        assert word_count("to be or not to be") == 6
        assert word_count("to be or not to be", unique=True) == 4
        assert word_count("") == 0
        assert word_count(None) == 0
        assert word_count("   ") == 0


class TestWordFrequency:
    """Test word_frequency."""

    TEXT = "b a c b a b"

    def test_unsorted_keeps_first_seen_order(self):
        from exfunctions.text import word_frequency

        result = word_frequency(self.TEXT)
        assert result == {"b": 3, "a": 2, "c": 1}
        assert list(result) == ["b", "a", "c"]

    def test_descending(self):
        from exfunctions.text import word_frequency, SortOrder

        result = word_frequency("x y y z z z", sort_order=SortOrder.DESCENDING)
        assert list(result.items()) == [("z", 3), ("y", 2), ("x", 1)]

    def test_ascending(self):
        from exfunctions.text import word_frequency, SortOrder

        result = word_frequency("z z z y y x", sort_order=SortOrder.ASCENDING)
        assert list(result.items()) == [("x", 1), ("y", 2), ("z", 3)]

    def test_plain_integers_select_order(self):
        from exfunctions.text import word_frequency

        assert list(word_frequency("a b b", sort_order=-5)) == ["b", "a"]
        assert list(word_frequency("b b a", sort_order=7)) == ["a", "b"]

    def test_ties_keep_group_order(self):
        from exfunctions.text import word_frequency, SortOrder

        result = word_frequency("p q r q", sort_order=SortOrder.ASCENDING)
        assert list(result) == ["p", "r", "q"]

    def test_case_insensitive(self):
        from exfunctions.text import word_frequency

        assert word_frequency("The the THE end") == {"The": 1, "the": 1, "THE": 1, "end": 1}
        assert word_frequency("The the THE end", case_insensitive=True) == {"the": 3, "end": 1}

    def test_empty(self):
        from exfunctions.text import word_frequency

        assert word_frequency("") is None
        assert word_frequency("   ") is None


class TestNthWord:
    """Test nth_word."""

    def test_positions(self):
        from exfunctions.text import nth_word

        assert nth_word("one two three", 1) == "one"
        assert nth_word("one two three", 3) == "three"
        assert nth_word("one two three", -2) == "two"

    def test_out_of_range(self):
        from exfunctions.text import nth_word

        assert nth_word("one two three", 4) == "three"
        assert nth_word("one two three", 4, last_if_out_of_range=False) is None

    def test_unique(self):
        from exfunctions.text import nth_word

        assert nth_word("a a b", 2) == "a"
        assert nth_word("a a b", 2, unique=True) == "b"

    def test_invalid(self):
        from exfunctions.text import nth_word

        assert nth_word("one two", 0) is None
        assert nth_word("", 1) is None
        assert nth_word("   ", 1) is None


class TestSentences:
    """Test sentences and sentence_count."""

    def test_split_and_trim(self):
        from exfunctions.text import sentences

        assert sentences("First one. Second one.  Third") == ["First one", "Second one", "Third"]

    def test_every_period_splits(self):
        from exfunctions.text import sentences

        # Known limitation: no abbreviation or URL awareness
        assert sentences("Visit example.com today.") == ["Visit example", "com today"]

    def test_sentence_count(self):
        from exfunctions.text import sentence_count

        assert sentence_count("One. Two. Three.") == 3
        assert sentence_count("") == 0
        assert sentence_count(None) == 0

    def test_whitespace_only(self):
        from exfunctions.text import sentences, sentence_count

        assert sentences("   ") is None
        assert sentence_count("   ") == 0
        assert sentence_count(" \n\t") == 0
