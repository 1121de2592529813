"""Tests for character classification functions."""

import pytest


class TestVowels:
    """Test vowels and non-vowels."""

    def test_vowels(self):
        from exfunctions.text import vowels

        assert vowels("Education") == ["E", "u", "a", "i", "o"]
        assert vowels("banana", unique=True) == ["a"]
        assert vowels("rhythm") == []
        assert vowels("") is None

    def test_vowel_count(self):
        from exfunctions.text import vowel_count

        assert vowel_count("banana") == 3
        assert vowel_count("Aa", unique=True) == 2
        assert vowel_count(None) == 0

    def test_non_vowels(self):
        from exfunctions.text import non_vowels, non_vowel_count

        assert non_vowels("a b!") == [" ", "b", "!"]
        assert non_vowels("bob", unique=True) == ["b"]
        assert non_vowel_count("a b!") == 3
        assert non_vowel_count("") == 0


class TestConsonants:
    """Consonant extraction matches every ASCII letter, vowels included."""

    def test_consonants_include_vowels(self):
        from exfunctions.text import consonants

        assert consonants("ab1") == ["a", "b"]
        assert consonants("Hello", unique=True) == ["H", "e", "l", "o"]

    def test_no_letters(self):
        from exfunctions.text import consonants, consonant_count

        assert consonants("123 !") is None
        assert consonant_count("123 !") == 0
        assert consonants("") is None

    def test_consonant_count(self):
        from exfunctions.text import consonant_count

        assert consonant_count("Hello, World") == 10


class TestSpecialAndDigits:
    """Test special characters and digits."""

    def test_special_characters(self):
        from exfunctions.text import special_characters, special_character_count

        assert special_characters("a-b c!") == ["-", " ", "!"]
        assert special_characters("abc123") == []
        assert special_character_count("a--b", unique=True) == 1

    def test_digits(self):
        from exfunctions.text import digits, digit_count

        assert digits("R2-D2 and C-3PO") == [2, 2, 3]
        assert digits("R2-D2 and C-3PO", unique=True) == [2, 3]
        assert digits("none") is None
        assert digit_count("R2-D2") == 2
        assert digit_count("none") == 0
        assert digit_count("") == 0
