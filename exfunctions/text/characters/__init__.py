"""
Character Classification Functions

Vowels, non-vowels, letters, special characters and digits.
"""

from .vowels import vowels, vowel_count, non_vowels, non_vowel_count
from .consonants import consonants, consonant_count
from .special import special_characters, special_character_count
from .digits import digits, digit_count

__all__ = [
    'vowels',
    'vowel_count',
    'non_vowels',
    'non_vowel_count',
    'consonants',
    'consonant_count',
    'special_characters',
    'special_character_count',
    'digits',
    'digit_count',
]
