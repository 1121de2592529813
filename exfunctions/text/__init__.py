"""
Text Utility Functions

Extension functions over str: slicing, words and sentences, character
classification, searching, extraction and transforms.
"""

from .slicing import (
    left,
    right,
    between,
    left_of,
    right_of,
    between_markers,
    middle,
)
from .words import (
    SortOrder,
    words,
    word_count,
    word_frequency,
    nth_word,
    sentences,
    sentence_count,
)
from .characters import (
    vowels,
    vowel_count,
    non_vowels,
    non_vowel_count,
    consonants,
    consonant_count,
    special_characters,
    special_character_count,
    digits,
    digit_count,
)
from .search import (
    pattern_frequency,
    nth_index_of,
    is_palindrome,
    split_regex,
)
from .extractors import urls, phone_numbers, ssns
from .transforms import (
    reverse,
    truncate,
    truncate_middle,
    truncate_ends,
    replace_nth,
    replace_multiple,
    remove_html_tags,
    br_to_newline,
)

__all__ = [
    # Slicing
    'left',
    'right',
    'between',
    'left_of',
    'right_of',
    'between_markers',
    'middle',
    # Words
    'SortOrder',
    'words',
    'word_count',
    'word_frequency',
    'nth_word',
    'sentences',
    'sentence_count',
    # Characters
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
    # Search
    'pattern_frequency',
    'nth_index_of',
    'is_palindrome',
    'split_regex',
    # Extractors
    'urls',
    'phone_numbers',
    'ssns',
    # Transforms
    'reverse',
    'truncate',
    'truncate_middle',
    'truncate_ends',
    'replace_nth',
    'replace_multiple',
    'remove_html_tags',
    'br_to_newline',
]
