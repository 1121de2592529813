"""
Word and Sentence Functions

Tokenization, counting and frequency analysis.
"""

from .tokens import words, word_count, unique_in_order
from .frequency import SortOrder, word_frequency
from .nth_word import nth_word
from .sentences import sentences, sentence_count

__all__ = [
    'words',
    'word_count',
    'unique_in_order',
    'SortOrder',
    'word_frequency',
    'nth_word',
    'sentences',
    'sentence_count',
]
