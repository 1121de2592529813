"""
Patterns: Character Classes

ASCII character classes used by the classification functions.
"""

from .registry import register_pattern


VOWEL = register_pattern(
    name="char.vowel",
    pattern=r'[aeiouAEIOU]',
    description="Single ASCII vowel, either case",
    examples=[
        {"input": "sample", "match": ["a", "e"]},
    ],
)

NON_VOWEL = register_pattern(
    name="char.non_vowel",
    pattern=r'[^aeiouAEIOU]',
    description="Any single character that is not an ASCII vowel",
    examples=[
        {"input": "a b", "match": [" ", "b"]},
    ],
)

# Matches vowels too
LETTER = register_pattern(
    name="char.letter",
    pattern=r'[a-zA-Z]',
    description="Single ASCII letter (used for consonant extraction)",
    examples=[
        {"input": "a1b", "match": ["a", "b"]},
    ],
)

SPECIAL = register_pattern(
    name="char.special",
    pattern=r'[^a-zA-Z0-9]',
    description="Any single character that is not an ASCII letter or digit",
    examples=[
        {"input": "a-b c", "match": ["-", " "]},
    ],
)

DIGIT = register_pattern(
    name="char.digit",
    pattern=r'\d',
    description="Single digit",
    examples=[
        {"input": "a1b2", "match": ["1", "2"]},
    ],
)
