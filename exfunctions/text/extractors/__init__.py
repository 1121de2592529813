"""
Extractor Functions

URLs, phone numbers and social security numbers by regular expression.
"""

from .urls import urls
from .phones import phone_numbers
from .ssns import ssns

__all__ = [
    'urls',
    'phone_numbers',
    'ssns',
]
