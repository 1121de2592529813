"""
Patterns: URLs, US Phone Numbers, US Social Security Numbers

Defaults come from configuration so deployments can swap them.
"""

from ..config import config
from .registry import register_pattern


URL = register_pattern(
    name="contact.url",
    pattern=config.url_pattern,
    description="URL with scheme, www. prefix or user@host form",
    examples=[
        {"input": "see http://example.com now", "match": ["http://example.com"]},
    ],
)

PHONE_US = register_pattern(
    name="contact.phone.us",
    pattern=config.phone_pattern,
    description="US phone number with optional +1 prefix",
    examples=[
        {"input": "call (555) 987-6543", "match": ["(555) 987-6543"]},
    ],
)

SSN_US = register_pattern(
    name="contact.ssn.us",
    pattern=config.ssn_pattern,
    description="US social security number at the end of the text",
    examples=[
        {"input": "SSN: 123-45-6789", "match": ["123-45-6789"]},
    ],
)
