"""Structural validation of submitted URLs and requested short paths.

Patterns are compiled once and matched against the whole input string.
No percent-decoding or internationalization is performed.

Functions:
    validate_url(value) -> bool
    validate_path(value) -> bool
    has_scheme(value) -> bool
    normalize_url(value) -> str

Example:
    >>> validate_url('example.com')
    True
    >>> validate_path('/1a2b3c4d')
    True
    >>> normalize_url('example.com')
    'http://example.com'
"""

import re

from shortcutter.constants import DEFAULT_SCHEME


URL_PATTERN = re.compile(r'[a-zA-Z0-9_:./]{5,200}')
PATH_PATTERN = re.compile(r'/[0-9A-Za-z]{2,15}')
SCHEME_PATTERN = re.compile(r'https?://')


def validate_url(value: str) -> bool:
    """True iff `value` is 5-200 characters of letters, digits, '_', ':', '.' or '/'."""
    return isinstance(value, str) and URL_PATTERN.fullmatch(value) is not None


def validate_path(value: str) -> bool:
    """True iff `value` is '/' followed by 2-15 ASCII alphanumerics."""
    return isinstance(value, str) and PATH_PATTERN.fullmatch(value) is not None


def has_scheme(value: str) -> bool:
    """True iff `value` starts with 'http://' or 'https://'."""
    return isinstance(value, str) and SCHEME_PATTERN.match(value) is not None


def normalize_url(value: str) -> str:
    return value if has_scheme(value) else f'{DEFAULT_SCHEME}{value}'
