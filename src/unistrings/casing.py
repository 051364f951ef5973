"""Case conversion and text normalization.

All functions operate on code points and use Unicode case tables, so they
behave the same for any script regardless of locale.
"""

__docformat__ = 'google'

__all__ = [
    'to_lower',
    'to_upper',
    'first_lower',
    'first_upper',
    'title_case',
    'capitalize',
    'underscore_to_camel',
    'normalize',
    'normalize_newlines'
]

import re
import unicodedata
from unistrings.helpers import chain_operations
from unistrings.patterns import (
    NEWLINE_PATTERN,
    CONTROL_CHARACTERS_PATTERN,
    TRAILING_WHITESPACE_PATTERN,
    WORD_PATTERN
)

def to_lower(s: str) -> str:
    """
    Example:
        >>> to_lower('Hello WORLD')
        'hello world'
    """
    return s.lower()

def to_upper(s: str) -> str:
    """
    Example:
        >>> to_upper('Hello world')
        'HELLO WORLD'
    """
    return s.upper()

def first_lower(s: str) -> str:
    """
    Lower-case the first character and leave the rest untouched.

    Example:
        >>> first_lower('Hello World')
        'hello World'
    """
    return s[:1].lower() + s[1:]

def first_upper(s: str) -> str:
    """
    Upper-case the first character and leave the rest untouched.

    Example:
        >>> first_upper('hello world')
        'Hello world'
    """
    return s[:1].upper() + s[1:]

def _title_word(match: re.Match) -> str:
    word = match.group()
    return word[:1].title() + word[1:].lower()

def title_case(s: str) -> str:
    """
    Capitalize the first letter of every word and lower-case the rest.

    Words are runs of letters and digits. Underscores and other punctuation
    separate words; an apostrophe between two letters does not.

    Args:
        s: Any text

    Returns:
        Title-cased text

    Example:
        >>> title_case('hello wORLD')
        'Hello World'
        >>> title_case("don't stop")
        "Don't Stop"
        >>> title_case('user_first_name')
        'User_First_Name'
    """
    return WORD_PATTERN.sub(_title_word, s)

capitalize = title_case

def underscore_to_camel(s: str) -> str:
    """
    Convert a snake_case name to PascalCase.

    Example:
        >>> underscore_to_camel('user_first_name')
        'UserFirstName'
    """
    return title_case(s).replace('_', '')

def normalize_newlines(s: str) -> str:
    """
    Convert Windows (CRLF) and classic Mac (CR) line endings to LF.

    Example:
        >>> normalize_newlines('one\\r\\ntwo\\rthree\\n')
        'one\\ntwo\\nthree\\n'
    """
    return NEWLINE_PATTERN.sub('\n', s)

def _strip_control_characters(s: str) -> str:
    return CONTROL_CHARACTERS_PATTERN.sub('', s)

def _compose(s: str) -> str:
    return unicodedata.normalize('NFC', s)

def _strip_trailing_whitespace(s: str) -> str:
    return TRAILING_WHITESPACE_PATTERN.sub('', s)

def _strip_blank_edges(s: str) -> str:
    return s.strip('\n')

def normalize(s: str) -> str:
    """
    Clean up text for storage or comparison.

    Operations performed:
        1. Convert line endings to LF
        2. Remove control characters other than tab and LF
        3. Compose to Unicode normal form C
        4. Strip spaces and tabs at the end of each line
        5. Strip leading and trailing line feeds

    Composition runs after control characters are removed, so that marks
    separated from their base by a control character are composed in one
    pass and the result is stable under repeated normalization.

    Args:
        s: Any text

    Returns:
        Normalized text

    Example:
        >>> normalize('\\n\\nHello  \\r\\nWorld\\x07\\t\\n\\n')
        'Hello\\nWorld'
        >>> normalize('Cafe\\u0301') == 'Caf\\u00e9'
        True
    """
    normalization_functions = [
        normalize_newlines
        , _strip_control_characters
        , _compose
        , _strip_trailing_whitespace
        , _strip_blank_edges
    ]
    return chain_operations(s, normalization_functions)
