"""Trimming, padding, truncation and indentation.

Lengths are counted in code points.
"""

__docformat__ = 'google'

__all__ = [
    'trim',
    'truncate',
    'indent',
    'pad_left',
    'pad_right'
]

import re
from unistrings.patterns import (
    TRIM_CHARACTERS,
    ELLIPSIS,
    INDENT_CHARACTERS,
    TRUNCATE_TEMPLATE,
    LINE_START_PATTERN
)

def trim(s: str, charlist: str = TRIM_CHARACTERS) -> str:
    """
    Strip leading and trailing characters found in `charlist`.

    Args:
        s: Any text
        charlist: Characters to strip. Defaults to whitespace, NUL and no-break space.

    Example:
        >>> trim('\\u00a0 Hello\\t ')
        'Hello'
        >>> trim('--Hello--', '-')
        'Hello'
    """
    return s.strip(charlist)

def truncate(s: str, max_len: int, ellipsis: str = ELLIPSIS) -> str:
    """
    Shorten text to at most `max_len` characters, ending with an ellipsis.

    The cut is made at the last word boundary (whitespace or ASCII
    punctuation) that fits, or mid-word when there is none.

    Args:
        s: Any text
        max_len: Maximum length of the result, ellipsis included
        ellipsis: Suffix marking the cut

    Returns:
        Input unchanged if it already fits, else the shortened text. When the
        ellipsis alone does not leave room for a character, only the ellipsis
        is returned.

    Example:
        >>> text = 'Hello, how are you today?'
        >>> truncate(text, 5)
        'Hell…'
        >>> truncate(text, 20)
        'Hello, how are you…'
        >>> truncate(text, 30)
        'Hello, how are you today?'
        >>> truncate(text, 20, '~')
        'Hello, how are you~'
    """
    if len(s) <= max_len:
        return s

    budget = max_len - len(ellipsis)
    if budget < 1:
        return ellipsis

    boundary_pattern = TRUNCATE_TEMPLATE.substitute(length=budget)
    match = re.match(boundary_pattern, s, re.S)
    if match is None:
        return s[:budget] + ellipsis
    else:
        return match.group() + ellipsis

def indent(s: str, level: int = 1, chars: str = INDENT_CHARACTERS) -> str:
    """
    Indent every non-blank line.

    Args:
        s: Any text, possibly multi-line
        level: Number of times `chars` is repeated
        chars: Indentation unit, a tab by default

    Example:
        >>> indent('Hello')
        '\\tHello'
        >>> indent('Hello', 2, '+')
        '++Hello'
        >>> indent('one\\n\\ntwo', 1, '  ')
        '  one\\n\\n  two'
    """
    if level <= 0:
        return s
    prefix = chars * level
    return LINE_START_PATTERN.sub(lambda match: match.group() + prefix, s)

def _padding(s: str, length: int, pad: str) -> str:
    if not pad:
        raise ValueError('Padding string must not be empty')
    missing = max(0, length - len(s))
    repeats, remainder = divmod(missing, len(pad))
    return pad * repeats + pad[:remainder]

def pad_left(s: str, length: int, pad: str = ' ') -> str:
    """
    Pad text on the left to the given length.

    Args:
        s: Any text
        length: Target length; shorter targets leave the input unchanged
        pad: Padding unit, repeated and cut to fit

    Raises:
        ValueError: If pad is empty.

    Example:
        >>> pad_left('Hello', 6)
        ' Hello'
        >>> pad_left('Hello', 8, '+*')
        '+*+Hello'
    """
    return _padding(s, length, pad) + s

def pad_right(s: str, length: int, pad: str = ' ') -> str:
    """
    Pad text on the right to the given length.

    Example:
        >>> pad_right('Hello', 6)
        'Hello '
        >>> pad_right('Hello', 8, '+*')
        'Hello+*+'
    """
    return s + _padding(s, length, pad)
