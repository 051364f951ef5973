"""Substring extraction, searching and comparison.

Positions and lengths are code point offsets into `str` values.
"""

__docformat__ = 'google'

__all__ = [
    'substring',
    'reverse',
    'length',
    'starts_with',
    'ends_with',
    'contains',
    'compare_ignore_case',
    'compare',
    'common_prefix',
    'before',
    'after',
    'index_of'
]

import unicodedata
from typing import Optional, Sequence, Union

def substring(s: str, start: int, length: Optional[int] = None) -> str:
    """
    Extract part of a string.

    Args:
        s: Any text
        start: Offset of the first character; negative values count from the end
        length: Number of characters to take. None takes everything to the end,
            a negative value leaves that many characters off the end.

    Example:
        >>> substring('Nette Framework', 0, 5)
        'Nette'
        >>> substring('Nette Framework', 6)
        'Framework'
        >>> substring('Nette Framework', -4)
        'work'
        >>> substring('Nette Framework', 6, -4)
        'Frame'
    """
    size = len(s)
    begin = max(size + start, 0) if start < 0 else min(start, size)

    if length is None:
        end = size
    elif length < 0:
        end = max(size + length, begin)
    else:
        end = min(begin + length, size)
    return s[begin:end]

def reverse(s: str) -> str:
    """
    Reverse the order of code points.

    Combining marks are reversed like any other code point, so they end up
    before their base character.

    Example:
        >>> reverse('Nette')
        'etteN'
    """
    return s[::-1]

def length(s: str) -> int:
    """
    Number of code points.

    Example:
        >>> length('Žluťoučký')
        9
    """
    return len(s)

def starts_with(haystack: str, needle: str) -> bool:
    return haystack.startswith(needle)

def ends_with(haystack: str, needle: str) -> bool:
    return haystack.endswith(needle)

def contains(haystack: str, needle: str) -> bool:
    return needle in haystack

def compare_ignore_case(left: str, right: str, length: Optional[int] = None) -> bool:
    """
    Compare two strings, or their first or last characters, ignoring case.

    Both strings are decomposed (NFD) first, so precomposed and combining
    forms of the same letter compare equal.

    Args:
        left: Text to compare
        right: Text to compare
        length: Compare only this many leading characters, or trailing
            characters when negative. None compares the whole strings.

    Example:
        >>> compare_ignore_case('Nette', 'nette')
        True
        >>> compare_ignore_case('Nette', 'next', 2)
        True
        >>> compare_ignore_case('Nette', 'Latte', -2)
        True
    """
    left = unicodedata.normalize('NFD', left)
    right = unicodedata.normalize('NFD', right)

    if length is not None and length < 0:
        left = substring(left, length, -length)
        right = substring(right, length, -length)
    elif length is not None:
        left = substring(left, 0, length)
        right = substring(right, 0, length)
    return left.lower() == right.lower()

compare = compare_ignore_case

def _realign_utf8(prefix: bytes, following: bytes) -> bytes:
    """Drop a trailing partial UTF-8 sequence from a byte prefix."""
    end = len(prefix)
    while end and prefix[end - 1] >= 0x80 and following[:1] and 0x80 <= following[0] < 0xC0:
        end -= 1
        following = prefix[end:end + 1]
    return prefix[:end]

def common_prefix(strings: Sequence[Union[str, bytes]]) -> Union[str, bytes]:
    """
    Longest prefix shared by all strings.

    Text is compared by code point. Byte strings are compared by byte, and
    the prefix is shortened if it would end inside a UTF-8 sequence.

    Args:
        strings: Strings of the same type

    Returns:
        Common prefix; empty if there is none or `strings` is empty

    Example:
        >>> common_prefix(['prefix-a', 'prefix-bb', 'prefix-c'])
        'prefix-'
        >>> common_prefix(['Nette', 'is', 'great'])
        ''
        >>> common_prefix(['caf\\u00e9'.encode(), 'caf\\u00e8'.encode()])
        b'caf'
    """
    if len(strings) == 0:
        return ''

    first, *others = strings
    for i in range(len(first)):
        for other in others:
            if i >= len(other) or first[i] != other[i]:
                if isinstance(first, bytes):
                    return _realign_utf8(first[:i], first[i:i + 1])
                return first[:i]
    return first

def _position(haystack: str, needle: str, nth: int = 1) -> Optional[int]:
    """Offset of the nth occurrence of needle, counting from the end when nth is negative."""
    if nth == 0:
        return None

    if nth > 0:
        if needle == '':
            return 0
        pos = haystack.find(needle)
        while pos != -1 and nth > 1:
            nth -= 1
            pos = haystack.find(needle, pos + 1)
    else:
        if needle == '':
            return len(haystack)
        pos = haystack.rfind(needle)
        while pos != -1 and nth < -1:
            nth += 1
            pos = haystack.rfind(needle, 0, pos - 1 + len(needle)) if pos > 0 else -1
    return None if pos == -1 else pos

def before(haystack: str, needle: str, nth: int = 1) -> Optional[str]:
    """
    Text before the nth occurrence of a needle.

    Args:
        haystack: Text to search
        needle: Text to find
        nth: Occurrence to use, 1-based. Negative values count from the end.

    Returns:
        Text preceding the occurrence, or None if it does not exist

    Example:
        >>> before('Nette_is_great', '_', 1)
        'Nette'
        >>> before('Nette_is_great', '_', -2)
        'Nette'
        >>> before('Nette_is_great', ' ') is None
        True
        >>> before('Nette_is_great', '_', 3) is None
        True
    """
    pos = _position(haystack, needle, nth)
    return None if pos is None else haystack[:pos]

def after(haystack: str, needle: str, nth: int = 1) -> Optional[str]:
    """
    Text after the nth occurrence of a needle.

    Example:
        >>> after('Nette_is_great', '_', 2)
        'great'
        >>> after('Nette_is_great', '_', -1)
        'great'
        >>> after('Nette_is_great', ' ') is None
        True
    """
    pos = _position(haystack, needle, nth)
    return None if pos is None else haystack[pos + len(needle):]

def index_of(haystack: str, needle: str, nth: int = 1) -> Optional[int]:
    """
    Offset of the nth occurrence of a needle.

    Example:
        >>> index_of('abc abc abc', 'abc', 2)
        4
        >>> index_of('abc abc abc', 'abc', -1)
        8
        >>> index_of('abc abc abc', 'd') is None
        True
    """
    return _position(haystack, needle, nth)
