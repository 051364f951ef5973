"""Encoding repair, encoding heuristics and ASCII transliteration.

The GB2312 helpers in this module are heuristics, not decoders. They look at
byte patterns that are typical of each encoding and can misclassify short or
ambiguous input; use them to guess, not to validate.
"""

__docformat__ = 'google'

__all__ = [
    'fix_utf8',
    'is_valid_utf8',
    'detect_gb_encoding',
    'coerce_encoding',
    'to_ascii',
    'codepoint_to_char',
    'webalize'
]

import codecs
import logging
import re
from typing import Optional, Union
from unistrings.transliteration import Transliterator, default_transliterator
from unistrings.patterns import (
    GB2312,
    UTF8,
    GB_DEFAULT_ENCODING,
    OUTPUT_ENCODING,
    TYPOGRAPHIC_SUBSTITUTIONS,
    SYMBOL_SUBSTITUTIONS,
    ASCII_BYTES_PATTERN,
    GB2312_BYTES_PATTERN,
    CJK_PATTERN,
    UNSAFE_CHARACTERS_PATTERN,
    NON_ASCII_PATTERN,
    SLUG_TEMPLATE
)

logger = logging.getLogger(__name__)

def _as_bytes(data: Union[str, bytes]) -> bytes:
    if isinstance(data, str):
        return data.encode(UTF8, 'surrogateescape')
    return data

def fix_utf8(s: Union[str, bytes]) -> str:
    """
    Remove everything that is not valid UTF-8.

    Byte strings lose malformed sequences, encoded surrogates (U+D800 to
    U+DFFF) and sequences above U+10FFFF. Text loses lone surrogates, which
    cannot be encoded.

    Args:
        s: Text or raw bytes

    Returns:
        Valid text

    Example:
        >>> fix_utf8(b'caf\\xc3\\xa9 \\xff\\xed\\xa0\\x80ok')
        'café ok'
        >>> fix_utf8('a\\udcffb')
        'ab'
    """
    if isinstance(s, bytes):
        return s.decode(UTF8, 'ignore')
    return s.encode(UTF8, 'ignore').decode(UTF8)

def is_valid_utf8(s: Union[str, bytes]) -> bool:
    """
    Check whether text or bytes are valid UTF-8.

    Example:
        >>> is_valid_utf8('café'.encode())
        True
        >>> is_valid_utf8(b'\\xc3')
        False
    """
    fixed = fix_utf8(s)
    if isinstance(s, bytes):
        return fixed.encode(UTF8) == s
    return fixed == s

def _matches_encoding(data: bytes, encoding: str) -> bool:
    if encoding == GB2312:
        return GB2312_BYTES_PATTERN.fullmatch(data) is not None
    try:
        return CJK_PATTERN.fullmatch(data.decode(UTF8)) is not None
    except UnicodeDecodeError:
        return False

def detect_gb_encoding(data: Union[str, bytes], default: str = GB_DEFAULT_ENCODING) -> str:
    """
    Guess whether Chinese text is encoded as GB2312 or UTF-8.

    ASCII bytes are ignored. What remains is tested against the byte
    pattern of the assumed encoding (GB2312 double-byte pairs, or UTF-8 CJK
    ideographs) and then converted to the other encoding. If either step
    fails, the other encoding is reported.

    Args:
        data: Raw bytes; text is encoded as UTF-8 first
        default: Encoding assumed when there is nothing to test, 'gb2312' or 'utf-8'

    Returns:
        'gb2312' or 'utf-8'

    Raises:
        ValueError: If default is not one of the two supported encodings.

    Example:
        >>> detect_gb_encoding('你好'.encode('gb2312'))
        'gb2312'
        >>> detect_gb_encoding('你好'.encode('utf-8'))
        'utf-8'
        >>> detect_gb_encoding(b'hello')
        'gb2312'
    """
    default = default.lower()
    if default not in (GB2312, UTF8):
        raise ValueError(f"Unsupported encoding '{default}', expected '{GB2312}' or '{UTF8}'")
    option = UTF8 if default == GB2312 else GB2312

    remainder = ASCII_BYTES_PATTERN.sub(b'', _as_bytes(data))
    if not remainder:
        return default

    if not _matches_encoding(remainder, default):
        logger.debug("Bytes do not look like %s, assuming %s", default, option)
        return option

    try:
        remainder.decode(default).encode(option)
    except UnicodeError:
        logger.debug("Bytes do not convert from %s to %s, assuming %s", default, option, option)
        return option
    return default

def _guess_encoding(data: bytes) -> str:
    """Scan for the first high-bit sequence that looks like UTF-8 or GB2312."""
    size = len(data)
    i = 0
    while i < size:
        if data[i] < 0x80:
            i += 1
            continue

        if data[i] & 0xE0 == 0xE0:
            i += 1
            if i < size and data[i] & 0x80:
                i += 1
                if i < size and data[i] & 0x80:
                    return UTF8

        if i < size and data[i] & 0xC0 == 0xC0:
            i += 1
            if i < size and data[i] & 0x80:
                return GB2312
        i += 1
    return UTF8

def coerce_encoding(data: Union[str, bytes], out_encoding: str = OUTPUT_ENCODING) -> bytes:
    """
    Convert UTF-8 or GB2312 bytes to the requested encoding.

    The source encoding is guessed from the first multi-byte sequence: a
    three-byte run with the high bits of a UTF-8 lead byte is taken as UTF-8,
    a two-byte run with a GB2312-like lead byte as GB2312. Bytes with no
    multi-byte sequence are treated as UTF-8. Characters that cannot be
    represented in `out_encoding` are dropped.

    Args:
        data: Raw bytes; text is encoded as UTF-8 first
        out_encoding: Any codec name known to Python

    Returns:
        Bytes in `out_encoding`

    Example:
        >>> coerce_encoding('你好'.encode('gb2312')) == '你好'.encode('utf-8')
        True
        >>> coerce_encoding('你好'.encode('utf-8')) == '你好'.encode('utf-8')
        True
    """
    data = _as_bytes(data)
    encoding = _guess_encoding(data)
    if codecs.lookup(encoding).name == codecs.lookup(out_encoding).name:
        return data

    logger.debug("Converting %s bytes to %s", encoding, out_encoding)
    return data.decode(encoding, 'ignore').encode(out_encoding, 'ignore')

def to_ascii(s: str, transliterator: Optional[Transliterator] = None) -> str:
    """
    Transliterate text to printable ASCII.

    Operations performed:
        1. Remove control characters, combining marks and lone surrogates
        2. Replace typographic quotes, the degree sign, Я/я/Ю/ю and German
           umlauts with fixed ASCII spellings
        3. Replace symbols such as ©, €, ™ and arrows, unless the backend
           opts out
        4. Transliterate with the backend
        5. Remove anything that is still not ASCII

    Exact output for scripts without a fixed spelling depends on the backend.

    Args:
        s: Any text
        transliterator: Backend to use instead of the process-wide default

    Example:
        >>> to_ascii('Žluťoučký kůň')
        'Zlutoucky kun'
        >>> to_ascii('Größe „Maß“ © 2024')
        'Groesse "Mass" (c) 2024'
    """
    backend = transliterator or default_transliterator()

    s = UNSAFE_CHARACTERS_PATTERN.sub('', s)
    s = s.translate(TYPOGRAPHIC_SUBSTITUTIONS)
    if backend.applies_symbol_table:
        s = s.translate(SYMBOL_SUBSTITUTIONS)
    s = backend.transliterate(s)
    return NON_ASCII_PATTERN.sub('', s)

def codepoint_to_char(code: int) -> str:
    """
    Character for a Unicode scalar value.

    Args:
        code: Code point in range 0x0 to 0xD7FF or 0xE000 to 0x10FFFF

    Raises:
        ValueError: If code is negative, a surrogate, or above 0x10FFFF.

    Example:
        >>> codepoint_to_char(0xA9)
        '©'
        >>> codepoint_to_char(0xA9).encode()
        b'\\xc2\\xa9'
    """
    if code < 0 or 0xD800 <= code <= 0xDFFF or code > 0x10FFFF:
        raise ValueError('Code point must be in range 0x0 to 0xD7FF or 0xE000 to 0x10FFFF.')
    return chr(code)

def webalize(s: str, charlist: Optional[str] = None, lower: bool = True) -> str:
    """
    Convert text to a URL slug.

    Args:
        s: Any text
        charlist: Extra characters allowed in the slug
        lower: Lower-case the result

    Example:
        >>> webalize('Hello world', lower=False)
        'Hello-world'
        >>> webalize('10. image_id', '._')
        '10.-image_id'
        >>> webalize('Žluťoučký kůň!')
        'zlutoucky-kun'
    """
    s = to_ascii(s)
    if lower:
        s = s.lower()
    allowed = re.escape(charlist) if charlist is not None else ''
    s = re.sub(SLUG_TEMPLATE.substitute(charlist=allowed), '-', s, flags=re.I)
    return s.strip('-')
