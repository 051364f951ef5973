"""Regex patterns, constants and lookup tables shared by the string helpers.
"""

__docformat__ = 'google'

import re
from string import Template
from typing import Dict, List
from unistrings.lookups import Settings, SubstitutionData

# Lookup tables
SETTINGS: Settings = Settings()
SUBSTITUTIONS: SubstitutionData = SubstitutionData()

## Sizes
SIZE_UNITS: List[str] = SETTINGS.size_units
"""Unit labels used once a size reaches one step, smallest first.

Used in `unistrings.sizes.human_readable_size`."""

SIZE_STEP: int = SETTINGS.size_step
"""Divisor between consecutive units."""

## Layout
TRIM_CHARACTERS: str = SETTINGS.trim_characters
"""Characters stripped by `unistrings.layout.trim` by default.

Space, tab, line feed, carriage return, NUL, vertical tab and no-break space."""

ELLIPSIS: str = SETTINGS.ellipsis
"""Default suffix appended by `unistrings.layout.truncate`."""

INDENT_CHARACTERS: str = SETTINGS.indent_characters
"""Default indentation unit used by `unistrings.layout.indent`."""

# Building blocks
BOUNDARY: str = '[\\s\\x00-/:-@\\[-`{-~]'
"""Whitespace or ASCII punctuation; a place where text may be cut."""

TRUNCATE_TEMPLATE: Template = Template(f'^.{{1,$length}}(?={BOUNDARY})')
"""Longest prefix of at most `$length` code points followed by a boundary."""

# Patterns
LINE_START_PATTERN: re.Pattern = re.compile('(?:^|[\\r\\n]+)(?=[^\\r\\n])')
"""Matches the start of every non-blank line.

Used in `unistrings.layout.indent`."""

## Case & normalization
# Patterns
NEWLINE_PATTERN: re.Pattern = re.compile('\\r\\n?')
"""Matches Windows and classic Mac line terminators.

Used in `unistrings.casing.normalize_newlines`."""

CONTROL_CHARACTERS_PATTERN: re.Pattern = re.compile('[\\x00-\\x08\\x0B-\\x1F\\x7F-\\x9F]+')
"""Matches C0 and C1 control characters except tab and line feed.

Used in `unistrings.casing.normalize`."""

TRAILING_WHITESPACE_PATTERN: re.Pattern = re.compile('[\\t ]+$', re.M)
"""Matches spaces and tabs at the end of each line.

Used in `unistrings.casing.normalize`."""

COMBINING_MARKS: str = '\\u0300-\\u036F\\u1AB0-\\u1AFF\\u1DC0-\\u1DFF\\u20D0-\\u20FF\\uFE20-\\uFE2F'
"""Combining diacritical mark blocks; they extend the word they follow."""

WORD_CHARACTER: str = f'(?:[^\\W_]|[{COMBINING_MARKS}])'
WORD_SEGMENT: str = f'[^\\W_]{WORD_CHARACTER}*'

WORD_PATTERN: re.Pattern = re.compile(f"{WORD_SEGMENT}(?:['\\u2019]{WORD_SEGMENT})*")
"""Matches a run of letters and digits, allowing inner apostrophes.

Combining marks never break a word, so decomposed (NFD) text title-cases
the same as composed text. Underscores are word separators so that
`snake_case` names title-case one segment at a time.

Used in `unistrings.casing.title_case`."""

## Encodings
# Constants
GB2312: str = 'gb2312'
UTF8: str = 'utf-8'

GB_DEFAULT_ENCODING: str = SETTINGS.gb_default_encoding
"""Encoding assumed by `unistrings.encodings.detect_gb_encoding`."""

OUTPUT_ENCODING: str = SETTINGS.output_encoding
"""Target encoding of `unistrings.encodings.coerce_encoding`."""

TRANSLITERATOR: str = SETTINGS.transliterator
"""Name of the default transliteration backend.

See `unistrings.transliteration.BACKENDS`."""

TYPOGRAPHIC_SUBSTITUTIONS: Dict[int, str] = SUBSTITUTIONS.typographic
"""„ “ ” ‚ ‘ ’ ° Я я Ю ю Ä Ö Ü ẞ ä ö ü ß and their ASCII spellings.

Applied by `unistrings.encodings.to_ascii` before every backend."""

SYMBOL_SUBSTITUTIONS: Dict[int, str] = SUBSTITUTIONS.symbols
"""® © … « » £ ¥ ² ³ µ ¹ º ¿ ˊ ˍ ˝ ` € ™ ℮ ← ↑ → ↓ ↔ and their ASCII spellings.

Applied by `unistrings.encodings.to_ascii` unless the backend opts out."""

# Patterns
ASCII_BYTES_PATTERN: re.Pattern = re.compile(b'[\\x01-\\x7F]+')
"""Matches runs of ASCII bytes (NUL excluded).

Used in `unistrings.encodings.detect_gb_encoding`."""

GB2312_BYTES_PATTERN: re.Pattern = re.compile(b'(?:[\\xA1-\\xF7][\\xA0-\\xFE])+')
"""Matches a byte string made only of GB2312 double-byte characters."""

CJK_PATTERN: re.Pattern = re.compile('[\\u4E00-\\u9FA5]+')
"""Matches a string made only of CJK unified ideographs (simplified and traditional)."""

UNSAFE_CHARACTERS_PATTERN: re.Pattern = re.compile(
    '[^\\x09\\x0A\\x0D\\x20-\\x7E\\xA0-\\u02FF\\u0370-\\uD7FF\\uE000-\\U0010FFFF]'
    )
"""Matches control characters, combining diacritical marks and lone surrogates.

Used in `unistrings.encodings.to_ascii`."""

NON_ASCII_PATTERN: re.Pattern = re.compile('[^\\x00-\\x7F]+')
"""Matches runs of non-ASCII code points."""

SLUG_TEMPLATE: Template = Template('[^a-z0-9$charlist]+')
"""Characters that `unistrings.encodings.webalize` collapses into a dash."""
