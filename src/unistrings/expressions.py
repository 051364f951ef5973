"""Regular expression helpers.

Every function accepts a pattern as a regex string (compiled with `flags`), a
precompiled `re.Pattern`, or a `unistrings.entities.RegexPattern`, whose own
flags take precedence.

Match results are plain lists of groups: index 0 is the whole match and
groups that did not participate are None.
"""

__docformat__ = 'google'

__all__ = [
    'split_regex',
    'match_first',
    'match_all',
    'replace'
]

import re
from typing import Callable, List, Mapping, Optional, Sequence, Union
from unistrings.entities import MatchOrder, RegexPattern

PatternLike = Union[str, re.Pattern, RegexPattern]
Groups = List[Optional[str]]
Replacement = Union[str, Callable[[Groups], str]]

def _compile(pattern: PatternLike, flags: int = 0) -> re.Pattern:
    if isinstance(pattern, RegexPattern):
        return pattern.compiled
    elif isinstance(pattern, re.Pattern):
        return pattern
    else:
        return re.compile(pattern, flags)

def _groups(match: re.Match) -> Groups:
    return [match.group(0), *match.groups()]

def split_regex(s: str, pattern: PatternLike, flags: int = 0, skip_empty: bool = False) -> List[str]:
    """
    Split text on a regex, keeping captured delimiters.

    Args:
        s: Text to split
        pattern: Delimiter pattern
        flags: `re` flags for string patterns
        skip_empty: Drop empty pieces

    Returns:
        Pieces of text, with the text of each participating capture group
        between them

    Example:
        >>> split_regex('One,  two,three', ',\\\\s*')
        ['One', 'two', 'three']
        >>> split_regex('One,  two,three', '(,)\\\\s*')
        ['One', ',', 'two', ',', 'three']
    """
    compiled = _compile(pattern, flags)
    pieces = compiled.split(s)

    if isinstance(pattern, RegexPattern) and not pattern.delimiter_capture:
        pieces = pieces[::compiled.groups + 1]

    pieces = [piece for piece in pieces if piece is not None]
    if skip_empty:
        pieces = list(filter(None, pieces))
    return pieces

def match_first(s: str, pattern: PatternLike, flags: int = 0, offset: int = 0) -> Optional[Groups]:
    """
    Groups of the first match at or after `offset`.

    Example:
        >>> match_first('One,  two,three', '[a-z]+', re.I)
        ['One']
        >>> match_first('Order 66', '([a-z]+) (\\\\d+)', re.I)
        ['Order 66', 'Order', '66']
        >>> match_first('One,  two,three', '\\\\d+') is None
        True
    """
    if offset > len(s):
        return None
    match = _compile(pattern, flags).search(s, offset)
    return None if match is None else _groups(match)

def match_all(
        s: str,
        pattern: PatternLike,
        flags: int = 0,
        offset: int = 0,
        order: MatchOrder = MatchOrder.SET
    ) -> List[Groups]:
    """
    Groups of every match at or after `offset`.

    Args:
        s: Text to search
        pattern: Pattern to find
        flags: `re` flags for string patterns
        offset: Position to start searching from
        order: `MatchOrder.SET` for one groups list per match,
            `MatchOrder.PATTERN` for one list per group

    Example:
        >>> match_all('One,  two,three', '[a-z]+', re.I)
        [['One'], ['two'], ['three']]
        >>> match_all('a1 b2', '([a-z])(\\\\d)', order=MatchOrder.PATTERN)
        [['a1', 'b2'], ['a', 'b'], ['1', '2']]
        >>> match_all('One,  two,three', '\\\\d+')
        []
    """
    if offset > len(s):
        return []

    compiled = _compile(pattern, flags)
    matches = [_groups(match) for match in compiled.finditer(s, offset)]

    if order is MatchOrder.PATTERN:
        return [[groups[i] for groups in matches] for i in range(compiled.groups + 1)]
    return matches

def _substitute(s: str, pattern: PatternLike, replacement: Replacement, count: int) -> str:
    compiled = _compile(pattern)
    if callable(replacement):
        return compiled.sub(lambda match: replacement(_groups(match)), s, count)
    elif isinstance(replacement, str):
        return compiled.sub(replacement, s, count)
    else:
        raise TypeError(f'Replacement must be a string or callable, not {type(replacement).__name__}')

def replace(
        s: str,
        pattern: Union[PatternLike, Mapping[PatternLike, Replacement], Sequence[PatternLike]],
        replacement: Union[Replacement, Sequence[Replacement]] = '',
        limit: int = -1
    ) -> str:
    """
    Replace regex matches.

    Args:
        s: Text to change
        pattern: A pattern; a mapping of patterns to their replacements; or a
            sequence of patterns applied in order
        replacement: A `re` replacement template (`\\1`, `\\g<name>`), or a
            callable receiving the match groups and returning the substitute.
            With a sequence of patterns, may also be a parallel sequence of
            replacements (missing entries replace with '').
        limit: Maximum replacements per pattern; -1 for no limit

    Raises:
        TypeError: If a replacement is neither a string nor callable.

    Example:
        >>> replace('One,  two,three', RegexPattern('[a-z]+', ignore_case=True), '*')
        '*,  *,*'
        >>> replace('One,  two,three', {'(?i)[a-z]+': '*', '\\\\s+': '+'})
        '*,+*,*'
        >>> replace('One,  two,three', '(?i)[a-z]+', lambda m: m[0][::-1])
        'enO,  owt,eerht'
    """
    if limit == 0:
        return s
    count = 0 if limit < 0 else limit

    if isinstance(pattern, Mapping):
        pairs = list(pattern.items())
    elif isinstance(pattern, (str, re.Pattern, RegexPattern)):
        pairs = [(pattern, replacement)]
    elif isinstance(replacement, str) or callable(replacement):
        pairs = [(p, replacement) for p in pattern]
    else:
        replacements = list(replacement)
        pairs = [
            (p, replacements[i] if i < len(replacements) else '')
            for i, p in enumerate(pattern)
        ]

    for p, r in pairs:
        s = _substitute(s, p, r, count)
    return s
