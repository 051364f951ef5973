import re
from dataclasses import dataclass
from functools import cached_property
from enum import Enum

class MatchOrder(Enum):
    """
    Grouping of results returned by `unistrings.expressions.match_all`.
    """
    SET = "set"
    """One list of groups per match."""
    PATTERN = "pattern"
    """One list per group, holding that group for every match."""

@dataclass(frozen=True)
class RegexPattern:
    """
    A regular expression together with the flags it should be compiled with.

    Args:
        pattern: Regular expression source
        ignore_case: Match letters regardless of case
        multiline: `^` and `$` match at every line boundary
        dotall: `.` also matches line feeds
        unicode: Unicode-aware `\\w`, `\\s` and `\\d` (ASCII-only when False)
        delimiter_capture: Keep captured delimiters in `unistrings.expressions.split_regex` output

    The compiled pattern is built on first use and kept on the instance.
    """
    pattern: str
    ignore_case: bool = False
    multiline: bool = False
    dotall: bool = False
    unicode: bool = True
    delimiter_capture: bool = True

    @property
    def flags(self) -> int:
        flags = 0 if self.unicode else re.ASCII
        if self.ignore_case: flags |= re.IGNORECASE
        if self.multiline: flags |= re.MULTILINE
        if self.dotall: flags |= re.DOTALL
        return flags

    @cached_property
    def compiled(self) -> re.Pattern:
        return re.compile(self.pattern, self.flags)
