"""Transliteration backends used by `unistrings.encodings.to_ascii`.

A backend turns arbitrary text into (mostly) ASCII. The default backend is
chosen by the `transliterator` package setting and created once per process;
callers that need a different one can pass it to `to_ascii` directly.
"""

__docformat__ = 'google'

__all__ = [
    'Transliterator',
    'UnidecodeTransliterator',
    'AsciiStripper',
    'BACKENDS',
    'create_transliterator',
    'default_transliterator'
]

import logging
import threading
from typing import Dict, Optional, Protocol, Type
from unidecode import unidecode
from unistrings.patterns import NON_ASCII_PATTERN, TRANSLITERATOR

logger = logging.getLogger(__name__)

class Transliterator(Protocol):
    applies_symbol_table: bool
    """Whether `to_ascii` should replace symbols (©, €, →, ...) before calling the backend."""

    def transliterate(self, s: str) -> str:
        ...

class UnidecodeTransliterator:
    """Context-free character-by-character romanization with Unidecode."""
    applies_symbol_table = True

    def transliterate(self, s: str) -> str:
        return unidecode(s)

class AsciiStripper:
    """Fallback backend that drops every non-ASCII character."""
    applies_symbol_table = True

    def transliterate(self, s: str) -> str:
        return NON_ASCII_PATTERN.sub('', s)

BACKENDS: Dict[str, Type[Transliterator]] = {
    'unidecode': UnidecodeTransliterator,
    'none': AsciiStripper
}
"""Transliteration backends by setting name."""

def create_transliterator(name: str) -> Transliterator:
    """
    Create a backend by name.

    Raises:
        ValueError: If no backend is registered under that name.
    """
    backend = BACKENDS.get(name)
    if backend is None:
        raise ValueError(f"Unknown transliterator '{name}', expected one of: {', '.join(BACKENDS)}")
    return backend()

_default: Optional[Transliterator] = None
_default_lock = threading.Lock()

def default_transliterator() -> Transliterator:
    """
    The process-wide backend configured by the `transliterator` setting.

    Created on first use; concurrent first calls share a single instance.
    """
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                logger.debug("Creating default transliterator '%s'", TRANSLITERATOR)
                _default = create_transliterator(TRANSLITERATOR)
    return _default
