"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
import logging

from . import sizes
from . import casing
from . import layout
from . import search
from . import encodings
from . import expressions
from . import transliteration
from . import patterns
from . import entities

from .sizes import *
from .casing import *
from .layout import *
from .search import *
from .encodings import *
from .expressions import *
from .entities import MatchOrder, RegexPattern

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Modules
    'sizes',
    'casing',
    'layout',
    'search',
    'encodings',
    'expressions',
    'transliteration',
    'patterns',
    'entities',
    # Types
    'MatchOrder',
    'RegexPattern',
    *sizes.__all__,
    *casing.__all__,
    *layout.__all__,
    *search.__all__,
    *encodings.__all__,
    *expressions.__all__
]
