"""Small functional helpers shared by the string modules.
"""

__docformat__ = 'google'

__all__ = [
    'chain_operations'
]

from functools import reduce
from typing import Callable, Iterable, TypeVar

T = TypeVar('T')

def chain_operations(value: T, operations: Iterable[Callable[[T], T]]) -> T:
    """
    Pass a value through a sequence of single-argument functions, in order.

    Args:
        value: Initial value
        operations: Functions applied left to right

    Returns:
        The output of the last function

    Example:
        >>> chain_operations(' Hello ', [str.strip, str.upper])
        'HELLO'
    """
    return reduce(lambda result, operation: operation(result), operations, value)
