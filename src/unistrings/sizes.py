"""Byte-count formatting.
"""

__docformat__ = 'google'

__all__ = [
    'human_readable_size'
]

from unistrings.patterns import SIZE_UNITS, SIZE_STEP

def human_readable_size(size: int|float) -> str:
    """
    Format a byte count with a binary-prefixed unit.

    Sizes below one kilobyte are reported in bytes as given. Larger sizes are
    divided by 1024 until they drop below it or the largest unit (GB) is
    reached, and printed with two decimals.

    Args:
        size: Non-negative number of bytes

    Returns:
        Human-readable size

    Raises:
        ValueError: If size is negative.

    Example:
        >>> human_readable_size(1023)
        '1023 bytes'
        >>> human_readable_size(512.0)
        '512 bytes'
        >>> human_readable_size(1536)
        '1.50 KB'
        >>> human_readable_size(5 * 1024 ** 4)
        '5120.00 GB'
    """
    if size < 0:
        raise ValueError(f'Size must not be negative: {size}')

    if size < SIZE_STEP:
        if isinstance(size, float) and size.is_integer():
            size = int(size)
        return f'{size} bytes'

    for unit in SIZE_UNITS:
        size /= SIZE_STEP
        if size < SIZE_STEP:
            break
    return f'{size:.2f} {unit}'
