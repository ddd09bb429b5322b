"""Shared character-stripping helpers used by the normalizer."""

import re

_NON_DIGIT = re.compile(r"\D", re.ASCII)
_NON_WORD = re.compile(r"\W", re.ASCII)


def digits_only(value: str) -> str:
    """Strip everything except ASCII decimal digits.

    Examples:
        >>> digits_only("(555) 555-5555")
        '5555555555'
        >>> digits_only("ph: 555.555.5555 ext 12")
        '555555555512'
    """
    return _NON_DIGIT.sub("", value)


def word_chars_only(value: str) -> str:
    """Strip everything except letters, digits and underscores.

    Examples:
        >>> word_chars_only(" x1x  2x3 ")
        'x1x2x3'
    """
    return _NON_WORD.sub("", value)


def chunk(value: str, *sizes: int) -> list[str]:
    """Split the leading part of ``value`` into consecutive pieces of ``sizes``.

    Characters past the sum of ``sizes`` are dropped.

    Examples:
        >>> chunk("5555555555", 3, 3, 4)
        ['555', '555', '5555']
    """
    parts = []
    start = 0
    for size in sizes:
        parts.append(value[start:start + size])
        start += size
    return parts
