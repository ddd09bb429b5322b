"""
Formatters that turn loosely typed phone numbers and postal codes into
their canonical display form.

Every formatter returns the input unchanged when it does not have the
minimum required shape. Nothing here raises on malformed input; callers
that need a success flag use ``normalize()`` instead.

Usage:
    format_nanp("(555) 555-5555")            # '555-555-5555'
    format_nanp_quebec("555.555.5555", True)  # '1 555 555-5555'
    format_ca_postal_code(" h2x 1y4 ")       # 'H2X 1Y4'
"""

import logging
import re
from typing import Any, Callable, Optional

from normval.config import settings
from normval.schemas import NormalizedValue
from normval.utils import chunk, digits_only, word_chars_only

logger = logging.getLogger(__name__)

NANP_DIGITS = 10
NANP_GROUPS = (3, 3, 4)
POSTAL_CODE_LENGTH = 6
POSTAL_CODE_GROUPS = (3, 3)


def _nanp_groups(value: str, include_country_code: bool) -> Optional[list[str]]:
    """Split the first ten digits of ``value`` into NANP groups, or None if too short."""
    digits = digits_only(value)
    if len(digits) < NANP_DIGITS:
        logger.debug("Not a NANP number (%d digits): %r", len(digits), value)
        return None

    groups = chunk(digits, *NANP_GROUPS)
    if include_country_code:
        groups.insert(0, settings.normalizer.nanp_country_code)
    return groups


def format_nanp(value: str, include_country_code: bool = False) -> str:
    """Format a North American Numbering Plan phone number.

    Only the first ten digits are used; anything after them (an extension,
    for instance) is dropped.

    Examples:
        >>> format_nanp("(555) 555-5555")
        '555-555-5555'
        >>> format_nanp("555.555.5555", True)
        '1-555-555-5555'
        >>> format_nanp("(55) 555-5555")
        '(55) 555-5555'
    """
    groups = _nanp_groups(value, include_country_code)
    if groups is None:
        return value
    return "-".join(groups)


def format_nanp_quebec(value: str, include_country_code: bool = False) -> str:
    """Format a NANP phone number Quebec style: ``555 555-5555``.

    Works like ``format_nanp`` but turns the first hyphen (the first two
    when the country code is included) into spaces.
    """
    groups = _nanp_groups(value, include_country_code)
    if groups is None:
        return value
    return " ".join(groups[:-1]) + "-" + groups[-1]


def format_ca_postal_code(value: str) -> str:
    """Format a Canadian postal code as ``L#L #L#``.

    Examples:
        >>> format_ca_postal_code(" x1x  2x3 ")
        'X1X 2X3'
        >>> format_ca_postal_code("90120-1234")
        '90120-1234'
    """
    compact = word_chars_only(value.upper())
    if len(compact) != POSTAL_CODE_LENGTH:
        logger.debug("Not a postal code (%d characters): %r", len(compact), value)
        return value

    return " ".join(chunk(compact, *POSTAL_CODE_GROUPS))


# Formatter and the canonical shape of its successful output.
FORMATTERS: dict[str, tuple[Callable[..., str], re.Pattern]] = {
    "nanp": (format_nanp, re.compile(r"^(\d+-)?\d{3}-\d{3}-\d{4}$", re.ASCII)),
    "nanp_quebec": (format_nanp_quebec, re.compile(r"^(\d+ )?\d{3} \d{3}-\d{4}$", re.ASCII)),
    "ca_postal_code": (format_ca_postal_code, re.compile(r"^\w{3} \w{3}$", re.ASCII)),
}


def normalize(kind: str, value: str, **options: Any) -> NormalizedValue:
    """Run the formatter for ``kind`` and report whether it accepted the input.

    Raises:
        ValueError: if ``kind`` is not a known formatter.
    """
    try:
        formatter, canonical = FORMATTERS[kind]
    except KeyError:
        raise ValueError(
            f"Unknown normalizer: {kind!r} (expected one of {', '.join(FORMATTERS)})"
        ) from None

    result = formatter(value, **options)
    return NormalizedValue(
        original=value,
        value=result,
        ok=canonical.match(result) is not None,
    )
