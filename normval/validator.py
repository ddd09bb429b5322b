"""
Fluent validator that accumulates error messages against one input string.

Each check appends its message to ``errors`` when its failure condition
holds and returns the validator, so checks chain. Nothing is raised for
bad input; the caller reads ``errors`` (or ``report()``) at the end.

A value that is None or empty only fails ``required()``. The other checks
skip it, so optional fields pass until something is actually entered.

Usage:
    v = (
        validate(form["postal_code"])
        .required("Postal code is required")
        .max_length(7, "Postal code is too long")
        .matches(FORMATS["postal-code"])
        .at_least(1, "Postal code is not valid")
    )
    if not v.valid:
        show(v.errors)
"""

import re
from typing import Optional, Union

from normval.config import settings
from normval.logging_context import field_scope, get_field_logger
from normval.schemas import ValidationReport

logger = get_field_logger(__name__)

# Shared by the url pattern: unreserved characters, including non-ASCII ones.
_UCS = "\u00a0-\ud7ff\uf900-\ufdcf\ufdf0-\uffef"
_PRIVATE_USE = "\ue000-\uf8ff"
_UNRESERVED = rf"[a-z\d\-._~{_UCS}]"
_PCT_ENCODED = r"%[\da-f]{2}"
_SUB_DELIMS = r"[!$&'()*+,;=]"
_PCHAR = rf"(?:{_UNRESERVED}|{_PCT_ENCODED}|{_SUB_DELIMS}|:|@)"
_DEC_OCTET = r"(?:\d|[1-9]\d|1\d\d|2[0-4]\d|25[0-5])"
_ALNUM = rf"[a-z\d{_UCS}]"
_ALPHA = rf"[a-z{_UCS}]"
_DOMAIN_LABEL = rf"(?:{_ALNUM}|{_ALNUM}{_UNRESERVED}*{_ALNUM})"
_TOP_LABEL = rf"(?:{_ALPHA}|{_ALPHA}{_UNRESERVED}*{_ALPHA})"

_URL = (
    r"^(?:https?|ftp)://"
    rf"(?:(?:{_UNRESERVED}|{_PCT_ENCODED}|{_SUB_DELIMS}|:)*@)?"
    rf"(?:(?:{_DEC_OCTET}\.){{3}}{_DEC_OCTET}|(?:{_DOMAIN_LABEL}\.)+{_TOP_LABEL}\.?)"
    r"(?::\d*)?"
    rf"(?:/(?:{_PCHAR}+(?:/{_PCHAR}*)*)?)?"
    rf"(?:\?(?:{_PCHAR}|[{_PRIVATE_USE}]|/|\?)*)?"
    rf"(?:#(?:{_PCHAR}|/|\?)*)?\Z"
)

_EMAIL_ATOM = r"[\w!#$%&'*+\-/=?^`{|}~]+"
_EMAIL = (
    rf"^(?:{_EMAIL_ATOM}\.)*{_EMAIL_ATOM}@"
    r"(?:(?:(?:[a-z0-9][a-z0-9\-]{0,62}[a-z0-9]|[a-z])\.)+[a-z]{2,6}"
    r"|(?:\d{1,3}\.){3}\d{1,3}(?::\d{1,5})?)\Z"
)

# Anchored with \Z: $ would also accept a trailing newline.
FORMATS: dict[str, re.Pattern] = {
    "url": re.compile(_URL, re.IGNORECASE | re.ASCII),
    "email": re.compile(_EMAIL, re.IGNORECASE | re.ASCII),
    "postal-code": re.compile(r"^ *[a-z]\d[a-z] *\d[a-z]\d *\Z", re.IGNORECASE | re.ASCII),
}

Criterion = Union[str, re.Pattern]


class Validator:
    """Accumulates validation errors for a single value through chained checks."""

    formats = FORMATS

    def __init__(self, value: Optional[str], field: Optional[str] = None) -> None:
        self.value = value
        self.field = field
        self._errors: list[str] = []
        self._match_count: Optional[int] = None

    @property
    def errors(self) -> tuple[str, ...]:
        """Recorded error messages, in the order the checks ran."""
        return tuple(self._errors)

    @property
    def valid(self) -> bool:
        return not self._errors

    def required(self, error_message: Optional[str] = None) -> "Validator":
        """Record an error if the value is None or empty."""
        self.test(not self.value, error_message)
        return self

    def min_length(self, length: int, error_message: Optional[str] = None) -> "Validator":
        """Record an error if a present value is shorter than ``length``."""
        if self.value:
            self.test(len(self.value) < length, error_message)
        return self

    def max_length(self, length: int, error_message: Optional[str] = None) -> "Validator":
        """Record an error if a present value is longer than ``length``."""
        if self.value:
            self.test(len(self.value) > length, error_message)
        return self

    def matches(self, *criteria: Criterion) -> "Validator":
        """
        Count how many criteria the value satisfies.

        A string criterion must equal the value; a compiled pattern must be
        found somewhere in it. The count is checked by the next ``at_least``.

        Raises:
            TypeError: if a criterion is neither a string nor a compiled pattern.
        """
        if not self.value:
            return self

        self._match_count = 0
        for criterion in criteria:
            if isinstance(criterion, str):
                failed = self.test(criterion != self.value)
            elif isinstance(criterion, re.Pattern):
                failed = self.test(criterion.search(self.value) is None)
            else:
                raise TypeError(
                    f"Match criteria must be str or re.Pattern, got {type(criterion).__name__}"
                )
            if not failed:
                self._match_count += 1
        return self

    def at_least(self, minimum: int, error_message: Optional[str] = None) -> "Validator":
        """Record an error if fewer than ``minimum`` criteria matched, then reset the count."""
        if self._match_count is None:
            return self

        self.test(self._match_count < minimum, error_message)
        self._match_count = None
        return self

    def test(self, condition: bool, error_message: Optional[str] = None) -> bool:
        """
        Generic check: ``condition`` is True when the value FAILS.

        A failing check records ``error_message`` when one is given. Without a
        message nothing is recorded and the return value is the only signal.

        Returns:
            True if the check failed. This is returned whether or not a
            message was recorded, so a check with a message can still be
            branched on.
        """
        if condition and error_message:
            self._errors.append(error_message)
            if settings.validator.log_errors:
                self._log_error(error_message)
        return bool(condition)

    def _log_error(self, error_message: str) -> None:
        if self.field is None:
            logger.debug("Validation error recorded: %s", error_message)
            return
        with field_scope(self.field):
            logger.debug("Validation error recorded: %s", error_message)

    def report(self) -> ValidationReport:
        """Snapshot the current state as a ValidationReport."""
        return ValidationReport(
            value=self.value, field=self.field, errors=list(self._errors)
        )

    def __repr__(self) -> str:
        return (
            f"Validator(value={self.value!r}, field={self.field!r}, errors={self._errors!r})"
        )


def validate(value: Optional[str], field: Optional[str] = None) -> Validator:
    """Start a validation chain for ``value``.

    ``field`` names the input in log records (``%(field_name)s``).
    """
    return Validator(value, field)
