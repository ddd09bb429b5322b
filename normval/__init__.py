import logging

from normval.config import configure_logging
from normval.normalizer import (
    format_ca_postal_code,
    format_nanp,
    format_nanp_quebec,
    normalize,
)
from normval.schemas import NormalizedValue, ValidationReport
from normval.validator import FORMATS, Validator, validate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "format_nanp",
    "format_nanp_quebec",
    "format_ca_postal_code",
    "normalize",
    "NormalizedValue",
    "Validator",
    "ValidationReport",
    "validate",
    "FORMATS",
    "configure_logging",
]
