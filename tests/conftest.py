"""Shared test fixtures and helpers."""

import re
from typing import Optional

import pytest

from normval.validator import Validator

MIXED_PHRASE = "abc 123 ABC !@#"
SHORT_PHRASE = "abc"


@pytest.fixture
def mixed_criteria() -> list:
    """Lowercase, digit and uppercase patterns plus the exact mixed phrase."""
    return [re.compile(r"[a-z]+"), re.compile(r"\d+"), re.compile(r"[A-Z]+"), MIXED_PHRASE]


@pytest.fixture
def empty_validator() -> Validator:
    return Validator(None)


@pytest.fixture
def mixed_validator() -> Validator:
    return Validator(MIXED_PHRASE)


@pytest.fixture
def short_validator() -> Validator:
    return Validator(SHORT_PHRASE)


def run_chain(value: Optional[str], criteria: list) -> tuple[str, ...]:
    """Run a fixed check chain on a fresh validator and return its errors."""
    return (
        Validator(value)
        .required("required")
        .min_length(4, "too short")
        .max_length(8, "too long")
        .matches(*criteria)
        .at_least(2, "not enough matches")
        .errors
    )
