"""Tests for phone number and postal code formatting."""

import pytest

from normval.config import AppConfig, NormalizerConfig
from normval.normalizer import (
    format_ca_postal_code,
    format_nanp,
    format_nanp_quebec,
    normalize,
)


class TestFormatNanp:
    def test_parenthesized_area_code(self):
        assert format_nanp("(555) 555-5555", False) == "555-555-5555"

    def test_dotted(self):
        assert format_nanp("555.555.5555") == "555-555-5555"

    def test_noisy_input_with_extension(self):
        assert format_nanp("ph:555- 555---5555 ext: 1234", False) == "555-555-5555"

    def test_takes_first_ten_digits(self):
        assert format_nanp("555555123498") == "555-555-1234"

    def test_with_country_code(self):
        assert format_nanp("(555) 555-5555", True) == "1-555-555-5555"

    def test_dotted_with_country_code(self):
        assert format_nanp("555.555.5555", True) == "1-555-555-5555"

    def test_already_canonical(self):
        assert format_nanp("555-555-5555") == "555-555-5555"

    def test_too_few_digits_returns_input(self):
        assert format_nanp("(55) 555-5555", False) == "(55) 555-5555"

    def test_too_few_digits_ignores_country_code(self):
        assert format_nanp("(55) 555-5555", True) == "(55) 555-5555"

    def test_empty_string(self):
        assert format_nanp("") == ""

    def test_configured_country_code(self, monkeypatch):
        config = AppConfig(normalizer=NormalizerConfig(nanp_country_code="44"))
        monkeypatch.setattr("normval.normalizer.settings", config)
        assert format_nanp("5555555555", True) == "44-555-555-5555"


class TestFormatNanpQuebec:
    def test_without_country_code(self):
        assert format_nanp_quebec("(555) 555-5555", False) == "555 555-5555"

    def test_with_country_code(self):
        assert format_nanp_quebec("(555) 555-5555", True) == "1 555 555-5555"

    def test_already_hyphenated(self):
        assert format_nanp_quebec("555-555-5555") == "555 555-5555"

    def test_too_few_digits_returns_input_untouched(self):
        assert format_nanp_quebec("(55) 555-5555") == "(55) 555-5555"

    def test_too_few_digits_with_country_code(self):
        assert format_nanp_quebec("555-5555", True) == "555-5555"


class TestFormatCaPostalCode:
    @pytest.mark.parametrize(
        "raw",
        ["XXXXXX", "xxxxxx", "xxx xxx", " xxx  xxx "],
    )
    def test_upper_cases_and_groups(self, raw):
        assert format_ca_postal_code(raw) == "XXX XXX"

    def test_mixed_letters_and_digits(self):
        assert format_ca_postal_code(" X1x 2x3 ") == "X1X 2X3"

    def test_strips_hyphen(self):
        assert format_ca_postal_code("h2x-1y4") == "H2X 1Y4"

    def test_zip_code_returns_input(self):
        assert format_ca_postal_code("90120") == "90120"

    def test_zip_plus_four_returns_input(self):
        assert format_ca_postal_code("90120-1234") == "90120-1234"

    def test_too_long_returns_input(self):
        assert format_ca_postal_code("h2x 1y4 5") == "h2x 1y4 5"


class TestNormalize:
    def test_accepted_phone(self):
        result = normalize("nanp", "(555) 555-5555")
        assert result.ok is True
        assert result.value == "555-555-5555"
        assert result.original == "(555) 555-5555"

    def test_accepted_phone_with_country_code(self):
        result = normalize("nanp", "555.555.5555", include_country_code=True)
        assert result.ok is True
        assert result.value == "1-555-555-5555"

    def test_rejected_phone(self):
        result = normalize("nanp", "(55) 555-5555")
        assert result.ok is False
        assert result.value == "(55) 555-5555"

    def test_quebec(self):
        result = normalize("nanp_quebec", "5555555555", include_country_code=True)
        assert result.ok is True
        assert result.value == "1 555 555-5555"

    def test_rejected_quebec(self):
        assert normalize("nanp_quebec", "555").ok is False

    def test_postal_code(self):
        result = normalize("ca_postal_code", "h2x1y4")
        assert result.ok is True
        assert result.value == "H2X 1Y4"

    def test_rejected_postal_code(self):
        result = normalize("ca_postal_code", "90120")
        assert result.ok is False
        assert result.value == "90120"

    def test_unknown_kind_raises(self):
        with pytest.raises(ValueError, match="Unknown normalizer"):
            normalize("uk_postcode", "SW1A 1AA")
