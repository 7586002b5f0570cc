"""
Tests for share link encoding and parsing.
"""

from dataclasses import replace

from app.calculations.inputs import DEFAULT_INPUTS
from app.calculations.share import (
    URL_KEYS,
    build_share_url,
    encode_share_params,
    parse_share_params,
)


class TestEncode:
    """Test encoding inputs to query parameters."""

    def test_defaults_encode_to_nothing(self):
        assert encode_share_params(DEFAULT_INPUTS) == {}
        assert build_share_url("https://example.com/calc", DEFAULT_INPUTS) == (
            "https://example.com/calc"
        )

    def test_only_changed_fields(self):
        inputs = replace(DEFAULT_INPUTS, purchase_price=120000, mortgage_rate=6.25)
        assert encode_share_params(inputs) == {"pp": "120000", "mi": "6.25"}

    def test_share_url(self):
        inputs = replace(DEFAULT_INPUTS, purchase_price=120000, mortgage_rate=6.25)
        url = build_share_url("https://example.com/calc", inputs)
        assert url == "https://example.com/calc?pp=120000&mi=6.25"

    def test_every_field_has_a_key(self):
        keys = set(URL_KEYS.values())
        assert len(keys) == len(URL_KEYS) == 13
        assert all(len(key) == 2 for key in keys)


class TestParse:
    """Test parsing query parameters back to inputs."""

    def test_empty_params_give_defaults(self):
        assert parse_share_params({}) == DEFAULT_INPUTS

    def test_known_keys_override(self):
        inputs = parse_share_params({"pp": "120000", "my": "15", "bm": "20"})
        assert inputs.purchase_price == 120000
        assert inputs.mortgage_term_years == 15
        assert isinstance(inputs.mortgage_term_years, int)
        assert inputs.below_market_percent == 20
        assert inputs.monthly_rent == DEFAULT_INPUTS.monthly_rent

    def test_unparseable_values_fall_back(self):
        inputs = parse_share_params(
            {
                "mi": "abc",
                "mr": "",
                "ar": "nan",
                "my": "12.5",
                "pp": "inf",
                "cc": "-inf",
                "rg": "1e400",
            }
        )
        assert inputs == DEFAULT_INPUTS

    def test_unknown_keys_ignored(self):
        assert parse_share_params({"zz": "5", "utm_source": "mail"}) == DEFAULT_INPUTS

    def test_round_trip(self):
        inputs = replace(
            DEFAULT_INPUTS,
            purchase_price=150000,
            below_market_percent=15,
            mortgage_rate=6.875,
            mortgage_term_years=20,
            maintenance_percent=1.5,
        )
        assert parse_share_params(encode_share_params(inputs)) == inputs
