"""
Share Links

Encodes calculator inputs into short query parameters so a scenario can be
shared as a URL. Only values that differ from the defaults are written, and
parsing falls back to the default for any key that is missing or unreadable.
"""

import math
from dataclasses import asdict, replace
from typing import Dict, Mapping, Optional
from urllib.parse import urlencode

from app.calculations.inputs import DEFAULT_INPUTS, RealEstateInputs

URL_KEYS: Dict[str, str] = {
    "purchase_price": "pp",
    "below_market_percent": "bm",
    "monthly_rent": "mr",
    "appreciation_rate": "ar",
    "rent_growth_rate": "rg",
    "down_payment_percent": "dp",
    "closing_costs": "cc",
    "vacancy_rate": "vr",
    "insurance_tax_monthly": "it",
    "property_management_percent": "pm",
    "maintenance_percent": "mt",
    "mortgage_rate": "mi",
    "mortgage_term_years": "my",
}

REVERSE_URL_KEYS: Dict[str, str] = {v: k for k, v in URL_KEYS.items()}

INTEGER_FIELDS = {"mortgage_term_years"}


def _format_value(value: float) -> str:
    # 85000.0 -> "85000", 7.25 -> "7.25"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _parse_value(raw: str) -> Optional[float]:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def encode_share_params(
    inputs: RealEstateInputs, defaults: RealEstateInputs = DEFAULT_INPUTS
) -> Dict[str, str]:
    """Map every non-default input to its short key."""
    params = {}
    default_values = asdict(defaults)

    for name, value in asdict(inputs).items():
        if value != default_values[name]:
            params[URL_KEYS[name]] = _format_value(value)

    return params


def build_share_url(
    base_url: str,
    inputs: RealEstateInputs,
    defaults: RealEstateInputs = DEFAULT_INPUTS,
) -> str:
    """Append the non-default inputs to a base URL as a query string."""
    params = encode_share_params(inputs, defaults)
    if not params:
        return base_url
    return f"{base_url}?{urlencode(params)}"


def parse_share_params(
    params: Mapping[str, str], defaults: RealEstateInputs = DEFAULT_INPUTS
) -> RealEstateInputs:
    """
    Rebuild inputs from short query parameters.

    Unknown keys are ignored. A value that is not a number (or not a whole
    number for the mortgage term, or not finite) leaves that field at its
    default, so parsing never raises.
    """
    overrides = {}

    for key, raw in params.items():
        name = REVERSE_URL_KEYS.get(key)
        if name is None:
            continue

        value = _parse_value(raw)
        if value is None:
            continue

        if name in INTEGER_FIELDS:
            if not value.is_integer():
                continue
            value = int(value)

        overrides[name] = value

    return replace(defaults, **overrides)
