"""
Calculator Inputs

Input record, default values and slider bounds for the wealth projection.
All rates are expressed as percentages (e.g., 7.5 for 7.5%).
"""

from dataclasses import dataclass, fields
from typing import Dict, List


@dataclass(frozen=True)
class RealEstateInputs:
    """Inputs for a single projection run."""

    # Property basics
    purchase_price: float = 85000.0
    below_market_percent: float = 0.0  # How far the price sits below market value
    monthly_rent: float = 1100.0

    # Growth rates
    appreciation_rate: float = 4.0  # Annual property appreciation
    rent_growth_rate: float = 3.0  # Annual rent increase

    # Financing
    down_payment_percent: float = 25.0
    closing_costs: float = 8000.0
    mortgage_rate: float = 7.5
    mortgage_term_years: int = 30

    # Operating expenses
    vacancy_rate: float = 8.0
    insurance_tax_monthly: float = 200.0
    property_management_percent: float = 0.0  # % of rent
    maintenance_percent: float = 0.0  # % of property value per year


DEFAULT_INPUTS = RealEstateInputs()

INPUT_FIELDS: List[str] = [f.name for f in fields(RealEstateInputs)]


@dataclass(frozen=True)
class InputBound:
    """Slider range for one input field."""

    min: float
    max: float
    step: float
    advanced: bool = False


# Slider ranges from the calculator UI. Advisory only: the engine never clamps.
# Closing costs have no slider.
INPUT_BOUNDS: Dict[str, InputBound] = {
    "purchase_price": InputBound(min=50000, max=300000, step=5000),
    "below_market_percent": InputBound(min=0, max=40, step=5),
    "monthly_rent": InputBound(min=500, max=3000, step=50),
    "appreciation_rate": InputBound(min=0, max=10, step=0.5),
    "rent_growth_rate": InputBound(min=0, max=6, step=0.5),
    "down_payment_percent": InputBound(min=0, max=100, step=5),
    "vacancy_rate": InputBound(min=0, max=20, step=1, advanced=True),
    "insurance_tax_monthly": InputBound(min=0, max=500, step=25, advanced=True),
    "property_management_percent": InputBound(min=0, max=15, step=1, advanced=True),
    "maintenance_percent": InputBound(min=0, max=5, step=0.5, advanced=True),
    "mortgage_rate": InputBound(min=4, max=12, step=0.25, advanced=True),
    "mortgage_term_years": InputBound(min=10, max=30, step=5, advanced=True),
}


def out_of_bounds_fields(inputs: RealEstateInputs) -> List[str]:
    """Return the names of fields that fall outside their slider range."""
    out = []
    for name, bound in INPUT_BOUNDS.items():
        value = getattr(inputs, name)
        if value < bound.min or value > bound.max:
            out.append(name)
    return out


def is_within_bounds(inputs: RealEstateInputs) -> bool:
    """Check whether every field sits inside its slider range."""
    return not out_of_bounds_fields(inputs)
