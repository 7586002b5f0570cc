"""
Projection calculation API endpoints.

These endpoints accept calculator inputs and return calculated results.
Chart renderers call them on every input change.
"""

import logging
import math
from dataclasses import asdict
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from app.calculations import amortization, derived, display, projection
from app.calculations.inputs import (
    DEFAULT_INPUTS,
    INPUT_BOUNDS,
    INPUT_FIELDS,
    RealEstateInputs,
)
from app.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter()


class CalculatorInput(BaseModel):
    """Calculator inputs. Rates are percentages (7.5 = 7.5%)."""

    # Property basics
    purchase_price: float = DEFAULT_INPUTS.purchase_price
    below_market_percent: float = Field(
        default=DEFAULT_INPUTS.below_market_percent, ge=0, lt=100
    )
    monthly_rent: float = DEFAULT_INPUTS.monthly_rent

    # Growth
    appreciation_rate: float = DEFAULT_INPUTS.appreciation_rate
    rent_growth_rate: float = DEFAULT_INPUTS.rent_growth_rate

    # Financing
    down_payment_percent: float = DEFAULT_INPUTS.down_payment_percent
    closing_costs: float = DEFAULT_INPUTS.closing_costs
    mortgage_rate: float = DEFAULT_INPUTS.mortgage_rate
    mortgage_term_years: int = Field(default=DEFAULT_INPUTS.mortgage_term_years, ge=1)

    # Operating expenses
    vacancy_rate: float = DEFAULT_INPUTS.vacancy_rate
    insurance_tax_monthly: float = DEFAULT_INPUTS.insurance_tax_monthly
    property_management_percent: float = DEFAULT_INPUTS.property_management_percent
    maintenance_percent: float = DEFAULT_INPUTS.maintenance_percent

    def to_inputs(self) -> RealEstateInputs:
        return RealEstateInputs(**self.model_dump(include=set(INPUT_FIELDS)))


class ProjectionInput(CalculatorInput):
    """Inputs plus presentation options for the projection endpoint."""

    sampled: bool = False
    start_date: Optional[date] = None


class ProjectionResponse(BaseModel):
    """Response with monthly points, summary and yearly wealth breakdown."""

    derived: dict
    points: List[dict]
    summary: dict
    wealth_breakdown: List[dict]
    formatted: dict


class AmortizationInput(BaseModel):
    """Input for amortization calculation."""

    principal: float
    annual_rate_percent: float
    term_years: int = Field(ge=1)
    months_paid: Optional[int] = Field(default=None, ge=0)


def _ensure_finite(payload, path: str = "result"):
    """Reject results holding inf or NaN, which JSON cannot carry."""
    if isinstance(payload, float):
        if not math.isfinite(payload):
            logger.warning(f"Non-finite value at {path}")
            raise HTTPException(
                status_code=422,
                detail=f"Calculation produced a non-finite value at {path}",
            )
    elif isinstance(payload, dict):
        for key, value in payload.items():
            _ensure_finite(value, f"{path}.{key}")
    elif isinstance(payload, list):
        for index, value in enumerate(payload):
            _ensure_finite(value, f"{path}[{index}]")
    return payload


@router.get("/defaults")
async def get_defaults():
    """Default inputs and slider bounds."""
    return {
        "inputs": asdict(DEFAULT_INPUTS),
        "bounds": {name: asdict(bound) for name, bound in INPUT_BOUNDS.items()},
    }


@router.post("/derived")
async def calculate_derived(inputs: CalculatorInput):
    """Calculate derived financing values and first-month expenses."""
    calc_inputs = inputs.to_inputs()
    values = derived.calculate_derived_values(calc_inputs)
    expenses = derived.calculate_monthly_expenses(
        calc_inputs.monthly_rent, values.market_value, calc_inputs
    )

    return _ensure_finite(
        {"derived": asdict(values), "monthly_expenses": asdict(expenses)}
    )


@router.post("/projection", response_model=ProjectionResponse)
async def calculate_projection(inputs: ProjectionInput):
    """Generate the full month-by-month projection."""
    calc_inputs = inputs.to_inputs()
    result = projection.generate_projection(
        calc_inputs, mid_term_month=settings.mid_term_month
    )
    logger.debug(
        f"Projection generated: {len(result.points)} points, "
        f"term {calc_inputs.mortgage_term_years} years"
    )

    # Rounding and formatting below need finite values
    derived_row = _ensure_finite(asdict(result.derived), "result.derived")
    summary_row = _ensure_finite(asdict(result.summary), "result.summary")
    all_rows = _ensure_finite(
        [asdict(point) for point in result.points], "result.points"
    )

    if inputs.sampled:
        sampled = display.sample_chart_data(
            result.points, settings.chart_sample_interval
        )
        point_rows = [all_rows[point.month] for point in sampled]
    else:
        point_rows = all_rows
    if inputs.start_date is not None:
        dates = projection.generate_monthly_dates(
            inputs.start_date, len(result.points) - 1
        )
        for row in point_rows:
            row["date"] = dates[row["month"]].isoformat()

    wealth = projection.annual_wealth_breakdown(
        result.points, result.derived.market_value, result.derived.loan_amount
    )

    format_config = display.FormatConfig(currency_symbol=settings.currency_symbol)
    formatted = {}
    if result.summary.term_end is not None:
        term_end = result.summary.term_end
        formatted = {
            "term_end_net_worth": display.format_currency(term_end.net_worth, format_config),
            "term_end_equity": display.format_currency(term_end.equity, format_config),
            "term_end_property_value": display.format_currency(
                term_end.property_value, format_config
            ),
        }

    response = {
        "derived": derived_row,
        "points": point_rows,
        "summary": summary_row,
        "wealth_breakdown": [asdict(row) for row in wealth],
        "formatted": formatted,
    }
    return response


@router.post("/year1")
async def calculate_year1(inputs: CalculatorInput):
    """Calculate year-1 returns with and without leverage."""
    calc_inputs = inputs.to_inputs()
    values = derived.calculate_derived_values(calc_inputs)
    results = projection.calculate_year1_results(calc_inputs, values)

    return _ensure_finite(asdict(results))


@router.post("/amortization")
async def calculate_amortization(inputs: AmortizationInput):
    """Generate a monthly amortization schedule."""
    schedule = amortization.generate_amortization_schedule(
        principal=inputs.principal,
        annual_rate_percent=inputs.annual_rate_percent,
        term_years=inputs.term_years,
    )

    response = {
        "monthly_payment": amortization.monthly_payment(
            inputs.principal, inputs.annual_rate_percent, inputs.term_years
        ),
        "schedule": schedule,
        "total_interest": amortization.calculate_total_interest(schedule),
        "total_principal": amortization.calculate_total_principal(schedule),
    }

    if inputs.months_paid is not None:
        response["remaining_balance"] = amortization.remaining_balance(
            inputs.principal,
            inputs.annual_rate_percent,
            inputs.term_years,
            inputs.months_paid,
        )

    return _ensure_finite(response)
