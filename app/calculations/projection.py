"""
Wealth Projection

Month-by-month projection of property value, mortgage balance, equity and
cash flow over the full mortgage term, plus the year-1 "three engines of
profit" breakdown (cash flow, appreciation, principal paydown).

Property value compounds every month. Rent steps up once a year, on each
12-month boundary, modelling annual lease renewals.
"""

from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from dateutil.relativedelta import relativedelta

from app.calculations.derived import (
    DerivedValues,
    calculate_derived_values,
    calculate_monthly_expenses,
)
from app.calculations.inputs import RealEstateInputs

MID_TERM_MONTH = 180


@dataclass(frozen=True)
class ProjectionPoint:
    """State of the investment at the end of one month."""

    month: int  # 0 = purchase
    year: int  # 1-based
    label: str  # "1.01", "1.06", "2.01", ...

    monthly_rent: float
    property_value: float
    mortgage_balance: float
    equity: float  # property_value - mortgage_balance
    equity_percent: float
    net_worth: float  # equity + cumulative_cash_flow

    monthly_cash_flow: float
    cumulative_cash_flow: float
    total_equity_built: float  # down payment + appreciation + principal paid


@dataclass(frozen=True)
class EngineBreakdown:
    value: float
    percent: float


@dataclass(frozen=True)
class ThreeEngines:
    cash_flow: EngineBreakdown
    appreciation: EngineBreakdown
    principal_paydown: EngineBreakdown


@dataclass(frozen=True)
class NoLeverageResult:
    """Year-1 returns for a hypothetical all-cash purchase."""

    net_monthly: float
    annual_cash_flow: float
    appreciation: float
    total_return: float
    roi: float  # % of market value


@dataclass(frozen=True)
class WithLeverageResult:
    """Year-1 returns for the financed purchase."""

    net_monthly: float
    annual_cash_flow: float
    appreciation: float
    principal_paydown: float
    total_return: float
    roi: float  # % of down payment
    engines: ThreeEngines


@dataclass(frozen=True)
class Year1Results:
    no_leverage: NoLeverageResult
    with_leverage: WithLeverageResult


@dataclass(frozen=True)
class ProjectionSummary:
    year1: Year1Results
    mid_term: Optional[ProjectionPoint]
    term_end: Optional[ProjectionPoint]
    average_annual_roi: float


@dataclass(frozen=True)
class ProjectionData:
    derived: DerivedValues
    points: List[ProjectionPoint]
    summary: ProjectionSummary


@dataclass(frozen=True)
class WealthBreakdownPoint:
    """Floored, rounded wealth components at a year boundary."""

    year: int
    cash_flow: int
    equity: int
    appreciation: int
    total: int


def _percent_of(value: float, total: float) -> float:
    return (value / total) * 100 if total != 0 else 0.0


def calculate_three_engines(
    cash_flow: float, appreciation: float, principal_paydown: float
) -> ThreeEngines:
    """
    Split a total return into its three additive engines.

    Percentages are shares of the summed total and are all 0 when the
    total is exactly 0.
    """
    total = cash_flow + appreciation + principal_paydown

    return ThreeEngines(
        cash_flow=EngineBreakdown(cash_flow, _percent_of(cash_flow, total)),
        appreciation=EngineBreakdown(appreciation, _percent_of(appreciation, total)),
        principal_paydown=EngineBreakdown(
            principal_paydown, _percent_of(principal_paydown, total)
        ),
    )


def calculate_year1_principal_paydown(
    loan_amount: float, annual_rate_percent: float, payment: float
) -> float:
    """Principal repaid over the first 12 scheduled payments."""
    paydown = 0.0
    balance = loan_amount
    monthly_rate = annual_rate_percent / 100 / 12

    for _ in range(12):
        if balance <= 0:
            break
        interest = balance * monthly_rate
        principal_pmt = min(payment - interest, balance)
        paydown += principal_pmt
        balance -= principal_pmt

    return paydown


def calculate_year1_results(
    inputs: RealEstateInputs, derived: DerivedValues
) -> Year1Results:
    """
    Calculate year-1 returns with and without leverage.

    Without leverage ROI is measured against market value; with leverage it
    is measured against the down payment.
    """
    expenses = calculate_monthly_expenses(
        inputs.monthly_rent, derived.market_value, inputs
    )
    appreciation = derived.market_value * (inputs.appreciation_rate / 100)

    # === NO LEVERAGE (100% cash purchase) ===
    cash_net_monthly = inputs.monthly_rent - expenses.total
    cash_annual = cash_net_monthly * 12
    cash_total_return = cash_annual + appreciation
    cash_roi = (
        (cash_total_return / derived.market_value) * 100
        if derived.market_value > 0
        else 0.0
    )

    # === WITH LEVERAGE ===
    net_monthly = inputs.monthly_rent - expenses.total - derived.monthly_mortgage
    annual_cash_flow = net_monthly * 12
    principal_paydown = calculate_year1_principal_paydown(
        derived.loan_amount, inputs.mortgage_rate, derived.monthly_mortgage
    )
    total_return = annual_cash_flow + appreciation + principal_paydown
    roi = (
        (total_return / derived.down_payment) * 100
        if derived.down_payment > 0
        else 0.0
    )

    return Year1Results(
        no_leverage=NoLeverageResult(
            net_monthly=cash_net_monthly,
            annual_cash_flow=cash_annual,
            appreciation=appreciation,
            total_return=cash_total_return,
            roi=cash_roi,
        ),
        with_leverage=WithLeverageResult(
            net_monthly=net_monthly,
            annual_cash_flow=annual_cash_flow,
            appreciation=appreciation,
            principal_paydown=principal_paydown,
            total_return=total_return,
            roi=roi,
            engines=calculate_three_engines(
                annual_cash_flow, appreciation, principal_paydown
            ),
        ),
    )


def format_month_label(month: int) -> str:
    """Label a month as "<year>.<month of year>", e.g. month 12 -> "2.01"."""
    return f"{month // 12 + 1}.{month % 12 + 1:02d}"


def generate_projection_points(
    inputs: RealEstateInputs, derived: DerivedValues
) -> List[ProjectionPoint]:
    """
    Generate one data point per month from 0 through the end of the term.

    Single forward pass with running state. Month 0 is the purchase state
    with no growth applied. For every later month the mortgage is amortized
    first, then the property value compounds, then rent steps up if the month
    closes a year.
    """
    total_months = inputs.mortgage_term_years * 12

    # === CONSTANTS ===
    monthly_appreciation_factor = (1 + inputs.appreciation_rate / 100) ** (1 / 12)
    yearly_rent_growth_factor = 1 + inputs.rent_growth_rate / 100
    monthly_interest_rate = inputs.mortgage_rate / 100 / 12
    vacancy_factor = inputs.vacancy_rate / 100
    management_factor = inputs.property_management_percent / 100
    maintenance_monthly_factor = (inputs.maintenance_percent / 100) / 12

    initial_market_value = derived.market_value
    payment = derived.monthly_mortgage

    # === RUNNING STATE ===
    current_rent = inputs.monthly_rent
    current_value = initial_market_value
    balance = derived.loan_amount
    cumulative_cash_flow = 0.0

    points = []

    for month in range(total_months + 1):
        if month > 0:
            if balance > 0:
                interest = balance * monthly_interest_rate
                if month == total_months:
                    # Final payment clears any floating-point residue
                    principal_pmt = balance
                else:
                    principal_pmt = min(payment - interest, balance)
                balance = max(0.0, balance - principal_pmt)

            current_value *= monthly_appreciation_factor
            if month % 12 == 0:
                current_rent *= yearly_rent_growth_factor

        equity = current_value - balance
        equity_percent = (equity / current_value) * 100 if current_value > 0 else 0.0

        expenses = (
            current_rent * vacancy_factor
            + inputs.insurance_tax_monthly
            + current_rent * management_factor
            + current_value * maintenance_monthly_factor
        )

        effective_mortgage = payment if balance > 0 else 0.0
        monthly_cash_flow = current_rent - expenses - effective_mortgage
        cumulative_cash_flow += monthly_cash_flow

        appreciation_gained = current_value - initial_market_value
        principal_paid = derived.loan_amount - balance

        points.append(
            ProjectionPoint(
                month=month,
                year=month // 12 + 1,
                label=format_month_label(month),
                monthly_rent=current_rent,
                property_value=current_value,
                mortgage_balance=balance,
                equity=equity,
                equity_percent=equity_percent,
                net_worth=current_value - balance + cumulative_cash_flow,
                monthly_cash_flow=monthly_cash_flow,
                cumulative_cash_flow=cumulative_cash_flow,
                total_equity_built=derived.down_payment
                + appreciation_gained
                + principal_paid,
            )
        )

    return points


def calculate_average_annual_roi(
    term_end: Optional[ProjectionPoint],
    derived: DerivedValues,
    term_years: int,
) -> float:
    """
    Annualize the total wealth gained by the end of the term.

    Gain is cumulative cash flow plus principal paid plus appreciation,
    compounded against the down payment over the term.
    """
    if term_end is None or derived.down_payment <= 0 or term_years <= 0:
        return 0.0

    gain = (
        term_end.cumulative_cash_flow
        + (derived.loan_amount - term_end.mortgage_balance)
        + (term_end.property_value - derived.market_value)
    )
    growth = 1 + gain / derived.down_payment
    if growth <= 0:
        return 0.0

    return (growth ** (1 / term_years) - 1) * 100


def generate_projection(
    inputs: RealEstateInputs, mid_term_month: int = MID_TERM_MONTH
) -> ProjectionData:
    """
    Generate the full projection and its summary.

    Args:
        inputs: Calculator inputs
        mid_term_month: Month of the mid-term snapshot (capped at term end)

    Returns:
        ProjectionData with term_months + 1 points
    """
    derived = calculate_derived_values(inputs)
    points = generate_projection_points(inputs, derived)

    mid_term = None
    term_end = None
    if points:
        mid_term = points[min(mid_term_month, len(points) - 1)]
        term_end = points[-1]

    return ProjectionData(
        derived=derived,
        points=points,
        summary=ProjectionSummary(
            year1=calculate_year1_results(inputs, derived),
            mid_term=mid_term,
            term_end=term_end,
            average_annual_roi=calculate_average_annual_roi(
                term_end, derived, inputs.mortgage_term_years
            ),
        ),
    )


def annual_wealth_breakdown(
    points: List[ProjectionPoint],
    initial_market_value: float,
    loan_amount: float,
) -> List[WealthBreakdownPoint]:
    """
    Convert monthly points to a yearly wealth breakdown for stacked charts.

    Only year-boundary months are used. Each component is floored at zero,
    so early negative cumulative cash flow shows as no contribution.
    """
    breakdown = []

    for point in points:
        if point.month % 12 != 0:
            continue

        cash_flow = max(0.0, point.cumulative_cash_flow)
        equity = max(0.0, loan_amount - point.mortgage_balance)
        appreciation = max(0.0, point.property_value - initial_market_value)

        breakdown.append(
            WealthBreakdownPoint(
                year=point.month // 12,
                cash_flow=round(cash_flow),
                equity=round(equity),
                appreciation=round(appreciation),
                total=round(cash_flow + equity + appreciation),
            )
        )

    return breakdown


def generate_monthly_dates(start_date: date, num_months: int) -> List[date]:
    """Generate the calendar date of each month from purchase onward."""
    return [start_date + relativedelta(months=i) for i in range(num_months + 1)]
