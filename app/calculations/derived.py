"""
Derived Values

One-shot financing quantities and operating expenses computed from inputs.
"""

from dataclasses import dataclass

from app.calculations.amortization import monthly_payment
from app.calculations.inputs import RealEstateInputs


@dataclass(frozen=True)
class DerivedValues:
    """Financing quantities derived from the inputs."""

    market_value: float
    instant_equity: float  # market_value - purchase_price
    down_payment: float
    loan_amount: float  # purchase_price - down_payment
    monthly_mortgage: float  # Principal and interest
    total_cash_required: float  # down_payment + closing_costs


@dataclass(frozen=True)
class MonthlyExpenses:
    """Operating expenses for a single month."""

    vacancy: float
    insurance_tax: float
    management: float
    maintenance: float
    total: float


def calculate_market_value(purchase_price: float, below_market_percent: float) -> float:
    """
    Infer market value from a purchase price bought below market.

    Buying 30% below market means market_value = price / (1 - 0.30).
    The discount is not validated: 100% or more has no finite answer.
    """
    if below_market_percent > 0:
        return purchase_price / (1 - below_market_percent / 100)
    return purchase_price


def calculate_derived_values(inputs: RealEstateInputs) -> DerivedValues:
    """Calculate market value, down payment, loan amount and payment."""
    market_value = calculate_market_value(
        inputs.purchase_price, inputs.below_market_percent
    )
    down_payment = inputs.purchase_price * (inputs.down_payment_percent / 100)
    loan_amount = inputs.purchase_price - down_payment

    return DerivedValues(
        market_value=market_value,
        instant_equity=market_value - inputs.purchase_price,
        down_payment=down_payment,
        loan_amount=loan_amount,
        monthly_mortgage=monthly_payment(
            loan_amount, inputs.mortgage_rate, inputs.mortgage_term_years
        ),
        total_cash_required=down_payment + inputs.closing_costs,
    )


def calculate_monthly_expenses(
    current_rent: float,
    current_value: float,
    inputs: RealEstateInputs,
) -> MonthlyExpenses:
    """
    Calculate monthly operating expenses.

    Vacancy and management scale with the current rent, maintenance with the
    current property value. Insurance and tax are a fixed monthly amount.
    """
    vacancy = current_rent * (inputs.vacancy_rate / 100)
    insurance_tax = inputs.insurance_tax_monthly
    management = current_rent * (inputs.property_management_percent / 100)
    maintenance = current_value * (inputs.maintenance_percent / 100) / 12

    return MonthlyExpenses(
        vacancy=vacancy,
        insurance_tax=insurance_tax,
        management=management,
        maintenance=maintenance,
        total=vacancy + insurance_tax + management + maintenance,
    )
