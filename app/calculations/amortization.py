"""
Mortgage Amortization Calculations

Closed-form monthly payment and remaining balance for a fixed-rate mortgage,
plus a month-by-month amortization schedule.

Rates are annual percentages (e.g., 7.5 for 7.5%), terms are in years.
"""

from typing import List, Dict


def monthly_payment(
    principal: float, annual_rate_percent: float, term_years: int
) -> float:
    """
    Calculate the monthly principal and interest payment.

    Formula: M = P * r * (1+r)^n / ((1+r)^n - 1)

    Args:
        principal: Loan principal amount
        annual_rate_percent: Annual interest rate as a percentage
        term_years: Loan term in years

    Returns:
        Monthly payment amount (0 when there is nothing to borrow)
    """
    if principal <= 0:
        return 0.0

    num_payments = term_years * 12
    if num_payments <= 0:
        return 0.0

    monthly_rate = annual_rate_percent / 100 / 12

    if monthly_rate == 0:
        return principal / num_payments

    growth = (1 + monthly_rate) ** num_payments
    return principal * monthly_rate * growth / (growth - 1)


def remaining_balance(
    principal: float,
    annual_rate_percent: float,
    term_years: int,
    months_paid: int,
) -> float:
    """
    Calculate the remaining loan balance after a number of payments.

    Formula: B = P * ((1+r)^n - (1+r)^p) / ((1+r)^n - 1)

    Args:
        principal: Original loan principal
        annual_rate_percent: Annual interest rate as a percentage
        term_years: Loan term in years
        months_paid: Number of payments already made

    Returns:
        Outstanding balance, never negative
    """
    num_payments = term_years * 12
    if principal <= 0 or months_paid >= num_payments:
        return 0.0

    monthly_rate = annual_rate_percent / 100 / 12

    if monthly_rate == 0:
        return max(0.0, principal - (principal / num_payments) * months_paid)

    growth_total = (1 + monthly_rate) ** num_payments
    growth_paid = (1 + monthly_rate) ** months_paid
    balance = principal * (growth_total - growth_paid) / (growth_total - 1)

    # Floating-point overshoot near the end of the term
    return max(0.0, balance)


def generate_amortization_schedule(
    principal: float,
    annual_rate_percent: float,
    term_years: int,
) -> List[Dict]:
    """
    Generate a full monthly amortization schedule.

    The last row pays off whatever balance remains, so the schedule always
    ends at zero.

    Args:
        principal: Loan principal amount
        annual_rate_percent: Annual interest rate as a percentage
        term_years: Loan term in years

    Returns:
        List of amortization rows, one per payment
    """
    schedule = []
    balance = principal
    monthly_rate = annual_rate_percent / 100 / 12
    total_months = term_years * 12
    payment = monthly_payment(principal, annual_rate_percent, term_years)

    for period in range(1, total_months + 1):
        if balance <= 0:
            break

        interest = balance * monthly_rate

        if period == total_months:
            principal_pmt = balance
        else:
            principal_pmt = min(payment - interest, balance)

        ending_balance = max(0.0, balance - principal_pmt)

        schedule.append(
            {
                "period": period,
                "beginning_balance": round(balance, 2),
                "payment": round(principal_pmt + interest, 2),
                "interest": round(interest, 2),
                "principal": round(principal_pmt, 2),
                "ending_balance": round(ending_balance, 2),
            }
        )

        balance = ending_balance

    return schedule


def calculate_total_interest(schedule: List[Dict]) -> float:
    """Calculate total interest paid over the loan term."""
    return sum(row["interest"] for row in schedule)


def calculate_total_principal(schedule: List[Dict]) -> float:
    """Calculate total principal repaid over the loan term."""
    return sum(row["principal"] for row in schedule)
