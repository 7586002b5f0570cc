#!/usr/bin/env python3
"""
Print a wealth projection for the default scenario, or for a shared link.

Usage:
    python scripts/print_projection.py
    python scripts/print_projection.py "pp=120000&mr=1500&mi=6.5"
"""

import sys
import os
from urllib.parse import parse_qsl

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.calculations.display import FormatConfig, format_currency
from app.calculations.projection import annual_wealth_breakdown, generate_projection
from app.calculations.share import parse_share_params
from app.config import get_settings


def main():
    settings = get_settings()
    fmt = FormatConfig(currency_symbol=settings.currency_symbol)

    query = sys.argv[1] if len(sys.argv) > 1 else ""
    inputs = parse_share_params(dict(parse_qsl(query.lstrip("?"))))
    result = generate_projection(inputs, mid_term_month=settings.mid_term_month)
    derived = result.derived

    print("Financing")
    print(f"  Market value:        {format_currency(derived.market_value, fmt)}")
    print(f"  Down payment:        {format_currency(derived.down_payment, fmt)}")
    print(f"  Loan amount:         {format_currency(derived.loan_amount, fmt)}")
    print(f"  Monthly mortgage:    {derived.monthly_mortgage:,.2f}")
    print(f"  Total cash required: {format_currency(derived.total_cash_required, fmt)}")

    year1 = result.summary.year1.with_leverage
    print("\nYear 1 (with leverage)")
    print(f"  Cash flow:         {format_currency(year1.annual_cash_flow, fmt)}"
          f" ({year1.engines.cash_flow.percent:.1f}%)")
    print(f"  Appreciation:      {format_currency(year1.appreciation, fmt)}"
          f" ({year1.engines.appreciation.percent:.1f}%)")
    print(f"  Principal paydown: {format_currency(year1.principal_paydown, fmt)}"
          f" ({year1.engines.principal_paydown.percent:.1f}%)")
    print(f"  ROI:               {year1.roi:.1f}%")

    print("\nYear  Cash flow  Principal  Appreciation      Total")
    for row in annual_wealth_breakdown(
        result.points, derived.market_value, derived.loan_amount
    ):
        print(f"{row.year:>4}  {row.cash_flow:>9,}  {row.equity:>9,}"
              f"  {row.appreciation:>12,}  {row.total:>9,}")

    print(f"\nAverage annual ROI: {result.summary.average_annual_roi:.2f}%")


if __name__ == "__main__":
    main()
