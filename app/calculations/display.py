"""
Display Helpers

Sampling, rounding and currency formatting applied when presenting a
projection. None of these feed back into the calculations.
"""

import math
from dataclasses import dataclass
from typing import List, TypeVar

from app.calculations.projection import ProjectionPoint

DEFAULT_SAMPLE_INTERVAL = 3

T = TypeVar("T", bound=ProjectionPoint)


@dataclass(frozen=True)
class FormatConfig:
    """Formatting settings passed explicitly to presentation helpers."""

    currency_symbol: str = "$"
    thousands_separator: str = ","
    symbol_after: bool = False


def sample_chart_data(
    points: List[T], every: int = DEFAULT_SAMPLE_INTERVAL
) -> List[T]:
    """
    Thin a monthly series for chart rendering.

    Keeps every Nth point, every year boundary and always the last point,
    so a 361-point series drops to roughly 120 points.
    """
    last_index = len(points) - 1
    return [
        point
        for index, point in enumerate(points)
        if point.month % 12 == 0 or index % every == 0 or index == last_index
    ]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def round_for_display(value: float) -> int:
    """
    Round to a precision that suits the magnitude of the value.

    Callers must pass finite values: inf raises OverflowError, NaN ValueError.
    """
    magnitude = abs(value)
    if magnitude >= 1_000_000:
        return _round_half_up(value / 1000) * 1000
    if magnitude >= 10_000:
        return _round_half_up(value / 100) * 100
    if magnitude >= 1000:
        return _round_half_up(value / 10) * 10
    return _round_half_up(value)


def _with_symbol(text: str, config: FormatConfig) -> str:
    if config.symbol_after:
        return f"{text}{config.currency_symbol}"
    return f"{config.currency_symbol}{text}"


def format_currency(value: float, config: FormatConfig = FormatConfig()) -> str:
    """
    Format a whole-unit currency amount, e.g. 85000 -> "$85,000".

    The value must be finite, as for round_for_display.
    """
    rounded = round_for_display(value)
    text = f"{abs(rounded):,}".replace(",", config.thousands_separator)
    sign = "-" if rounded < 0 else ""
    return sign + _with_symbol(text, config)


def format_axis_value(value: float, config: FormatConfig = FormatConfig()) -> str:
    """Compact axis label, e.g. 1250000 -> "$1.3M", 85000 -> "$85K"."""
    if value >= 1_000_000:
        return _with_symbol(f"{value / 1_000_000:.1f}M", config)
    if value >= 1000:
        return _with_symbol(f"{value / 1000:.0f}K", config)
    return _with_symbol(f"{value:g}", config)
