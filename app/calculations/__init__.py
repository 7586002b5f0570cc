"""
Wealth Projection Engine

Pure calculation modules for rental property investment projections.
No I/O and no shared state: every call recomputes from its inputs.
"""

from app.calculations import inputs, amortization, derived, projection, display, share

__all__ = ["inputs", "amortization", "derived", "projection", "display", "share"]
