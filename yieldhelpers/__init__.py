"""Rate helpers for yield curve bootstrapping.

This package turns deposit, futures, FRA, swap, basis swap, BMA swap and FX
swap quotes into residuals on a trial discount curve, and carries a small
iterative bootstrapper that solves those residuals pillar by pillar.

Key modules:
- ratehelpers: the helpers, their options and error types
- market: quotes, handles, evaluation context and notifications
- curves: yield term structures used as trial and exogenous curves
- indexes: IBOR, swap and BMA indexes
- instruments: coupon legs and the swaps priced by the helpers
- bootstrap: the pillar-by-pillar solver
- conventions, schedule, business_calendar: market conventions and dates
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Main modules are imported via subpackages
    "ratehelpers",
    "market",
    "curves",
    "indexes",
    "instruments",
    "bootstrap",
    "conventions",
    "schedule",
    "business_calendar",
    "interpolation",
]
