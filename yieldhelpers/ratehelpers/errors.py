"""Exceptions raised by rate helpers."""


class RateHelperError(Exception):
    """Base class for rate helper failures."""


class NotReadyError(RateHelperError, RuntimeError):
    """The trial term structure was not set before pricing."""


class EmptyQuoteError(RateHelperError, ValueError):
    """The market quote behind a helper carries no value."""


class InvalidPillarError(RateHelperError, ValueError):
    """A custom pillar date lies outside ``[earliest_date, maturity_date]``."""


class DegenerateSwapError(RateHelperError, ArithmeticError):
    """An annuity (or equivalent denominator) is not positive."""


class UnrepresentableFxTenorError(RateHelperError, ValueError):
    """An ON/TN FX swap cannot settle under the given calendars."""


class InconsistentCurvesError(RateHelperError, ValueError):
    """An exogenous curve given to a helper is the curve being bootstrapped."""
