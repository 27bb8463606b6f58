"""
Rate helper base classes.

A helper turns one market quote into a residual on a trial curve.  The
bootstrapper points every helper at its trial curve through
``set_term_structure`` and then reads ``quote_error`` while it moves the
curve's nodes.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from datetime import date
from typing import Any, Dict, Optional, Tuple, Union

from yieldhelpers.market.context import EvaluationContext
from yieldhelpers.market.handles import Handle, RelinkableHandle
from yieldhelpers.market.observable import Observable, Observer
from yieldhelpers.market.quotes import Quote, SimpleQuote

from .errors import EmptyQuoteError, InconsistentCurvesError, NotReadyError
from .options import HelperDescription, HelperKind, QuoteMode

logger = logging.getLogger(__name__)

QuoteLike = Union[float, int, Quote, Handle, None]


def make_quote_handle(value: QuoteLike) -> Tuple[Handle, QuoteMode]:
    """Wrap a number, quote or quote handle into a handle."""
    if isinstance(value, Handle):
        return value, QuoteMode.QUOTE
    if isinstance(value, Quote):
        return Handle(value), QuoteMode.QUOTE
    if value is None:
        return Handle(), QuoteMode.QUOTE
    if isinstance(value, (int, float)):
        return Handle(SimpleQuote(float(value))), QuoteMode.RAW
    raise TypeError(f"Cannot use {value!r} as a quote")


def quote_or_none(handle: Handle) -> Optional[float]:
    """Value behind ``handle``, or ``None`` when it is empty or unset."""
    if handle.empty():
        return None
    quote = handle.current_link()
    return quote.value() if quote.is_valid() else None


def quote_value(handle: Handle, name: str, default: Optional[float] = None) -> float:
    """Value behind ``handle``; ``default`` stands in for an empty handle when given."""
    if handle.empty() and default is not None:
        return default
    value = quote_or_none(handle)
    if value is None:
        raise EmptyQuoteError(f"{name} quote is empty")
    return value


class RateHelper(Observable, Observer):
    """Common lifecycle of a bootstrap instrument.

    Subclasses set ``_earliest_date``, ``_maturity_date``,
    ``_latest_relevant_date`` and ``_pillar_date`` and implement
    ``implied_quote``.  The trial curve is held by a relinkable handle that
    never observes the curve, so that the curve can own its helpers.
    """

    kind: HelperKind

    def __init__(self, quote: QuoteLike):
        super().__init__()
        self._quote, self.quote_mode = make_quote_handle(quote)
        self.register_with(self._quote)
        self._term_structure: RelinkableHandle = RelinkableHandle()
        self._earliest_date: Optional[date] = None
        self._maturity_date: Optional[date] = None
        self._latest_relevant_date: Optional[date] = None
        self._pillar_date: Optional[date] = None

    # ------------------------------------------------------------------
    # Quotes
    # ------------------------------------------------------------------
    @property
    def quote_handle(self) -> Handle:
        return self._quote

    def quote(self) -> Optional[float]:
        """Current market value, or ``None`` when the quote is empty."""
        return quote_or_none(self._quote)

    def quote_error(self) -> float:
        """``quote - implied_quote`` on the current trial curve."""
        value = self.quote()
        if value is None:
            raise EmptyQuoteError(f"{self!r}: quote is empty")
        return value - self.implied_quote()

    @abstractmethod
    def implied_quote(self) -> float:
        """Quote implied by the trial curve."""

    # ------------------------------------------------------------------
    # Trial curve
    # ------------------------------------------------------------------
    def set_term_structure(self, curve) -> None:
        """Point the helper at ``curve`` without observing it."""
        if curve is not None:
            self._check_exogenous_curves(curve)
        self._term_structure.link_to(curve, register_as_observer=False)

    @property
    def term_structure(self):
        return None if self._term_structure.empty() else self._term_structure.current_link()

    def _trial_curve(self):
        if self._term_structure.empty():
            raise NotReadyError(f"{self!r}: term structure not set")
        return self._term_structure.current_link()

    def _exogenous_curves(self) -> Dict[str, Handle]:
        """Handles to curves the helper reads but never bootstraps."""
        return {}

    def _check_exogenous_curves(self, curve) -> None:
        for role, handle in self._exogenous_curves().items():
            if handle.links_to(curve):
                raise InconsistentCurvesError(
                    f"{self!r}: the {role} curve is the curve being bootstrapped"
                )

    # ------------------------------------------------------------------
    # Dates
    # ------------------------------------------------------------------
    @property
    def earliest_date(self) -> date:
        return self._earliest_date

    @property
    def maturity_date(self) -> date:
        return self._maturity_date

    @property
    def latest_relevant_date(self) -> date:
        return self._latest_relevant_date

    @property
    def pillar_date(self) -> date:
        return self._pillar_date

    @property
    def latest_date(self) -> date:
        """Last date the helper reads from the curve; the bootstrap node."""
        return max(self._pillar_date, self._maturity_date, self._latest_relevant_date)

    # ------------------------------------------------------------------
    # Notifications and inspection
    # ------------------------------------------------------------------
    def update(self) -> None:
        self.notify_observers()

    def describe(self) -> HelperDescription:
        return HelperDescription(
            kind=self.kind,
            earliest_date=self._earliest_date,
            pillar_date=self._pillar_date,
            maturity_date=self._maturity_date,
            latest_relevant_date=self._latest_relevant_date,
            quote=self.quote(),
            details=self._details(),
        )

    def _details(self) -> Dict[str, Any]:
        return {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(pillar={self._pillar_date}, quote={self.quote()})"


class RelativeDateRateHelper(RateHelper):
    """Helper whose dates follow the evaluation date of its context.

    Subclasses finish their constructor by calling ``initialize_dates``.
    """

    def __init__(self, quote: QuoteLike, context: EvaluationContext):
        super().__init__(quote)
        if not isinstance(context, EvaluationContext):
            raise TypeError(f"an EvaluationContext is required, got {context!r}")
        self._context = context
        self._evaluation_date = context.evaluation_date
        self._date_error: Optional[Exception] = None
        self.register_with(context)

    @property
    def context(self) -> EvaluationContext:
        return self._context

    @property
    def evaluation_date(self) -> date:
        return self._evaluation_date

    def update(self) -> None:
        if self._context.evaluation_date != self._evaluation_date:
            previous = self._evaluation_date
            self._evaluation_date = self._context.evaluation_date
            try:
                self.initialize_dates()
            except Exception as exc:
                # keep the last good evaluation date so the next update retries
                self._evaluation_date = previous
                self._date_error = exc
                raise
            self._date_error = None
            logger.debug(
                "%r re-initialised for evaluation date %s", self, self._evaluation_date
            )
        super().update()

    def _trial_curve(self):
        if self._date_error is not None:
            raise NotReadyError(
                f"{self!r}: dates could not be set for {self._context.evaluation_date}"
            ) from self._date_error
        return super()._trial_curve()

    @abstractmethod
    def initialize_dates(self) -> None:
        """Derive all dates from ``self.evaluation_date``."""
