"""Numerical engine for the sequential pillar bootstrap."""

from __future__ import annotations

import logging
import math
from datetime import date
from typing import Callable, List, Optional, Sequence, Tuple

from yieldhelpers.curves.discount import InterpolatedDiscountCurve
from yieldhelpers.ratehelpers.base import RateHelper

from .config import BootstrapConfig, BootstrapError
from .results import BootstrapResult, PillarResult

logger = logging.getLogger(__name__)

# zero rate used to extrapolate the first guess for a new node
_GUESS_RATE = 0.03


class IterativeBootstrapper:
    """Solves one discount factor per helper, earliest pillar first.

    Each helper contributes a node at its ``pillar_date``.  The node's
    discount factor is moved until the helper's ``quote_error`` vanishes,
    with every earlier node held at its solved value.  Dates a helper reads
    beyond its pillar come from the curve's extrapolation.
    """

    def __init__(
        self,
        helpers: Sequence[RateHelper],
        reference_date: date,
        config: Optional[BootstrapConfig] = None,
    ):
        if not helpers:
            raise ValueError("Need at least one rate helper to bootstrap")
        self.reference_date = reference_date
        self.config = config or BootstrapConfig()
        self.helpers: List[RateHelper] = sorted(helpers, key=lambda h: h.pillar_date)

        previous = reference_date
        for helper in self.helpers:
            if helper.pillar_date <= previous:
                if previous == reference_date:
                    raise ValueError(
                        f"{helper!r} has no node after the reference date {reference_date}"
                    )
                raise ValueError(
                    f"More than one helper has its pillar on {helper.pillar_date}"
                )
            previous = helper.pillar_date

        self._curve: Optional[InterpolatedDiscountCurve] = None
        self._results: List[PillarResult] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def bootstrap(self) -> BootstrapResult:
        """Build the curve and return it with per-pillar diagnostics."""
        curve = InterpolatedDiscountCurve(
            [self.reference_date],
            [1.0],
            day_counter=self.config.day_count_convention,
            interpolation_method=self.config.interpolation_method,
            name="bootstrapped",
        )
        for helper in self.helpers:
            helper.set_term_structure(curve)

        if self.config.verbose:
            logger.info(
                "Bootstrapping %d helpers from %s (%s)",
                len(self.helpers),
                self.reference_date,
                self.config.interpolation_method,
            )

        self._results = []
        for helper in self.helpers:
            self._results.append(self._solve_pillar(curve, helper))

        # publish the solved nodes to curve observers
        curve.set_nodes(curve.dates, curve.discount_factors)
        self._curve = curve

        if self.config.verbose:
            logger.info("Bootstrap finished: %d nodes up to %s", len(curve.dates), curve.max_date)
        return BootstrapResult(curve=curve, pillars=list(self._results))

    def get_curve(self) -> InterpolatedDiscountCurve:
        if self._curve is None:
            raise BootstrapError("bootstrap() has not been run")
        return self._curve

    def get_results(self) -> List[PillarResult]:
        return list(self._results)

    # ------------------------------------------------------------------
    # Pillar solve
    # ------------------------------------------------------------------
    def _solve_pillar(self, curve: InterpolatedDiscountCurve, helper: RateHelper) -> PillarResult:
        node_date = helper.pillar_date
        df_prev = curve.discount_factors[-1]
        t_prev = curve.time_from_reference(curve.max_date)
        t_node = curve.time_from_reference(node_date)
        guess = df_prev * math.exp(-_GUESS_RATE * (t_node - t_prev))
        index = curve.add_node(node_date, guess)

        def residual(df: float) -> float:
            curve.set_discount_factor(index, df)
            return helper.quote_error()

        lower, upper = self._bracket_solution(helper, residual, df_prev)
        df_node, iterations = self._bisect_solution(helper, residual, lower, upper)
        curve.set_discount_factor(index, df_node)

        logger.debug(
            "%s node %s solved: df=%.12f after %d iterations",
            helper.kind.value,
            node_date,
            df_node,
            iterations,
        )
        return PillarResult(
            kind=helper.kind,
            pillar_date=helper.pillar_date,
            node_date=node_date,
            discount_factor=df_node,
            zero_rate=curve.zero_rate(node_date),
            iterations=iterations,
        )

    def _bracket_solution(
        self,
        helper: RateHelper,
        residual: Callable[[float], float],
        df_prev: float,
    ) -> Tuple[float, float]:
        """Bracket the root for bisection."""
        # negative rates can push the discount factor above 1.0
        lower = min(df_prev * 0.1, 0.01)
        upper = max(df_prev * 1.5, 1.5)
        res_lower = residual(lower)
        res_upper = residual(upper)

        attempts = 0
        while res_lower * res_upper > 0 and attempts < 20:
            if abs(res_lower) < abs(res_upper):
                lower *= 0.5
                res_lower = residual(lower)
            else:
                upper *= 1.2
                res_upper = residual(upper)
            attempts += 1

        if res_lower * res_upper > 0:
            raise BootstrapError(
                f"Unable to bracket solution for {helper!r}: "
                f"f({lower}) = {res_lower}, f({upper}) = {res_upper}"
            )
        return lower, upper

    def _bisect_solution(
        self,
        helper: RateHelper,
        residual: Callable[[float], float],
        lower: float,
        upper: float,
    ) -> Tuple[float, int]:
        """Find the root by bisection; returns the root and the iteration count."""
        accuracy = self.config.accuracy
        res_lower = residual(lower)

        for iteration in range(1, self.config.max_iterations + 1):
            mid = 0.5 * (lower + upper)
            res_mid = residual(mid)

            if abs(res_mid) < accuracy or abs(upper - lower) < accuracy:
                return mid, iteration

            if res_lower * res_mid <= 0:
                upper = mid
            else:
                lower = mid
                res_lower = res_mid

        raise BootstrapError(
            f"No convergence for {helper!r} after {self.config.max_iterations} iterations"
        )
