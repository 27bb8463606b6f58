"""
Discount curve interpolated between node dates.
"""
import logging
from datetime import date
from typing import List, Optional, Sequence, Union

from yieldhelpers.conventions.daycount import DayCountConvention
from yieldhelpers.interpolation import Interpolator, create_interpolator

from .base import YieldTermStructure

logger = logging.getLogger(__name__)


class InterpolatedDiscountCurve(YieldTermStructure):
    """
    Discount curve defined by discount factors at node dates.

    The first node must be the reference date with a discount factor of 1.
    Nodes can be replaced in place, which is how the bootstrapper moves its
    trial curve from one guess to the next.
    """

    def __init__(self,
                 dates: Sequence[date],
                 discount_factors: Sequence[float],
                 day_counter: Union[str, DayCountConvention] = "ACT/365F",
                 interpolation_method: str = "LOGLINEAR_DF",
                 name: str = ""):
        """
        Initialize the curve.

        Args:
            dates: Node dates, the first one being the curve reference date
            discount_factors: Discount factors at the node dates
            day_counter: Day count used to turn dates into curve times
            interpolation_method: Interpolator name (see ``create_interpolator``)
            name: Curve name
        """
        if len(dates) == 0:
            raise ValueError("At least one node date is required")
        super().__init__(dates[0], day_counter, name)
        self.interpolation_method = interpolation_method
        self._dates: List[date] = []
        self._discount_factors: List[float] = []
        self._interpolator: Optional[Interpolator] = None
        self._set_nodes(dates, discount_factors)

    @property
    def dates(self) -> List[date]:
        return list(self._dates)

    @property
    def discount_factors(self) -> List[float]:
        return list(self._discount_factors)

    @property
    def times(self) -> List[float]:
        return [self.time_from_reference(d) for d in self._dates]

    @property
    def max_date(self) -> date:
        return self._dates[-1]

    def nodes(self):
        return list(zip(self._dates, self._discount_factors))

    def set_nodes(self, dates: Sequence[date], discount_factors: Sequence[float]) -> None:
        """Replace all nodes and notify observers."""
        self._set_nodes(dates, discount_factors)
        self.notify_observers()

    def add_node(self, node_date: date, value: float) -> int:
        """Append a node after the last one and return its index."""
        if node_date <= self._dates[-1]:
            raise ValueError(f"Node {node_date} must follow the last node {self._dates[-1]}")
        if value <= 0:
            raise ValueError(f"Discount factor at {node_date} must be positive: {value}")
        self._dates.append(node_date)
        self._discount_factors.append(float(value))
        self._rebuild()
        return len(self._dates) - 1

    def set_discount_factor(self, index: int, value: float, notify: bool = False) -> None:
        """Replace the discount factor of one node."""
        if index == 0:
            raise ValueError("The reference-date discount factor is fixed at 1.0")
        if value <= 0:
            raise ValueError(f"Discount factor at node {index} must be positive: {value}")
        self._discount_factors[index] = float(value)
        self._rebuild()
        if notify:
            self.notify_observers()

    def _set_nodes(self, dates: Sequence[date], discount_factors: Sequence[float]) -> None:
        if len(dates) != len(discount_factors):
            raise ValueError("Dates and discount factors must have same length")
        if dates[0] != self.reference_date:
            raise ValueError(
                f"First node {dates[0]} must be the reference date {self.reference_date}"
            )
        if abs(discount_factors[0] - 1.0) > 1e-14:
            raise ValueError("Discount factor at the reference date must be 1.0")
        for previous, current in zip(dates, dates[1:]):
            if current <= previous:
                raise ValueError(f"Node dates must be strictly increasing: {previous}, {current}")
        for i, df in enumerate(discount_factors):
            if df <= 0:
                raise ValueError(f"Discount factor at node {i} must be positive: {df}")

        self._dates = list(dates)
        self._discount_factors = [float(df) for df in discount_factors]
        for i in range(1, len(self._discount_factors)):
            increase = self._discount_factors[i] - self._discount_factors[i - 1]
            if increase > 1e-6:
                logger.warning(
                    "Discount factors increasing at node %s (%s, increase = %.8f)",
                    i,
                    self._dates[i],
                    increase,
                )
        self._rebuild()

    def _rebuild(self) -> None:
        if len(self._dates) < 2:
            self._interpolator = None
            return
        self._interpolator = create_interpolator(
            self.interpolation_method, self.times, self._discount_factors
        )

    def _discount_impl(self, t: float) -> float:
        if t <= 0:
            return 1.0
        if self._interpolator is None:
            raise ValueError(f"{self} has a single node and cannot discount beyond it")
        return self._interpolator.interpolate(t)
