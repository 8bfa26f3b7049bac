"""Main distribution engine"""
import logging
import math
from dataclasses import dataclass
from numbers import Integral
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from quarter_ratio.allocation.rounding import apply_strategy
from quarter_ratio.models import DistributedRatioConfig
from quarter_ratio.utils import as_number, difference, sum_values

logger = logging.getLogger(__name__)

QuarterRecord = Mapping[str, Any]


@dataclass(frozen=True)
class _AllocationContext:
    """Values computed once per allocate() call, before any quarter changes"""
    total: float
    use_defaults: bool
    current_total: float


@dataclass(frozen=True)
class _RemainderContext:
    """Values computed once per redistribute() call"""
    remainder: float
    adjustments: Tuple[int, ...]


class DistributedRatio:
    """
    Standardizes the distribution of a total value across quarters.

    Ratios come from the quarters' current values, or from the configured
    defaults when no quarter holds a positive value. Both public operations
    return new lists of new dicts and never touch the caller's data, so one
    instance can be shared freely.
    """

    def __init__(self, config: Optional[DistributedRatioConfig] = None, **overrides):
        if config is None:
            config = DistributedRatioConfig(**overrides)
        elif overrides:
            config = DistributedRatioConfig(**{**config.to_dict(), **overrides})
        self.config = config

    @property
    def value_key(self) -> str:
        return self.config.qtr_val_key

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def allocate(self, total: float, quarters: Sequence[QuarterRecord]) -> List[Dict[str, Any]]:
        """
        Spread total across the quarters by ratio and apply the remainder strategy.

        Ratios are generated from the current values of the quarters, not from
        the new total. The result may be off from total by a few units; pass it
        to redistribute() to fix the sum.
        """
        context = self._allocation_context(total, quarters)
        return [
            self._with_value(qtr, self._allocated_value(context, qtr, index))
            for index, qtr in enumerate(quarters)
        ]

    def redistribute(self, total: float, quarters: Sequence[QuarterRecord]) -> List[Dict[str, Any]]:
        """
        Map the gap between total and the quarters' sum back onto the quarters.

        A positive gap is added one unit per active quarter from the first
        quarter forward, a negative one is taken from the last quarter
        backward.
        """
        context = self._remainder_context(total, quarters)
        return [
            self._with_value(qtr, self._adjusted_value(qtr, adjustment))
            for qtr, adjustment in zip(quarters, context.adjustments)
        ]

    def distribute(self, total: float, quarters: Sequence[QuarterRecord]) -> List[Dict[str, Any]]:
        """Allocate total and redistribute the rounding remainder"""
        return self.redistribute(total, self.allocate(total, quarters))

    def total_of(self, quarters: Sequence[QuarterRecord]) -> float:
        """Sum of the quarter values, unusable values count as 0"""
        return sum_values(quarters, self.value_key)

    # ------------------------------------------------------------------
    # Allocation helpers
    # ------------------------------------------------------------------

    def use_defaults(self, quarters: Sequence[QuarterRecord]) -> bool:
        """True when no quarter carries a positive value"""
        for qtr in quarters:
            number = as_number(qtr.get(self.value_key))
            if number is not None and number > 0:
                return False
        return True

    def _allocation_context(self, total, quarters) -> _AllocationContext:
        if len(quarters) != self.config.number_of_qtrs:
            logger.warning(
                "Got %d quarters, configured for %d",
                len(quarters), self.config.number_of_qtrs
            )
        context = _AllocationContext(
            total=_usable_total(total),
            use_defaults=self.use_defaults(quarters),
            current_total=self.total_of(quarters),
        )
        logger.debug(
            "Allocating %s across %d quarters (defaults=%s, current total=%s)",
            context.total, len(quarters), context.use_defaults, context.current_total
        )
        return context

    def _allocated_value(self, context: _AllocationContext, qtr: QuarterRecord, index: int) -> float:
        return apply_strategy(
            self.config.remainder_strategy,
            context.total * self._ratio(context, qtr, index)
        )

    def _ratio(self, context: _AllocationContext, qtr: QuarterRecord, index: int) -> float:
        if context.use_defaults:
            defaults = self.config.qtr_defaults
            return defaults[index] if index < len(defaults) else 0
        return calculate_ratio(context.current_total, qtr.get(self.value_key))

    # ------------------------------------------------------------------
    # Remainder helpers
    # ------------------------------------------------------------------

    def is_active(self, qtr: QuarterRecord) -> bool:
        """Active quarters (value >= 1) are the only ones given remainder units"""
        number = as_number(qtr.get(self.value_key))
        return number is not None and number >= 1

    def _remainder_context(self, total, quarters) -> _RemainderContext:
        remainder = difference(_usable_total(total), self.total_of(quarters))
        units = _whole_units(remainder)
        step = -1 if remainder < 0 else 1

        if remainder < 0:
            # take from the bottom up
            walk = range(len(quarters) - 1, -1, -1)
        else:
            # add from the top down
            walk = range(len(quarters))
        active = [index for index in walk if self.is_active(quarters[index])]

        adjustments = [0] * len(quarters)
        for index in active[:units]:
            adjustments[index] = step

        excess = units - len(active)
        if excess > 0 and active:
            logger.warning(
                "Remainder %s exceeds the %d active quarters, folding %d extra onto quarter %d",
                remainder, len(active), excess, active[0]
            )
            adjustments[active[0]] += step * excess
        elif units and not active:
            logger.warning(
                "Remainder %s left undistributed, no active quarters", remainder
            )

        return _RemainderContext(remainder=remainder, adjustments=tuple(adjustments))

    def _adjusted_value(self, qtr: QuarterRecord, adjustment: int) -> Any:
        value = qtr.get(self.value_key)
        if not adjustment:
            return value
        return value + adjustment

    def _with_value(self, qtr: QuarterRecord, value: Any) -> Dict[str, Any]:
        return {**qtr, self.value_key: value}

    def __repr__(self) -> str:
        return (f"DistributedRatio({self.config.number_of_qtrs} qtrs, "
                f"key={self.value_key!r}, strategy={self.config.remainder_strategy!r})")


def calculate_ratio(total: Any, part: Any) -> float:
    """
    Safe ratio of part to total.

    Returns 0 instead of failing when either side is missing, not a number,
    or when total is 0.
    """
    total = as_number(total)
    part = as_number(part)
    if total is None or total == 0 or part is None:
        return 0
    return part / total


def _usable_total(total: Any) -> float:
    number = as_number(total)
    return 0 if number is None else number


def _whole_units(remainder: float) -> int:
    """Whole units in the remainder; a fractional gap stays where it is"""
    if isinstance(remainder, Integral):
        return abs(remainder)
    return int(abs(remainder)) if math.isfinite(remainder) else 0
