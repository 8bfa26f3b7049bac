"""Remainder strategies applied to raw allocations"""
import math
from typing import Callable, Dict


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, halves move away from zero.

    Python's round() uses banker's rounding, which would turn 26.5 into 26.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _none(value: float) -> float:
    return value


STRATEGY_HANDLERS: Dict[str, Callable[[float], float]] = {
    'floor': math.floor,
    'ceil': math.ceil,
    'round': round_half_away_from_zero,
    'none': _none,
}


def apply_strategy(strategy: str, value: float) -> float:
    """Apply a remainder strategy to a raw allocation"""
    if not math.isfinite(value):
        return value
    return STRATEGY_HANDLERS[strategy](value)
