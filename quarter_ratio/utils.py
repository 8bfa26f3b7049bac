"""Utility functions"""
import logging
import math
import os
from datetime import datetime
from numbers import Integral, Number
from typing import Any, Iterable, List, Mapping, Optional


def ensure_directory(path: str) -> None:
    """Create directory if it doesn't exist"""
    os.makedirs(path, exist_ok=True)


def format_timestamp(dt: datetime = None) -> str:
    """Format timestamp for filenames"""
    if dt is None:
        dt = datetime.now()
    return dt.strftime('%Y%m%d_%H%M%S')


def configure_logging(level: str = None) -> None:
    """Configure root logging for the CLI and the frontend"""
    from quarter_ratio.config import LOG_LEVEL
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )


def as_number(value: Any) -> Optional[float]:
    """Return value if it is a usable number, otherwise None.

    Booleans, None, NaN, ints too large for a float and anything non-numeric
    are not usable. Non-integral numbers such as Decimal come back as float so
    they mix with the rest of the arithmetic.
    """
    if value is None or isinstance(value, bool) or not isinstance(value, Number):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(number):
        return None
    return value if isinstance(value, Integral) else number


def quarter_values(quarters: Iterable[Mapping[str, Any]], key: str) -> List[Any]:
    """Pull the raw value of every quarter"""
    return [qtr.get(key) for qtr in quarters]


def sum_values(quarters: Iterable[Mapping[str, Any]], key: str) -> float:
    """Sum quarter values, counting unusable values as 0.

    Ints are summed exactly. A sum past the float range becomes +/- inf.
    """
    int_total = 0
    float_total = None
    for value in quarter_values(quarters, key):
        number = as_number(value)
        if number is None:
            continue
        if isinstance(number, Integral):
            int_total += number
        else:
            float_total = number if float_total is None else float_total + number
    if float_total is None:
        return int_total
    try:
        return int_total + float_total
    except OverflowError:
        return math.inf if int_total > 0 else -math.inf


def difference(total: float, current: float) -> float:
    """total - current, as +/- inf when an exact int sum is past the float range"""
    try:
        return total - current
    except OverflowError:
        return -math.inf if current > total else math.inf
