"""Factories for ready-made DistributedRatio instances"""
from quarter_ratio.allocation import DistributedRatio
from quarter_ratio.config import EXAMPLE_NUMBER_OF_QTRS, EXAMPLE_QTR_DEFAULTS
from quarter_ratio.models import DistributedRatioConfig


def DistributedRatioFactory() -> DistributedRatio:
    """Six quarters weighted towards the middle, floored"""
    return DistributedRatio(DistributedRatioConfig(
        number_of_qtrs=EXAMPLE_NUMBER_OF_QTRS,
        qtr_defaults=EXAMPLE_QTR_DEFAULTS,
        qtr_val_key='value',
        remainder_strategy='floor',
    ))


def from_settings(**overrides) -> DistributedRatio:
    """Build a DistributedRatio from the environment backed settings in config.py"""
    return DistributedRatio(DistributedRatioConfig.from_settings(**overrides))
