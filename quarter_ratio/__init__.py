"""Distribute a total across a fixed set of quarters by ratio"""

from quarter_ratio.allocation import DistributedRatio, DistributionValidator
from quarter_ratio.exceptions import (
    ConfigMismatchError,
    DistributedRatioError,
    InvalidConfigError,
    QuarterDataError,
)
from quarter_ratio.factory import DistributedRatioFactory
from quarter_ratio.models import DistributedRatioConfig, Quarter

__version__ = '0.1.0'

__all__ = [
    'DistributedRatio',
    'DistributedRatioConfig',
    'DistributedRatioFactory',
    'DistributionValidator',
    'Quarter',
    'DistributedRatioError',
    'ConfigMismatchError',
    'InvalidConfigError',
    'QuarterDataError',
]
