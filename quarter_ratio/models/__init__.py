"""Data models for quarters and distribution settings"""

from .quarter import Quarter
from .ratio_config import DistributedRatioConfig, REMAINDER_STRATEGIES

__all__ = ['Quarter', 'DistributedRatioConfig', 'REMAINDER_STRATEGIES']
