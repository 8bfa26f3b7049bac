"""Distribution logic"""

from .distributor import DistributedRatio
from .validator import DistributionValidator

__all__ = ['DistributedRatio', 'DistributionValidator']
