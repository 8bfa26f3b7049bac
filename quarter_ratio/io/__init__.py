"""Input/Output operations"""

from .loader import QuarterLoader
from .saver import ResultSaver

__all__ = ['QuarterLoader', 'ResultSaver']
