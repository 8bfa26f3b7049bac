"""Analysis functionality"""

from .analyzer import QuarterAnalyzer

__all__ = ['QuarterAnalyzer']
