"""Data analysis functionality"""
from typing import Any, Dict, List, Mapping, Sequence

import pandas as pd

from quarter_ratio.allocation.distributor import calculate_ratio
from quarter_ratio.models import Quarter
from quarter_ratio.utils import sum_values


class QuarterAnalyzer:
    """Analyzes quarter sequences"""

    @staticmethod
    def analyze(quarters: Sequence[Mapping[str, Any]], value_key: str = 'value') -> Dict[str, Any]:
        """Summarise a quarter sequence"""
        models = [Quarter(q, value_key, i) for i, q in enumerate(quarters)]
        total = sum_values(quarters, value_key)

        analysis = {
            'total_quarters': len(models),
            'total_value': total,
            'active_quarters': [],
            'inactive_quarters': [],
            'ratios': {},
        }

        for qtr in models:
            if qtr.is_active:
                analysis['active_quarters'].append(qtr.label)
            else:
                analysis['inactive_quarters'].append(qtr.label)
            analysis['ratios'][qtr.label] = calculate_ratio(total, qtr.raw_value)

        return analysis

    @staticmethod
    def to_frame(before: Sequence[Mapping[str, Any]], after: Sequence[Mapping[str, Any]],
                 value_key: str = 'value') -> pd.DataFrame:
        """Side by side table of values and shares before and after a distribution"""
        before_total = sum_values(before, value_key)
        after_total = sum_values(after, value_key)

        rows: List[Dict[str, Any]] = []
        for index, (old, new) in enumerate(zip(before, after)):
            old_qtr = Quarter(old, value_key, index)
            new_qtr = Quarter(new, value_key, index)
            rows.append({
                'quarter': new_qtr.label,
                'before': old_qtr.value,
                'after': new_qtr.value,
                'change': new_qtr.value - old_qtr.value,
                'share_before': calculate_ratio(before_total, old_qtr.raw_value),
                'share_after': calculate_ratio(after_total, new_qtr.raw_value),
            })

        return pd.DataFrame(
            rows,
            columns=['quarter', 'before', 'after', 'change', 'share_before', 'share_after']
        )
