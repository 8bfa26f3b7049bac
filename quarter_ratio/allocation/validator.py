"""Distribution validation"""
from typing import Any, List, Mapping, Sequence

from quarter_ratio.models import DistributedRatioConfig
from quarter_ratio.utils import as_number, difference, sum_values


class DistributionValidator:
    """Validates a distributed quarter sequence against its target total"""

    def __init__(self, config: DistributedRatioConfig):
        self.config = config
        self.value_key = config.qtr_val_key

    def validate(self, total: float, quarters: Sequence[Mapping[str, Any]]) -> List[str]:
        """Validate quarters against the configuration and the target total"""
        issues = []

        # Check quarter count
        if len(quarters) != self.config.number_of_qtrs:
            issues.append(
                f"❌ COUNT: got {len(quarters)} quarters, "
                f"configured for {self.config.number_of_qtrs}"
            )

        for index, qtr in enumerate(quarters):
            raw = qtr.get(self.value_key)
            number = as_number(raw)

            if number is None:
                issues.append(
                    f"⚠️ VALUE: quarter {index + 1} has no usable "
                    f"'{self.value_key}' ({raw!r})"
                )
                continue

            if number < 0:
                issues.append(f"⚠️ NEGATIVE: quarter {index + 1} is {number}")

            if self.config.remainder_strategy != 'none' and not float(number).is_integer():
                issues.append(
                    f"⚠️ FRACTION: quarter {index + 1} is {number} with "
                    f"'{self.config.remainder_strategy}' rounding"
                )

        # Check the sum
        distributed = sum_values(quarters, self.value_key)
        off = difference(distributed, total)
        if self.config.remainder_strategy == 'none':
            drifted = abs(off) > 1e-9 * max(1, abs(total))
        else:
            drifted = distributed != total
        if drifted:
            issues.append(
                f"❌ SUM: quarters add up to {distributed}, expected {total} "
                f"(off by {off})"
            )

        return issues

    def is_valid(self, total: float, quarters: Sequence[Mapping[str, Any]]) -> bool:
        return not self.validate(total, quarters)
